"""
Four-Square — Two-Key Digraph Cipher
====================================
Uses three 5x5 squares, I and J sharing a cell in each:

    alphabet square   plain A..Z (no J)
    square1           built from the first key
    square2           built from the second key

Encrypting a pair: find both letters in the alphabet square at (r1, c1)
and (r2, c2), then output square1[r1][c2] followed by square2[r2][c1].
Decrypting runs the lookup the other way round: first letter in square1,
second in square2, output read from the alphabet square.

Plaintext is uppercased, J becomes I, non-letters are removed and an odd
last letter is padded with X. There is no doubled-letter rule here.

Historical note: Félix Delastelle, 1902.
"""

import logging
from typing import List, Tuple

from ..alphabet import ALPHABET
from ..base import Cipher
from ..exceptions import BadKey, InvalidLength
from ..keygen import generate_str
from ..squares import KeySquare

logger = logging.getLogger(__name__)


class FourSquareCipher(Cipher):
    """Four-Square cipher keyed by two independent strings."""

    name   = "four_square"
    FILLER = "X"

    def __init__(self, first_key: str, second_key: str):
        if not isinstance(first_key, str) or not first_key:
            raise BadKey("First secret key must not be empty")
        if not isinstance(second_key, str) or not second_key:
            raise BadKey("Second secret key must not be empty")
        self._first_key  = first_key
        self._second_key = second_key
        self.square1  = KeySquare(first_key)
        self.square2  = KeySquare(second_key)
        self.alphabet = KeySquare()
        logger.debug(
            f"FourSquareCipher ready: key_lens={len(first_key)}/{len(second_key)}"
        )

    @property
    def key(self) -> Tuple[str, str]:
        return self._first_key, self._second_key

    @staticmethod
    def generate_key(size: int = None, rng=None) -> Tuple[str, str]:
        return generate_str(size, rng=rng), generate_str(size, rng=rng)

    @classmethod
    def prepare(cls, text: str) -> List[str]:
        """Normalize plaintext and split it into two-letter chunks."""
        letters = "".join(ch for ch in text.upper().replace("J", "I") if ch in ALPHABET)
        if len(letters) % 2:
            letters += cls.FILLER
        return [letters[i:i + 2] for i in range(0, len(letters), 2)]

    def encrypt(self, data: str) -> str:
        out = []
        for a, b in self.prepare(data):
            r1, c1 = self.alphabet.position(a)
            r2, c2 = self.alphabet.position(b)
            out.append(self.square1.at(r1, c2) + self.square2.at(r2, c1))
        return "".join(out)

    def decrypt(self, data: str) -> str:
        if len(data) % 2:
            raise InvalidLength("Four-Square ciphertext must have an even number of letters.")
        out = []
        for i in range(0, len(data), 2):
            r1, c1 = self.square1.position(data[i])
            r2, c2 = self.square2.position(data[i + 1])
            out.append(self.alphabet.at(r1, c2) + self.alphabet.at(r2, c1))
        return "".join(out)
