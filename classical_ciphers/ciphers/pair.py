"""
Pair — Playfair-style Digraph Cipher
====================================
Letters are enciphered two at a time using one 5x5 key square
(J is dropped from the key, plaintext J is written as I).

Preparing the plaintext:
    HIDE THE GOLD IN THE TREE STUMP
    → HI DE TH EG OL DI NT HE TR EX ES TU MP
A doubled letter inside a pair gets an X between them; a lone last
letter is padded with X.

For each pair, with positions (r1, c1) and (r2, c2):
    same row       → letters to the right (wrapping)
    same column    → letters below (wrapping)
    otherwise      → each takes the other's column (rectangle corners)

Decryption shifts left / up instead; the rectangle rule is its own
inverse. The inserted X fillers remain in the decrypted text.

Historical note: Charles Wheatstone, 1854; promoted by Lord Playfair.
"""

import logging
from typing import List, Tuple

from ..alphabet import ALPHABET
from ..base import Cipher
from ..exceptions import BadKey, InvalidLength
from ..keygen import generate_str
from ..squares import KeySquare

logger = logging.getLogger(__name__)


class PairCipher(Cipher):
    """Playfair digraph substitution over a single key square."""

    name   = "pair"
    FILLER = "X"

    def __init__(self, key: str):
        if not isinstance(key, str) or not key:
            raise BadKey("Secret key must not be empty")
        self._key = key
        self._square = KeySquare(key, merge_j=False)
        logger.debug(f"PairCipher ready: key_len={len(key)}")

    @property
    def key(self) -> str:
        return self._key

    @property
    def square(self) -> KeySquare:
        return self._square

    @staticmethod
    def generate_key(size: int = None, rng=None) -> str:
        return generate_str(size, rng=rng)

    @classmethod
    def prepare(cls, text: str) -> List[Tuple[str, str]]:
        """Split plaintext into the digraphs that get enciphered."""
        letters = "".join(ch for ch in text.upper() if ch in ALPHABET).replace("J", "I")
        pairs = []
        i = 0
        while i < len(letters):
            first = letters[i]
            second = letters[i + 1] if i + 1 < len(letters) else cls.FILLER
            if first == second:
                pairs.append((first, cls.FILLER))
                i += 1
            else:
                pairs.append((first, second))
                i += 2
        return pairs

    def _substitute(self, a: str, b: str, step: int) -> str:
        r1, c1 = self._square.position(a)
        r2, c2 = self._square.position(b)
        sq = self._square
        if r1 == r2:
            return sq.at(r1, c1 + step) + sq.at(r2, c2 + step)
        if c1 == c2:
            return sq.at(r1 + step, c1) + sq.at(r2 + step, c2)
        return sq.at(r1, c2) + sq.at(r2, c1)

    def encrypt(self, data: str) -> str:
        return "".join(self._substitute(a, b, 1) for a, b in self.prepare(data))

    def decrypt(self, data: str) -> str:
        """Decrypt digraph ciphertext. Input must have an even length."""
        if len(data) % 2:
            raise InvalidLength("Pair ciphertext must have an even number of letters.")
        return "".join(
            self._substitute(data[i], data[i + 1], -1)
            for i in range(0, len(data), 2)
        )
