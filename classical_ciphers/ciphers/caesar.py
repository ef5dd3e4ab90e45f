"""
Caesar — Monoalphabetic Shift Cipher
====================================
Every letter moves `shift` places along the alphabet, wrapping at Z.
Case is preserved; digits, spaces and punctuation pass through untouched.

Decryption is the same transform with the additive inverse shift,
26 - (shift mod 26), so any positive shift works, including shifts > 26.

Historical note: Suetonius records Julius Caesar using a shift of 3.
"""

import logging
import string

from ..alphabet import ALPHABET_SIZE
from ..base import Cipher
from ..exceptions import BadKey
from ..keygen import generate_int

logger = logging.getLogger(__name__)


class CaesarCipher(Cipher):
    """Caesar shift cipher over the 26-letter Latin alphabet."""

    name = "caesar"

    def __init__(self, key: int):
        if isinstance(key, bool) or not isinstance(key, int) or key <= 0:
            raise BadKey("Key must be a positive integer")
        self._key = key
        logger.debug("CaesarCipher ready")

    @property
    def key(self) -> int:
        return self._key

    @staticmethod
    def generate_key(rng=None) -> int:
        return generate_int(rng=rng)

    def encrypt(self, data: str) -> str:
        return self._shift(data, self._key)

    def decrypt(self, data: str) -> str:
        return self._shift(data, ALPHABET_SIZE - (self._key % ALPHABET_SIZE))

    @staticmethod
    def _shift(text: str, shift: int) -> str:
        result = []
        for ch in text:
            if ch in string.ascii_uppercase:
                base = ord("A")
            elif ch in string.ascii_lowercase:
                base = ord("a")
            else:
                result.append(ch)
                continue
            result.append(chr((ord(ch) - base + shift) % ALPHABET_SIZE + base))
        return "".join(result)
