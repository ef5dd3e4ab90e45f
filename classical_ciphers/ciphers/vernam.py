"""
Vernam — XOR Stream Cipher
==========================
Each output character's code point is the XOR of the data character and
the key character at the same position. XOR is its own inverse, so the
same keystream both encrypts and decrypts.

Key adjustment:
    encrypt  key shorter than data → repeated cyclically
             key longer than data  → truncated
    decrypt  key always repeated cyclically to the data length

Output code points may fall outside the printable range; treat the
ciphertext as an opaque string.

Historical note: Gilbert Vernam, AT&T, 1917 — teleprinter tape XOR.
With a truly random key as long as the message it becomes the one-time pad.
"""

import logging

from ..base import Cipher
from ..exceptions import BadKey, InvalidLength
from ..keygen import generate_str

logger = logging.getLogger(__name__)


class VernamCipher(Cipher):
    """Character-wise XOR against a repeating key."""

    name = "vernam"

    def __init__(self, key: str):
        if not isinstance(key, str) or not key:
            raise BadKey("Secret key must not be empty")
        self._key = key
        logger.debug(f"VernamCipher ready: key_len={len(key)}")

    @property
    def key(self) -> str:
        return self._key

    @staticmethod
    def generate_key(size: int = None, rng=None) -> str:
        return generate_str(size, rng=rng)

    @staticmethod
    def _repeat(key: str, length: int) -> str:
        return "".join(key[i % len(key)] for i in range(length))

    @staticmethod
    def _xor(data: str, key: str) -> str:
        if len(key) != len(data):
            raise InvalidLength("The length of the key must be equal to the length of the data.")
        return "".join(chr(ord(d) ^ ord(k)) for d, k in zip(data, key))

    def encrypt(self, data: str) -> str:
        if not data:
            return ""
        if len(self._key) < len(data):
            stream = self._repeat(self._key, len(data))
        else:
            stream = self._key[:len(data)]
        return self._xor(data, stream)

    def decrypt(self, data: str) -> str:
        if not data:
            return ""
        return self._xor(data, self._repeat(self._key, len(data)))
