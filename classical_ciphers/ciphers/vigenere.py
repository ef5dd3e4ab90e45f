"""
Vigenère — Polyalphabetic Substitution Cipher
=============================================
Each plaintext letter is shifted by the matching letter of a running key:
the key, uppercased and repeated until it covers the whole message.

Normalization is one-way. encrypt() removes spaces and uppercases the
text before transforming it; decrypt() expects that normalized form and
does not put spaces or case back. So

    decrypt(encrypt("attack at dawn")) == "ATTACKATDAWN"

Only spaces are removed. Any other non-letter (digits, punctuation) is
pushed through the letter formula and decrypts to some letter, not to
itself: decrypt(encrypt("HI,")) == "HIF". Strip such characters first
if they matter.

Historical note: Giovan Battista Bellaso, 1553, later misattributed to
Blaise de Vigenère. Called "le chiffre indéchiffrable" for 300 years.
"""

import logging

from ..alphabet import ALPHABET_SIZE
from ..base import Cipher
from ..exceptions import BadKey
from ..keygen import generate_str

logger = logging.getLogger(__name__)

_A = ord("A")


class VigenereCipher(Cipher):
    """Vigenère cipher with a plain repeating key."""

    name = "vigenere"

    def __init__(self, key: str):
        if not isinstance(key, str) or not key:
            raise BadKey("Secret key must not be empty")
        self._key = key
        logger.debug(f"VigenereCipher ready: period={len(key)}")

    @property
    def key(self) -> str:
        return self._key

    @staticmethod
    def generate_key(size: int = None, rng=None) -> str:
        return generate_str(size, rng=rng)

    def _running_key(self, length: int) -> str:
        """
        Uppercased key, doubled until it is at least `length` long,
        then cut to exactly `length`.
        """
        running = self._key.upper()
        while len(running) < length:
            running += running
        return running[:length]

    def encrypt(self, data: str) -> str:
        """Encrypt plaintext. Spaces are removed and letters uppercased first."""
        text = data.replace(" ", "").upper()
        stream = self._running_key(len(text))
        return "".join(
            chr((ord(t) - _A + ord(k) - _A) % ALPHABET_SIZE + _A)
            for t, k in zip(text, stream)
        )

    def decrypt(self, data: str) -> str:
        """Decrypt ciphertext produced by encrypt()."""
        stream = self._running_key(len(data))
        return "".join(
            chr((ord(c) - ord(k) + ALPHABET_SIZE) % ALPHABET_SIZE + _A)
            for c, k in zip(data, stream)
        )
