"""
Block-cipher collaborators
==========================
Thin text wrappers around `cryptography` block primitives so AES and DES
fit the same encrypt/decrypt/key contract as the classical ciphers.

Mode:      ECB (each block independently, no IV)
Padding:   PKCS#7 to the algorithm's block size (PKCS5Padding in Java terms)
Encoding:  UTF-8 text in → Base64 text out

Empty input returns "" without touching the primitive.

ECB leaks repeated blocks. These wrappers exist for interoperability
with the legacy toolkit, not for protecting data.

Dependencies: cryptography >= 43.0
"""

import base64
import logging
from abc import abstractmethod

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher as _Primitive, modes

from ..base import Cipher
from ..exceptions import BadKey

logger = logging.getLogger(__name__)


class BlockCipher(Cipher):
    """ECB / PKCS#7 / Base64 wrapper. Subclasses pick the algorithm."""

    KEY_SIZES  = ()
    BLOCK_SIZE = 128   # bits

    def __init__(self, key: bytes):
        if not isinstance(key, (bytes, bytearray)) or len(key) not in self.KEY_SIZES:
            raise BadKey("Received wrong secret key")
        self._key = bytes(key)
        self._primitive = _Primitive(self._algorithm(self._key), modes.ECB())
        logger.debug(f"{type(self).__name__} ready: key={len(key) * 8} bits")

    @staticmethod
    @abstractmethod
    def _algorithm(key: bytes):
        """Return the `cryptography` algorithm object for `key`."""

    @property
    def key(self) -> bytes:
        return self._key

    def encrypt(self, data: str) -> str:
        if not data:
            return ""
        padder = padding.PKCS7(self.BLOCK_SIZE).padder()
        padded = padder.update(data.encode("utf-8")) + padder.finalize()
        enc = self._primitive.encryptor()
        ct = enc.update(padded) + enc.finalize()
        return base64.b64encode(ct).decode("ascii")

    def decrypt(self, data: str) -> str:
        """
        Decrypt Base64 ciphertext.
        Raises ValueError on a wrong key or corrupted data (bad padding).
        """
        if not data:
            return ""
        dec = self._primitive.decryptor()
        padded = dec.update(base64.b64decode(data)) + dec.finalize()
        unpadder = padding.PKCS7(self.BLOCK_SIZE).unpadder()
        return (unpadder.update(padded) + unpadder.finalize()).decode("utf-8")

    def __repr__(self):
        return f"{type(self).__name__}(key=<{len(self._key) * 8} bits>)"
