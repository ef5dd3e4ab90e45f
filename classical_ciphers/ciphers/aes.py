"""
AES — Advanced Encryption Standard (ECB)
========================================
Key sizes: 128, 192 or 256 bits (16, 24 or 32 bytes).
Block:     128 bits.

Dependencies: cryptography >= 43.0
"""

from cryptography.hazmat.primitives.ciphers import algorithms

from ..exceptions import BadKey
from ..keygen import generate_bytes
from .block import BlockCipher


class AESCipher(BlockCipher):
    """AES-ECB with PKCS#7 padding and Base64 output."""

    name       = "aes"
    KEY_SIZES  = (16, 24, 32)
    BLOCK_SIZE = 128

    @staticmethod
    def _algorithm(key: bytes):
        return algorithms.AES(key)

    @staticmethod
    def generate_key(bits: int = 128) -> bytes:
        if bits not in (128, 192, 256):
            raise BadKey("AES key size must be 128, 192 or 256 bits")
        return generate_bytes(bits // 8)

    @classmethod
    def generate_128_key(cls) -> bytes:
        return cls.generate_key(128)

    @classmethod
    def generate_192_key(cls) -> bytes:
        return cls.generate_key(192)

    @classmethod
    def generate_256_key(cls) -> bytes:
        return cls.generate_key(256)
