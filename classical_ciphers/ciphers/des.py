"""
DES — Data Encryption Standard (ECB)
====================================
Key:   64 bits on the wire (8 bytes, 56 effective + parity).
Block: 64 bits.

Single DES is run as TripleDES keyed K1 = K2 = K3 (the 8-byte key
repeated three times), which is equivalent to plain DES.
DES has been broken by brute force since 1998. Legacy interop only.

Dependencies: cryptography >= 43.0 (TripleDES lives in hazmat.decrepit)
"""

from cryptography.hazmat.decrepit.ciphers.algorithms import TripleDES

from ..keygen import generate_bytes
from .block import BlockCipher


class DESCipher(BlockCipher):
    """DES-ECB with PKCS#7 padding and Base64 output."""

    name       = "des"
    KEY_SIZE   = 8
    KEY_SIZES  = (KEY_SIZE,)
    BLOCK_SIZE = 64

    @staticmethod
    def _algorithm(key: bytes):
        return TripleDES(key * 3)

    @classmethod
    def generate_key(cls) -> bytes:
        return generate_bytes(cls.KEY_SIZE)
