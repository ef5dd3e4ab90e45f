"""
classical_ciphers — Classical Cipher Toolkit
============================================
Substitution and transposition ciphers behind one uniform contract,
from Caesar's shift to Delastelle's Four-Square.

Ciphers:
    CAESAR       — Monoalphabetic shift
    VIGENERE     — Polyalphabetic substitution (repeating key)
    VERNAM       — Character XOR stream
    MATRIX       — Columnar transposition
    PAIR         — Playfair-style digraph substitution (one 5x5 square)
    FOUR_SQUARE  — Digraph substitution (two keyed 5x5 squares)
    AES / DES    — Block-cipher collaborators (ECB, PKCS#7, Base64)

Every cipher: encrypt(str) -> str, decrypt(str) -> str, .key

These are teaching and legacy-interop ciphers. None of them protects
data against modern cryptanalysis.

License: Apache 2.0
"""

__version__  = "1.0.0"

from .alphabet    import ALPHABET, ALPHABET_SIZE
from .base        import Cipher
from .exceptions  import CipherError, BadKey, InvalidLength, CharacterNotFound
from .squares     import KeySquare
from .ciphers     import (
    CaesarCipher,
    VigenereCipher,
    VernamCipher,
    MatrixCipher,
    PairCipher,
    FourSquareCipher,
    AESCipher,
    DESCipher,
)
from .registry    import CipherKind, make_cipher, generate_key

__all__ = [
    "ALPHABET",
    "ALPHABET_SIZE",
    "Cipher",
    "CipherError",
    "BadKey",
    "InvalidLength",
    "CharacterNotFound",
    "KeySquare",
    "CaesarCipher",
    "VigenereCipher",
    "VernamCipher",
    "MatrixCipher",
    "PairCipher",
    "FourSquareCipher",
    "AESCipher",
    "DESCipher",
    "CipherKind",
    "make_cipher",
    "generate_key",
]
