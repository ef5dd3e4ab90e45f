"""
Cipher registry
===============
The closed set of cipher variants, addressable by name.

    cipher = make_cipher(CipherKind.PAIR, "PLAYFAIR EXAMPLE")
    key    = generate_key(CipherKind.FOUR_SQUARE, rng=random.Random(7))
    cipher = make_cipher("four_square", key)

Four-Square takes its key as a (first, second) tuple.
"""

import logging
from enum import Enum

from .ciphers import (
    AESCipher,
    CaesarCipher,
    DESCipher,
    FourSquareCipher,
    MatrixCipher,
    PairCipher,
    VernamCipher,
    VigenereCipher,
)
from .exceptions import BadKey

logger = logging.getLogger(__name__)


class CipherKind(Enum):
    CAESAR      = "caesar"
    VIGENERE    = "vigenere"
    VERNAM      = "vernam"
    MATRIX      = "matrix"
    PAIR        = "pair"
    FOUR_SQUARE = "four_square"
    AES         = "aes"
    DES         = "des"


_CLASSES = {
    CipherKind.CAESAR:      CaesarCipher,
    CipherKind.VIGENERE:    VigenereCipher,
    CipherKind.VERNAM:      VernamCipher,
    CipherKind.MATRIX:      MatrixCipher,
    CipherKind.PAIR:        PairCipher,
    CipherKind.FOUR_SQUARE: FourSquareCipher,
    CipherKind.AES:         AESCipher,
    CipherKind.DES:         DESCipher,
}


def _kind(kind) -> CipherKind:
    try:
        return CipherKind(kind)
    except ValueError:
        raise ValueError(
            f"Unknown cipher {kind!r}. Choose from: "
            + ", ".join(k.value for k in CipherKind)
        ) from None


def cipher_class(kind):
    return _CLASSES[_kind(kind)]


def make_cipher(kind, key):
    """Build the cipher for `kind` (a CipherKind or its string value)."""
    kind = _kind(kind)
    logger.debug(f"make_cipher: {kind.value}")
    if kind is CipherKind.FOUR_SQUARE:
        if not isinstance(key, (tuple, list)) or len(key) != 2:
            raise BadKey("Four-Square needs a (first, second) key pair")
        first, second = key
        return FourSquareCipher(first, second)
    return _CLASSES[kind](key)


def generate_key(kind, rng=None):
    """
    Random key material valid for `kind`.
    `rng` is ignored for AES/DES, whose keys always come from os.urandom.
    """
    kind = _kind(kind)
    if kind in (CipherKind.AES, CipherKind.DES):
        return _CLASSES[kind].generate_key()
    return _CLASSES[kind].generate_key(rng=rng)
