from .caesar      import CaesarCipher
from .vigenere    import VigenereCipher
from .vernam      import VernamCipher
from .matrix      import MatrixCipher
from .pair        import PairCipher
from .four_square import FourSquareCipher
from .aes         import AESCipher
from .des         import DESCipher

__all__ = [
    "CaesarCipher",
    "VigenereCipher",
    "VernamCipher",
    "MatrixCipher",
    "PairCipher",
    "FourSquareCipher",
    "AESCipher",
    "DESCipher",
]
