"""
Matrix — Columnar Transposition Cipher
======================================
Letters are not changed, only moved.

    1. Write the text row by row into a grid `len(key)` columns wide,
       padding the last row with spaces.
    2. Number the columns by sorting the key's characters; equal
       characters keep their left-to-right order.
    3. Read the columns out top to bottom in that order.

Example, key ZEBRA:

    Z E B R A        read order: A(4) B(2) E(1) R(3) Z(0)
    W E A R E
    D I S C O        → EODAE ASREN EIELO RCEEC WDVFT
    V E R E D
    F L E E A
    T O N C E

Decryption refills the columns in the same order and reads the rows back.
Trailing padding is stripped, so trailing spaces of the original text
are lost too; spaces inside the text survive.
"""

import logging
from typing import List

from ..base import Cipher
from ..exceptions import BadKey
from ..keygen import generate_str

logger = logging.getLogger(__name__)


class MatrixCipher(Cipher):
    """Columnar transposition keyed by column order."""

    name = "matrix"
    PAD  = " "

    def __init__(self, key: str):
        if not isinstance(key, str) or not key:
            raise BadKey("Secret key must not be empty")
        self._key = key
        self._order = self.column_order(key)
        logger.debug(f"MatrixCipher ready: columns={len(key)}")

    @property
    def key(self) -> str:
        return self._key

    @staticmethod
    def generate_key(size: int = None, rng=None) -> str:
        return generate_str(size, rng=rng)

    @staticmethod
    def column_order(key: str) -> List[int]:
        """Column indices sorted by key character (stable on ties)."""
        return sorted(range(len(key)), key=lambda i: key[i])

    def encrypt(self, data: str) -> str:
        cols = len(self._key)
        rows = -(-len(data) // cols)
        padded = data.ljust(rows * cols, self.PAD)
        grid = [padded[r * cols:(r + 1) * cols] for r in range(rows)]
        return "".join(
            grid[r][c] for c in self._order for r in range(rows)
        )

    def decrypt(self, data: str) -> str:
        cols = len(self._key)
        rows = len(data) // cols
        grid = [[self.PAD] * cols for _ in range(rows)]
        chars = iter(data)
        for c in self._order:
            for r in range(rows):
                grid[r][c] = next(chars)
        return "".join("".join(row) for row in grid).rstrip(self.PAD)
