"""
Key squares
===========
The 5x5 letter grid shared by the digraph ciphers (Four-Square, Pair).

A square is filled row by row with the deduplicated letters of a seed
key, followed by the rest of the alphabet in order. I and J share a cell,
so the square always holds exactly the 25 letters A–Z minus J.

How J in the seed is treated depends on the cipher:
    merge_j=True   J becomes I        (Four-Square)
    merge_j=False  J is dropped       (Pair)
"""

from typing import Dict, Tuple

from .alphabet import ALPHABET
from .exceptions import CharacterNotFound

SQUARE_SIZE = 5
SQUARE_LETTERS = ALPHABET.replace("J", "")


def square_sequence(seed: str, merge_j: bool = True) -> str:
    """Return the 25 square letters in row-major order for `seed`."""
    seed = seed.upper()
    if merge_j:
        seed = seed.replace("J", "I")
    seen = []
    for ch in seed + SQUARE_LETTERS:
        if ch in SQUARE_LETTERS and ch not in seen:
            seen.append(ch)
    return "".join(seen)


class KeySquare:
    """Immutable 5x5 grid with a letter -> (row, col) index."""

    def __init__(self, seed: str = "", merge_j: bool = True):
        letters = square_sequence(seed, merge_j)
        self._rows: Tuple[str, ...] = tuple(
            letters[i:i + SQUARE_SIZE]
            for i in range(0, len(letters), SQUARE_SIZE)
        )
        self._positions: Dict[str, Tuple[int, int]] = {
            ch: divmod(i, SQUARE_SIZE) for i, ch in enumerate(letters)
        }

    @property
    def rows(self) -> Tuple[str, ...]:
        return self._rows

    def at(self, row: int, col: int) -> str:
        """Letter at (row, col); indices wrap modulo the square size."""
        return self._rows[row % SQUARE_SIZE][col % SQUARE_SIZE]

    def position(self, char: str) -> Tuple[int, int]:
        try:
            return self._positions[char]
        except KeyError:
            raise CharacterNotFound(char) from None

    def __contains__(self, char: str) -> bool:
        return char in self._positions

    def __str__(self):
        return "\n".join(" ".join(row) for row in self._rows)

    def __repr__(self):
        return f"KeySquare({''.join(self._rows)!r})"
