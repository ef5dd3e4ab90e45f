"""
Key material generators
=======================
Random keys that satisfy each cipher's construction rules.

Every generator takes an optional `rng`: any object exposing
`randrange()` and `choice()` (a `random.Random` works). When omitted,
the OS-backed `secrets.SystemRandom` is used. Pass a seeded
`random.Random` for reproducible keys in tests.

Block-cipher keys come from `os.urandom`, as raw bytes.
"""

import os
import secrets

from .alphabet import ALPHABET

# Upper bound (exclusive) for random integers and default key lengths.
DEFAULT_UPPER = 47

_system_rng = secrets.SystemRandom()


def _source(rng):
    return _system_rng if rng is None else rng


def generate_int(upper: int = DEFAULT_UPPER, rng=None) -> int:
    """Random integer in [1, upper)."""
    if upper < 2:
        raise ValueError("upper bound must be at least 2.")
    return _source(rng).randrange(1, upper)


def generate_str(size: int = None, rng=None) -> str:
    """
    Random uppercase alphabetic string.
    Length is `size` (at least 1, so the key is usable by every string
    cipher), or a random length from generate_int() when omitted.
    """
    rng = _source(rng)
    if size is None:
        size = generate_int(rng=rng)
    if size < 1:
        raise ValueError("size must be at least 1.")
    return "".join(rng.choice(ALPHABET) for _ in range(size))


def generate_bytes(size: int) -> bytes:
    return os.urandom(size)
