"""
Errors raised by the cipher toolkit.

BadKey             — key rejected at construction. Fix the key and rebuild.
InvalidLength      — a length precondition between key and data failed.
CharacterNotFound  — a key-square lookup missed; the text was not
                     normalized for that square.
"""


class CipherError(Exception):
    """Base class for every error raised by classical_ciphers."""


class BadKey(CipherError, ValueError):
    def __init__(self, message: str = "Received invalid secret key"):
        super().__init__(message)


class InvalidLength(CipherError, ValueError):
    pass


class CharacterNotFound(CipherError, LookupError):
    def __init__(self, char: str):
        super().__init__(f"Character {char!r} not found in square")
        self.char = char
