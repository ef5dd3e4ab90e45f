"""
Cipher contract
===============
Every cipher in the toolkit — classical or block — implements this
interface, so callers can swap one for another without changing code.

    encrypt(data: str) -> str
    decrypt(data: str) -> str
    key                    read-only key material (int, str, tuple or bytes)

Keys are validated in __init__ and never change afterwards.
"""

from abc import ABC, abstractmethod


class Cipher(ABC):
    """Uniform text-in, text-out cipher interface."""

    name = "cipher"

    @abstractmethod
    def encrypt(self, data: str) -> str:
        """Encrypt plaintext → ciphertext."""

    @abstractmethod
    def decrypt(self, data: str) -> str:
        """Decrypt ciphertext → plaintext."""

    @property
    @abstractmethod
    def key(self):
        """Key material this cipher was built with."""

    def __repr__(self):
        return f"{type(self).__name__}()"
