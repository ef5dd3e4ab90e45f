"""
Alphabet
========
The 26-letter Latin alphabet every classical cipher in this package works
over. Modular letter arithmetic always uses ALPHABET_SIZE as the modulus.
"""

ALPHABET      = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALPHABET_SIZE = len(ALPHABET)
