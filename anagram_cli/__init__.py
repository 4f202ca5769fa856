"""Anagram generator for sets of distinct letters.

The console surface is implemented with Typer and Rich for help and error
ergonomics, while permutation output stays one-per-line (or JSON) on stdout.
"""

from .generator import generate, permutations_of
from .letter_inputs import (
    DuplicateCharacterError,
    EmptyInputError,
    InvalidCharacterError,
    LetterInputError,
    NullInputError,
    validate_letters,
)

__all__ = [
    "__version__",
    "DuplicateCharacterError",
    "EmptyInputError",
    "InvalidCharacterError",
    "LetterInputError",
    "NullInputError",
    "generate",
    "permutations_of",
    "validate_letters",
]

__version__ = "0.1.0"
