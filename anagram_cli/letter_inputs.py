from __future__ import annotations


class LetterInputError(ValueError):
    """Raised when a letter set cannot be turned into anagrams."""


class NullInputError(LetterInputError):
    """Raised when no input was supplied at all."""

    def __init__(self) -> None:
        super().__init__("null input is not allowed")


class EmptyInputError(LetterInputError):
    """Raised when the input is empty or whitespace only."""

    def __init__(self) -> None:
        super().__init__("empty input is not allowed")


class InvalidCharacterError(LetterInputError):
    """Raised when the input holds something other than a letter."""

    def __init__(self, character: str) -> None:
        self.character = character
        super().__init__(f"input must contain only letters; invalid character: {character!r}")


class DuplicateCharacterError(LetterInputError):
    """Raised when a letter appears more than once (case-sensitive)."""

    def __init__(self, character: str) -> None:
        self.character = character
        super().__init__(
            f"input must contain distinct letters (no repeats); repeated letter: {character!r}"
        )


def _require_non_empty(value: str | None) -> str:
    if value is None:
        raise NullInputError()
    out = value.strip()
    if not out:
        raise EmptyInputError()
    return out


def validate_letters(value: str | None) -> str:
    """Return the trimmed letter set, or raise on the first rule it breaks.

    Letters are anything ``str.isalpha`` accepts, so accented and non-Latin
    letters pass. Duplicates are compared by exact code point, without
    Unicode normalization.
    """

    letters = _require_non_empty(value)
    for ch in letters:
        if not ch.isalpha():
            raise InvalidCharacterError(ch)
    seen: set[str] = set()
    for ch in letters:
        if ch in seen:
            raise DuplicateCharacterError(ch)
        seen.add(ch)
    return letters
