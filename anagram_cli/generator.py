from __future__ import annotations

from .letter_inputs import validate_letters


def _backtrack(letters: list[str], used: list[bool], prefix: list[str], out: list[str]) -> None:
    if len(prefix) == len(letters):
        out.append("".join(prefix))
        return
    for i, ch in enumerate(letters):
        if used[i]:
            continue
        used[i] = True
        prefix.append(ch)
        _backtrack(letters, used, prefix, out)
        prefix.pop()
        used[i] = False


def permutations_of(letters: str) -> list[str]:
    """Enumerate every ordering of already-validated distinct letters.

    The letters are sorted by code point first, so trying unused positions
    left to right emits results in lexicographic order with no post-sort.
    """

    ordered = sorted(letters)
    out: list[str] = []
    _backtrack(ordered, [False] * len(ordered), [], out)
    return out


def generate(value: str | None) -> list[str]:
    """Validate ``value`` and return all of its anagrams in lexicographic order."""

    return permutations_of(validate_letters(value))
