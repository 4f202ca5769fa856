from __future__ import annotations

import json
import os
import sys
from dataclasses import dataclass
from typing import Any, TextIO


class AnagramOpsError(Exception):
    pass


class OpError(AnagramOpsError):
    pass


ANAGRAM_LETTERS = "ANAGRAM_LETTERS"
ANAGRAM_JSON = "ANAGRAM_JSON"
ANAGRAM_PERMUTATIONS_KIND = "anagram.permutations.v1"

PROMPT_TEXT = "Enter a group of distinct letters (e.g. abc): "


def _eprint(msg: str, *, end: str = "\n") -> None:
    print(msg, file=sys.stderr, end=end, flush=True)


@dataclass(frozen=True)
class GlobalOpts:
    json_output: bool
    pretty: bool
    quiet: bool


def _truthy(raw: str | None) -> bool:
    return str(raw or "").strip().lower() in {"1", "true", "yes", "on"}


def _env_or_none(*names: str) -> str | None:
    for n in names:
        v = (os.environ.get(n) or "").strip()
        if v:
            return v
    return None


def _read_stdin_line(*, prompt: str | None, stream: TextIO | None = None) -> str | None:
    """Read one line for the letter set; ``None`` means stdin hit EOF first."""

    if prompt:
        _eprint(prompt, end="")
    src = stream if stream is not None else sys.stdin
    try:
        line = src.readline()
    except OSError as e:
        raise OpError(f"failed to read letters from stdin: {e}") from e
    if not line:
        return None
    return line.rstrip("\r\n")


def _permutations_doc(*, letters: str, permutations: list[str]) -> dict[str, Any]:
    return {
        "kind": ANAGRAM_PERMUTATIONS_KIND,
        "input": letters,
        "count": len(permutations),
        "permutations": permutations,
    }


def _print_json(obj: Any, *, pretty: bool) -> None:
    if pretty:
        sys.stdout.write(json.dumps(obj, indent=2, sort_keys=True, ensure_ascii=False) + "\n")
    else:
        sys.stdout.write(
            json.dumps(obj, separators=(",", ":"), sort_keys=True, ensure_ascii=False) + "\n"
        )


def _print_lines(lines: list[str]) -> None:
    for line in lines:
        sys.stdout.write(line + "\n")
