from __future__ import annotations

import sys

import click
import typer
from rich.console import Console
from rich.markup import escape

from . import __version__
from .cli_shared import (
    ANAGRAM_JSON,
    ANAGRAM_LETTERS,
    PROMPT_TEXT,
    GlobalOpts,
    OpError,
    _env_or_none,
    _permutations_doc,
    _print_json,
    _print_lines,
    _read_stdin_line,
    _truthy,
)
from .generator import generate
from .letter_inputs import LetterInputError, validate_letters


app = typer.Typer(
    name="anagram",
    help="Print every anagram of a group of distinct letters, in lexicographic order.",
    add_completion=False,
)

_ERROR_CONSOLE = Console(stderr=True, soft_wrap=True)


def _rich_error(msg: str) -> None:
    _ERROR_CONSOLE.print(f"[bold red]error:[/bold red] {escape(msg)}", highlight=False)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"anagram {__version__}")
        raise typer.Exit(code=0)


def _resolve_letters(letters: str | None, g: GlobalOpts) -> str | None:
    if letters is not None:
        return letters
    from_env = _env_or_none(ANAGRAM_LETTERS)
    if from_env is not None:
        return from_env
    return _read_stdin_line(prompt=None if g.quiet else PROMPT_TEXT)


@app.command()
def anagrams(
    letters: str | None = typer.Argument(
        None,
        help=(
            f"Distinct letters, e.g. abc (env fallback: {ANAGRAM_LETTERS}; otherwise read from stdin). "
            "Put -- before a value that starts with '-'."
        ),
        show_default=False,
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help=f"Emit a JSON document instead of one anagram per line (env: {ANAGRAM_JSON})",
    ),
    plain_json: bool = typer.Option(False, "--plain-json", help="Emit compact JSON output"),
    quiet: bool = typer.Option(False, "--quiet", help="Do not prompt on stderr when reading stdin"),
    version: bool = typer.Option(False, "--version", callback=_version_callback, is_eager=True),
) -> None:
    del version
    g = GlobalOpts(
        json_output=json_output or plain_json or _truthy(_env_or_none(ANAGRAM_JSON)),
        pretty=not plain_json,
        quiet=quiet,
    )
    raw = _resolve_letters(letters, g)
    result = generate(raw)
    if not g.json_output:
        _print_lines(result)
        return
    # raw already passed validation inside generate(); this only trims it.
    _print_json(
        _permutations_doc(letters=validate_letters(raw), permutations=result),
        pretty=g.pretty,
    )


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    try:
        result = app(args=argv, prog_name="anagram", standalone_mode=False)
        if result is None:
            return 0
        return int(result)
    except typer.Exit as e:
        return int(e.exit_code)
    except click.ClickException as e:
        _rich_error(e.format_message())
        return int(e.exit_code)
    except (LetterInputError, OpError) as e:
        _rich_error(str(e))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
