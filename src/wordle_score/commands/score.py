"""Score command for wordle-score CLI.

Scores share text given as an argument, read from a file, or piped on stdin.
"""

import json
import sys
from pathlib import Path

import typer
from rich.table import Table

from wordle_score.cli_utils import (
    EXIT_ERROR,
    _error,
    _setup_logging,
    console,
)
from wordle_score.core.exceptions import InvalidFormatError
from wordle_score.scoring import ScoreResult, score_wordle


def _read_input(text: str | None, file: Path | None) -> str:
    if text is not None:
        return text
    if file is not None:
        try:
            return file.read_text(encoding="utf-8")
        except OSError as e:
            _error(f"Cannot read {file}: {e}")
            raise typer.Exit(code=EXIT_ERROR) from None
    if sys.stdin.isatty():
        return ""
    return sys.stdin.read()


def _render_table(result: ScoreResult) -> Table:
    table = Table(title=result.header_line or "Wordle score")
    table.add_column("#", justify="right")
    table.add_column("Guess")
    table.add_column("Box points", justify="right")
    table.add_column("Penalty", justify="right")

    for i, guess in enumerate(result.guesses):
        table.add_row(
            str(i + 1),
            guess,
            str(result.box_scores[i]),
            str(result.guess_penalties[i]),
        )

    table.add_section()
    table.add_row("", "Box total", str(result.box_total), "")
    table.add_row("", "Failure penalty", "", str(result.failure_penalty))
    table.add_row("", "Total penalty", "", str(result.total_penalty))
    return table


def score_command(
    text: str | None = typer.Argument(
        None,
        help="Wordle share text (reads --file or stdin when omitted)",
    ),
    file: Path | None = typer.Option(
        None,
        "--file",
        "-f",
        help="Read share text from a file",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the breakdown as JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
) -> None:
    """Score a Wordle share.

    Examples:
        wordle-score score "$(pbpaste)"
        wordle-score score --file share.txt --json
        pbpaste | wordle-score score

    """
    _setup_logging(verbose=verbose, quiet=not verbose)

    share_text = _read_input(text, file)
    if not share_text.strip():
        _error("Please provide Wordle share text")
        raise typer.Exit(code=EXIT_ERROR)

    try:
        result = score_wordle(share_text)
    except InvalidFormatError as e:
        _error(str(e))
        raise typer.Exit(code=EXIT_ERROR) from None

    if as_json:
        data = result.model_dump(mode="json", by_alias=True)
        typer.echo(json.dumps(data, indent=2, ensure_ascii=False))
        return

    console.print(_render_table(result))
    status = "[green]solved[/green]" if result.completed else "[red]not solved[/red]"
    console.print(
        f"[bold]Score: {result.total_score}[/bold] "
        f"({result.attempts}/6 guesses, {status}, raw {result.raw_score})"
    )
