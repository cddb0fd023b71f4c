"""wordle-score command line interface.

Usage:
    wordle-score score "Wordle 1,234 3/6 ..."
    wordle-score serve --port 3000
"""

import typer

from wordle_score.cli_utils import console
from wordle_score.commands.score import score_command
from wordle_score.commands.serve import serve_command

app = typer.Typer(
    name="wordle-score",
    help="Score shared Wordle results",
    no_args_is_help=True,
)

app.command("score")(score_command)
app.command("serve")(serve_command)


def _version_callback(value: bool) -> None:
    if value:
        from wordle_score import __version__

        console.print(f"wordle-score {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Score shared Wordle results."""


if __name__ == "__main__":
    app()
