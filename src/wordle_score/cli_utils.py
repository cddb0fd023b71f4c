"""Shared helpers for the wordle-score CLI.

Exit codes, the Rich console, message helpers and logging setup used by
every command module.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2

console = Console()
err_console = Console(stderr=True)


def _error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(f"[red]Error:[/red] {escape(message)}")


def _setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure root logging with a Rich handler.

    Args:
        verbose: Log at DEBUG level.
        quiet: Only log warnings and errors. Ignored when verbose is set.

    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True, show_path=verbose)],
        force=True,
    )
