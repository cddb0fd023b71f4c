"""Serve command for wordle-score CLI.

Starts the score calculator web server.
"""

from pathlib import Path

import typer

from wordle_score.cli_utils import (
    EXIT_CONFIG_ERROR,
    EXIT_ERROR,
    EXIT_SUCCESS,
    _error,
    _setup_logging,
    console,
)
from wordle_score.core.config import load_config
from wordle_score.core.exceptions import ConfigError, ServerError


def serve_command(
    host: str | None = typer.Option(
        None,
        "--host",
        # NOTE: No -h short form - conflicts with --help
        help="Address to bind server to (default: config or 127.0.0.1)",
    ),
    port: int | None = typer.Option(
        None,
        "--port",
        "-p",
        help="Port to bind server to (default: $PORT, config or 3000)",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to YAML config file (default: ./wordle-score.yaml)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging (shows HTTP request logs)",
    ),
    no_auto_port: bool = typer.Option(
        False,
        "--no-auto-port",
        help="Fail if port is busy instead of auto-discovering",
    ),
) -> None:
    """Start the score calculator web server."""
    import asyncio

    from wordle_score.web import ScoreServer
    from wordle_score.web.server import find_available_port

    try:
        loaded_config = load_config(config)
    except ConfigError as e:
        _error(f"Config error: {e}")
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from None

    _setup_logging(verbose=verbose, quiet=False)
    if not verbose:
        import logging

        logging.getLogger("wordle_score").setLevel(loaded_config.logging.level)

    bind_host = host if host is not None else loaded_config.server.host
    bind_port = port if port is not None else loaded_config.server.port

    # Port auto-discovery (unless --no-auto-port)
    actual_port = bind_port
    if not no_auto_port:
        try:
            actual_port = find_available_port(bind_port, bind_host)
            if actual_port != bind_port:
                console.print(
                    f"[yellow]Port {bind_port} unavailable, using port {actual_port}[/yellow]"
                )
        except ServerError as e:
            _error(str(e))
            raise typer.Exit(code=EXIT_ERROR) from None

    console.print("[green]Score server starting...[/green]")
    console.print(f"  URL: http://{bind_host}:{actual_port}/")
    console.print("  Press Ctrl+C to stop")

    server = ScoreServer(host=bind_host, port=actual_port)
    log_level = "debug" if verbose else loaded_config.server.log_level

    # Uvicorn logs bind failures itself and exits the process
    asyncio.run(server.run(log_level=log_level))

    console.print("\n[yellow]Server stopped.[/yellow]")
    raise typer.Exit(code=EXIT_SUCCESS)
