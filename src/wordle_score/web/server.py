"""HTTP server for wordle-score.

This module implements the web app using Starlette/Uvicorn:
- Renders the score calculator form (Jinja2 templates)
- Serves static CSS/JS assets
- Provides a JSON scoring API

Public API:
    ScoreServer: Main server class
    start_server: Convenience function to start server
"""

import asyncio
import contextlib
import logging
import socket
from collections.abc import AsyncIterator
from pathlib import Path

from starlette.applications import Starlette
from starlette.routing import BaseRoute, Mount
from starlette.staticfiles import StaticFiles
from starlette.templating import Jinja2Templates

from wordle_score.core.exceptions import ServerError
from wordle_score.core.types import MISS_ALIASES
from wordle_score.web.routes import ALL_ROUTES

logger = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"
STATIC_DIR = PACKAGE_DIR / "static"


def is_port_available(port: int, host: str = "127.0.0.1") -> bool:
    """Check if port is available for binding.

    Args:
        port: Port number to check.
        host: Host address to bind to.

    Returns:
        True if port can be bound, False if busy.

    """
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind((host, port))
            return True
    except OSError:
        return False


def find_available_port(
    start_port: int = 3000,
    host: str = "127.0.0.1",
    max_attempts: int = 10,
) -> int:
    """Find available port, incrementing by 1.

    Args:
        start_port: First port to try.
        host: Host address to bind to (must match server's --host).
        max_attempts: Maximum number of ports to try.

    Returns:
        First available port number.

    Raises:
        ServerError: If no available port found after max_attempts.

    """
    tried: list[int] = []
    for i in range(max_attempts):
        port = start_port + i
        tried.append(port)
        if is_port_available(port, host):
            return port

    raise ServerError(
        f"No available port. Tried: {tried[0]}-{tried[-1]}. "
        f"Free a port or use --port with different value."
    )


class ScoreServer:
    """Web server for the Wordle score calculator.

    Attributes:
        host: Server bind address.
        port: Server bind port.
        templates: Jinja2 template renderer shared by page routes.

    """

    def __init__(self, host: str = "127.0.0.1", port: int = 3000) -> None:
        """Initialize score server.

        Args:
            host: Address to bind server to.
            port: Port to bind server to.

        """
        self.host = host
        self.port = port
        self.templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
        self.templates.env.globals["miss_aliases"] = MISS_ALIASES
        self._app: Starlette | None = None

    def create_app(self) -> Starlette:
        """Create and configure Starlette application.

        Returns:
            Configured Starlette app instance.

        """
        routes: list[BaseRoute] = list(ALL_ROUTES)

        if STATIC_DIR.exists():
            routes.append(
                Mount("/static", app=StaticFiles(directory=str(STATIC_DIR)), name="static")
            )

        app = Starlette(routes=routes, lifespan=self._lifespan)

        app.state.server = self
        app.state.templates = self.templates

        self._app = app
        return app

    @contextlib.asynccontextmanager
    async def _lifespan(self, app: Starlette) -> AsyncIterator[None]:
        logger.info("Score server starting at http://%s:%d", self.host, self.port)
        yield
        logger.info("Score server shutting down...")

    async def run(self, log_level: str = "info") -> None:
        """Start the server and run until shutdown.

        Args:
            log_level: Uvicorn log level (debug, info, warning, error).

        """
        import uvicorn

        app = self.create_app()

        config = uvicorn.Config(
            app,
            host=self.host,
            port=self.port,
            log_level=log_level,
        )
        server = uvicorn.Server(config)
        await server.serve()


def start_server(host: str = "127.0.0.1", port: int = 3000, log_level: str = "info") -> None:
    """Start score server.

    Args:
        host: Address to bind to.
        port: Port to bind to.
        log_level: Uvicorn log level.

    """
    server = ScoreServer(host=host, port=port)
    asyncio.run(server.run(log_level=log_level))
