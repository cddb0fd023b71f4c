"""JSON API route handlers.

Provides scoring, version and health endpoints.
"""

import logging

from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from wordle_score.core.exceptions import InvalidFormatError
from wordle_score.scoring import score_wordle
from wordle_score.web.routes.pages import EMPTY_INPUT_MESSAGE, FORM_FIELD

logger = logging.getLogger(__name__)


async def post_score(request: Request) -> JSONResponse:
    """POST /api/score - Score share text sent as JSON.

    Body: {"wordleText": "..."}

    Returns the camelCase score breakdown, or 400 with {"error": ...} for
    a missing, blank or unparseable grid.
    """
    try:
        body = await request.json()
    except ValueError:
        # JSONDecodeError and UnicodeDecodeError
        return JSONResponse({"error": "Request body must be JSON"}, status_code=400)

    wordle_text = body.get(FORM_FIELD) if isinstance(body, dict) else None
    if not isinstance(wordle_text, str) or not wordle_text.strip():
        return JSONResponse({"error": EMPTY_INPUT_MESSAGE}, status_code=400)

    try:
        result = score_wordle(wordle_text)
    except InvalidFormatError as e:
        return JSONResponse(
            {
                "error": str(e),
                "boxCount": e.box_count,
                "validTotals": list(e.valid_totals),
            },
            status_code=400,
        )
    except Exception as e:
        logger.exception("Failed to score share text")
        return JSONResponse({"error": str(e)}, status_code=500)

    return JSONResponse(result.model_dump(mode="json", by_alias=True))


async def get_version(request: Request) -> JSONResponse:
    """GET /api/version - Return wordle-score version."""
    from wordle_score import __version__

    return JSONResponse({"version": __version__})


async def get_health(request: Request) -> JSONResponse:
    """GET /health - Liveness probe."""
    return JSONResponse({"status": "ok"})


routes = [
    Route("/api/score", post_score, methods=["POST"]),
    Route("/api/version", get_version, methods=["GET"]),
    Route("/health", get_health, methods=["GET"]),
]
