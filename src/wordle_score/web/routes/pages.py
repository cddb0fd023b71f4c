"""HTML page route handlers.

Provides the score calculator form and its submission handler.
"""

import logging

from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Route

from wordle_score.core.exceptions import InvalidFormatError
from wordle_score.scoring import score_wordle

logger = logging.getLogger(__name__)

FORM_FIELD = "wordleText"
EMPTY_INPUT_MESSAGE = "Please provide Wordle share text"


def _render(request: Request, **context: object) -> Response:
    templates = request.app.state.templates
    return templates.TemplateResponse(request, "index.html", context)


async def index(request: Request) -> Response:
    """GET / - Render the empty score calculator form."""
    return _render(request, result=None, error=None, wordle_text="")


async def submit_score(request: Request) -> Response:
    """POST /score - Score submitted share text and render the breakdown.

    Blank input and unparseable grids re-render the form with the error
    message and the submitted text so the user can correct it.
    """
    form = await request.form()
    wordle_text = form.get(FORM_FIELD)

    if not isinstance(wordle_text, str) or not wordle_text.strip():
        return _render(
            request,
            result=None,
            error=EMPTY_INPUT_MESSAGE,
            wordle_text=wordle_text if isinstance(wordle_text, str) else "",
        )

    try:
        result = score_wordle(wordle_text)
    except InvalidFormatError as e:
        logger.info("Rejected share text: %s", e)
        return _render(request, result=None, error=str(e), wordle_text=wordle_text)

    return _render(request, result=result, error=None, wordle_text="")


routes = [
    Route("/", index, methods=["GET"]),
    Route("/score", submit_score, methods=["POST"]),
]
