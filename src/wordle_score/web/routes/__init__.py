"""Route tables for the wordle-score web app.

Each submodule exposes a ``routes`` list; they are concatenated here in
the order Starlette should match them.
"""

from starlette.routing import BaseRoute

from wordle_score.web.routes import api, pages

PAGE_ROUTES: list[BaseRoute] = list(pages.routes)
API_ROUTES: list[BaseRoute] = list(api.routes)

ALL_ROUTES: list[BaseRoute] = [*PAGE_ROUTES, *API_ROUTES]

__all__ = ["ALL_ROUTES", "API_ROUTES", "PAGE_ROUTES"]
