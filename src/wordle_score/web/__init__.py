"""Web module for wordle-score.

Public API:
    ScoreServer: Main HTTP server class
    start_server: Convenience function to start the server
"""

from wordle_score.web.server import ScoreServer, start_server

__all__ = [
    "ScoreServer",
    "start_server",
]
