"""Wordle scoring.

Public API:
    score_wordle: Parse share text and return a ScoreResult
    ScoreResult: Immutable scoring breakdown
    VALID_TOTALS: Accepted total box counts
"""

from wordle_score.scoring.models import ScoreResult
from wordle_score.scoring.scorer import (
    BOXES_PER_GUESS,
    COMPLETION_PATTERN,
    FAILURE_PENALTY,
    MAX_GUESSES,
    VALID_TOTALS,
    score_wordle,
)

__all__ = [
    "ScoreResult",
    "score_wordle",
    "BOXES_PER_GUESS",
    "COMPLETION_PATTERN",
    "FAILURE_PENALTY",
    "MAX_GUESSES",
    "VALID_TOTALS",
]
