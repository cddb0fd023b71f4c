"""Exceptions for wordle-score.

This module provides the exception hierarchy shared by the scorer,
the configuration loader and the web server.
"""

from __future__ import annotations


class WordleScoreError(Exception):
    """Base exception for wordle-score.

    All wordle-score specific exceptions inherit from this class.
    """

    pass


class InvalidFormatError(WordleScoreError):
    """Share text could not be turned into a Wordle grid.

    Raised when:
    - No box glyphs are found in the input
    - The number of boxes is not a whole number of 5-box guesses (1-6)

    The message is meant to be shown to the user verbatim.

    Attributes:
        box_count: Number of boxes extracted from the input.
        valid_totals: Box counts that would have been accepted.

    """

    def __init__(
        self,
        message: str,
        box_count: int = 0,
        valid_totals: tuple[int, ...] = (),
    ) -> None:
        """Initialize InvalidFormatError with context.

        Args:
            message: Human-readable error message.
            box_count: Number of boxes found in the input.
            valid_totals: Accepted box counts.

        """
        super().__init__(message)
        self.box_count = box_count
        self.valid_totals = valid_totals


class ConfigError(WordleScoreError):
    """Configuration file is malformed or fails validation."""

    pass


class ServerError(WordleScoreError):
    """Web server could not be started."""

    pass
