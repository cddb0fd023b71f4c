"""Wordle share-text scorer.

This module turns the text a player copies from Wordle's share button into
a ScoreResult. Only the emoji grid matters; the header and any other text
are ignored during extraction.

Scoring system:
    - Miss boxes (⬛, and ⬜ ⚫ 🟫 aliases): 2 points each
    - Present boxes (🟨): 1 point each
    - Hit boxes (🟩): 0 points each
    - Guess penalty: (guess_number - 1) × 2 for each guess
    - Failure penalty: 10 points if the last guess is not all green
    - Final score: |100 - raw_score| (higher is better)

The final transform reflects around 100 rather than clamping, so a raw score
above 200 yields a total_score above 100.
"""

from __future__ import annotations

import logging

from wordle_score.core.exceptions import InvalidFormatError
from wordle_score.core.types import Box, GuessRow, normalize_glyph
from wordle_score.scoring.models import ScoreResult

logger = logging.getLogger(__name__)

# =============================================================================
# Constants
# =============================================================================

BOXES_PER_GUESS: int = 5
MAX_GUESSES: int = 6
FAILURE_PENALTY: int = 10
PERFECT_SCORE_BASE: int = 100
GUESS_PENALTY_STEP: int = 2

# Valid total box counts (5 boxes per guess, 1-6 guesses)
VALID_TOTALS: tuple[int, ...] = tuple(
    BOXES_PER_GUESS * n for n in range(1, MAX_GUESSES + 1)
)

COMPLETION_PATTERN: GuessRow = Box.HIT.value * BOXES_PER_GUESS

HEADER_PREFIX = "Wordle"


# =============================================================================
# Scoring Steps
# =============================================================================


def extract_boxes(share_text: str) -> list[Box]:
    """Extract and normalize box glyphs, ignoring every other character.

    Args:
        share_text: Wordle share text containing box emojis.

    Returns:
        Canonical boxes in input order.

    """
    boxes: list[Box] = []
    for char in share_text:
        box = normalize_glyph(char)
        if box is not None:
            boxes.append(box)
    return boxes


def validate_box_count(box_count: int) -> None:
    """Check that box_count is a whole number of guesses (1-6).

    Args:
        box_count: Total number of boxes found.

    Raises:
        InvalidFormatError: If no boxes were found or the count is not in
            VALID_TOTALS.

    """
    if box_count == 0:
        raise InvalidFormatError(
            "Invalid Wordle format: No box patterns found",
            box_count=0,
            valid_totals=VALID_TOTALS,
        )
    if box_count not in VALID_TOTALS:
        accepted = ", ".join(str(n) for n in VALID_TOTALS)
        raise InvalidFormatError(
            f"Invalid Wordle format: Found {box_count} boxes total, "
            f"but must be one of: {accepted} (1-{MAX_GUESSES} guesses)",
            box_count=box_count,
            valid_totals=VALID_TOTALS,
        )


def group_rows(boxes: list[Box]) -> list[GuessRow]:
    """Group boxes into consecutive rows of 5."""
    return [
        "".join(box.value for box in boxes[i : i + BOXES_PER_GUESS])
        for i in range(0, len(boxes), BOXES_PER_GUESS)
    ]


def calculate_box_score(row: GuessRow) -> int:
    """Sum the box points of one guess row (higher = worse).

    Args:
        row: String of 5 canonical box glyphs.

    Returns:
        Raw points for the row.

    """
    return sum(Box(char).points for char in row)


def calculate_guess_penalty(guess_number: int) -> int:
    """Return the penalty for the 1-based guess_number (0 for the first guess)."""
    return (guess_number - 1) * GUESS_PENALTY_STEP if guess_number > 1 else 0


def is_completed(last_row: GuessRow) -> bool:
    """Return True if the last guess is all green."""
    return last_row == COMPLETION_PATTERN


def transform_score(raw_score: int) -> int:
    """Turn a lower-is-better raw score into the displayed score.

    Formula: |100 - raw_score|. Not clamped.

    Args:
        raw_score: Box points plus penalties.

    Returns:
        Final score where higher is better.

    """
    return abs(PERFECT_SCORE_BASE - raw_score)


def extract_header_line(share_text: str) -> str | None:
    """Return the leading "Wordle ..." line of a share, if present.

    Args:
        share_text: Raw share text.

    Returns:
        The stripped first line when the stripped text starts with "Wordle",
        otherwise None.

    """
    stripped = share_text.strip()
    if not stripped.startswith(HEADER_PREFIX):
        return None
    return stripped.splitlines()[0].strip()


# =============================================================================
# Public API
# =============================================================================


def score_wordle(share_text: str) -> ScoreResult:
    """Score a Wordle game from its share text.

    Validation fully precedes scoring: a malformed grid never yields a
    partial result.

    Args:
        share_text: Wordle share text containing box emojis.

    Returns:
        ScoreResult with the full scoring breakdown.

    Raises:
        InvalidFormatError: If the text holds no boxes or a box count that
            is not 5, 10, 15, 20, 25 or 30.

    Example:
        >>> result = score_wordle("Wordle 1,000 1/6\\n\\n🟩🟩🟩🟩🟩")
        >>> result.total_score
        100

    """
    boxes = extract_boxes(share_text)
    validate_box_count(len(boxes))

    rows = group_rows(boxes)

    box_scores: list[int] = []
    guess_penalties: list[int] = []
    for guess_number, row in enumerate(rows, start=1):
        box_scores.append(calculate_box_score(row))
        guess_penalties.append(calculate_guess_penalty(guess_number))

    box_total = sum(box_scores)
    failure_penalty = 0 if is_completed(rows[-1]) else FAILURE_PENALTY
    total_penalty = sum(guess_penalties) + failure_penalty
    total_score = transform_score(box_total + total_penalty)

    logger.debug(
        "Scored %d-guess game: box_total=%d total_penalty=%d total_score=%d",
        len(rows),
        box_total,
        total_penalty,
        total_score,
    )

    return ScoreResult(
        attempts=len(rows),
        guesses=tuple(rows),
        box_scores=tuple(box_scores),
        box_total=box_total,
        guess_penalties=tuple(guess_penalties),
        total_penalty=total_penalty,
        failure_penalty=failure_penalty,
        total_score=total_score,
        original_text=share_text,
        header_line=extract_header_line(share_text),
    )
