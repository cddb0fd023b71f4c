"""Core type definitions for wordle-score.

This module provides the Box enum and the glyph lookup table used to
normalize the many squares people paste into the three canonical boxes.
"""

from __future__ import annotations

from enum import Enum
from typing import TypeAlias


class Box(str, Enum):
    """Canonical Wordle feedback box.

    Values are the glyphs the official game uses in its share text:
    - HIT: correct letter in the correct position
    - PRESENT: correct letter in the wrong position
    - MISS: letter not in the word
    """

    HIT = "🟩"
    PRESENT = "🟨"
    MISS = "⬛"

    @property
    def points(self) -> int:
        """Raw points for this box (lower is better)."""
        return BOX_POINTS[self]


# A guess row rendered as its 5 canonical glyphs, e.g. "⬛🟨🟩⬛🟨"
GuessRow: TypeAlias = str

BOX_POINTS: dict[Box, int] = {
    Box.MISS: 2,
    Box.PRESENT: 1,
    Box.HIT: 0,
}

# Light mode, high contrast and third-party clones use other squares for a miss
GLYPH_TABLE: dict[str, Box] = {
    "⬛": Box.MISS,
    "⬜": Box.MISS,
    "⚫": Box.MISS,
    "🟫": Box.MISS,
    "🟨": Box.PRESENT,
    "🟩": Box.HIT,
}

MISS_ALIASES: tuple[str, ...] = tuple(
    glyph for glyph, box in GLYPH_TABLE.items() if box is Box.MISS and glyph != Box.MISS.value
)


def normalize_glyph(char: str) -> Box | None:
    """Map a single character to its canonical box.

    Args:
        char: One code point from the share text.

    Returns:
        The canonical Box, or None if the character is not a box glyph.

    Examples:
        >>> normalize_glyph("⬜")
        <Box.MISS: '⬛'>
        >>> normalize_glyph("W") is None
        True

    """
    return GLYPH_TABLE.get(char)
