"""Score breakdown model."""

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel


class ScoreResult(BaseModel):
    """Detailed scoring breakdown for one Wordle share.

    Serializes with camelCase keys (``boxScores``, ``totalScore``...) when
    dumped with ``by_alias=True``; attribute access uses snake_case.

    Attributes:
        attempts: Number of guess rows (1-6).
        guesses: Normalized 5-glyph string per row.
        box_scores: Raw box points per row (lower is better).
        box_total: Sum of box_scores.
        guess_penalties: Attempt-number penalty per row.
        total_penalty: Sum of guess_penalties plus failure_penalty.
        failure_penalty: 10 when the last row is not all green, else 0.
        total_score: |100 - raw score|; not clamped to 0-100.
        original_text: Input exactly as submitted.
        header_line: "Wordle 1,234 3/6" line when the share starts with one.

    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    attempts: int = Field(ge=1, le=6)
    guesses: tuple[str, ...]
    box_scores: tuple[int, ...]
    box_total: int
    guess_penalties: tuple[int, ...]
    total_penalty: int
    failure_penalty: int
    total_score: int
    original_text: str
    header_line: str | None = None

    @computed_field(alias="rawScore")  # type: ignore[prop-decorator]
    @property
    def raw_score(self) -> int:
        """Pre-transform score (lower is better)."""
        return self.box_total + self.total_penalty

    @computed_field(alias="completed")  # type: ignore[prop-decorator]
    @property
    def completed(self) -> bool:
        """Whether the puzzle was solved."""
        return self.failure_penalty == 0
