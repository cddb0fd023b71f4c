"""Pytest configuration and fixtures for wordle-score tests."""

import pytest

HIT = "🟩"
PRESENT = "🟨"
MISS = "⬛"


@pytest.fixture(autouse=True)
def reset_config_singleton(monkeypatch: pytest.MonkeyPatch):
    """Reset config singleton and config env vars around each test.

    Ensures tests don't leak configuration (or a developer's $PORT)
    between each other.
    """
    from wordle_score.core.config import _reset_config

    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("WORDLE_SCORE_HOST", raising=False)
    _reset_config()
    yield
    _reset_config()


@pytest.fixture
def perfect_share() -> str:
    """One-guess win."""
    return "Wordle 1,234 1/6\n\n" + HIT * 5


@pytest.fixture
def three_guess_share() -> str:
    """Three-guess win with a header line.

    Box points: 6 + 2 + 0 = 8, penalties 0 + 2 + 4 = 6, raw 14, score 86.
    """
    return (
        "Wordle 123 3/6\n\n"
        f"{MISS}{PRESENT}{HIT}{MISS}{PRESENT}\n"
        f"{PRESENT}{HIT}{PRESENT}{HIT}{HIT}\n"
        f"{HIT * 5}"
    )


@pytest.fixture
def failed_share() -> str:
    """Two all-miss rows: box 20, penalty 2 + 10, raw 32, score 68."""
    return f"{MISS * 5}\n{MISS * 5}"
