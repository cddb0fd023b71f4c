"""CLI command implementations for wordle-score."""
