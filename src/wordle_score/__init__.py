"""wordle-score - score shared Wordle results."""

from importlib.metadata import version

try:
    __version__ = version("wordle-score")
except Exception:
    __version__ = "0.0.0-dev"
