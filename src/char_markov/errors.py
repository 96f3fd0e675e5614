"""Exception hierarchy for the character-level Markov model."""

from __future__ import annotations


class CharMarkovError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(CharMarkovError, ValueError):
    """Invalid window length, text length, cap or config file content."""


class ModelStateError(CharMarkovError, RuntimeError):
    """The model is used out of order (e.g. trained twice)."""


class FrozenTableError(ModelStateError):
    """A finalized context table was asked to change."""


class WordBoundaryNotReached(CharMarkovError):
    """Generation hit the character cap before reaching a word boundary.

    The text produced up to the cap is kept on the exception so callers
    can still use it.
    """

    def __init__(self, text: str, generated: int):
        super().__init__(
            f"could not reach a word boundary after generating {generated} characters"
        )
        self.text = text
        self.generated = generated
