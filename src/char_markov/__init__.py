"""Character-level k-th order Markov text model.

Train a LanguageModel on a corpus, then call `generate` to synthesize text.
"""

from .config import ModelConfig
from .errors import (
    CharMarkovError,
    ConfigurationError,
    FrozenTableError,
    ModelStateError,
    WordBoundaryNotReached,
)
from .frequency import CharData, CharFrequencyList, calculate_probabilities, sample
from .model import LanguageModel
from .table import ContextTable

__version__ = "1.0.0"

__all__ = [
    "CharData",
    "CharFrequencyList",
    "CharMarkovError",
    "ConfigurationError",
    "ContextTable",
    "FrozenTableError",
    "LanguageModel",
    "ModelConfig",
    "ModelStateError",
    "WordBoundaryNotReached",
    "calculate_probabilities",
    "sample",
]
