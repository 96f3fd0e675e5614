"""
Character-level k-th order Markov language model.

The model learns, from a corpus, how often each character follows every
window of k characters, and samples from those frequencies to produce
new text.

Usage:
    lm = LanguageModel(window_length=3, seed=20)
    lm.train("corpus.txt")
    text = lm.generate("The", 200)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

import numpy as np

from .config import ModelConfig
from .corpus import as_char_iterator, iter_file_chars, iter_text_chars, read_window
from .errors import ConfigurationError, ModelStateError, WordBoundaryNotReached
from .frequency import CharFrequencyList, sample
from .table import ContextTable

logger = logging.getLogger(__name__)

CARRIAGE_RETURN = "\r"
WORD_BOUNDARY = " "


class LanguageModel:
    """
    A window -> next-character frequency model with its own random source.

    A model is trained exactly once. Training a second time raises
    ModelStateError; create a new model instead. One instance must not
    be shared by concurrent generate() calls, since they all draw from the
    same random generator.

    Attributes:
        config: The ModelConfig this model was built from
        window_length: k, the number of characters of context
    """

    def __init__(
        self,
        window_length: int | None = None,
        seed: int | None = None,
        *,
        config: ModelConfig | None = None,
    ):
        """
        Initialize an untrained model.

        Args:
            window_length: k; overrides config.window_length when given
            seed: Fixed seed for reproducible output; overrides config.seed
                when given. Without a seed or config, system entropy is used.
            config: Full configuration (defaults used if not provided)
        """
        if config is None:
            config = ModelConfig(
                window_length=3 if window_length is None else window_length,
                seed=seed,
            )
        else:
            overrides = {}
            if window_length is not None:
                overrides["window_length"] = window_length
            if seed is not None:
                overrides["seed"] = seed
            if overrides:
                config = ModelConfig.from_dict({**config.to_dict(), **overrides})

        self.config = config
        self.window_length = config.window_length
        self._rng = np.random.default_rng(config.seed)
        self._table = ContextTable(self.window_length)

    @classmethod
    def from_config(cls, config: ModelConfig) -> LanguageModel:
        return cls(config=config)

    @property
    def trained(self) -> bool:
        return self._table.frozen

    @property
    def table(self) -> ContextTable:
        return self._table

    # Training

    def train(self, path: str | Path) -> None:
        """Build the model from the text in the corpus file at `path`."""
        self._ensure_untrained()
        logger.info(f"Training k={self.window_length} model on {path}")
        self._train(iter_file_chars(path, encoding=self.config.encoding))

    def train_text(self, text: str) -> None:
        self._ensure_untrained()
        self._train(iter_text_chars(text))

    def train_chars(self, chars: Iterable[str]) -> None:
        """Train from any iterable of characters or string chunks."""
        self._ensure_untrained()
        self._train(as_char_iterator(chars))

    def _ensure_untrained(self) -> None:
        if self.trained:
            raise ModelStateError("model is already trained; create a new LanguageModel")

    def _train(self, chars: Iterator[str]) -> None:
        table = ContextTable(self.window_length)
        skipped = 0

        window = read_window(chars, self.window_length)
        consumed = len(window)
        if len(window) == self.window_length:
            for ch in chars:
                # Carriage returns after the first window are not observations.
                if ch == CARRIAGE_RETURN:
                    skipped += 1
                    continue
                table.observe(window, ch)
                window = window[1:] + ch
                consumed += 1
        else:
            logger.warning(
                f"Corpus has fewer than {self.window_length} characters; nothing to learn"
            )

        table.finalize()
        self._table = table
        logger.info(
            f"Learned {len(table)} windows from {consumed} characters "
            f"({skipped} carriage returns skipped)"
        )

    # Generation

    def get_random_char(self, freq_list: CharFrequencyList) -> str:
        """Draw one character from a normalized list using the model's RNG."""
        return sample(freq_list, self._rng.random())

    def generate(self, initial_text: str, text_length: int) -> str:
        """
        Generate text that continues `initial_text`.

        `text_length` is a soft minimum: once it is reached, generation keeps
        going until the last character is a space, so the final word is not
        cut. Generation also stops, without error, as soon as the current
        window was never seen during training.

        Args:
            initial_text: Text to continue. If it is shorter than k it is
                returned unchanged.
            text_length: Minimum length of the returned text

        Returns:
            The generated text, starting with `initial_text`

        Raises:
            WordBoundaryNotReached: config.max_generated_chars characters were
                appended without meeting the stop rule
        """
        k = self.window_length
        if len(initial_text) < k:
            return initial_text
        if text_length < 0:
            raise ConfigurationError("text_length must be >= 0")
        if not self.trained:
            raise ModelStateError("model must be trained before generating")

        cap = self.config.max_generated_chars
        out = list(initial_text)
        generated = 0

        while len(out) < text_length or out[-1] != WORD_BOUNDARY:
            window = "".join(out[-k:])
            freq_list = self._table.get(window)
            if freq_list is None:
                logger.debug(f"Stopped on unseen window {window!r}")
                break
            if cap is not None and generated >= cap:
                logger.debug(f"Stopped at cap of {cap} generated characters")
                raise WordBoundaryNotReached("".join(out), generated)
            out.append(self.get_random_char(freq_list))
            generated += 1
        else:
            logger.debug(f"Stopped at word boundary after {generated} characters")

        return "".join(out)

    def stats(self) -> dict:
        """Basic statistics about the trained table."""
        windows = len(self._table)
        observations = sum(fl.total for _, fl in self._table.items())
        branching = sum(len(fl) for _, fl in self._table.items())
        return {
            "window_length": self.window_length,
            "windows": windows,
            "observations": observations,
            "avg_branching": branching / windows if windows else 0.0,
        }

    def __str__(self) -> str:
        return str(self._table)
