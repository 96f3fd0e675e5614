"""
Context table: maps each k-character window to its CharFrequencyList.

The table is built during training and then finalized. Finalizing
normalizes every list exactly once and freezes the table; afterwards
any attempt to record observations raises FrozenTableError.
"""

from __future__ import annotations

import logging
from typing import Iterator

import pandas as pd

from .errors import ConfigurationError, FrozenTableError
from .frequency import CharFrequencyList, calculate_probabilities

logger = logging.getLogger(__name__)


class ContextTable:
    """Window -> CharFrequencyList mapping with a builder and a frozen state."""

    def __init__(self, window_length: int):
        if window_length < 1:
            raise ConfigurationError("window_length must be >= 1")
        self.window_length = window_length
        self._lists: dict[str, CharFrequencyList] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def observe(self, window: str, char: str) -> None:
        """Record that `char` followed `window`."""
        if self._frozen:
            raise FrozenTableError("context table is finalized and read-only")
        if len(window) != self.window_length:
            raise ValueError(
                f"window {window!r} has length {len(window)}, expected {self.window_length}"
            )

        freq_list = self._lists.get(window)
        if freq_list is None:
            freq_list = CharFrequencyList()
            self._lists[window] = freq_list
        freq_list.update(char)

    def finalize(self) -> None:
        """Normalize every list and freeze the table."""
        if self._frozen:
            raise FrozenTableError("context table was already finalized")

        for freq_list in self._lists.values():
            calculate_probabilities(freq_list)
        self._frozen = True
        logger.debug(f"Finalized context table with {len(self._lists)} windows")

    def get(self, window: str) -> CharFrequencyList | None:
        return self._lists.get(window)

    def __contains__(self, window: object) -> bool:
        return window in self._lists

    def __len__(self) -> int:
        return len(self._lists)

    def __iter__(self) -> Iterator[str]:
        return iter(self._lists)

    def items(self) -> Iterator[tuple[str, CharFrequencyList]]:
        return iter(self._lists.items())

    def to_frame(self) -> pd.DataFrame:
        """One row per (window, char) entry, in table order."""
        rows = [
            {"window": window, "char": cd.char, "count": cd.count, "p": cd.p, "cp": cd.cp}
            for window, freq_list in self._lists.items()
            for cd in freq_list
        ]
        return pd.DataFrame(rows, columns=["window", "char", "count", "p", "cp"])

    def __str__(self) -> str:
        return "".join(f"{window} : {freq_list}\n" for window, freq_list in self._lists.items())
