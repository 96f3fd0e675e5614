"""Per-window character frequencies, their normalization and sampling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import numpy as np


@dataclass
class CharData:
    """One observed next-character with its count and derived probabilities."""

    char: str
    count: int = 1
    p: float = 0.0
    cp: float = 0.0

    def __str__(self) -> str:
        return f"({self.char} {self.count} {self.p} {self.cp})"


class CharFrequencyList:
    """Next-characters seen after one window, kept in first-occurrence order.

    The order matters: sampling returns the first entry whose cumulative
    probability exceeds the draw.
    """

    def __init__(self):
        self._entries: list[CharData] = []
        self._index: dict[str, CharData] = {}

    def update(self, char: str) -> None:
        """Record one observation of `char`."""
        entry = self._index.get(char)
        if entry is None:
            entry = CharData(char)
            self._entries.append(entry)
            self._index[char] = entry
        else:
            entry.count += 1

    def get(self, char: str) -> CharData | None:
        return self._index.get(char)

    @property
    def total(self) -> int:
        return sum(cd.count for cd in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CharData]:
        return iter(self._entries)

    def __getitem__(self, i: int) -> CharData:
        return self._entries[i]

    def __contains__(self, char: object) -> bool:
        return char in self._index

    def __str__(self) -> str:
        return "(" + " ".join(str(cd) for cd in self._entries) + ")"

    def __repr__(self) -> str:
        return f"CharFrequencyList({self})"


def calculate_probabilities(freq_list: CharFrequencyList) -> None:
    """Set p and cp of every entry in place from the current counts.

    p = count / total; cp is the running sum of p in list order, so each
    entry owns the interval (previous cp, cp].
    """

    if len(freq_list) == 0:
        return

    counts = np.fromiter((cd.count for cd in freq_list), dtype=np.float64, count=len(freq_list))
    probs = counts / counts.sum()
    cumulative = np.cumsum(probs)

    for cd, p, cp in zip(freq_list, probs, cumulative):
        cd.p = float(p)
        cd.cp = float(cp)


def sample(freq_list: CharFrequencyList, r: float) -> str:
    """Return the first character whose cp is strictly greater than `r`.

    Falls back to the last entry when rounding leaves every cp <= r.
    """

    for cd in freq_list:
        if cd.cp > r:
            return cd.char
    return freq_list[-1].char
