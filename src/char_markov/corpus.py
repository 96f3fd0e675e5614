from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 64 * 1024


def iter_file_chars(
    path: str | Path,
    *,
    encoding: str = "utf-8",
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Iterator[str]:
    """Yield the characters of a corpus file in order.

    Newlines are not translated, so carriage returns are passed through
    for the trainer to skip.
    """

    try:
        f = open(path, "r", encoding=encoding, newline="")
    except OSError as e:
        logger.error(f"Cannot open corpus {path}: {e}")
        raise

    with f:
        while True:
            try:
                chunk = f.read(chunk_size)
            except UnicodeDecodeError as e:
                logger.error(f"Encoding error in {path}: {e}")
                raise
            if not chunk:
                break
            yield from chunk


def iter_text_chars(text: str) -> Iterator[str]:
    """Yield the characters of an in-memory corpus."""
    yield from text


def read_window(chars: Iterator[str], k: int) -> str:
    """Consume up to `k` characters from `chars` as the first window."""
    window = []
    for ch in chars:
        window.append(ch)
        if len(window) == k:
            break
    return "".join(window)


def as_char_iterator(source: Iterable[str]) -> Iterator[str]:
    """Flatten an iterable of strings (single chars or chunks) into chars."""
    for piece in source:
        yield from piece
