from __future__ import annotations

import codecs
import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from .errors import ConfigurationError

DEFAULT_SEED = 20


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class ModelConfig:
    """
    Settings for a LanguageModel.

    Attributes:
        window_length: Number of preceding characters (k) used as context
        seed: Seed for the model's random source; None draws from system entropy
        max_generated_chars: Hard cap on characters appended by one generate()
            call; None lets generation run until its stop rule is met
        encoding: Encoding used to read corpus files
    """

    window_length: int = 3
    seed: int | None = DEFAULT_SEED
    max_generated_chars: int | None = 100_000
    encoding: str = "utf-8"

    def __post_init__(self):
        if not _is_int(self.window_length):
            raise ConfigurationError(f"window_length must be an integer, got {self.window_length!r}")
        if self.window_length < 1:
            raise ConfigurationError("window_length must be >= 1")
        if self.max_generated_chars is not None:
            if not _is_int(self.max_generated_chars):
                raise ConfigurationError(
                    f"max_generated_chars must be an integer or None, got {self.max_generated_chars!r}"
                )
            if self.max_generated_chars < 1:
                raise ConfigurationError("max_generated_chars must be >= 1 or None")
        if self.seed is not None and (not _is_int(self.seed) or self.seed < 0):
            raise ConfigurationError(f"seed must be a non-negative integer or None, got {self.seed!r}")
        if not isinstance(self.encoding, str):
            raise ConfigurationError(f"encoding must be a string, got {self.encoding!r}")
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ConfigurationError(f"Unknown encoding {self.encoding!r}") from e

    @classmethod
    def from_dict(cls, config_dict: dict) -> ModelConfig:
        """Create a config from a dictionary, ignoring unknown keys."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_dict.items() if k in names})

    @classmethod
    def from_json(cls, path: str | Path) -> ModelConfig:
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {path} must contain a JSON object")
        return cls.from_dict(data)

    def to_dict(self) -> dict:
        return asdict(self)
