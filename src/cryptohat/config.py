"""
Runtime configuration.
Settings are read once from environment variables.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigError

DEFAULT_ENGINE = "system"

# 1024 words = 4096 bytes per call into the secure source
DEFAULT_BUFFER_WORDS = 1024


@dataclass(frozen=True)
class Settings:
    """Knobs for the random word source used by a registry."""

    engine: str = DEFAULT_ENGINE  # name of the secure source, see sources.ENGINES
    buffer_words: int = DEFAULT_BUFFER_WORDS  # words fetched per refill

    def __post_init__(self):
        if not self.engine:
            raise ConfigError("The engine name must not be empty")
        if isinstance(self.buffer_words, bool) or not isinstance(self.buffer_words, int):
            raise ConfigError("buffer_words must be an integer")
        if self.buffer_words <= 0:
            raise ConfigError("buffer_words must be positive")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from the environment.

        Variables:
        - CRYPTOHAT_ENGINE: "system" (default) or "chacha20"
        - CRYPTOHAT_BUFFER_WORDS: number of 32-bit words fetched per refill
        """
        if environ is None:
            engine = os.getenv("CRYPTOHAT_ENGINE", "")
            buffer_words_str = os.getenv("CRYPTOHAT_BUFFER_WORDS", "")
        else:
            engine = environ.get("CRYPTOHAT_ENGINE", "")
            buffer_words_str = environ.get("CRYPTOHAT_BUFFER_WORDS", "")

        engine = engine.strip().lower() or DEFAULT_ENGINE

        buffer_words = DEFAULT_BUFFER_WORDS
        if buffer_words_str.strip():
            try:
                buffer_words = int(buffer_words_str)
            except ValueError as exc:
                raise ConfigError(
                    f"CRYPTOHAT_BUFFER_WORDS must be an integer, got {buffer_words_str!r}"
                ) from exc

        return cls(engine=engine, buffer_words=buffer_words)
