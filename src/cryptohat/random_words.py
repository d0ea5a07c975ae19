"""
Buffered random word source.

Invoking the secure random source has a large one-time cost, so we amortize
it by having the source fill a large buffer that satisfies many calls to
next_word().
"""

import logging
import threading
from typing import Optional

from .config import DEFAULT_BUFFER_WORDS
from .errors import ConfigError, FatalSourceError
from .sources import SystemRandomSource, WordSource, new_word_array

logger = logging.getLogger(__name__)


class BufferedWordSource:
    """
    Hands out 32-bit random words from a pre-fetched buffer.

    The buffer starts exhausted (offset == capacity) and is refilled in one
    call to the secure source whenever every word has been used.
    """

    def __init__(self, source: Optional[WordSource] = None, buffer_words: int = DEFAULT_BUFFER_WORDS):
        if isinstance(buffer_words, bool) or not isinstance(buffer_words, int) or buffer_words <= 0:
            raise ConfigError("buffer_words must be a positive integer")

        self.source = source if source is not None else SystemRandomSource()
        self.capacity = buffer_words
        self._buffer = new_word_array(buffer_words)
        self.offset = buffer_words
        self._lock = threading.Lock()

    @property
    def engine(self) -> str:
        """Name of the secure source behind this buffer."""
        return getattr(self.source, "name", type(self.source).__name__)

    def _refill(self) -> None:
        try:
            self.source.fill_words(self._buffer)
        except FatalSourceError:
            raise
        except Exception as exc:
            logger.error("Random source %s failed during refill: %s", self.engine, exc)
            raise FatalSourceError(
                f"Secure random source {self.engine} failed: {exc}"
            ) from exc
        self.offset = 0
        logger.debug("Refilled random buffer with %d words from %s", self.capacity, self.engine)

    def next_word(self) -> int:
        """Return a uniformly distributed 32-bit random number."""
        with self._lock:
            if self.offset == self.capacity:
                self._refill()
            word = self._buffer[self.offset]
            self.offset += 1
            return word
