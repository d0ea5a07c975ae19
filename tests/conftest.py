"""
Shared fixtures for the cryptohat tests.
"""

import itertools

import pytest

from cryptohat import registry as registry_module
from cryptohat.random_words import BufferedWordSource
from cryptohat.sources import WordSource


class SequenceSource(WordSource):
    """Deterministic source that repeats a fixed list of words."""

    name = "sequence"

    def __init__(self, words):
        self._words = itertools.cycle(words)
        self.fill_count = 0

    def fill_words(self, buffer) -> None:
        self.fill_count += 1
        for i in range(len(buffer)):
            buffer[i] = next(self._words)


class BrokenSource(WordSource):
    """Source whose underlying facility is unavailable."""

    name = "broken"

    def __init__(self, error=None):
        self.error = error or OSError("entropy device missing")

    def fill_words(self, buffer) -> None:
        raise self.error


@pytest.fixture
def make_words():
    """Build a buffered word source that replays the given words."""
    def _make(words, buffer_words=None):
        source = SequenceSource(words)
        return BufferedWordSource(source, buffer_words or len(words))
    return _make


@pytest.fixture
def system_words():
    return BufferedWordSource(buffer_words=256)


@pytest.fixture(autouse=True)
def reset_default_registry():
    """Keep tests from leaking the process-wide registry into each other."""
    registry_module.set_default_registry(None)
    yield
    registry_module.set_default_registry(None)
