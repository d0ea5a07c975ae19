"""
Tests for the buffered random word source.
"""

import pytest

from cryptohat.errors import ConfigError, FatalSourceError
from cryptohat.random_words import BufferedWordSource
from conftest import BrokenSource, SequenceSource


class TestBufferedWordSource:
    """Tests for buffering and refilling."""

    def test_starts_exhausted(self):
        """Test that nothing is fetched until the first word is requested."""
        source = SequenceSource([1, 2, 3])
        words = BufferedWordSource(source, buffer_words=4)
        assert words.offset == words.capacity == 4
        assert source.fill_count == 0

    def test_refills_when_exhausted(self):
        """Test that one refill serves capacity words."""
        source = SequenceSource([1, 2, 3])
        words = BufferedWordSource(source, buffer_words=2)

        assert words.next_word() == 1
        assert words.next_word() == 2
        assert source.fill_count == 1

        assert words.next_word() == 3
        assert source.fill_count == 2
        assert words.next_word() == 1
        assert words.offset == 2

    def test_default_source_is_system(self):
        words = BufferedWordSource()
        assert words.engine == "secrets.token_bytes()"
        assert words.capacity == 1024
        assert 0 <= words.next_word() <= 0xFFFFFFFF

    def test_words_are_32_bit(self):
        words = BufferedWordSource(buffer_words=64)
        for _ in range(200):
            assert 0 <= words.next_word() < 2 ** 32

    @pytest.mark.parametrize("buffer_words", [0, -1, 2.5, True])
    def test_rejects_bad_buffer_size(self, buffer_words):
        with pytest.raises(ConfigError):
            BufferedWordSource(SequenceSource([1]), buffer_words=buffer_words)


class TestSourceFailure:
    """Tests for failures of the secure random source."""

    def test_failure_is_fatal(self):
        """Test that a failing source raises FatalSourceError, chained to the cause."""
        words = BufferedWordSource(BrokenSource(), buffer_words=8)
        with pytest.raises(FatalSourceError) as excinfo:
            words.next_word()
        assert isinstance(excinfo.value.__cause__, OSError)

    def test_fatal_error_passes_through(self):
        error = FatalSourceError("no entropy")
        words = BufferedWordSource(BrokenSource(error), buffer_words=8)
        with pytest.raises(FatalSourceError) as excinfo:
            words.next_word()
        assert excinfo.value is error

    def test_failure_is_not_retried_silently(self):
        """Test that every call after a failure fails again instead of returning stale words."""
        words = BufferedWordSource(BrokenSource(), buffer_words=8)
        for _ in range(3):
            with pytest.raises(FatalSourceError):
                words.next_word()
        assert words.offset == words.capacity
