"""
Secure random sources.

A source fills a buffer of unsigned 32-bit words with cryptographically
strong random data. The engine is picked once, by configuration, and never
falls back to a weaker generator.
"""

import logging
import secrets
from abc import ABC, abstractmethod
from array import array

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms

from .errors import ConfigError, FatalSourceError

logger = logging.getLogger(__name__)

# array typecode holding exactly 32 bits on this platform
WORD_TYPECODE = "I" if array("I").itemsize == 4 else "L"


def new_word_array(size: int) -> array:
    """Create a zeroed array of unsigned 32-bit words."""
    return array(WORD_TYPECODE, bytes(4 * size))


def _store_bytes(buffer, data: bytes) -> None:
    """Overwrite every word in buffer with the given random bytes."""
    if isinstance(buffer, array):
        with memoryview(buffer) as view, view.cast("B") as raw:
            raw[:] = data
        return

    words = array(WORD_TYPECODE)
    words.frombytes(data)
    buffer[:] = words.tolist()


class WordSource(ABC):
    """
    Interface for secure random sources.

    fill_words() must fill the entire buffer with independent, uniformly
    distributed 32-bit values, and must raise instead of degrading when it
    cannot guarantee cryptographic strength.
    """

    name = "abstract"

    @abstractmethod
    def fill_words(self, buffer) -> None:
        """Fill a mutable sequence of uint32 values in place."""


class SystemRandomSource(WordSource):
    """
    Operating system CSPRNG.

    Uses the secrets module, which reads from the OS secure random
    generator (getrandom(), /dev/urandom, BCryptGenRandom).
    """

    name = "secrets.token_bytes()"

    def fill_words(self, buffer) -> None:
        try:
            data = secrets.token_bytes(4 * len(buffer))
        except (OSError, NotImplementedError) as exc:
            logger.error("Operating system random source failed: %s", exc)
            raise FatalSourceError(
                "No cryptographically secure random source is available"
            ) from exc
        _store_bytes(buffer, data)


class ChaCha20RandomSource(WordSource):
    """
    ChaCha20 keystream generator.

    How it works:
    1. Take a 256-bit key and a 128-bit nonce from the OS CSPRNG
    2. Encrypt zero bytes with ChaCha20; the ciphertext is the keystream
    3. After rekey_bytes of output, throw the key away and start over

    This asks the OS for entropy only once per rekey interval, which helps
    on platforms where the system call is slow.
    """

    name = "cryptography ChaCha20"

    # 1 MiB of keystream per key
    REKEY_BYTES = 1 << 20

    def __init__(self, rekey_bytes: int = REKEY_BYTES):
        if rekey_bytes <= 0:
            raise ConfigError("rekey_bytes must be positive")
        self.rekey_bytes = rekey_bytes
        self._encryptor = None
        self._remaining = 0

    def _rekey(self) -> None:
        try:
            key = secrets.token_bytes(32)  # 32 bytes = 256 bits
            nonce = secrets.token_bytes(16)
            cipher = Cipher(algorithms.ChaCha20(key, nonce), mode=None)
            encryptor = cipher.encryptor()
        except (OSError, NotImplementedError, UnsupportedAlgorithm) as exc:
            logger.error("Could not key the ChaCha20 random source: %s", exc)
            raise FatalSourceError(
                "No cryptographically secure random source is available"
            ) from exc

        self._encryptor = encryptor
        self._remaining = self.rekey_bytes
        logger.debug("ChaCha20 random source rekeyed")

    def _keystream(self, size: int) -> bytes:
        chunks = []
        while size > 0:
            if self._remaining == 0:
                self._rekey()
            take = min(size, self._remaining)
            chunks.append(self._encryptor.update(bytes(take)))
            self._remaining -= take
            size -= take
        return b"".join(chunks)

    def fill_words(self, buffer) -> None:
        _store_bytes(buffer, self._keystream(4 * len(buffer)))


ENGINES = {
    "system": SystemRandomSource,
    "chacha20": ChaCha20RandomSource,
}


def create_source(engine: str) -> WordSource:
    """Instantiate the secure source registered under an engine name."""
    try:
        source_class = ENGINES[engine]
    except KeyError:
        known = ", ".join(sorted(ENGINES))
        raise ConfigError(f"Unknown random engine {engine!r} (expected one of: {known})") from None
    return source_class()
