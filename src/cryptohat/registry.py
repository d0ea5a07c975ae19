"""
Generator registry.

Building a generator has a setup cost (digit planning, buffer allocation),
so generators are cached and reused.

Number generators are cached by the number of bits of randomness, e.g. the
key for a 32-bit number generator is 32. Identifier generators are cached by
bits and base, e.g. the key for a 32-bit base-10 generator is (32, 10).
"""

import logging
import threading
from typing import Optional, Union

from .config import Settings
from .generators import IdentifierGenerator, NumberGenerator, check_base, check_bits
from .random_words import BufferedWordSource
from .sources import create_source

logger = logging.getLogger(__name__)

DEFAULT_BITS = 128
DEFAULT_BASE = 16


class GeneratorRegistry:
    """
    Cache of generators sharing one buffered random word source.

    Entries are created on first request and are never evicted.
    """

    def __init__(self, words: Optional[BufferedWordSource] = None, settings: Optional[Settings] = None):
        if words is None:
            settings = settings or Settings.from_env()
            words = BufferedWordSource(create_source(settings.engine), settings.buffer_words)
        self.words = words
        self._generators = {}
        # get() recurses when an identifier generator needs a number generator
        self._lock = threading.RLock()

    @property
    def engine(self) -> str:
        return self.words.engine

    def get(self, bits: int, base: Optional[int] = None) -> Union[NumberGenerator, IdentifierGenerator]:
        """
        Return a random generator.

        Passing in a falsy base returns a number generator; otherwise the
        generator returns identifiers as strings in that base.
        """
        # Equal keys like True and 1 must not bypass validation
        check_bits(bits)
        if base:
            check_base(base)

        key = (bits, base) if base else bits
        generator = self._generators.get(key)
        if generator is not None:
            return generator

        with self._lock:
            generator = self._generators.get(key)
            if generator is None:
                generator = self._build(bits, base)
                self._generators[key] = generator
                logger.debug("Registered %r", generator)
            return generator

    def _build(self, bits, base):
        if not base:
            return NumberGenerator(bits, self.words)

        number_generator = None
        if IdentifierGenerator.uses_number_generator(bits):
            number_generator = self.get(bits)
        return IdentifierGenerator(bits, base, self.words, number_generator)

    def __len__(self):
        return len(self._generators)

    def __contains__(self, key):
        return key in self._generators


_default_registry: Optional[GeneratorRegistry] = None
_default_lock = threading.Lock()


def default_registry() -> GeneratorRegistry:
    """Return the process-wide registry, creating it from the environment on first use."""
    global _default_registry
    registry = _default_registry
    if registry is None:
        with _default_lock:
            if _default_registry is None:
                _default_registry = GeneratorRegistry()
                logger.debug("Created default registry using %s", _default_registry.engine)
            registry = _default_registry
    return registry


def set_default_registry(registry: Optional[GeneratorRegistry]) -> None:
    """Replace the process-wide registry; None makes the next call rebuild it."""
    global _default_registry
    with _default_lock:
        _default_registry = registry


def generate_identifier(bits: Optional[int] = DEFAULT_BITS, base: Optional[int] = DEFAULT_BASE,
                        registry: Optional[GeneratorRegistry] = None):
    """
    Generate a random identifier.

    The identifiers generated for a given base and number of bits always
    have the same length, so they might have leading zeros.

    Passing base=0 returns a random number instead of a string, the same as
    GeneratorRegistry.get().
    """
    if bits is None:
        bits = DEFAULT_BITS
    if base is None:
        base = DEFAULT_BASE
    if registry is None:
        registry = default_registry()
    return registry.get(bits, base).next()
