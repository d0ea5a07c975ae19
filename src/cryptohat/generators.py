"""
Random number and identifier generators.

Generators are small stateful objects. Each one owns its scratch buffers,
so a generator is serialized with its own lock; independent generators can
run on different threads.
"""

import logging
import threading
from typing import Optional

from .errors import InvalidBaseError, InvalidBitsError
from .random_words import BufferedWordSource
from .utils.conversion import array32_to_hex_string, array32_to_string, format_int
from .utils.digits import max_digits, top_word_mask, word_count, zero_pad

logger = logging.getLogger(__name__)

# Largest integer width a double can represent exactly
MAX_NUMBER_BITS = 53

MIN_BASE = 2
MAX_BASE = 36


def check_bits(bits) -> int:
    """Make sure bits is a positive integer."""
    if isinstance(bits, bool) or not isinstance(bits, int):
        raise InvalidBitsError(f"The bits argument must be an integer, got {bits!r}")
    if bits < 1:
        raise InvalidBitsError(f"The bits argument must be positive, got {bits}")
    return bits


def check_base(base) -> int:
    """Make sure base is an integer between 2 and 36."""
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBaseError(f"The base argument must be an integer, got {base!r}")
    if base < MIN_BASE or base > MAX_BASE:
        raise InvalidBaseError("The base argument must be between 2 and 36")
    return base


class NumberGenerator:
    """
    Generates random numbers with a fixed number of bits.

    At most 53 bits are supported, so results keep the same range as the
    numbers produced by other hat-compatible generators.
    """

    def __init__(self, bits: int, words: BufferedWordSource):
        check_bits(bits)
        if bits > MAX_NUMBER_BITS:
            raise InvalidBitsError("Numbers can accurately represent at most 53 bits")

        self.bits = bits
        self.words = words

        if bits < 32:
            # Mask off the higher-order bits of one 32-bit number
            self._mask = (1 << bits) - 1
            self._next = self._next_masked
        elif bits > 32:
            # Two 32-bit numbers become the lower and upper parts
            self._mask = (1 << (bits - 32)) - 1
            self._next = self._next_wide
        else:
            self._mask = None
            self._next = words.next_word

    def _next_masked(self) -> int:
        return self.words.next_word() & self._mask

    def _next_wide(self) -> int:
        low = self.words.next_word()
        high = self.words.next_word() & self._mask
        return (high << 32) | low

    def next(self) -> int:
        """Return a random number in [0, 2**bits)."""
        return self._next()

    def __call__(self) -> int:
        return self._next()

    def __repr__(self):
        return f"NumberGenerator(bits={self.bits})"


class IdentifierGenerator:
    """
    Generates random identifiers as strings.

    All the identifiers returned by one generator have the same length;
    to satisfy this, an identifier might have leading zeros.
    """

    def __init__(self, bits: int, base: int, words: BufferedWordSource,
                 number_generator: Optional[NumberGenerator] = None):
        check_base(base)
        check_bits(bits)

        self.bits = bits
        self.base = base
        self.words = words
        self.digit_count = max_digits(bits, base)
        self._lock = threading.Lock()

        if self.uses_number_generator(bits):
            # Fast path: render a native integer
            if number_generator is None:
                number_generator = NumberGenerator(bits, words)
            elif number_generator.bits != bits:
                raise InvalidBitsError(
                    f"Number generator has {number_generator.bits} bits, expected {bits}"
                )
            elif number_generator.words is not words:
                raise ValueError("Number generator must draw from the same word source")
            self.number_generator = number_generator
            self._next = self._next_small
        else:
            self.number_generator = None
            self._digits = ["0"] * self.digit_count
            self._numbers = [0] * word_count(bits)
            self._mask = top_word_mask(bits)
            self._stringifier = array32_to_hex_string if base == 16 else array32_to_string
            self._next = self._next_large

        logger.debug("Created %r with %d digits", self, self.digit_count)

    @staticmethod
    def uses_number_generator(bits: int) -> bool:
        """Whether identifiers this wide are rendered from a native integer."""
        return bits <= MAX_NUMBER_BITS

    def _next_small(self) -> str:
        return zero_pad(format_int(self.number_generator.next(), self.base), self.digit_count)

    def _next_large(self) -> str:
        numbers = self._numbers
        next_word = self.words.next_word

        # The most significant word comes first and is the only one masked
        numbers[0] = next_word() & self._mask
        for i in range(1, len(numbers)):
            numbers[i] = next_word()

        return self._stringifier(numbers, self.base, self._digits)

    def next(self) -> str:
        """Return a random identifier of exactly digit_count characters."""
        with self._lock:
            return self._next()

    def __call__(self) -> str:
        return self.next()

    def __repr__(self):
        return f"IdentifierGenerator(bits={self.bits}, base={self.base})"
