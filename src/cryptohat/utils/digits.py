"""
Digit planning.
Works out how many digits and 32-bit words an identifier needs.
"""

import math

# The characters used to represent digits, indexed by digit value
DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

LN2 = math.log(2)

WORD_BITS = 32
WORD_MASK = 0xFFFFFFFF


def max_digits(bits: int, base: int) -> int:
    """
    The maximum number of digits in a number with a fixed number of bits.

    Computed as ceil(bits * ln(2) / ln(base)) so no base-2 logarithm is
    needed.
    """
    return math.ceil((bits * LN2) / math.log(base))


def word_count(bits: int) -> int:
    """Number of 32-bit words needed to hold the given number of bits."""
    return (bits + WORD_BITS - 1) // WORD_BITS


def top_word_mask(bits: int) -> int:
    """
    Mask applied to the most significant word of a bits-wide number.

    When bits is a multiple of 32 every bit of the top word is used.
    """
    extra_bits = bits % WORD_BITS
    if extra_bits == 0:
        return WORD_MASK
    return (1 << extra_bits) - 1


def zero_pad(string: str, length: int) -> str:
    """
    Pads a string with zeros until it reaches a desired length.

    Strings that are already long enough are returned unchanged.
    """
    digits_needed = length - len(string)
    if digits_needed > 0:
        string = "0" * digits_needed + string
    return string
