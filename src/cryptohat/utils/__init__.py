"""
Digit planning and base conversion helpers.
"""

from .conversion import array32_to_hex_string, array32_to_string, format_int
from .digits import DIGITS, max_digits, top_word_mask, word_count, zero_pad

__all__ = [
    'DIGITS',
    'array32_to_hex_string',
    'array32_to_string',
    'format_int',
    'max_digits',
    'top_word_mask',
    'word_count',
    'zero_pad'
]
