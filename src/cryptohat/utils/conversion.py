"""
Conversion of big-endian 32-bit word arrays into text.

Each element in a word array is one 32-bit digit of a large unsigned
number, most significant word first. The converters treat the word array as
scratch space and trash its contents.
"""

from .digits import DIGITS, WORD_BITS, zero_pad

# Format specs Python can render natively
_NATIVE_FORMATS = {2: "b", 8: "o", 10: "d", 16: "x"}


def array32_to_string(array, base: int, digits: list) -> str:
    """
    Produce the textual representation of a number in any base.

    How it works:
    1. Divide the whole array by base, word by word, keeping the remainder
    2. The final remainder is the least significant digit still missing
    3. Repeat once per output digit, filling the digit buffer right to left

    Every position of the digit buffer is written on every call, so the
    buffer can be reused without clearing it.
    """
    digit_count = len(digits)
    array_length = len(array)

    for j in range(digit_count - 1, -1, -1):
        remainder = 0
        for i in range(array_length):
            # remainder < base <= 36 here, so this stays under 38 bits
            remainder = (remainder << WORD_BITS) + array[i]
            array[i], remainder = divmod(remainder, base)
        digits[j] = DIGITS[remainder]

    return "".join(digits)


def array32_to_hex_string(array, base: int, digits: list) -> str:
    """
    Special case of array32_to_string() for base 16.

    Each 32-bit word expands to exactly 8 hexadecimal digits. A masked top
    word still expands to 8 digits, so the extra leading characters are cut
    off to match the length of the digit buffer.
    """
    string = "".join(format(word, "08x") for word in array)

    digit_count = len(digits)
    extra_characters = len(string) - digit_count
    if extra_characters > 0:
        string = string[extra_characters:]
    return zero_pad(string, digit_count)


def format_int(value: int, base: int) -> str:
    """Render a non-negative integer in the given base, without padding."""
    spec = _NATIVE_FORMATS.get(base)
    if spec is not None:
        return format(value, spec)

    if value == 0:
        return "0"
    characters = []
    while value:
        value, remainder = divmod(value, base)
        characters.append(DIGITS[remainder])
    return "".join(reversed(characters))
