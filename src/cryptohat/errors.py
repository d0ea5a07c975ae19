"""
Exceptions raised by cryptohat.
"""


class CryptohatError(Exception):
    """Base class for every error raised by this package."""


class RangeError(CryptohatError, ValueError):
    """An argument is outside the range a generator can honor."""


class InvalidBitsError(RangeError):
    """
    The requested number of bits is not usable.

    Raised when bits is not a positive integer, or when a number generator
    is asked for more than 53 bits.
    """


class InvalidBaseError(RangeError):
    """The base/radix is not between 2 and 36."""


class FatalSourceError(CryptohatError, RuntimeError):
    """
    The secure random source failed.

    This is never retried and never replaced by a weaker source.
    """


class ConfigError(CryptohatError, ValueError):
    """A configuration value is invalid."""
