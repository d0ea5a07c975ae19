"""
Cryptographically strong, hat-compatible random identifier generator.

Identifiers have a requested number of bits of randomness and are rendered
in any base from 2 to 36. Identifiers generated for a given base and number
of bits always have the same length.
"""

from .config import Settings
from .errors import (
    ConfigError,
    CryptohatError,
    FatalSourceError,
    InvalidBaseError,
    InvalidBitsError,
    RangeError,
)
from .generators import IdentifierGenerator, NumberGenerator
from .random_words import BufferedWordSource
from .registry import GeneratorRegistry, default_registry, generate_identifier, set_default_registry
from .sources import ChaCha20RandomSource, SystemRandomSource, WordSource, create_source

__version__ = "1.0.0"

__all__ = [
    'BufferedWordSource',
    'ChaCha20RandomSource',
    'ConfigError',
    'CryptohatError',
    'FatalSourceError',
    'GeneratorRegistry',
    'IdentifierGenerator',
    'InvalidBaseError',
    'InvalidBitsError',
    'NumberGenerator',
    'RangeError',
    'Settings',
    'SystemRandomSource',
    'WordSource',
    'create_source',
    'default_registry',
    'generate_identifier',
    'set_default_registry'
]
