"""
Leaf components: alphabets, chunk geometry and the error taxonomy.
"""

from BaseCodec.core.alphabet import Alphabet, CaseMode
from BaseCodec.core.chunking import ChunkLayout, SUPPORTED_BITS
from BaseCodec.core.errors import (
    BaseCodecError,
    ConfigurationError,
    DecodingError,
    UnrecognizedCharacterError,
    InvalidLengthError,
)

__all__ = [
    "Alphabet",
    "CaseMode",
    "ChunkLayout",
    "SUPPORTED_BITS",
    "BaseCodecError",
    "ConfigurationError",
    "DecodingError",
    "UnrecognizedCharacterError",
    "InvalidLengthError",
]
