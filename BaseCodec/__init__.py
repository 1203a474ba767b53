"""
BaseCodec - Base-N Text Encoding Library

Converts bytes to and from text over 16-, 32- and 64-symbol alphabets,
with configurable padding, letter case and separators, in bulk or as streams.
"""

from BaseCodec.version import __version__

from BaseCodec.encoding.base import (
    BaseEncoding,
    base64,
    base64_url,
    base32,
    base32_hex,
    base16,
)
from BaseCodec.encoding.config import EncodingConfig

from BaseCodec.core.errors import (
    BaseCodecError,
    ConfigurationError,
    DecodingError,
    UnrecognizedCharacterError,
    InvalidLengthError,
)

from BaseCodec import core
from BaseCodec import encoding
from BaseCodec import stream

__all__ = [
    "__version__",
    "BaseEncoding",
    "base64",
    "base64_url",
    "base32",
    "base32_hex",
    "base16",
    "EncodingConfig",
    "BaseCodecError",
    "ConfigurationError",
    "DecodingError",
    "UnrecognizedCharacterError",
    "InvalidLengthError",
    "core",
    "encoding",
    "stream",
]
