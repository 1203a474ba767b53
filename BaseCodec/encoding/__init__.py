"""
Base-N encodings of bytes as text.

Provides the RFC 4648 encodings and their padding, case and separator variants.
"""

from BaseCodec.encoding.base import (
    BaseEncoding,
    StandardEncoding,
    STANDARD_ENCODINGS,
    base64,
    base64_url,
    base32,
    base32_hex,
    base16,
)
from BaseCodec.encoding.separated import SeparatedEncoding
from BaseCodec.encoding.config import EncodingConfig
from BaseCodec.encoding.constants import (
    BASE64_CHARS,
    BASE64_URL_CHARS,
    BASE32_CHARS,
    BASE32_HEX_CHARS,
    BASE16_CHARS,
    DEFAULT_PAD_CHAR,
)

__all__ = [
    "BaseEncoding",
    "StandardEncoding",
    "SeparatedEncoding",
    "EncodingConfig",
    "STANDARD_ENCODINGS",
    "base64",
    "base64_url",
    "base32",
    "base32_hex",
    "base16",
    "BASE64_CHARS",
    "BASE64_URL_CHARS",
    "BASE32_CHARS",
    "BASE32_HEX_CHARS",
    "BASE16_CHARS",
    "DEFAULT_PAD_CHAR",
]
