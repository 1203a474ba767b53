"""
Bulk base-N encoding and decoding.

An encoding is configured once through builder calls that each return a
new immutable value, then used for any number of bulk or streaming
conversions.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, TextIO, Union

import numpy as np

from BaseCodec.core.alphabet import ASCII_MAX, Alphabet
from BaseCodec.core.errors import (
    ConfigurationError,
    DecodingError,
    InvalidLengthError,
    UnrecognizedCharacterError,
)
from BaseCodec.encoding.constants import (
    BASE16_CHARS,
    BASE32_CHARS,
    BASE32_HEX_CHARS,
    BASE64_CHARS,
    BASE64_URL_CHARS,
    DEFAULT_PAD_CHAR,
)
from BaseCodec.stream.decoder import DecodingStream
from BaseCodec.stream.encoder import EncodingStream
from BaseCodec.utils.logging import get_logger

BytesLike = Union[bytes, bytearray, memoryview]


class BaseEncoding(ABC):
    """
    A binary-to-text encoding such as base64, base32 or base16.

    Subclasses are immutable and safe to share between threads. Streams
    returned by ``encoding_stream``/``decoding_stream`` are not.
    """

    def encode(self, data: BytesLike, offset: int = 0, length: Optional[int] = None) -> str:
        """
        Encodes ``data[offset:offset + length]``.

        Args:
            data: Bytes to encode
            offset: Start of the range to encode
            length: Number of bytes to encode (default: up to the end)

        Returns:
            Encoded text

        Raises:
            IndexError: if the range does not lie within ``data``
        """
        view = memoryview(data).cast("B")
        if length is None:
            length = len(view) - offset
        if offset < 0 or length < 0 or offset + length > len(view):
            raise IndexError(
                f"Range [{offset}, {offset + length}) out of bounds for length {len(view)}"
            )
        return self._encode(view[offset:offset + length])

    def decode(self, chars: str) -> bytes:
        """
        Decodes text produced by ``encode``.

        Raises:
            ValueError: if the input is not valid for this encoding; the
                underlying ``DecodingError`` is chained as the cause
        """
        try:
            return self.decode_checked(chars)
        except DecodingError as e:
            raise ValueError(str(e)) from e

    @abstractmethod
    def decode_checked(self, chars: str) -> bytes:
        """
        Decodes text produced by ``encode``.

        Raises:
            DecodingError: if the input is not valid for this encoding
        """

    def can_decode(self, chars: str) -> bool:
        """Checks whether ``decode`` would succeed, without decoding."""
        try:
            self._check(chars)
        except DecodingError as e:
            get_logger().rejected(self, e)
            return False
        return True

    @abstractmethod
    def encoding_stream(self, sink: TextIO, close_sink: bool = True) -> EncodingStream:
        """Wraps a text sink in a writable byte stream that encodes into it."""

    @abstractmethod
    def decoding_stream(self, source: Union[TextIO, str], close_source: bool = True) -> DecodingStream:
        """Wraps a text source in a readable byte stream that decodes from it."""

    @abstractmethod
    def max_encoded_size(self, num_bytes: int) -> int:
        """Number of characters ``encode`` produces for ``num_bytes`` bytes, at most."""

    @abstractmethod
    def max_decoded_size(self, num_chars: int) -> int:
        """Number of bytes ``decode`` produces for ``num_chars`` characters, at most."""

    @abstractmethod
    def omit_padding(self) -> "BaseEncoding":
        """Equivalent encoding that writes no padding (RFC 4648 section 3.2)."""

    @abstractmethod
    def with_pad_char(self, pad_char: str) -> "BaseEncoding":
        """Equivalent encoding that pads with ``pad_char``."""

    @abstractmethod
    def with_separator(self, separator: str, interval: int) -> "BaseEncoding":
        """Equivalent encoding that inserts ``separator`` every ``interval`` characters."""

    @abstractmethod
    def upper_case(self) -> "BaseEncoding":
        """Equivalent encoding with an upper-cased alphabet."""

    @abstractmethod
    def lower_case(self) -> "BaseEncoding":
        """Equivalent encoding with a lower-cased alphabet."""

    @abstractmethod
    def ignore_case(self) -> "BaseEncoding":
        """Equivalent encoding whose decoder accepts either letter case."""

    @abstractmethod
    def _encode(self, data: memoryview) -> str:
        pass

    @abstractmethod
    def _check(self, chars: str) -> None:
        """Validates ``chars`` as ``decode_checked`` would, producing nothing."""

    @classmethod
    def custom(cls, name: str, chars: str, pad_char: Optional[str] = DEFAULT_PAD_CHAR) -> "BaseEncoding":
        """
        Builds an encoding over a caller-supplied alphabet.

        Args:
            name: Name used in the descriptor, e.g. ``"zbase32"``
            chars: 16, 32 or 64 distinct ASCII characters
            pad_char: Padding character, or None for no padding

        Raises:
            ConfigurationError: if the alphabet or pad character is unusable
        """
        alphabet = Alphabet(f"{name}()", chars)
        if not alphabet.layout.can_pad:
            pad_char = None
        return StandardEncoding(alphabet, pad_char)


@dataclass(frozen=True, repr=False)
class StandardEncoding(BaseEncoding):
    """
    Encoding over one alphabet with an optional pad character.

    Symbols are drawn most-significant bit first; a final short group is
    padded with zero bits, and a final partial chunk is filled up with the
    pad character when one is set.
    """

    alphabet: Alphabet
    pad_char: Optional[str] = None

    def __post_init__(self):
        if self.pad_char is not None:
            if not isinstance(self.pad_char, str) or len(self.pad_char) != 1:
                raise ConfigurationError(f"Padding must be a single character, got {self.pad_char!r}")
            if self.alphabet.matches(self.pad_char):
                raise ConfigurationError(
                    f"Padding character {self.pad_char} was already in alphabet"
                )

    def __str__(self) -> str:
        descriptor = str(self.alphabet)
        if self.alphabet.layout.can_pad:
            if self.pad_char is None:
                descriptor += ".omit_padding()"
            else:
                descriptor += f".with_pad_char({self.pad_char!r})"
        return descriptor

    __repr__ = __str__

    def _encode(self, data: memoryview) -> str:
        if len(data) == 0:
            return ""

        bits = self.alphabet.bits_per_symbol
        stream = np.unpackbits(np.frombuffer(data, dtype=np.uint8))
        remainder = -stream.size % bits
        if remainder:
            stream = np.concatenate([stream, np.zeros(remainder, dtype=np.uint8)])

        weights = 1 << np.arange(bits - 1, -1, -1)
        symbols = stream.reshape(-1, bits) @ weights
        encoded = self.alphabet.encode_table[symbols].tobytes().decode("ascii")

        if self.pad_char is not None:
            padded = self.alphabet.layout.padded_symbols_for_bytes(len(data))
            encoded += self.pad_char * (padded - len(encoded))
        return encoded

    def decode_checked(self, chars: str) -> bytes:
        values = self._symbol_values(chars)

        bits = self.alphabet.bits_per_symbol
        shifts = np.arange(bits - 1, -1, -1, dtype=np.int16)
        stream = ((values[:, None] >> shifts) & 1).astype(np.uint8).ravel()
        # leftover bits short of a byte are dropped unchecked
        usable = stream.size - stream.size % 8
        return np.packbits(stream[:usable]).tobytes()

    def _check(self, chars: str) -> None:
        self._symbol_values(chars)

    def _trim_padding(self, chars: str) -> str:
        if self.pad_char is None:
            return chars
        return chars.rstrip(self.pad_char)

    def _symbol_values(self, chars: str) -> np.ndarray:
        """Strips padding, validates length and maps every character to its value."""
        chars = self._trim_padding(chars)
        if not self.alphabet.layout.is_valid_length(len(chars)):
            raise InvalidLengthError(len(chars))

        codes = np.fromiter(map(ord, chars), dtype=np.uint32, count=len(chars))
        ascii_mask = codes <= ASCII_MAX
        values = np.full(len(chars), -1, dtype=np.int16)
        values[ascii_mask] = self.alphabet.decode_table[codes[ascii_mask]]

        invalid = np.flatnonzero(values < 0)
        if invalid.size:
            raise UnrecognizedCharacterError(chars[invalid[0]])
        return values

    def encoding_stream(self, sink: TextIO, close_sink: bool = True) -> EncodingStream:
        return EncodingStream(self.alphabet, self.pad_char, sink, close_sink=close_sink)

    def decoding_stream(self, source: Union[TextIO, str], close_source: bool = True) -> DecodingStream:
        return DecodingStream(self.alphabet, self.pad_char, source, close_source=close_source)

    def max_encoded_size(self, num_bytes: int) -> int:
        return self.alphabet.layout.padded_symbols_for_bytes(num_bytes)

    def max_decoded_size(self, num_chars: int) -> int:
        return self.alphabet.layout.bytes_for_symbols(num_chars)

    def omit_padding(self) -> BaseEncoding:
        if self.pad_char is None:
            return self
        result = StandardEncoding(self.alphabet, None)
        get_logger().derived(self, result)
        return result

    def with_pad_char(self, pad_char: str) -> BaseEncoding:
        if not self.alphabet.layout.can_pad or pad_char == self.pad_char:
            return self
        result = StandardEncoding(self.alphabet, pad_char)
        get_logger().derived(self, result)
        return result

    def with_separator(self, separator: str, interval: int) -> BaseEncoding:
        from BaseCodec.encoding.separated import SeparatedEncoding

        result = SeparatedEncoding(self, separator, interval)
        get_logger().derived(self, result)
        return result

    def upper_case(self) -> BaseEncoding:
        return self._with_alphabet(self.alphabet.upper_case())

    def lower_case(self) -> BaseEncoding:
        return self._with_alphabet(self.alphabet.lower_case())

    def ignore_case(self) -> BaseEncoding:
        return self._with_alphabet(self.alphabet.ignore_case())

    def _with_alphabet(self, alphabet: Alphabet) -> BaseEncoding:
        if alphabet is self.alphabet:
            return self
        result = StandardEncoding(alphabet, self.pad_char)
        get_logger().derived(self, result)
        return result


_BASE64 = StandardEncoding(Alphabet("base64()", BASE64_CHARS), DEFAULT_PAD_CHAR)
_BASE64_URL = StandardEncoding(Alphabet("base64_url()", BASE64_URL_CHARS), DEFAULT_PAD_CHAR)
_BASE32 = StandardEncoding(Alphabet("base32()", BASE32_CHARS), DEFAULT_PAD_CHAR)
_BASE32_HEX = StandardEncoding(Alphabet("base32_hex()", BASE32_HEX_CHARS), DEFAULT_PAD_CHAR)
_BASE16 = StandardEncoding(Alphabet("base16()", BASE16_CHARS), None)


def base64() -> BaseEncoding:
    """RFC 4648 section 4 base64, padded with ``=``."""
    return _BASE64


def base64_url() -> BaseEncoding:
    """RFC 4648 section 5 URL- and filename-safe base64, padded with ``=``."""
    return _BASE64_URL


def base32() -> BaseEncoding:
    """RFC 4648 section 6 base32, padded with ``=``."""
    return _BASE32


def base32_hex() -> BaseEncoding:
    """RFC 4648 section 7 base32 with the extended hex alphabet, padded with ``=``."""
    return _BASE32_HEX


def base16() -> BaseEncoding:
    """RFC 4648 section 8 base16 (upper-case hexadecimal). Never padded."""
    return _BASE16


STANDARD_ENCODINGS = {
    "base64": base64,
    "base64_url": base64_url,
    "base32": base32,
    "base32_hex": base32_hex,
    "base16": base16,
}
