"""
Separator decorator: inserts a fixed string every N characters on encode,
and ignores its characters on decode.
"""

from dataclasses import dataclass, field
from typing import Dict, TextIO, Union

from BaseCodec.core.errors import ConfigurationError
from BaseCodec.encoding.base import BaseEncoding, StandardEncoding
from BaseCodec.stream.decoder import DecodingStream
from BaseCodec.stream.encoder import EncodingStream, SeparatingWriter
from BaseCodec.utils.logging import get_logger


@dataclass(frozen=True, repr=False)
class SeparatedEncoding(BaseEncoding):
    """
    Wraps a ``StandardEncoding`` with a separator.

    The separator never changes the encoded bits: it is placed strictly
    between data characters when encoding, and every character it contains
    is dropped before decoding.
    """

    delegate: StandardEncoding
    separator: str
    interval: int
    _strip_table: Dict[int, None] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.delegate, StandardEncoding):
            raise ConfigurationError("Already have a separator")
        if self.interval <= 0:
            raise ConfigurationError(f"Cannot add a separator after every {self.interval} chars")

        pad_char = self.delegate.pad_char
        for ch in self.separator:
            if self.delegate.alphabet.matches(ch) or ch == pad_char:
                raise ConfigurationError("Separator cannot contain alphabet or padding characters")

        object.__setattr__(self, "_strip_table", dict.fromkeys(map(ord, self.separator)))

    def __str__(self) -> str:
        return f"{self.delegate}.with_separator({self.separator!r}, {self.interval})"

    __repr__ = __str__

    def _strip(self, chars: str) -> str:
        return chars.translate(self._strip_table)

    def _encode(self, data: memoryview) -> str:
        encoded = self.delegate._encode(data)
        n = self.interval
        return self.separator.join(encoded[i:i + n] for i in range(0, len(encoded), n))

    def decode_checked(self, chars: str) -> bytes:
        return self.delegate.decode_checked(self._strip(chars))

    def _check(self, chars: str) -> None:
        self.delegate._check(self._strip(chars))

    def encoding_stream(self, sink: TextIO, close_sink: bool = True) -> EncodingStream:
        writer = SeparatingWriter(sink, self.separator, self.interval)
        return self.delegate.encoding_stream(writer, close_sink=close_sink)

    def decoding_stream(self, source: Union[TextIO, str], close_source: bool = True) -> DecodingStream:
        return DecodingStream(
            self.delegate.alphabet,
            self.delegate.pad_char,
            source,
            ignore=frozenset(self.separator),
            close_source=close_source,
        )

    def max_encoded_size(self, num_bytes: int) -> int:
        unseparated = self.delegate.max_encoded_size(num_bytes)
        return unseparated + len(self.separator) * (max(0, unseparated - 1) // self.interval)

    def max_decoded_size(self, num_chars: int) -> int:
        return self.delegate.max_decoded_size(num_chars)

    def omit_padding(self) -> BaseEncoding:
        return self._rewrap(self.delegate.omit_padding())

    def with_pad_char(self, pad_char: str) -> BaseEncoding:
        return self._rewrap(self.delegate.with_pad_char(pad_char))

    def with_separator(self, separator: str, interval: int) -> BaseEncoding:
        raise ConfigurationError("Already have a separator")

    def upper_case(self) -> BaseEncoding:
        return self._rewrap(self.delegate.upper_case())

    def lower_case(self) -> BaseEncoding:
        return self._rewrap(self.delegate.lower_case())

    def ignore_case(self) -> BaseEncoding:
        return self._rewrap(self.delegate.ignore_case())

    def _rewrap(self, delegate: BaseEncoding) -> BaseEncoding:
        if delegate is self.delegate:
            return self
        result = SeparatedEncoding(delegate, self.separator, self.interval)
        get_logger().derived(self, result)
        return result
