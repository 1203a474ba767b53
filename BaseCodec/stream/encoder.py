"""
Incremental encoder: bytes in, characters out.
"""

import io
from typing import Optional, TextIO

from BaseCodec.core.alphabet import Alphabet
from BaseCodec.utils.logging import get_logger


class SeparatingWriter:
    """
    Text writer that inserts ``separator`` after every ``interval`` characters.

    A separator is only written when another character follows it, so the
    output never starts or ends with one.
    """

    def __init__(self, sink: TextIO, separator: str, interval: int):
        if interval <= 0:
            raise ValueError(f"Cannot add a separator after every {interval} chars")
        self.sink = sink
        self.separator = separator
        self.interval = interval
        self._until_separator = interval

    @property
    def closed(self) -> bool:
        return getattr(self.sink, "closed", False)

    def write(self, text: str) -> int:
        parts = []
        for ch in text:
            if self._until_separator == 0:
                parts.append(self.separator)
                self._until_separator = self.interval
            parts.append(ch)
            self._until_separator -= 1
        self.sink.write("".join(parts))
        return len(text)

    def flush(self) -> None:
        flush = getattr(self.sink, "flush", None)
        if flush is not None:
            flush()

    def close(self) -> None:
        close = getattr(self.sink, "close", None)
        if close is not None:
            close()


class EncodingStream(io.RawIOBase):
    """
    Writable byte stream that base-encodes into a text sink.

    Bytes are fed through a bit accumulator; every completed symbol is
    written to the sink straight away. Closing the stream writes the final
    partial symbol and any padding, then closes the sink (unless
    ``close_sink`` is false).

    Not thread-safe: one stream belongs to one writer.
    """

    def __init__(
        self,
        alphabet: Alphabet,
        pad_char: Optional[str],
        sink: TextIO,
        close_sink: bool = True,
    ):
        super().__init__()
        self.alphabet = alphabet
        self.pad_char = pad_char
        self.sink = sink
        self.close_sink = close_sink

        self._bit_buffer = 0
        self._bit_count = 0
        self._written = 0

    def writable(self) -> bool:
        return True

    def write(self, b) -> int:
        if self.closed:
            raise ValueError("write to closed encoding stream")

        data = memoryview(b).cast("B")
        bits = self.alphabet.bits_per_symbol
        mask = self.alphabet.layout.mask
        out = []

        for byte in data:
            self._bit_buffer = (self._bit_buffer << 8) | byte
            self._bit_count += 8
            while self._bit_count >= bits:
                self._bit_count -= bits
                out.append(self.alphabet.encode((self._bit_buffer >> self._bit_count) & mask))
            self._bit_buffer &= (1 << self._bit_count) - 1

        if out:
            self.sink.write("".join(out))
            self._written += len(out)
        return len(data)

    def flush(self) -> None:
        if self.closed or getattr(self.sink, "closed", False):
            return
        flush = getattr(self.sink, "flush", None)
        if flush is not None:
            flush()

    def close(self) -> None:
        if self.closed:
            return
        try:
            self._finish()
        finally:
            try:
                super().close()
            finally:
                if self.close_sink:
                    close = getattr(self.sink, "close", None)
                    if close is not None:
                        close()

    def _finish(self) -> None:
        """Writes the trailing partial symbol and padding, as bulk encode does."""
        if self._bit_count == 0:
            return

        bits = self.alphabet.bits_per_symbol
        tail = [self.alphabet.encode((self._bit_buffer << (bits - self._bit_count)) & self.alphabet.layout.mask)]
        self._bit_buffer = 0
        self._bit_count = 0

        written = self._written + 1
        if self.pad_char is not None:
            symbols_per_chunk = self.alphabet.layout.symbols_per_chunk
            tail.append(self.pad_char * (-written % symbols_per_chunk))

        text = "".join(tail)
        self.sink.write(text)
        self._written += len(text)
        get_logger().debug(f"Encoding stream finished after {self._written} characters")
