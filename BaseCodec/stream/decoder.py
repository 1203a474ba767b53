"""
Incremental decoder: characters in, bytes out.
"""

import io
from typing import FrozenSet, Optional, TextIO, Union

from BaseCodec.core.alphabet import Alphabet
from BaseCodec.core.errors import (
    DecodingError,
    InvalidLengthError,
    UnrecognizedCharacterError,
    display_char,
)


class DecodingStream(io.RawIOBase):
    """
    Readable byte stream decoding base-encoded text pulled from a source.

    Characters are read one at a time. Separator characters are skipped,
    the first pad character ends the data and only more padding may follow
    it. Unlike bulk decode, length problems are reported only once they
    become observable: at the end of the source, or where padding starts.

    A failure that happens after some bytes were already decoded in the same
    ``read`` is held back; those bytes are returned first and the error is
    raised by the next read.

    Not thread-safe: one stream belongs to one reader.
    """

    def __init__(
        self,
        alphabet: Alphabet,
        pad_char: Optional[str],
        source: Union[TextIO, str],
        ignore: FrozenSet[str] = frozenset(),
        close_source: bool = True,
    ):
        super().__init__()
        if isinstance(source, str):
            source = io.StringIO(source)
        self.alphabet = alphabet
        self.pad_char = pad_char
        self.source = source
        self.ignore = ignore
        self.close_source = close_source

        self._bit_buffer = 0
        self._bit_count = 0
        self._symbols = 0
        self._position = 0
        self._hit_padding = False
        self._pending_error: Optional[DecodingError] = None

    def readable(self) -> bool:
        return True

    def readinto(self, b) -> int:
        if self.closed:
            raise ValueError("read from closed decoding stream")
        if self._pending_error is not None:
            error, self._pending_error = self._pending_error, None
            raise error

        view = memoryview(b).cast("B")
        count = 0
        while count < len(view):
            try:
                value = self._next_byte()
            except DecodingError as e:
                if count == 0:
                    raise
                self._pending_error = e
                break
            if value is None:
                break
            view[count] = value
            count += 1
        return count

    def close(self) -> None:
        if self.closed:
            return
        try:
            super().close()
        finally:
            if self.close_source:
                close = getattr(self.source, "close", None)
                if close is not None:
                    close()

    def _next_byte(self) -> Optional[int]:
        """Decodes up to the next whole byte; None at a clean end of input."""
        layout = self.alphabet.layout
        bits = layout.bits_per_symbol

        while True:
            ch = self.source.read(1)
            if not ch:
                if not self._hit_padding and not layout.is_valid_length(self._symbols):
                    raise InvalidLengthError(self._symbols)
                return None
            if ch in self.ignore:
                continue

            self._position += 1
            if self.pad_char is not None and ch == self.pad_char:
                if not self._hit_padding and (
                    self._symbols == 0 or not layout.is_valid_padding_start(self._symbols)
                ):
                    raise InvalidLengthError(
                        self._symbols, f"Padding cannot start at index {self._position}"
                    )
                self._hit_padding = True
                continue
            if self._hit_padding:
                raise UnrecognizedCharacterError(
                    ch,
                    f"Expected padding character but found '{display_char(ch)}' "
                    f"at index {self._position}",
                )

            self._bit_buffer = (self._bit_buffer << bits) | self.alphabet.decode(ch)
            self._bit_count += bits
            self._symbols += 1

            if self._bit_count >= 8:
                self._bit_count -= 8
                value = (self._bit_buffer >> self._bit_count) & 0xFF
                self._bit_buffer &= (1 << self._bit_count) - 1
                return value
