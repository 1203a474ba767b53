"""
Chunk geometry and the partial-chunk length table.
"""

from dataclasses import dataclass, field
from functools import lru_cache
from typing import FrozenSet

from BaseCodec.core.errors import ConfigurationError

SUPPORTED_BITS = (4, 5, 6)


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


@dataclass(frozen=True)
class ChunkLayout:
    """
    Smallest group of bytes and symbols with no fractional bit remainder.

    For base64 (6 bits per symbol) a chunk is 3 bytes or 4 symbols, for
    base32 it is 5 bytes or 8 symbols and for base16 1 byte or 2 symbols.
    """

    bits_per_symbol: int
    bytes_per_chunk: int
    symbols_per_chunk: int
    valid_lengths: FrozenSet[int] = field(repr=False)

    @classmethod
    @lru_cache(maxsize=None)
    def for_bits(cls, bits_per_symbol: int) -> "ChunkLayout":
        """Builds (and caches) the layout for a symbol width."""
        if bits_per_symbol not in SUPPORTED_BITS:
            raise ConfigurationError(
                f"Unsupported symbol width {bits_per_symbol} bits; expected one of {SUPPORTED_BITS}"
            )

        # lowest set bit of the width, capped at a whole byte
        gcd = min(8, bits_per_symbol & -bits_per_symbol)
        symbols_per_chunk = 8 // gcd
        bytes_per_chunk = bits_per_symbol // gcd

        valid = frozenset(
            _ceil_div(n * 8, bits_per_symbol) % symbols_per_chunk
            for n in range(bytes_per_chunk)
        )
        return cls(bits_per_symbol, bytes_per_chunk, symbols_per_chunk, valid)

    @property
    def mask(self) -> int:
        return (1 << self.bits_per_symbol) - 1

    @property
    def can_pad(self) -> bool:
        """Whether a final chunk can ever be partial."""
        return self.bytes_per_chunk > 1

    def is_valid_length(self, symbol_count: int) -> bool:
        """Checks a data-symbol count against the partial-chunk length table."""
        return symbol_count % self.symbols_per_chunk in self.valid_lengths

    def is_valid_padding_start(self, index: int) -> bool:
        """Checks whether padding may begin after ``index`` data symbols."""
        return self.is_valid_length(index)

    def symbols_for_bytes(self, n: int) -> int:
        """Unpadded number of symbols produced by ``n`` bytes."""
        return _ceil_div(n * 8, self.bits_per_symbol)

    def padded_symbols_for_bytes(self, n: int) -> int:
        """Number of symbols produced by ``n`` bytes when padding to a chunk."""
        return self.symbols_per_chunk * _ceil_div(n, self.bytes_per_chunk)

    def bytes_for_symbols(self, n: int) -> int:
        """Upper bound on the bytes decoded from ``n`` symbols."""
        return (n * self.bits_per_symbol + 7) // 8
