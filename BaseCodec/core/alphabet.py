"""
Symbol tables mapping values 0..2^b-1 to characters and back.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict

import numpy as np

from BaseCodec.core.chunking import ChunkLayout
from BaseCodec.core.errors import ConfigurationError, UnrecognizedCharacterError

ASCII_MAX = 127


class CaseMode(Enum):
    """
    Letter case of an alphabet.

    UPPER and LOWER only record which case builder produced the alphabet;
    the characters themselves already carry that case. IGNORE changes the
    decode tables.
    """

    EXACT = "exact"
    UPPER = "upper"
    LOWER = "lower"
    IGNORE = "ignore"


def _is_lower(c: str) -> bool:
    return "a" <= c <= "z"


def _is_upper(c: str) -> bool:
    return "A" <= c <= "Z"


@dataclass(frozen=True)
class Alphabet:
    """
    Immutable, ASCII-only symbol table.

    The decode side is precomputed both as a dict (single characters, used
    by the streams) and as a numpy lookup array indexed by code point (used
    by bulk decode). With ``CaseMode.IGNORE`` both tables also hold the
    opposite case of every letter.
    """

    name: str
    chars: str
    case_mode: CaseMode = CaseMode.EXACT

    layout: ChunkLayout = field(init=False, repr=False, compare=False)
    decode_map: Dict[str, int] = field(init=False, repr=False, compare=False)
    encode_table: np.ndarray = field(init=False, repr=False, compare=False)
    decode_table: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        size = len(self.chars)
        bits = size.bit_length() - 1
        if size == 0 or (1 << bits) != size:
            raise ConfigurationError(f"Illegal alphabet length {size}")
        layout = ChunkLayout.for_bits(bits)

        decode_map: Dict[str, int] = {}
        for i, c in enumerate(self.chars):
            if ord(c) > ASCII_MAX:
                raise ConfigurationError(f"Non-ASCII character: {c}")
            if c in decode_map:
                raise ConfigurationError(f"Duplicate character: {c}")
            decode_map[c] = i

        if self.case_mode is CaseMode.IGNORE:
            for c, i in list(decode_map.items()):
                other = c.lower() if _is_upper(c) else c.upper()
                if decode_map.get(other, i) != i:
                    raise ConfigurationError(
                        f"Cannot call ignore_case() since '{c}' and '{other}' encode different values"
                    )
                decode_map[other] = i

        decode_table = np.full(ASCII_MAX + 1, -1, dtype=np.int16)
        for c, i in decode_map.items():
            decode_table[ord(c)] = i

        # frozen dataclass: derived tables are attached once here
        object.__setattr__(self, "layout", layout)
        object.__setattr__(self, "decode_map", decode_map)
        object.__setattr__(
            self, "encode_table", np.frombuffer(self.chars.encode("ascii"), dtype=np.uint8)
        )
        object.__setattr__(self, "decode_table", decode_table)

    def __str__(self) -> str:
        return self.name

    @property
    def bits_per_symbol(self) -> int:
        return self.layout.bits_per_symbol

    def encode(self, value: int) -> str:
        return self.chars[value]

    def decode(self, ch: str) -> int:
        """
        Looks up the value of a single character.

        Raises:
            UnrecognizedCharacterError: if the character is not in the alphabet
        """
        value = self.decode_map.get(ch)
        if value is None:
            raise UnrecognizedCharacterError(ch)
        return value

    def matches(self, ch: str) -> bool:
        return ch in self.decode_map

    def has_lower_case(self) -> bool:
        return any(_is_lower(c) for c in self.chars)

    def has_upper_case(self) -> bool:
        return any(_is_upper(c) for c in self.chars)

    def upper_case(self) -> "Alphabet":
        """Upper-cased alphabet; returns itself if there is nothing to change."""
        if not self.has_lower_case():
            return self
        if self.has_upper_case():
            raise ConfigurationError("Cannot call upper_case() on a mixed-case alphabet")
        mode = CaseMode.IGNORE if self.case_mode is CaseMode.IGNORE else CaseMode.UPPER
        return Alphabet(f"{self.name}.upper_case()", self.chars.upper(), mode)

    def lower_case(self) -> "Alphabet":
        """Lower-cased alphabet; returns itself if there is nothing to change."""
        if not self.has_upper_case():
            return self
        if self.has_lower_case():
            raise ConfigurationError("Cannot call lower_case() on a mixed-case alphabet")
        mode = CaseMode.IGNORE if self.case_mode is CaseMode.IGNORE else CaseMode.LOWER
        return Alphabet(f"{self.name}.lower_case()", self.chars.lower(), mode)

    def ignore_case(self) -> "Alphabet":
        """Alphabet that decodes either case of its letters."""
        if self.case_mode is CaseMode.IGNORE:
            return self
        return Alphabet(f"{self.name}.ignore_case()", self.chars, CaseMode.IGNORE)
