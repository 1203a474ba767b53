"""Alphabets and chunk geometry."""

import pytest

from BaseCodec.core import (
    Alphabet,
    CaseMode,
    ChunkLayout,
    ConfigurationError,
    UnrecognizedCharacterError,
)
from BaseCodec.encoding import BASE32_CHARS, BASE64_CHARS, BaseEncoding


@pytest.mark.parametrize("bits, bytes_per_chunk, symbols_per_chunk, valid", [
    (6, 3, 4, {0, 2, 3}),
    (5, 5, 8, {0, 2, 4, 5, 7}),
    (4, 1, 2, {0}),
])
def test_chunk_layout(bits, bytes_per_chunk, symbols_per_chunk, valid):
    layout = ChunkLayout.for_bits(bits)
    assert layout.bytes_per_chunk == bytes_per_chunk
    assert layout.symbols_per_chunk == symbols_per_chunk
    assert layout.bytes_per_chunk * 8 == layout.symbols_per_chunk * bits
    assert set(layout.valid_lengths) == valid
    assert layout is ChunkLayout.for_bits(bits)


def test_valid_lengths_wrap_around_chunks():
    layout = ChunkLayout.for_bits(6)
    assert [n for n in range(10) if layout.is_valid_length(n)] == [0, 2, 3, 4, 6, 7, 8]


def test_symbol_counts():
    layout = ChunkLayout.for_bits(5)
    assert layout.symbols_for_bytes(1) == 2
    assert layout.symbols_for_bytes(5) == 8
    assert layout.padded_symbols_for_bytes(1) == 8
    assert layout.padded_symbols_for_bytes(6) == 16
    assert layout.padded_symbols_for_bytes(0) == 0
    assert layout.bytes_for_symbols(8) == 5


@pytest.mark.parametrize("bits", [1, 3, 7, 8])
def test_unsupported_widths(bits):
    with pytest.raises(ConfigurationError):
        ChunkLayout.for_bits(bits)


def test_alphabet_lookup():
    alphabet = Alphabet("base64()", BASE64_CHARS)
    assert alphabet.bits_per_symbol == 6
    assert alphabet.encode(0) == "A"
    assert alphabet.encode(63) == "/"
    assert alphabet.decode("Z") == 25
    assert alphabet.matches("+")
    assert not alphabet.matches("=")
    with pytest.raises(UnrecognizedCharacterError) as excinfo:
        alphabet.decode("*")
    assert excinfo.value.character == "*"


@pytest.mark.parametrize("chars, message", [
    ("ABC", "Illegal alphabet length 3"),
    ("", "Illegal alphabet length 0"),
    ("A" * 16, "Duplicate character: A"),
    ("é" + BASE32_CHARS[1:], "Non-ASCII character: é"),
])
def test_alphabet_validation(chars, message):
    with pytest.raises(ConfigurationError, match=message):
        Alphabet("bad()", chars)


def test_alphabet_case_variants():
    alphabet = Alphabet("base32()", BASE32_CHARS)
    lower = alphabet.lower_case()
    assert lower.chars == BASE32_CHARS.lower()
    assert lower.case_mode is CaseMode.LOWER
    assert lower.name == "base32().lower_case()"
    assert alphabet.upper_case() is alphabet

    ignoring = alphabet.ignore_case()
    assert ignoring.case_mode is CaseMode.IGNORE
    assert ignoring.decode("m") == ignoring.decode("M") == 12
    assert ignoring.lower_case().case_mode is CaseMode.IGNORE


def test_mixed_case_alphabet():
    alphabet = Alphabet("base64()", BASE64_CHARS)
    for change in (alphabet.upper_case, alphabet.lower_case, alphabet.ignore_case):
        with pytest.raises(ConfigurationError):
            change()


def test_ignore_case_on_mixed_alphabet_without_collisions():
    alphabet = Alphabet("hexish()", "0123456789abcdeF").ignore_case()
    assert alphabet.case_mode is CaseMode.IGNORE
    assert alphabet.decode("F") == alphabet.decode("f") == 15
    assert alphabet.decode("A") == alphabet.decode("a") == 10

    encoding = BaseEncoding.custom("hexish", "0123456789abcdeF").ignore_case()
    assert encoding.decode("dEaD") == encoding.decode("dead") == b"\xde\xad"
    assert encoding.encode(b"\xde\xaf") == "deaF"


def test_ignore_case_rejects_colliding_letters():
    alphabet = Alphabet("colliding()", BASE32_CHARS[:-1] + "a")
    with pytest.raises(ConfigurationError, match="'A' and 'a' encode different values"):
        alphabet.ignore_case()


def test_upper_and_lower_modes_record_the_builder():
    lower = Alphabet("base32()", BASE32_CHARS).lower_case()
    upper = lower.upper_case()
    assert upper.case_mode is CaseMode.UPPER
    assert upper.chars == BASE32_CHARS
    assert upper.name == "base32().lower_case().upper_case()"


def test_alphabet_equality():
    assert Alphabet("base32()", BASE32_CHARS) == Alphabet("base32()", BASE32_CHARS)
    assert Alphabet("base32()", BASE32_CHARS) != Alphabet("base32()", BASE32_CHARS).ignore_case()
