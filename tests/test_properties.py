"""Property tests over arbitrary byte strings."""

import pytest
from hypothesis import given, settings, strategies as st

from BaseCodec import base16, base32, base32_hex, base64, base64_url

from helpers import insert_separators, stream_decode, stream_encode

pytestmark = pytest.mark.property

ENCODINGS = [
    base64(),
    base64_url(),
    base64().omit_padding(),
    base64().with_pad_char("~"),
    base32(),
    base32().lower_case(),
    base32().ignore_case().omit_padding(),
    base32_hex(),
    base16(),
    base16().lower_case(),
    base64().with_separator("\r\n", 76),
    base32().with_separator("-", 5),
    base16().with_separator(":", 2),
]


@pytest.mark.parametrize("encoding", ENCODINGS, ids=str)
@given(data=st.binary(max_size=64))
@settings(max_examples=50)
def test_round_trip(encoding, data):
    encoded = encoding.encode(data)
    assert encoding.can_decode(encoded)
    assert encoding.decode(encoded) == data


@pytest.mark.parametrize("encoding", ENCODINGS, ids=str)
@given(data=st.binary(max_size=64))
@settings(max_examples=50)
def test_streaming_matches_bulk(encoding, data):
    encoded = stream_encode(encoding, data, one_at_a_time=True)
    assert encoded == encoding.encode(data)
    assert stream_decode(encoding, encoded) == data


@pytest.mark.parametrize("encoding", [base64(), base32(), base16()], ids=str)
@given(data=st.binary(max_size=64))
@settings(max_examples=50)
def test_separator_transparency(encoding, data):
    separated = encoding.with_separator(",", 4)
    text = insert_separators(encoding.encode(data), ",", 4)
    assert separated.encode(data) == text
    assert separated.decode(text) == data


@given(data=st.binary(max_size=64), bounds=st.tuples(st.integers(0, 64), st.integers(0, 64)))
@settings(max_examples=50)
def test_offset_matches_slice(data, bounds):
    offset = min(bounds[0], len(data))
    length = min(bounds[1], len(data) - offset)
    for encoding in (base64(), base32(), base16()):
        assert encoding.encode(data, offset, length) == encoding.encode(data[offset:offset + length])


@given(data=st.binary(max_size=64))
@settings(max_examples=50)
def test_padded_length(data):
    assert len(base64().encode(data)) == base64().max_encoded_size(len(data))
    assert len(base32().encode(data)) == base32().max_encoded_size(len(data))
    assert len(base64().omit_padding().encode(data)) == -(-len(data) * 8 // 6)


@given(text=st.text(max_size=32))
@settings(max_examples=100)
def test_can_decode_agrees_with_decode(text):
    for encoding in (base64(), base32().with_separator(" ", 4), base16()):
        try:
            encoding.decode(text)
        except ValueError:
            assert not encoding.can_decode(text)
        else:
            assert encoding.can_decode(text)
