import io

import pytest

from suikit.bcs.uleb128 import MAX_ULEB128_LENGTH, U64_MAX, uleb128_decode, uleb128_encode
from suikit.errors import BcsError


def test_small_values():
    assert uleb128_encode(0) == b"\x00"
    assert uleb128_encode(127) == b"\x7f"
    assert uleb128_encode(128) == b"\x80\x01"


@pytest.mark.parametrize(
    "value", [0, 1, 127, 128, 255, 300, 16383, 16384, 2**32 - 1, 2**63, U64_MAX]
)
def test_round_trip(value):
    encoded = uleb128_encode(value)
    assert uleb128_decode(io.BytesIO(encoded)) == (value, len(encoded))


def test_max_value_uses_max_length():
    assert len(uleb128_encode(U64_MAX)) == MAX_ULEB128_LENGTH


def test_only_last_byte_lacks_continuation_bit():
    encoded = uleb128_encode(2**40 + 12345)
    assert all(b & 0x80 for b in encoded[:-1])
    assert encoded[-1] & 0x80 == 0


def test_decode_stops_at_end_of_value():
    stream = io.BytesIO(uleb128_encode(300) + b"rest")
    value, count = uleb128_decode(stream)
    assert value == 300
    assert stream.read() == b"rest"
    assert count == len(uleb128_encode(300))


def test_decode_accepts_bytes():
    assert uleb128_decode(uleb128_encode(1000)) == (1000, 2)


@pytest.mark.parametrize("value", [-1, U64_MAX + 1])
def test_encode_out_of_range(value):
    with pytest.raises(BcsError):
        uleb128_encode(value)


def test_decode_empty_stream():
    with pytest.raises(BcsError, match="EOF"):
        uleb128_decode(io.BytesIO(b""))


def test_decode_truncated():
    with pytest.raises(BcsError):
        uleb128_decode(io.BytesIO(b"\x80\x80"))


def test_decode_overflow():
    with pytest.raises(BcsError, match="overflow"):
        uleb128_decode(io.BytesIO(b"\x80" * 9 + b"\x02"))


def test_decode_too_long():
    with pytest.raises(BcsError, match="most significant"):
        uleb128_decode(io.BytesIO(b"\x80" * 10 + b"\x00"))