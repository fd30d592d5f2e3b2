import io
from dataclasses import dataclass
from typing import List, Optional, Tuple

import pytest

from suikit.bcs.decoding import Decoder, unmarshal
from suikit.bcs.encoding import Option, marshal
from suikit.bcs.tags import bcs_field
from suikit.bcs.types import I64, U8, U16, U32, U64, BcsEnum
from suikit.errors import BcsError


@dataclass
class Point:
    x: U32
    y: U32


@dataclass
class Record:
    name: str
    tags: List[str]
    payload: bytes
    origin: Point
    pair: Tuple[U8, U16]
    flag: bool
    delta: I64
    note: Optional[str] = bcs_field("optional", default=None)
    cache: str = bcs_field("-", default="")


@dataclass
class Shape(BcsEnum):
    circle: Optional[U32] = None
    square: Optional[Point] = None


class Reversed:
    def __init__(self, data: bytes) -> None:
        self.data = data

    @classmethod
    def unmarshal_bcs(cls, stream):
        return cls(stream.read(2)[::-1]), 2


def test_string_wire_format():
    assert unmarshal(b"\x03abc", str) == ("abc", 4)


def test_bool_nonzero_is_true():
    assert unmarshal(b"\x01", bool) == (True, 1)
    assert unmarshal(b"\x00", bool)[0] is False
    assert unmarshal(b"\x07", bool)[0] is True


@pytest.mark.parametrize("value", [U8(255), U16(513), U32(70000), U64(2**64 - 1), I64(-5)])
def test_fixed_int_round_trip(value):
    data = marshal(value)
    decoded, used = unmarshal(data, type(value))
    assert decoded == value
    assert type(decoded) is type(value)
    assert used == len(data)


@pytest.mark.parametrize("note", [None, "hello"])
def test_struct_round_trip(note):
    record = Record(
        name="coin",
        tags=["a", "bc", ""],
        payload=b"\x00\x01\x02",
        origin=Point(U32(3), U32(4)),
        pair=(U8(1), U16(2)),
        flag=True,
        delta=I64(-9),
        note=note,
    )
    data = marshal(record)
    decoded, used = unmarshal(data, Record)
    assert decoded == record
    assert used == len(data)


def test_ignored_field_keeps_default():
    record = Record("n", [], b"", Point(U32(0), U32(0)), (U8(0), U16(0)), False, I64(0),
                    cache="dropped")
    decoded, _ = unmarshal(marshal(record), Record)
    assert decoded.cache == ""


@pytest.mark.parametrize("shape", [Shape(circle=U32(5)), Shape(square=Point(U32(1), U32(2)))])
def test_enum_round_trip(shape):
    data = marshal(shape)
    assert unmarshal(data, Shape) == (shape, len(data))


def test_enum_index_out_of_range():
    with pytest.raises(BcsError):
        unmarshal(b"\x05", Shape)


def test_list_of_structs_round_trip():
    points = [Point(U32(1), U32(2)), Point(U32(3), U32(4))]
    data = marshal(points)
    assert unmarshal(data, List[Point]) == (points, len(data))


@pytest.mark.parametrize("option", [Option(some=U64(7)), Option(none=True)])
def test_option_round_trip(option):
    data = marshal(option)
    decoded, used = unmarshal(data, Option[U64])
    assert decoded == option
    assert used == len(data)


def test_custom_unmarshaler():
    decoded, used = unmarshal(b"ab", Reversed)
    assert decoded.data == b"ba"
    assert used == 2


def test_decoder_reads_sequentially():
    stream = io.BytesIO(marshal(U16(513)) + marshal(U8(9)))
    decoder = Decoder(stream)
    assert decoder.decode(U16) == (513, 2)
    assert decoder.decode(U8) == (9, 1)


def test_truncated_string_raises():
    with pytest.raises(BcsError):
        unmarshal(b"\x05ab", str)


def test_truncated_integer_raises():
    with pytest.raises(BcsError):
        unmarshal(b"\x01", U32)


def test_invalid_utf8_raises():
    with pytest.raises(BcsError):
        unmarshal(b"\x01\xff", str)


def test_plain_int_is_rejected():
    with pytest.raises(BcsError):
        unmarshal(b"\x01", int)


def test_open_tuple_is_rejected():
    with pytest.raises(BcsError):
        unmarshal(b"\x01", Tuple[U8, ...])


def test_unsupported_type_is_rejected():
    with pytest.raises(BcsError):
        unmarshal(b"\x01", float)