import io
from dataclasses import dataclass, field
from typing import List, Optional

import pytest

from suikit.bcs.encoding import Encoder, Marshaler, Option, marshal, must_marshal
from suikit.bcs.tags import bcs_field
from suikit.bcs.types import I16, U8, U16, U32, U64, BcsEnum
from suikit.bcs.uleb128 import uleb128_encode
from suikit.errors import BcsError


def test_bool_wire_bytes():
    assert marshal(True) == b"\x01"
    assert marshal(False) == b"\x00"


def test_u32_is_little_endian():
    assert marshal(U32(1)) == b"\x01\x00\x00\x00"


@pytest.mark.parametrize("value, width", [(U8(9), 1), (U16(9), 2), (U32(9), 4), (U64(9), 8)])
def test_integer_widths(value, width):
    encoded = marshal(value)
    assert len(encoded) == width
    assert int.from_bytes(encoded, "little") == 9


def test_signed_integer():
    assert int.from_bytes(marshal(I16(-2)), "little", signed=True) == -2


def test_string_is_length_prefixed():
    assert marshal("hello") == uleb128_encode(5) + b"hello"


def test_unicode_string_counts_bytes():
    text = "ü"
    assert marshal(text) == uleb128_encode(len(text.encode())) + text.encode()


def test_bytes_are_length_prefixed():
    data = bytes(200)
    assert marshal(data) == uleb128_encode(200) + data


def test_list_is_length_prefixed():
    assert marshal([U16(1), U16(2)]) == uleb128_encode(2) + marshal(U16(1)) + marshal(U16(2))


def test_tuple_has_no_length():
    assert marshal((U8(1), U8(2))) == marshal(U8(1)) + marshal(U8(2))


def test_empty_list():
    assert marshal([]) == uleb128_encode(0)


@dataclass
class Inner:
    flag: bool
    amount: U64


@dataclass
class Outer:
    name: str
    inner: Inner
    items: List[U8]
    maybe: Optional[U16] = bcs_field("optional", default=None)
    skipped: str = bcs_field("-", default="ignored")
    _private: str = field(default="hidden")


def test_struct_encodes_fields_in_order():
    value = Outer(name="ab", inner=Inner(True, U64(3)), items=[U8(7)])
    expected = (
        marshal("ab")
        + marshal(True)
        + marshal(U64(3))
        + marshal([U8(7)])
        + b"\x00"
    )
    assert marshal(value) == expected


def test_optional_field_present():
    value = Outer(name="", inner=Inner(False, U64(0)), items=[], maybe=U16(5))
    assert marshal(value).endswith(b"\x01" + marshal(U16(5)))


@dataclass
class Choice(BcsEnum):
    first: Optional[U8] = None
    second: Optional[str] = None


def test_enum_encodes_variant_index():
    assert marshal(Choice(second="x")) == uleb128_encode(1) + marshal("x")
    assert marshal(Choice(first=U8(4))) == uleb128_encode(0) + marshal(U8(4))


def test_enum_without_variant_raises():
    with pytest.raises(BcsError, match="no field is set"):
        marshal(Choice())


@pytest.mark.parametrize("value", [5, None, {"a": 1}, 1.5])
def test_unsupported_values_raise(value):
    with pytest.raises(BcsError):
        marshal(value)


def test_callables_are_skipped():
    assert marshal((U8(1), len)) == marshal(U8(1))


def test_must_marshal_success_and_failure():
    assert must_marshal(U8(3)) == marshal(U8(3))
    with pytest.raises(RuntimeError):
        must_marshal({"a": 1})


def test_encoder_writes_to_stream():
    stream = io.BytesIO()
    encoder = Encoder(stream)
    encoder.encode(U8(1))
    encoder.encode("z")
    assert stream.getvalue() == marshal(U8(1)) + marshal("z")


class Custom:
    def marshal_bcs(self):
        return b"custom"


def test_marshaler_is_used():
    assert isinstance(Custom(), Marshaler)
    assert marshal([Custom()]) == uleb128_encode(1) + b"custom"


def test_option_none():
    assert Option(none=True).marshal_bcs() == b"\x00"
    assert marshal(Option(none=True)) == b"\x00"


def test_option_some():
    assert marshal(Option(some=U16(5))) == b"\x01" + marshal(U16(5))


def _decode_u8(payload):
    return U8(payload[0]), 1


def test_option_unmarshal_none():
    option, count = Option.unmarshal_bcs(io.BytesIO(b"\x00"), _decode_u8)
    assert option.none is True
    assert count == 1


def test_option_round_trip():
    encoded = marshal(Option(some=U8(7)))
    option, count = Option.unmarshal_bcs(io.BytesIO(encoded), _decode_u8)
    assert option == Option(some=U8(7))
    assert count == len(encoded)


def test_option_unmarshal_empty_raises():
    with pytest.raises(BcsError):
        Option.unmarshal_bcs(io.BytesIO(b""), _decode_u8)