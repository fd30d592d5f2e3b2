"""BCS serialization of Python values."""

import dataclasses
import io
import struct
from dataclasses import dataclass
from typing import Any, BinaryIO, Callable, Generic, Optional, Protocol, Tuple, TypeVar, runtime_checkable

from suikit.bcs.tags import TAG_NAME, parse_tag_value
from suikit.bcs.types import BcsEnum, FixedInt
from suikit.bcs.uleb128 import uleb128_encode
from suikit.errors import BcsError

T = TypeVar("T")


@runtime_checkable
class Marshaler(Protocol):
    """A value that produces its own BCS bytes."""

    def marshal_bcs(self) -> bytes: ...


class Encoder:
    """Writes BCS encoded values to a binary stream.

    Mapping of Python values: bool and the fixed-width ints as little-endian
    numbers, bytes and str as length-prefixed bytes, list as a
    length-prefixed sequence, tuple as a fixed-length sequence, dataclasses
    as their fields in order, BcsEnum subclasses as a tagged union.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def encode(self, value: Any) -> None:
        if isinstance(value, Marshaler) and not isinstance(value, type):
            self._stream.write(value.marshal_bcs())
        elif isinstance(value, BcsEnum):
            self._encode_enum(value)
        elif value is None:
            raise BcsError("cannot encode None outside an optional field")
        elif isinstance(value, bool):
            self._stream.write(b"\x01" if value else b"\x00")
        elif isinstance(value, FixedInt):
            self._stream.write(struct.pack(value.FORMAT, value))
        elif isinstance(value, int):
            raise BcsError("plain int has no fixed width; wrap it in U8..U64 or I8..I64")
        elif isinstance(value, (bytes, bytearray, memoryview)):
            self._encode_bytes(bytes(value))
        elif isinstance(value, str):
            self._encode_bytes(value.encode("utf-8"))
        elif isinstance(value, list):
            self._stream.write(uleb128_encode(len(value)))
            for item in value:
                self.encode(item)
        elif isinstance(value, tuple):
            for item in value:
                self.encode(item)
        elif dataclasses.is_dataclass(value) and not isinstance(value, type):
            self._encode_struct(value)
        elif callable(value):
            return
        else:
            raise BcsError(
                f"unsupported kind: {type(value).__name__}, consider making the field "
                "ignored with the - tag or providing a marshal_bcs method"
            )

    def _encode_bytes(self, data: bytes) -> None:
        self._stream.write(uleb128_encode(len(data)))
        self._stream.write(data)

    def _encode_struct(self, value: Any) -> None:
        for field in dataclasses.fields(value):
            if field.name.startswith("_"):
                continue
            tag = parse_tag_value(field.metadata.get(TAG_NAME, ""))
            if tag.is_ignored():
                continue
            item = getattr(value, field.name)
            if tag.is_optional():
                if item is None:
                    self._stream.write(b"\x00")
                else:
                    self._stream.write(b"\x01")
                    self.encode(item)
            else:
                self.encode(item)

    def _encode_enum(self, value: BcsEnum) -> None:
        if not dataclasses.is_dataclass(value):
            raise BcsError("only dataclasses are supported as enums")
        for index, field in enumerate(dataclasses.fields(value)):
            if field.name.startswith("_"):
                continue
            if parse_tag_value(field.metadata.get(TAG_NAME, "")).is_ignored():
                continue
            item = getattr(value, field.name)
            if item is not None:
                self._stream.write(uleb128_encode(index))
                self.encode(item)
                return
        raise BcsError("no field is set in the enum")


def marshal(value: Any) -> bytes:
    """Return the BCS encoding of ``value``."""
    buffer = io.BytesIO()
    Encoder(buffer).encode(value)
    return buffer.getvalue()


def must_marshal(value: Any) -> bytes:
    """Like marshal, but treats an encoding failure as a programming error."""
    try:
        return marshal(value)
    except BcsError as err:
        raise RuntimeError(f"bcs marshal failed: {err}") from err


@dataclass
class Option(Generic[T]):
    """An optional value: flag byte 0 for none, 1 followed by the value."""

    some: Optional[T] = None
    none: bool = False

    def marshal_bcs(self) -> bytes:
        if self.none:
            return b"\x00"
        return b"\x01" + marshal(self.some)

    @classmethod
    def unmarshal_bcs(
        cls, stream: BinaryIO, inner: Callable[[bytes], Tuple[T, int]]
    ) -> Tuple["Option[T]", int]:
        """Read the rest of ``stream`` as an option.

        ``inner`` decodes the payload bytes and returns the value with the
        number of bytes it used. Returns the option and the bytes consumed.
        """
        data = stream.read()
        if not data:
            raise BcsError("no data to decode an option from")
        if len(data) == 1:
            return cls(none=True), 1
        value, count = inner(data[1:])
        return cls(some=value), count + 1