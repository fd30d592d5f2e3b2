"""BCS deserialization into Python values described by type annotations."""

import dataclasses
import io
import struct
import types
from typing import (
    Any,
    BinaryIO,
    Dict,
    Protocol,
    Tuple,
    Union,
    get_args,
    get_origin,
    runtime_checkable,
)

from suikit.bcs.encoding import Option
from suikit.bcs.tags import TAG_NAME, parse_tag_value
from suikit.bcs.types import BcsEnum, FixedInt
from suikit.bcs.uleb128 import uleb128_decode
from suikit.errors import BcsError

_NONE_TYPE = type(None)


@runtime_checkable
class Unmarshaler(Protocol):
    """A type that reads its own BCS form from a stream.

    ``unmarshal_bcs`` is a classmethod that returns the decoded value and
    the number of bytes it consumed.
    """

    @classmethod
    def unmarshal_bcs(cls, stream: BinaryIO) -> Tuple[Any, int]: ...


def _strip_optional(type_: Any) -> Any:
    origin = get_origin(type_)
    if origin is Union or origin is types.UnionType:
        args = [arg for arg in get_args(type_) if arg is not _NONE_TYPE]
        if len(args) == 1:
            return args[0]
    return type_


def _field_type(cls: type, field: dataclasses.Field) -> Any:
    if isinstance(field.type, str):
        raise BcsError(
            f"field {cls.__name__}.{field.name} has a string annotation; "
            "declare it with a real type"
        )
    return field.type


class Decoder:
    """Reads BCS encoded values from a binary stream.

    The expected shape is given as a type: bool, U8..U64, I8..I64, bytes,
    str, ``list[T]`` for length-prefixed sequences, ``tuple[A, B, ...]``
    for fixed-length sequences, ``Option[T]``, dataclasses (fields in
    order, honouring BCS tags) and BcsEnum dataclasses.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def decode(self, type_: Any) -> Tuple[Any, int]:
        """Decode one value of ``type_``; return it with the bytes consumed."""
        return self._decode(type_)

    def _read_exact(self, size: int) -> bytes:
        data = self._stream.read(size)
        if len(data) != size:
            raise BcsError(f"wrong number of bytes read, want: {size}, got {len(data)}")
        return data

    def _decode(self, type_: Any) -> Tuple[Any, int]:
        type_ = _strip_optional(type_)
        origin = get_origin(type_)

        if origin is Option or type_ is Option:
            args = get_args(type_)
            if not args:
                raise BcsError("Option needs a type argument, such as Option[U64]")
            inner = args[0]
            return Option.unmarshal_bcs(self._stream, lambda data: unmarshal(data, inner))

        if isinstance(type_, type):
            if callable(getattr(type_, "unmarshal_bcs", None)):
                return type_.unmarshal_bcs(self._stream)
            if issubclass(type_, BcsEnum):
                return self._decode_enum(type_)
            if type_ is bool:
                return self._read_exact(1)[0] != 0, 1
            if issubclass(type_, FixedInt):
                size = struct.calcsize(type_.FORMAT)
                (value,) = struct.unpack(type_.FORMAT, self._read_exact(size))
                return type_(value), size
            if type_ is int:
                raise BcsError("plain int has no fixed width; use U8..U64 or I8..I64")
            if type_ in (bytes, bytearray):
                data, count = self._decode_bytes()
                return type_(data), count
            if type_ is str:
                data, count = self._decode_bytes()
                try:
                    return data.decode("utf-8"), count
                except UnicodeDecodeError as err:
                    raise BcsError(f"invalid utf-8 string: {err}") from err

        if origin is list:
            args = get_args(type_)
            if not args:
                raise BcsError("list needs an element type, such as list[U8]")
            return self._decode_list(args[0])

        if origin is tuple:
            args = get_args(type_)
            if len(args) == 2 and args[1] is Ellipsis:
                raise BcsError("fixed-length tuples need every element type spelled out")
            return self._decode_tuple(args)

        if isinstance(type_, type) and dataclasses.is_dataclass(type_):
            return self._decode_struct(type_)

        raise BcsError(f"unsupported decoding type: {type_!r}")

    def _decode_bytes(self) -> Tuple[bytes, int]:
        size, count = uleb128_decode(self._stream)
        if size == 0:
            return b"", count
        return self._read_exact(size), count + size

    def _decode_list(self, item_type: Any) -> Tuple[list, int]:
        size, count = uleb128_decode(self._stream)
        items = []
        for _ in range(size):
            item, used = self._decode(item_type)
            items.append(item)
            count += used
        return items, count

    def _decode_tuple(self, item_types: Tuple[Any, ...]) -> Tuple[tuple, int]:
        items = []
        count = 0
        for item_type in item_types:
            item, used = self._decode(item_type)
            items.append(item)
            count += used
        return tuple(items), count

    def _decode_struct(self, cls: type) -> Tuple[Any, int]:
        values: Dict[str, Any] = {}
        count = 0
        for field in dataclasses.fields(cls):
            if field.name.startswith("_"):
                continue
            tag = parse_tag_value(field.metadata.get(TAG_NAME, ""))
            if tag.is_ignored():
                continue
            if tag.is_optional():
                present = self._read_exact(1)[0]
                count += 1
                if present == 0:
                    values[field.name] = None
                    continue
            value, used = self._decode(_field_type(cls, field))
            count += used
            values[field.name] = value
        return _build(cls, values), count

    def _decode_enum(self, cls: type) -> Tuple[Any, int]:
        if not dataclasses.is_dataclass(cls):
            raise BcsError(f"only dataclasses are supported as enums, got {cls.__name__}")
        index, count = uleb128_decode(self._stream)
        fields = dataclasses.fields(cls)
        if index >= len(fields):
            raise BcsError(f"enum index {index} out of range for {cls.__name__}")
        field = fields[index]
        value, used = self._decode(_field_type(cls, field))
        return _build(cls, {field.name: value}), count + used


def _build(cls: type, values: Dict[str, Any]) -> Any:
    init_names = {field.name for field in dataclasses.fields(cls) if field.init}
    kwargs = {name: value for name, value in values.items() if name in init_names}
    try:
        instance = cls(**kwargs)
    except TypeError as err:
        raise BcsError(f"cannot build {cls.__name__}: {err}") from err
    for name, value in values.items():
        if name not in init_names:
            object.__setattr__(instance, name, value)
    return instance


def unmarshal(data: bytes, type_: Any) -> Tuple[Any, int]:
    """Decode a value of ``type_`` from ``data``; return it with the bytes used."""
    return Decoder(io.BytesIO(bytes(data))).decode(type_)