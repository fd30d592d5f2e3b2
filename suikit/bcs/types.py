"""Fixed-width integers and the enum marker used by the BCS codec."""

import struct
from typing import ClassVar

from suikit.errors import BcsError


class FixedInt(int):
    """An int with a fixed little-endian wire width, range checked."""

    FORMAT: ClassVar[str] = "<q"

    def __new__(cls, value: int = 0) -> "FixedInt":
        value = int(value)
        try:
            struct.pack(cls.FORMAT, value)
        except struct.error:
            raise BcsError(f"{value} is out of range for {cls.__name__}") from None
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"


class U8(FixedInt):
    FORMAT = "<B"


class U16(FixedInt):
    FORMAT = "<H"


class U32(FixedInt):
    FORMAT = "<I"


class U64(FixedInt):
    FORMAT = "<Q"


class I8(FixedInt):
    FORMAT = "<b"


class I16(FixedInt):
    FORMAT = "<h"


class I32(FixedInt):
    FORMAT = "<i"


class I64(FixedInt):
    FORMAT = "<q"


class BcsEnum:
    """Marker base for dataclasses encoded as a tagged union.

    Exactly one field is expected to be set; the others stay None.
    """