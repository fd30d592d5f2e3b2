"""Unsigned LEB128 integers as used for BCS lengths and enum tags."""

import io
from typing import BinaryIO, Tuple, Union

from suikit.errors import BcsError

MAX_ULEB128_LENGTH = 10
U64_MAX = (1 << 64) - 1


def uleb128_encode(value: int) -> bytes:
    """Encode a non-negative integer of at most 64 bits."""
    value = int(value)
    if value < 0 or value > U64_MAX:
        raise BcsError(f"value {value} cannot be ULEB128 encoded")
    out = bytearray()
    while True:
        low = value & 0x7F
        value >>= 7
        if value:
            out.append(low | 0x80)
        else:
            out.append(low)
            return bytes(out)


def uleb128_decode(stream: Union[BinaryIO, bytes, bytearray, memoryview]) -> Tuple[int, int]:
    """Read one integer; return it with the number of bytes consumed."""
    if isinstance(stream, (bytes, bytearray, memoryview)):
        stream = io.BytesIO(bytes(stream))
    value = 0
    shift = 0
    for count in range(1, MAX_ULEB128_LENGTH + 1):
        chunk = stream.read(1)
        if not chunk:
            raise BcsError("zero read in. possible EOF")
        byte = chunk[0]
        low = byte & 0x7F
        value |= low << shift
        if value > U64_MAX:
            raise BcsError(f"overflow at index {count - 1}: {low}")
        if byte <= 0x7F:
            return value, count
        shift += 7
    raise BcsError(
        f"failed to find most significant bytes after reading {MAX_ULEB128_LENGTH} bytes"
    )