"""Standard base64 helpers."""

import base64
import binascii
from typing import Union

from suikit.errors import BcsError


def from_base64(value: Union[str, bytes]) -> bytes:
    """Decode padded standard base64, raising BcsError on malformed input."""
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as err:
        raise BcsError(f"invalid base64: {err}") from err


def to_base64(data: bytes) -> str:
    """Encode bytes as padded standard base64."""
    return base64.b64encode(bytes(data)).decode("ascii")