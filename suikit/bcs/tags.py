"""Field tags that steer BCS encoding of dataclass fields."""

import dataclasses
from enum import IntFlag
from typing import Any

from suikit.errors import BcsError

TAG_NAME = "bcs"


class TagValue(IntFlag):
    OPTIONAL = 1
    IGNORE = 2

    def is_optional(self) -> bool:
        return bool(self & TagValue.OPTIONAL)

    def is_ignored(self) -> bool:
        return bool(self & TagValue.IGNORE)


def parse_tag_value(tag: str) -> TagValue:
    """Parse a comma separated tag such as ``"optional"`` or ``"-"``."""
    result = TagValue(0)
    for segment in tag.split(","):
        segment = segment.strip()
        if not segment:
            continue
        if segment == "optional":
            result |= TagValue.OPTIONAL
        elif segment == "-":
            return TagValue.IGNORE
        else:
            raise BcsError(f"unknown tag: {segment} in {tag}")
    return result


def bcs_field(tag: str, **kwargs: Any) -> Any:
    """A dataclass field carrying a BCS tag in its metadata."""
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[TAG_NAME] = tag
    return dataclasses.field(metadata=metadata, **kwargs)