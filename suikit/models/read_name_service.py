"""Name service lookups."""

import dataclasses
from dataclasses import dataclass
from typing import Any, List

from suikit.models.base import JsonModel

MAX_PAGE_LIMIT = 50


def _json(key: str, *, default: Any = dataclasses.MISSING, default_factory: Any = dataclasses.MISSING) -> Any:
    return dataclasses.field(default=default, default_factory=default_factory, metadata={"json": key})


@dataclass
class SuiXResolveNameServiceAddressRequest(JsonModel):
    name: str = _json("name", default="")


@dataclass
class SuiXResolveNameServiceNamesRequest(JsonModel):
    address: str = _json("address", default="")
    cursor: Any = _json("cursor", default=None)
    limit: int = _json("limit", default=0)

    def __post_init__(self) -> None:
        if not 0 <= self.limit <= MAX_PAGE_LIMIT:
            raise ValueError(f"limit must be between 0 and {MAX_PAGE_LIMIT}, got {self.limit}")


@dataclass
class SuiXResolveNameServiceNamesResponse(JsonModel):
    data: List[str] = _json("data", default_factory=list)
    next_cursor: str = _json("nextCursor", default="")
    has_next_page: bool = _json("hasNextPage", default=False)