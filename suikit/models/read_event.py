"""Event queries, filters and responses."""

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, List

from suikit.models.base import JsonModel

MAX_PAGE_LIMIT = 50


def _json(key: str, *, default: Any = dataclasses.MISSING, default_factory: Any = dataclasses.MISSING) -> Any:
    return dataclasses.field(default=default, default_factory=default_factory, metadata={"json": key})


@dataclass
class SuiGetEventsRequest(JsonModel):
    digest: str = _json("digest", default="")


@dataclass
class EventId(JsonModel):
    tx_digest: str = _json("txDigest", default="")
    event_seq: str = _json("eventSeq", default="")


@dataclass
class SuiEventResponse(JsonModel):
    id: EventId = _json("id", default_factory=EventId)
    package_id: str = _json("packageId", default="")
    transaction_module: str = _json("transactionModule", default="")
    sender: str = _json("sender", default="")
    type_: str = _json("type", default="")
    parsed_json: Dict[str, Any] = _json("parsedJson", default_factory=dict)
    bcs: str = _json("bcs", default="")
    timestamp_ms: str = _json("timestampMs", default="")


GetEventsResponse = List[SuiEventResponse]
SuiEventFilter = Dict[str, Any]


@dataclass
class MoveModule(JsonModel):
    package: str = _json("package", default="")
    module: str = _json("module", default="")


@dataclass
class MoveEventModule(JsonModel):
    package: str = _json("package", default="")
    module: str = _json("module", default="")
    event: str = _json("event", default="")


@dataclass
class MoveEventField(JsonModel):
    field: str = _json("field", default="")
    type_: str = _json("type", default="")
    value: str = _json("value", default="")


@dataclass
class TimeRange(JsonModel):
    start_time: int = _json("start_time", default=0)
    end_time: int = _json("end_time", default=0)


@dataclass
class EventFilterByPackage(JsonModel):
    package: str = _json("Package", default="")


@dataclass
class EventFilterByMoveModule(JsonModel):
    move_module: MoveModule = _json("MoveModule", default_factory=MoveModule)


@dataclass
class EventFilterByMoveEventType(JsonModel):
    move_event_type: str = _json("MoveEventType", default="")


@dataclass
class EventFilterByMoveEventModule(JsonModel):
    move_event_module: MoveEventModule = _json("MoveEventModule", default_factory=MoveEventModule)


@dataclass
class EventFilterByMoveEventField(JsonModel):
    move_event_field: MoveEventField = _json("MoveEventField", default_factory=MoveEventField)


@dataclass
class EventFilterByTransaction(JsonModel):
    transaction: str = _json("Transaction", default="")


@dataclass
class EventFilterByTimeRange(JsonModel):
    time_range: TimeRange = _json("TimeRange", default_factory=TimeRange)


@dataclass
class EventFilterBySuiAddress(JsonModel):
    sender: str = _json("Sender", default="")


@dataclass
class EventFilterBySenderAddress(JsonModel):
    sender_address: str = _json("SenderAddress", default="")


@dataclass
class SuiXQueryEventsRequest(JsonModel):
    sui_event_filter: Any = _json("suiEventFilter", default=None)
    cursor: Any = _json("cursor", default=None)
    limit: int = _json("limit", default=0)
    descending_order: bool = _json("descendingOrder", default=False)

    def __post_init__(self) -> None:
        if not 0 <= self.limit <= MAX_PAGE_LIMIT:
            raise ValueError(f"limit must be between 0 and {MAX_PAGE_LIMIT}, got {self.limit}")


@dataclass
class PaginatedEventsResponse(JsonModel):
    data: List[SuiEventResponse] = _json("data", default_factory=list)
    next_cursor: EventId = _json("nextCursor", default_factory=EventId)
    has_next_page: bool = _json("hasNextPage", default=False)