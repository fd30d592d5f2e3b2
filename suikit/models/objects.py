"""Object queries, object data and dynamic fields."""

import dataclasses
import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from suikit.models import sui_types
from suikit.models.base import JsonModel

MAX_PAGE_LIMIT = 50


def _json(
    key: str,
    *,
    omitempty: bool = False,
    default: Any = dataclasses.MISSING,
    default_factory: Any = dataclasses.MISSING,
) -> Any:
    metadata: Dict[str, Any] = {"json": key}
    if omitempty:
        metadata["omitempty"] = True
    return dataclasses.field(default=default, default_factory=default_factory, metadata=metadata)


def _inline(factory: Any) -> Any:
    return dataclasses.field(default_factory=factory, metadata={"inline": True})


def _check_limit(limit: int) -> None:
    if not 0 <= limit <= MAX_PAGE_LIMIT:
        raise ValueError(f"limit must be between 0 and {MAX_PAGE_LIMIT}, got {limit}")


def _split_path(path: str) -> List[str]:
    parts: List[str] = []
    current: List[str] = []
    chars = iter(path)
    for char in chars:
        if char == "\\":
            escaped = next(chars, "")
            current.append(escaped)
        elif char == ".":
            parts.append("".join(current))
            current = []
        else:
            current.append(char)
    parts.append("".join(current))
    return parts


def _get_path(data: Any, path: str) -> Any:
    """Value at a dotted path inside parsed JSON, or None when absent.

    Array elements are addressed by index; ``#`` gives an array's length.
    """
    if not path:
        return None
    current = data
    for part in _split_path(path):
        if isinstance(current, dict):
            if part not in current:
                return None
            current = current[part]
        elif isinstance(current, list):
            if part == "#":
                current = len(current)
            elif part.isdigit() and int(part) < len(current):
                current = current[int(part)]
            else:
                return None
        else:
            return None
    return current


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return json.dumps(value)
    return json.dumps(value, separators=(",", ":"), sort_keys=True)


@dataclass
class SuiObjectInfo(JsonModel):
    object_ref: sui_types.SuiObjectRef = _inline(sui_types.SuiObjectRef)
    type_: str = _json("type_", default="")
    owner: sui_types.Owner = _inline(sui_types.Owner)
    previous_transaction: str = _json("previousTransaction", default="")


@dataclass
class SuiMoveObject(JsonModel):
    type_: str = _json("type", default="")
    fields: Dict[str, Any] = _json("fields", default_factory=dict)
    has_public_transfer: bool = _json("hasPublicTransfer", default=False)


@dataclass
class SuiMovePackage(JsonModel):
    disassembled: Any = _json("disassembled", default=None)


@dataclass
class SuiMoveModuleId(JsonModel):
    address: str = _json("address", default="")
    name: str = _json("name", default="")


@dataclass
class SuiMoveNormalizedModule(JsonModel):
    file_format_version: int = _json("FileFormatVersion", default=0)
    address: str = _json("Address", default="")
    name: str = _json("Name", default="")
    friends: List[SuiMoveModuleId] = _json("Friends", default_factory=list)


@dataclass
class SuiRawMovePackage(JsonModel):
    id: str = _json("id", omitempty=True, default="")
    module_map: Dict[str, str] = _json("moduleMap", omitempty=True, default_factory=dict)


@dataclass
class SuiRawMoveObject(JsonModel):
    type_: str = _json("type", default="")
    has_public_transfer: bool = _json("hasPublicTransfer", default=False)
    version: int = _json("version", default=0)
    bcs_bytes: str = _json("bcsBytes", default="")


@dataclass
class SuiRawData(JsonModel):
    data_type: str = _json("dataType", default="")
    move_object: SuiRawMoveObject = _inline(SuiRawMoveObject)
    move_package: SuiRawMovePackage = _inline(SuiRawMovePackage)


@dataclass
class DynamicFieldName(JsonModel):
    type_: str = _json("type", default="")
    value: Any = _json("value", default=None)

    def field(self, path: str) -> Any:
        """Value at a dotted ``path`` inside the name's value, or None."""
        return _get_path(self.value, path)


@dataclass
class SuiObjectDataOptions(JsonModel):
    show_type: bool = _json("showType", default=False)
    show_content: bool = _json("showContent", default=False)
    show_bcs: bool = _json("showBcs", default=False)
    show_owner: bool = _json("showOwner", default=False)
    show_previous_transaction: bool = _json("showPreviousTransaction", default=False)
    show_storage_rebate: bool = _json("showStorageRebate", default=False)
    show_display: bool = _json("showDisplay", default=False)


SuiObjectDataFilter = Dict[str, Any]


@dataclass
class ObjectFilterByPackage(JsonModel):
    package: str = _json("Package", default="")


@dataclass
class ObjectFilterByStructType(JsonModel):
    struct_type: str = _json("StructType", default="")


@dataclass
class ObjectFilterByAddressOwner(JsonModel):
    address_owner: str = _json("AddressOwner", default="")


@dataclass
class ObjectFilterByObjectOwner(JsonModel):
    object_owner: str = _json("ObjectOwner", default="")


@dataclass
class ObjectFilterByObjectId(JsonModel):
    object_id: str = _json("ObjectId", default="")


@dataclass
class ObjectFilterByObjectIds(JsonModel):
    object_ids: List[str] = _json("ObjectIds", default_factory=list)


@dataclass
class ObjectFilterByVersion(JsonModel):
    version: str = _json("Version", default="")


@dataclass
class SuiObjectResponseQuery(JsonModel):
    filter: Any = _json("filter", default=None)
    options: SuiObjectDataOptions = _json("options", default_factory=SuiObjectDataOptions)


@dataclass
class SuiGetObjectRequest(JsonModel):
    object_id: str = _json("ObjectId", default="")
    options: SuiObjectDataOptions = _json("options", default_factory=SuiObjectDataOptions)


@dataclass
class SuiXGetOwnedObjectsRequest(JsonModel):
    address: str = _json("address", default="")
    query: SuiObjectResponseQuery = _json("Query", default_factory=SuiObjectResponseQuery)
    cursor: Any = _json("cursor", default=None)
    limit: int = _json("limit", default=0)

    def __post_init__(self) -> None:
        _check_limit(self.limit)


@dataclass
class SuiObjectResponseError(JsonModel):
    code: str = _json("code", default="")
    error: str = _json("error", default="")
    object_id: str = _json("object_id", default="")
    version: int = _json("version", default=0)
    digest: str = _json("digest", default="")


@dataclass
class ObjectShare(JsonModel):
    initial_shared_version: int = _json("initial_shared_version", default=0)


@dataclass
class ObjectOwner(JsonModel):
    address_owner: str = _json("AddressOwner", default="")
    object_owner: str = _json("ObjectOwner", default="")
    shared: ObjectShare = _json("Shared", default_factory=ObjectShare)


@dataclass
class DisplayFieldsResponse(JsonModel):
    data: Any = _json("data", default=None)
    error: Optional[SuiObjectResponseError] = _json("error", default=None)

    def _value(self, key: str) -> str:
        if self.data is None:
            return ""
        return _as_text(_get_path(self.data, key))

    def name(self) -> str:
        return self._value("name")

    def description(self) -> str:
        return self._value("description")

    def link(self) -> str:
        return self._value("link")

    def image_url(self) -> str:
        return self._value("image_url")

    def thumbnail_url(self) -> str:
        return self._value("thumbnail_url")

    def project_url(self) -> str:
        return self._value("project_url")

    def creator(self) -> str:
        return self._value("creator")


@dataclass
class SuiParsedData(JsonModel):
    data_type: str = _json("dataType", default="")
    move_object: SuiMoveObject = _inline(SuiMoveObject)
    move_package: SuiMovePackage = _inline(SuiMovePackage)


@dataclass
class SuiObjectData(JsonModel):
    object_id: str = _json("objectId", default="")
    version: str = _json("version", default="")
    digest: str = _json("digest", default="")
    type_: str = _json("type", default="")
    owner: Any = _json("owner", default=None)
    previous_transaction: str = _json("previousTransaction", omitempty=True, default="")
    display: DisplayFieldsResponse = _json("display", default_factory=DisplayFieldsResponse)
    content: Optional[SuiParsedData] = _json("content", omitempty=True, default=None)
    bcs: Optional[SuiRawData] = _json("bcs", omitempty=True, default=None)


@dataclass
class SuiObjectResponse(JsonModel):
    data: Optional[SuiObjectData] = _json("data", omitempty=True, default=None)
    error: Optional[SuiObjectResponseError] = _json("error", omitempty=True, default=None)


@dataclass
class PaginatedObjectsResponse(JsonModel):
    data: List[SuiObjectResponse] = _json("data", default_factory=list)
    next_cursor: str = _json("nextCursor", default="")
    has_next_page: bool = _json("hasNextPage", default=False)


@dataclass
class SuiMultiGetObjectsRequest(JsonModel):
    object_ids: List[str] = _json("objectIds", default_factory=list)
    options: SuiObjectDataOptions = _json("options", default_factory=SuiObjectDataOptions)


@dataclass
class SuiXGetDynamicFieldRequest(JsonModel):
    object_id: str = _json("objectId", default="")
    cursor: Any = _json("cursor", default=None)
    limit: int = _json("limit", default=0)

    def __post_init__(self) -> None:
        _check_limit(self.limit)


@dataclass
class DynamicFieldInfo(JsonModel):
    name: DynamicFieldName = _json("name", default_factory=DynamicFieldName)
    bcs_name: str = _json("bcsName", default="")
    type_: str = _json("type", default="")
    object_type: str = _json("objectType", default="")
    object_id: str = _json("objectId", default="")
    version: int = _json("version", default=0)
    digest: str = _json("digest", default="")


@dataclass
class PaginatedDynamicFieldInfoResponse(JsonModel):
    data: List[DynamicFieldInfo] = _json("data", default_factory=list)
    next_cursor: str = _json("nextCursor", default="")
    has_next_page: bool = _json("hasNextPage", default=False)


@dataclass
class DynamicFieldObjectName(JsonModel):
    type_: str = _json("type", default="")
    value: Any = _json("value", default=None)


@dataclass
class SuiXGetDynamicFieldObjectRequest(JsonModel):
    object_id: str = _json("objectId", default="")
    dynamic_field_name: DynamicFieldObjectName = _json(
        "dynamicFieldName", default_factory=DynamicFieldObjectName
    )


@dataclass
class SuiTryGetPastObjectRequest(JsonModel):
    object_id: str = _json("objectId", default="")
    version: int = _json("version", default=0)
    options: SuiObjectDataOptions = _json("options", default_factory=SuiObjectDataOptions)


@dataclass
class PastObjectResponse(JsonModel):
    status: str = _json("status", default="")
    details: Any = _json("details", default=None)


@dataclass
class SuiGetLoadedChildObjectsRequest(JsonModel):
    digest: str = _json("digest", default="")


@dataclass
class SuiLoadedChildObject(JsonModel):
    object_id: str = _json("objectId", default="")
    sequence_number: str = _json("sequenceNumber", default="")


@dataclass
class ChildObjectsResponse(JsonModel):
    loaded_child_objects: List[SuiLoadedChildObject] = _json(
        "loadedChildObjects", default_factory=list
    )


@dataclass
class PastObject(JsonModel):
    object_id: str = _json("objectId", default="")
    version: str = _json("version", default="")


@dataclass
class SuiTryMultiGetPastObjectsRequest(JsonModel):
    multi_get_past_objects: List[PastObject] = _json("MultiGetPastObjects", default_factory=list)
    options: SuiObjectDataOptions = _json("Options", default_factory=SuiObjectDataOptions)