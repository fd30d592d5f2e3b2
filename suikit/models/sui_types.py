"""Object references and owners."""

from dataclasses import dataclass, field

from suikit.models.base import JsonModel


@dataclass
class SuiObjectRef(JsonModel):
    digest: str = field(default="", metadata={"json": "digest"})
    object_id: str = field(default="", metadata={"json": "objectId"})
    version: int = field(default=0, metadata={"json": "version"})


@dataclass
class Owner(JsonModel):
    address_owner: str = field(default="", metadata={"json": "addressOwner", "omitempty": True})
    object_owner: str = field(default="", metadata={"json": "objectOwner", "omitempty": True})