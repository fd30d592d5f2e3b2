"""JSON-mapped dataclasses shared by the RPC models."""

import base64
import binascii
import dataclasses
import enum
import functools
import json
import types
from dataclasses import dataclass, field
from typing import Any, Dict, List, NewType, Optional, Type, TypeVar, Union, get_args, get_origin

from suikit.errors import InvalidJsonError

TransactionDigest = NewType("TransactionDigest", str)
SuiAddress = NewType("SuiAddress", str)

M = TypeVar("M", bound="JsonModel")

_MISSING = object()


class JsonModel:
    """Mixin for dataclasses exchanged as JSON.

    Field metadata steers the mapping: ``json`` gives the key (the field
    name by default), ``omitempty`` drops zero values on output, and
    ``inline`` merges a nested model's keys into the parent object. Keys are
    matched case-insensitively when reading. Fields whose name starts with
    an underscore are not serialized.
    """

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for item in _fields(type(self)):
            value = getattr(self, item.name)
            if item.metadata.get("inline"):
                if value is not None:
                    out.update(_dump(value))
                continue
            if item.metadata.get("omitempty") and _is_empty(value):
                continue
            out[_key(item)] = _dump(value)
        return out

    @classmethod
    def from_dict(cls: Type[M], data: Any) -> M:
        if not isinstance(data, dict):
            raise InvalidJsonError(f"expected a JSON object for {cls.__name__}")
        hints = _hints(cls)
        kwargs: Dict[str, Any] = {}
        for item in _fields(cls):
            hint = hints[item.name]
            if item.metadata.get("inline"):
                kwargs[item.name] = _load(data, hint)
                continue
            raw = _lookup(data, _key(item))
            if raw is not _MISSING:
                kwargs[item.name] = _load(raw, hint)
            elif item.default is dataclasses.MISSING and item.default_factory is dataclasses.MISSING:
                kwargs[item.name] = _zero(hint)
        return cls(**kwargs)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @classmethod
    def from_json(cls: Type[M], text: Union[str, bytes]) -> M:
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, UnicodeDecodeError) as err:
            raise InvalidJsonError(f"invalid json response: {err}") from err
        return cls.from_dict(data)


@functools.lru_cache(maxsize=None)
def _hints(cls: type) -> Dict[str, Any]:
    hints: Dict[str, Any] = {}
    for item in dataclasses.fields(cls):
        if isinstance(item.type, str):
            raise TypeError(
                f"field {cls.__name__}.{item.name} has a string annotation; "
                "declare it with a real type"
            )
        hints[item.name] = item.type
    return hints


def _fields(cls: type) -> List[dataclasses.Field]:
    if not dataclasses.is_dataclass(cls):
        raise TypeError(f"{cls.__name__} is not a dataclass")
    return [f for f in dataclasses.fields(cls) if f.init and not f.name.startswith("_")]


def _key(item: dataclasses.Field) -> str:
    return item.metadata.get("json", item.name)


def _lookup(data: Dict[str, Any], key: str) -> Any:
    if key in data:
        return data[key]
    lowered = key.lower()
    for name, value in data.items():
        if isinstance(name, str) and name.lower() == lowered:
            return value
    return _MISSING


def _is_empty(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    if isinstance(value, (str, bytes, bytearray, list, tuple, dict)):
        return len(value) == 0
    return False


def _dump(value: Any) -> Any:
    if isinstance(value, JsonModel):
        return value.to_dict()
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, dict):
        return {str(k): _dump(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_dump(v) for v in value]
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: _dump(getattr(value, f.name)) for f in dataclasses.fields(value)}
    return value


def _is_union(hint: Any) -> bool:
    origin = get_origin(hint)
    return origin is Union or origin is types.UnionType


def _zero(hint: Any) -> Any:
    supertype = getattr(hint, "__supertype__", None)
    if supertype is not None:
        return _zero(supertype)
    if _is_union(hint):
        return None
    origin = get_origin(hint) or hint
    if origin is list:
        return []
    if origin is dict:
        return {}
    if origin is tuple:
        return ()
    if isinstance(hint, type):
        if issubclass(hint, JsonModel):
            return hint.from_dict({})
        if issubclass(hint, enum.Enum):
            return None
        for base, zero in ((bool, False), (int, 0), (float, 0.0), (str, ""), (bytes, b"")):
            if hint is base:
                return zero
    return None


def _mismatch(value: Any, hint: Any) -> InvalidJsonError:
    name = getattr(hint, "__name__", repr(hint))
    return InvalidJsonError(f"cannot read {type(value).__name__} value into {name}")


def _load(value: Any, hint: Any) -> Any:
    if hint is Any or hint is object:
        return value
    supertype = getattr(hint, "__supertype__", None)
    if supertype is not None:
        return _load(value, supertype)
    if value is None:
        return _zero(hint)
    if _is_union(hint):
        args = [arg for arg in get_args(hint) if arg is not type(None)]
        return _load(value, args[0]) if len(args) == 1 else value

    origin = get_origin(hint)
    if origin is list or hint is list:
        if not isinstance(value, list):
            raise _mismatch(value, hint)
        args = get_args(hint)
        item_hint = args[0] if args else Any
        return [_load(v, item_hint) for v in value]
    if origin is dict or hint is dict:
        if not isinstance(value, dict):
            raise _mismatch(value, hint)
        args = get_args(hint)
        value_hint = args[1] if len(args) == 2 else Any
        return {k: _load(v, value_hint) for k, v in value.items()}
    if origin is tuple or hint is tuple:
        if not isinstance(value, list):
            raise _mismatch(value, hint)
        return tuple(value)

    if isinstance(hint, type):
        if issubclass(hint, JsonModel):
            return hint.from_dict(value)
        if issubclass(hint, enum.Enum):
            try:
                return hint(value)
            except ValueError as err:
                raise InvalidJsonError(str(err)) from err
        if hint is bool:
            if not isinstance(value, bool):
                raise _mismatch(value, hint)
            return value
        if hint is int:
            if not isinstance(value, int) or isinstance(value, bool):
                raise _mismatch(value, hint)
            return value
        if hint is float:
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                raise _mismatch(value, hint)
            return float(value)
        if hint is str:
            if not isinstance(value, str):
                raise _mismatch(value, hint)
            return value
        if hint is bytes:
            if not isinstance(value, str):
                raise _mismatch(value, hint)
            try:
                return base64.b64decode(value, validate=True)
            except (binascii.Error, ValueError) as err:
                raise InvalidJsonError(f"invalid base64 value: {err}") from err
    return value


@dataclass(kw_only=True)
class JsonRPCRequest(JsonModel):
    jsonrpc: str = "2.0"
    id: Any = None
    method: str
    params: List[Any] = field(default_factory=list)


@dataclass
class FaucetFixedAmountRequest(JsonModel):
    recipient: str = ""


@dataclass
class FaucetRequest(JsonModel):
    fixed_amount_request: Optional[FaucetFixedAmountRequest] = field(
        default=None, metadata={"json": "FixedAmountRequest"}
    )


@dataclass
class FaucetCoinInfo(JsonModel):
    amount: int = 0
    id: str = ""
    transfer_tx_digest: str = field(default="", metadata={"json": "transferTxDigest"})


@dataclass(frozen=True)
class SuiKeyPair:
    """A key pair read from a keystore entry, with its derived address."""

    flag: int
    address: str
    public_key: bytes
    public_key_base64: str
    private_key: bytes = field(repr=False)