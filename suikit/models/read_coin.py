"""Coin balances, coin objects, metadata and supply."""

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, List

from suikit.models.base import JsonModel

MAX_PAGE_LIMIT = 50


def _json(
    key: str, *, default: Any = dataclasses.MISSING, default_factory: Any = dataclasses.MISSING
) -> Any:
    metadata: Dict[str, Any] = {"json": key}
    return dataclasses.field(default=default, default_factory=default_factory, metadata=metadata)


def _check_limit(limit: int) -> None:
    if not 0 <= limit <= MAX_PAGE_LIMIT:
        raise ValueError(f"limit must be between 0 and {MAX_PAGE_LIMIT}, got {limit}")


@dataclass
class SuiXGetBalanceRequest(JsonModel):
    owner: str = _json("owner", default="")
    coin_type: str = _json("coinType", default="")


@dataclass
class SuiXGetAllBalanceRequest(JsonModel):
    owner: str = _json("owner", default="")


@dataclass
class CoinLockedBalance(JsonModel):
    epoch_id: int = _json("epochId", default=0)
    number: int = _json("number", default=0)


@dataclass
class CoinBalanceResponse(JsonModel):
    coin_type: str = _json("coinType", default="")
    coin_object_count: int = _json("coinObjectCount", default=0)
    total_balance: str = _json("totalBalance", default="")
    locked_balance: CoinLockedBalance = _json("lockedBalance", default_factory=CoinLockedBalance)


CoinAllBalanceResponse = List[CoinBalanceResponse]


@dataclass
class SuiXGetCoinsRequest(JsonModel):
    owner: str = _json("owner", default="")
    coin_type: str = _json("coin_type", default="")
    cursor: Any = _json("cursor", default=None)
    limit: int = _json("limit", default=0)

    def __post_init__(self) -> None:
        _check_limit(self.limit)


@dataclass
class CoinData(JsonModel):
    coin_type: str = _json("coinType", default="")
    coin_object_id: str = _json("coinObjectId", default="")
    version: str = _json("version", default="")
    digest: str = _json("digest", default="")
    balance: str = _json("balance", default="")
    locked_until_epoch: int = _json("lockedUntilEpoch", default=0)
    previous_transaction: str = _json("previousTransaction", default="")


@dataclass
class PaginatedCoinsResponse(JsonModel):
    data: List[CoinData] = _json("data", default_factory=list)
    next_cursor: str = _json("nextCursor", default="")
    has_next_page: bool = _json("hasNextPage", default=False)


@dataclass
class SuiXGetAllCoinsRequest(JsonModel):
    owner: str = _json("owner", default="")
    cursor: Any = _json("cursor", default=None)
    limit: int = _json("limit", default=0)

    def __post_init__(self) -> None:
        _check_limit(self.limit)


@dataclass
class SuiXGetCoinMetadataRequest(JsonModel):
    coin_type: str = _json("coinType", default="")


@dataclass
class CoinMetadataResponse(JsonModel):
    id: str = _json("id", default="")
    decimals: int = _json("decimals", default=0)
    name: str = _json("name", default="")
    symbol: str = _json("symbol", default="")
    description: str = _json("description", default="")
    icon_url: str = _json("iconUrl", default="")


@dataclass
class SuiXGetTotalSupplyRequest(JsonModel):
    coin_type: str = _json("coinType", default="")


@dataclass
class TotalSupplyResponse(JsonModel):
    value: str = _json("value", default="")