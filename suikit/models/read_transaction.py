"""Transaction block queries, effects, object and balance changes."""

import dataclasses
import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from suikit.errors import InvalidJsonError
from suikit.models.base import JsonModel
from suikit.models.objects import ObjectOwner, ObjectShare
from suikit.models.read_event import SuiEventResponse

MAX_PAGE_LIMIT = 50

SuiArgument = Dict[str, Any]
SuiCallArg = Dict[str, Any]
TransactionFilter = Dict[str, Any]


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


def _check_limit(limit: int) -> None:
    if not 0 <= limit <= MAX_PAGE_LIMIT:
        raise ValueError(f"limit must be between 0 and {MAX_PAGE_LIMIT}, got {limit}")


def _to_plain(data: Any) -> Any:
    if isinstance(data, JsonModel):
        return data.to_dict()
    try:
        return json.loads(json.dumps(data))
    except (TypeError, ValueError):
        return None


def _object_owner(owner: Any) -> Optional[ObjectOwner]:
    plain = _to_plain(owner)
    if not isinstance(plain, dict):
        return None
    try:
        return ObjectOwner.from_dict(plain)
    except InvalidJsonError:
        return None


@dataclass
class GetTransactionMetaData(JsonModel):
    gateway_tx_seq_number: int = _json("gatewayTxSeqNumber", default=0)
    transaction_digest: str = _json("transactionDigest", default="")


@dataclass
class SuiTransactionBlockOptions(JsonModel):
    show_input: bool = _json("showInput", omitempty=True, default=False)
    show_raw_input: bool = _json("showRawInput", omitempty=True, default=False)
    show_effects: bool = _json("showEffects", omitempty=True, default=False)
    show_events: bool = _json("showEvents", omitempty=True, default=False)
    show_object_changes: bool = _json("showObjectChanges", omitempty=True, default=False)
    show_balance_changes: bool = _json("showBalanceChanges", omitempty=True, default=False)


@dataclass
class SuiGetTransactionBlockRequest(JsonModel):
    digest: str = _json("digest", default="")
    options: SuiTransactionBlockOptions = _json(
        "options", default_factory=SuiTransactionBlockOptions
    )


@dataclass
class SuiTransactionBlockKind(JsonModel):
    kind: str = _json("kind", default="")
    inputs: List[Dict[str, Any]] = _json("inputs", default_factory=list)
    transactions: List[Any] = _json("transactions", default_factory=list)


@dataclass
class MoveCallSuiTransaction(JsonModel):
    package: str = _json("package", default="")
    module: str = _json("module", default="")
    function: str = _json("function", default="")
    type_arguments: List[str] = _json("type_arguments", default_factory=list)
    arguments: List[Any] = _json("arguments", default_factory=list)


def move_call(data: Any) -> Optional[MoveCallSuiTransaction]:
    """The MoveCall command held in a transaction entry, or None."""
    plain = _to_plain(data)
    if not isinstance(plain, dict):
        return None
    value = plain.get("MoveCall")
    if not isinstance(value, dict):
        return None
    try:
        return MoveCallSuiTransaction.from_dict(value)
    except InvalidJsonError:
        return None


@dataclass
class SuiTransactionEnum(JsonModel):
    make_move_vec: List[Any] = _json("MakeMoveVec", omitempty=True, default_factory=list)
    merge_coins: List[Any] = _json("MergeCoins", omitempty=True, default_factory=list)
    split_coins: List[Any] = _json("SplitCoins", omitempty=True, default_factory=list)
    transfer_objects: List[Any] = _json("TransferObjects", omitempty=True, default_factory=list)
    publish: List[Any] = _json("Publish", omitempty=True, default_factory=list)
    upgrade: List[Any] = _json("Upgrade", omitempty=True, default_factory=list)
    move_call: Optional[MoveCallSuiTransaction] = _json("MoveCall", omitempty=True, default=None)


@dataclass
class ProgrammableTransaction(JsonModel):
    transactions: List[Any] = _json("transactions", default_factory=list)
    inputs: List[Dict[str, Any]] = _json("inputs", default_factory=list)


@dataclass
class SuiObjectRef(JsonModel):
    object_id: str = _json("objectId", default="")
    version: int = _json("version", default=0)
    digest: str = _json("digest", default="")


@dataclass
class SuiGasData(JsonModel):
    payment: List[SuiObjectRef] = _json("payment", default_factory=list)
    owner: str = _json("owner", default="")
    price: str = _json("price", default="")
    budget: str = _json("budget", default="")


@dataclass
class SuiTransactionBlockData(JsonModel):
    message_version: str = _json("messageVersion", default="")
    transaction: SuiTransactionBlockKind = _json(
        "transaction", default_factory=SuiTransactionBlockKind
    )
    sender: str = _json("sender", default="")
    gas_data: SuiGasData = _json("gasData", default_factory=SuiGasData)


@dataclass
class SuiTransactionBlock(JsonModel):
    data: SuiTransactionBlockData = _json("data", default_factory=SuiTransactionBlockData)
    tx_signatures: List[str] = _json("txSignatures", default_factory=list)


@dataclass
class SuiObjectChangePublished(JsonModel):
    type_: str = _json("type", default="")
    package_id: str = _json("packageId", default="")
    version: int = _json("version", default=0)
    digest: str = _json("digest", default="")
    modules: List[str] = _json("modules", default_factory=list)


@dataclass
class SuiObjectChangeTransferred(JsonModel):
    type_: str = _json("type", default="")
    sender: str = _json("sender", default="")
    recipient: ObjectOwner = _json("recipient", default_factory=ObjectOwner)
    object_type: str = _json("objectType", default="")
    object_id: str = _json("objectId", default="")
    version: int = _json("version", default=0)
    digest: str = _json("digest", default="")


@dataclass
class SuiObjectChangeMutated(JsonModel):
    type_: str = _json("type", default="")
    sender: str = _json("sender", default="")
    owner: ObjectOwner = _json("owner", default_factory=ObjectOwner)
    object_type: str = _json("objectType", default="")
    object_id: str = _json("objectId", default="")
    version: int = _json("version", default=0)
    previous_version: int = _json("previousVersion", default=0)
    digest: str = _json("digest", default="")


@dataclass
class SuiObjectChangeDeleted(JsonModel):
    type_: str = _json("type", default="")
    sender: str = _json("sender", default="")
    object_type: str = _json("objectType", default="")
    object_id: str = _json("objectId", default="")
    version: int = _json("version", default=0)


@dataclass
class SuiObjectChangeWrapped(JsonModel):
    type_: str = _json("type", default="")
    sender: str = _json("sender", default="")
    object_type: str = _json("objectType", default="")
    object_id: str = _json("objectId", default="")
    version: int = _json("version", default=0)


@dataclass
class SuiObjectChangeCreated(JsonModel):
    type_: str = _json("type", default="")
    sender: str = _json("sender", default="")
    owner: ObjectOwner = _json("owner", default_factory=ObjectOwner)
    object_type: str = _json("objectType", default="")
    object_id: str = _json("objectId", default="")
    version: int = _json("version", default=0)
    digest: str = _json("digest", default="")


@dataclass
class OwnedObjectRef(JsonModel):
    owner: Any = _json("owner", default=None)
    reference: SuiObjectRef = _json("reference", default_factory=SuiObjectRef)


@dataclass
class ExecutionStatus(JsonModel):
    status: str = _json("status", default="")
    error: str = _json("error", omitempty=True, default="")


@dataclass
class GasCostSummary(JsonModel):
    computation_cost: str = _json("computationCost", default="")
    storage_cost: str = _json("storageCost", default="")
    storage_rebate: str = _json("storageRebate", default="")
    non_refundable_storage_fee: str = _json("nonRefundableStorageFee", default="")


@dataclass
class ModifiedAtVersions(JsonModel):
    object_id: str = _json("objectId", default="")
    sequence_number: str = _json("sequenceNumber", default="")


@dataclass
class SuiEffects(JsonModel):
    message_version: str = _json("messageVersion", default="")
    status: ExecutionStatus = _json("status", default_factory=ExecutionStatus)
    executed_epoch: str = _json("executedEpoch", default="")
    gas_used: GasCostSummary = _json("gasUsed", default_factory=GasCostSummary)
    modified_at_versions: List[ModifiedAtVersions] = _json(
        "modifiedAtVersions", default_factory=list
    )
    shared_objects: List[SuiObjectRef] = _json("sharedObjects", default_factory=list)
    transaction_digest: str = _json("transactionDigest", default="")
    created: List[OwnedObjectRef] = _json("created", default_factory=list)
    mutated: List[OwnedObjectRef] = _json("mutated", default_factory=list)
    deleted: List[SuiObjectRef] = _json("deleted", default_factory=list)
    gas_object: OwnedObjectRef = _json("gasObject", default_factory=OwnedObjectRef)
    events_digest: str = _json("eventsDigest", default="")
    dependencies: List[str] = _json("dependencies", default_factory=list)


@dataclass
class ObjectChange(JsonModel):
    type_: str = _json("type", default="")
    sender: str = _json("sender", default="")
    owner: Any = _json("owner", default=None)
    object_type: str = _json("objectType", default="")
    object_id: str = _json("objectId", default="")
    package_id: str = _json("packageId", default="")
    modules: List[str] = _json("modules", default_factory=list)
    version: str = _json("version", default="")
    previous_version: str = _json("previousVersion", omitempty=True, default="")
    digest: str = _json("digest", default="")

    def address_owner(self) -> str:
        """The owning address when the owner is an object, else ""."""
        owner = _object_owner(self.owner)
        return owner.address_owner if owner is not None else ""

    def object_owner(self) -> str:
        """The owning object id when the owner is an object, else ""."""
        owner = _object_owner(self.owner)
        return owner.object_owner if owner is not None else ""

    def owner_share(self) -> ObjectShare:
        """The shared-ownership details, empty when there are none."""
        owner = _object_owner(self.owner)
        return owner.shared if owner is not None else ObjectShare()


@dataclass
class BalanceChangeOwner(JsonModel):
    address_owner: str = _json("AddressOwner", default="")
    object_owner: str = _json("ObjectOwner", default="")


@dataclass
class BalanceChanges(JsonModel):
    owner: Any = _json("owner", default=None)
    coin_type: str = _json("coinType", default="")
    amount: str = _json("amount", default="")

    def balance_change_owner(self) -> str:
        """The owning address, "Immutable" for immutable owners, else ""."""
        if isinstance(self.owner, dict):
            try:
                owner = BalanceChangeOwner.from_dict(self.owner)
            except InvalidJsonError:
                owner = None
            if owner is not None and owner.address_owner:
                return owner.address_owner
        if self.owner == "Immutable":
            return "Immutable"
        return ""


@dataclass
class SuiTransactionBlockResponse(JsonModel):
    digest: str = _json("digest", default="")
    transaction: SuiTransactionBlock = _json(
        "transaction", omitempty=True, default_factory=SuiTransactionBlock
    )
    raw_transaction: str = _json("rawTransaction", omitempty=True, default="")
    effects: SuiEffects = _json("effects", omitempty=True, default_factory=SuiEffects)
    events: List[SuiEventResponse] = _json("events", omitempty=True, default_factory=list)
    object_changes: List[ObjectChange] = _json(
        "objectChanges", omitempty=True, default_factory=list
    )
    balance_changes: List[BalanceChanges] = _json(
        "balanceChanges", omitempty=True, default_factory=list
    )
    timestamp_ms: str = _json("timestampMs", omitempty=True, default="")
    checkpoint: str = _json("checkpoint", omitempty=True, default="")
    confirmed_local_execution: bool = _json(
        "confirmedLocalExecution", omitempty=True, default=False
    )
    results: Any = _json("results", omitempty=True, default=None)


@dataclass
class SuiMultiGetTransactionBlocksRequest(JsonModel):
    digests: List[str] = _json("digests", default_factory=list)
    options: SuiTransactionBlockOptions = _json(
        "options", default_factory=SuiTransactionBlockOptions
    )


SuiMultiGetTransactionBlocksResponse = List[SuiTransactionBlockResponse]


@dataclass
class SuiTransactionBlockResponseQuery(JsonModel):
    transaction_filter: Dict[str, Any] = _json("filter", default_factory=dict)
    options: SuiTransactionBlockOptions = _json(
        "options", default_factory=SuiTransactionBlockOptions
    )


@dataclass
class TransactionFilterByFromAddress(JsonModel):
    from_address: str = _json("FromAddress", default="")


@dataclass
class TransactionFilterByToAddress(JsonModel):
    to_address: str = _json("ToAddress", default="")


@dataclass
class TransactionFilterByInputObject(JsonModel):
    input_object: str = _json("InputObject", default="")


@dataclass
class TransactionFilterByChangedObjectFilter(JsonModel):
    changed_object: str = _json("ChangedObject", default="")


@dataclass
class MoveFunction(JsonModel):
    package: str = _json("package", default="")
    module: Optional[str] = _json("module", default=None)
    function: Optional[str] = _json("function", default=None)


@dataclass
class TransactionFilterByMoveFunction(JsonModel):
    move_function: MoveFunction = _json("MoveFunction", default_factory=MoveFunction)


@dataclass
class SuiXSubscribeTransactionsRequest(JsonModel):
    transaction_filter: Any = _json("filter", default=None)


@dataclass
class SuiXQueryTransactionBlocksRequest(JsonModel):
    sui_transaction_block_response_query: SuiTransactionBlockResponseQuery = _json(
        "SuiTransactionBlockResponseQuery", default_factory=SuiTransactionBlockResponseQuery
    )
    cursor: Any = _json("cursor", default=None)
    limit: int = _json("limit", default=0)
    descending_order: bool = _json("descendingOrder", default=False)

    def __post_init__(self) -> None:
        _check_limit(self.limit)


@dataclass
class SuiXQueryTransactionBlocksResponse(JsonModel):
    data: List[SuiTransactionBlockResponse] = _json("data", default_factory=list)
    next_cursor: str = _json("nextCursor", default="")
    has_next_page: bool = _json("hasNextPage", default=False)


@dataclass
class SuiDryRunTransactionBlockRequest(JsonModel):
    tx_bytes: str = _json("txBytes", default="")


@dataclass
class SuiDevInspectTransactionBlockRequest(JsonModel):
    sender: str = _json("sender", default="")
    tx_bytes: str = _json("txBytes", default="")
    gas_price: str = _json("gasPrice", omitempty=True, default="")
    epoch: str = _json("epoch", omitempty=True, default="")


@dataclass
class SuiXSubscribeEventsRequest(JsonModel):
    sui_event_filter: Any = _json("suiEventFilter", default=None)