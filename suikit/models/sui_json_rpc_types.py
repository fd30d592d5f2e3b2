"""Transaction, effect, event and Move module shapes returned by the RPC."""

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Dict, List

from suikit.models.base import JsonModel
from suikit.models.sui_types import Owner, SuiObjectRef


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
    return field(default=default, default_factory=default_factory, metadata=metadata)


@dataclass
class SuiParsedPublishResponse(JsonModel):
    package: SuiObjectRef = _json("package", default_factory=SuiObjectRef)


@dataclass
class SuiParsedMergeCoinResponse(JsonModel):
    pass


@dataclass
class SuiParsedSplitCoinResponse(JsonModel):
    pass


@dataclass
class SuiParsedTransactionResponse(JsonModel):
    publish: SuiParsedPublishResponse = _json(
        "publish", omitempty=True, default_factory=SuiParsedPublishResponse
    )
    merge_coin: SuiParsedMergeCoinResponse = _json(
        "mergeCoin", omitempty=True, default_factory=SuiParsedMergeCoinResponse
    )
    split_coin: SuiParsedSplitCoinResponse = _json(
        "splitCoin", omitempty=True, default_factory=SuiParsedSplitCoinResponse
    )


@dataclass
class TransferObject(JsonModel):
    recipient: str = _json("recipient", omitempty=True, default="")
    object_ref: SuiObjectRef = _json("objectRef", omitempty=True, default_factory=SuiObjectRef)


@dataclass
class Publish(JsonModel):
    modules: List[bytes] = _json("modules", omitempty=True, default_factory=list)


@dataclass
class Call(JsonModel):
    package: SuiObjectRef = _json("package", default_factory=SuiObjectRef)
    module: str = _json("module", default="")
    function: str = _json("function", default="")
    type_arguments: List[Any] = _json("typeArguments", default_factory=list)
    arguments: List[Any] = _json("arguments", default_factory=list)


@dataclass
class TransferSui(JsonModel):
    recipient: str = _json("recipient", omitempty=True, default="")
    amount: int = _json("amount", omitempty=True, default=0)


@dataclass
class ChangeEpoch(JsonModel):
    epoch: int = _json("epoch", default=0)
    storage_charge: int = _json("storageCharge", default=0)
    computation_charge: int = _json("computationCharge", default=0)


@dataclass
class SuiTransactionKind(JsonModel):
    transfer_object: TransferObject = _json(
        "transferObject", omitempty=True, default_factory=TransferObject
    )
    publish: Publish = _json("publish", omitempty=True, default_factory=Publish)
    call: Call = _json("call", omitempty=True, default_factory=Call)
    transfer_sui: TransferSui = _json("transferSui", omitempty=True, default_factory=TransferSui)
    change_epoch: ChangeEpoch = _json("changeEpoch", omitempty=True, default_factory=ChangeEpoch)


@dataclass
class SuiTransactionData(JsonModel):
    transactions: List[SuiTransactionKind] = _json(
        "transactions", omitempty=True, default_factory=list
    )
    sender: str = _json("sender", omitempty=True, default="")
    gas_payment: SuiObjectRef = _json("gasPayment", omitempty=True, default_factory=SuiObjectRef)
    gas_budget: int = _json("gasBudget", omitempty=True, default=0)


@dataclass
class AuthorityQuorumSignInfo(JsonModel):
    epoch: int = _json("epoch", omitempty=True, default=0)
    signature: List[str] = _json("signature", omitempty=True, default_factory=list)
    signers_map: List[int] = _json("signers_map", omitempty=True, default_factory=list)


@dataclass
class SuiCertifiedTransaction(JsonModel):
    transaction_digest: str = _json("transactionDigest", omitempty=True, default="")
    data: SuiTransactionData = _json("data", omitempty=True, default_factory=SuiTransactionData)
    tx_signature: str = _json("txSignature", omitempty=True, default="")
    auth_sign_info: AuthorityQuorumSignInfo = _json(
        "authSignInfo", omitempty=True, default_factory=AuthorityQuorumSignInfo
    )


@dataclass
class SuiGasCostSummary(JsonModel):
    computation_cost: int = _json("computationCost", default=0)
    storage_cost: int = _json("storageCost", default=0)
    storage_rebate: int = _json("storageRebate", default=0)


@dataclass
class SuiExecutionStatus(JsonModel):
    status: str = _json("status", default="")


@dataclass
class OwnedObjectRef(JsonModel):
    owner: Owner = _json("owner", omitempty=True, default_factory=Owner)
    reference: SuiObjectRef = _json("reference", omitempty=True, default_factory=SuiObjectRef)


@dataclass
class MoveEvent(JsonModel):
    package_id: str = _json("packageID", omitempty=True, default="")


@dataclass
class SuiEvent(JsonModel):
    move_event: MoveEvent = _json("moveEvent", omitempty=True, default_factory=MoveEvent)
    publish: Publish = _json("publish", omitempty=True, default_factory=Publish)


@dataclass
class SuiTransactionEffects(JsonModel):
    status: SuiExecutionStatus = _json("status", default_factory=SuiExecutionStatus)
    gas_used: SuiGasCostSummary = _json("gasUsed", default_factory=SuiGasCostSummary)
    share_objects: List[SuiObjectRef] = _json("shareObjects", omitempty=True, default_factory=list)
    transaction_digest: str = _json("transactionDigest", default="")
    created: List[OwnedObjectRef] = _json("created", omitempty=True, default_factory=list)
    mutated: List[OwnedObjectRef] = _json("mutated", omitempty=True, default_factory=list)
    unwrapped: List[OwnedObjectRef] = _json("unwrapped", omitempty=True, default_factory=list)
    deleted: List[SuiObjectRef] = _json("deleted", omitempty=True, default_factory=list)
    wrapped: List[SuiObjectRef] = _json("wrapped", omitempty=True, default_factory=list)
    gas_object: OwnedObjectRef = _json("gasObject", omitempty=True, default_factory=OwnedObjectRef)
    events: List[SuiEvent] = _json("events", omitempty=True, default_factory=list)
    dependencies: List[str] = _json("dependencies", omitempty=True, default_factory=list)


@dataclass
class SuiParsedMoveObject(JsonModel):
    data_type: str = _json("dataType", default="")
    type_: str = _json("type", default="")
    has_public_transfer: bool = _json("has_public_transfer", default=False)
    fields: Dict[str, Any] = _json("fields", default_factory=dict)
    bcs_bytes: bytes = _json("bcs_bytes", omitempty=True, default=b"")


@dataclass
class SuiObjectInfo(JsonModel):
    owned_object_ref: OwnedObjectRef = _json("owner", default_factory=OwnedObjectRef)


@dataclass
class SuiEventEnvelop(JsonModel):
    timestamp: int = _json("timestamp", default=0)
    tx_digest: str = _json("txDigest", omitempty=True, default="")
    event: SuiEvent = field(default_factory=SuiEvent, metadata={"inline": True})


@dataclass
class SuiMoveModuleId(JsonModel):
    address: str = _json("address", default="")
    name: str = _json("name", default="")


@dataclass
class SuiMoveNormalizedModule(JsonModel):
    file_format_version: int = _json("fileFormatVersion", default=0)
    address: str = _json("address", default="")
    name: str = _json("name", default="")
    friends: List[SuiMoveModuleId] = _json("friends", default_factory=list)
    structs: Dict[str, Any] = _json("structs", default_factory=dict)
    exposed_functions: Dict[str, Any] = _json("exposedFunctions", default_factory=dict)


@dataclass
class SuiMoveNormalizedStruct(JsonModel):
    abilities: Any = _json("abilities", default=None)
    type_parameters: List[Any] = _json("typeParameters", default_factory=list)
    fields: List[Any] = _json("fields", default_factory=list)


@dataclass
class SuiMoveNormalizedFunction(JsonModel):
    visibility: Any = _json("visibility", default=None)
    is_entry: bool = _json("isEntry", default=False)
    parameters: List[Any] = _json("parameters", default_factory=list)
    return_: List[Any] = _json("return_", default_factory=list)