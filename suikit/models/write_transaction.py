"""Requests that build, sign and execute transactions."""

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from suikit.models.base import JsonModel
from suikit.models.read_transaction import SuiTransactionBlockOptions
from suikit.models.signature import SignedTransactionSerializedSig, sign_serialized
from suikit.models.sui_types import SuiObjectRef


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


class ExecutionMode(str, Enum):
    COMMIT = "Commit"
    DEV_INSPECT = "DevInspect"


@dataclass
class MoveCallRequest(JsonModel):
    signer: str = _json("signer", default="")
    package_object_id: str = _json("packageObjectId", default="")
    module: str = _json("module", default="")
    function: str = _json("function", default="")
    type_arguments: List[Any] = _json("typeArguments", default_factory=list)
    arguments: List[Any] = _json("arguments", default_factory=list)
    gas: Optional[str] = _json("gas", default=None)
    gas_budget: str = _json("gasBudget", default="")
    execution_mode: str = _json("executionMode", default="")


@dataclass
class MoveCallResponse(JsonModel):
    gas: List[SuiObjectRef] = _json("gas", default_factory=list)
    input_objects: Any = _json("inputObjects", default=None)
    tx_bytes: str = _json("txBytes", default="")


@dataclass
class MergeCoinsRequest(JsonModel):
    signer: str = _json("signer", default="")
    primary_coin: str = _json("primaryCoin", default="")
    coin_to_merge: str = _json("coinToMerge", default="")
    gas: Optional[str] = _json("gas", default=None)
    gas_budget: str = _json("gasBudget", default="")


@dataclass
class SplitCoinRequest(JsonModel):
    signer: str = _json("signer", default="")
    coin_object_id: str = _json("coinObjectId", default="")
    split_amounts: List[str] = _json("splitAmounts", default_factory=list)
    gas: Optional[str] = _json("gas", default=None)
    gas_budget: str = _json("gasBudget", default="")


@dataclass
class SplitCoinEqualRequest(JsonModel):
    signer: str = _json("signer", default="")
    coin_object_id: str = _json("coinObjectId", default="")
    split_count: str = _json("splitCount", default="")
    gas: Optional[str] = _json("gas", default=None)
    gas_budget: str = _json("gasBudget", default="")


@dataclass
class PublishRequest(JsonModel):
    sender: str = _json("sender", default="")
    compiled_modules: List[str] = _json("compiled_modules", default_factory=list)
    dependencies: List[str] = _json("dependencies", default_factory=list)
    gas: Optional[str] = _json("gas", default=None)
    gas_budget: str = _json("gasBudget", default="")


@dataclass
class TransferObjectRequest(JsonModel):
    signer: str = _json("signer", default="")
    object_id: str = _json("objectId", default="")
    gas: Optional[str] = _json("gas", default=None)
    gas_budget: str = _json("gasBudget", default="")
    recipient: str = _json("recipient", default="")


@dataclass
class TransferSuiRequest(JsonModel):
    signer: str = _json("signer", default="")
    sui_object_id: str = _json("suiObjectId", default="")
    gas_budget: str = _json("gasBudget", default="")
    recipient: str = _json("recipient", default="")
    amount: str = _json("amount", default="")


@dataclass
class PayRequest(JsonModel):
    signer: str = _json("signer", default="")
    sui_object_id: List[str] = _json("suiObjectId", default_factory=list)
    recipient: List[str] = _json("recipient", default_factory=list)
    amount: List[str] = _json("amount", default_factory=list)
    gas: Optional[str] = _json("gas", default=None)
    gas_budget: str = _json("gasBudget", default="")


@dataclass
class PaySuiRequest(JsonModel):
    signer: str = _json("signer", default="")
    sui_object_id: List[str] = _json("suiObjectId", default_factory=list)
    recipient: List[str] = _json("recipient", default_factory=list)
    amount: List[str] = _json("amount", default_factory=list)
    gas_budget: str = _json("gasBudget", default="")


@dataclass
class PayAllSuiRequest(JsonModel):
    signer: str = _json("signer", default="")
    sui_object_id: List[str] = _json("suiObjectId", default_factory=list)
    recipient: str = _json("recipient", default="")
    gas_budget: str = _json("gasBudget", default="")


@dataclass
class AddStakeRequest(JsonModel):
    signer: str = _json("signer", default="")
    coins: List[str] = _json("coins", default_factory=list)
    amount: str = _json("amount", default="")
    validator: str = _json("validator", default="")
    gas: Optional[str] = _json("gas", default=None)
    gas_budget: str = _json("gasBudget", default="")


@dataclass
class WithdrawStakeRequest(JsonModel):
    signer: str = _json("signer", default="")
    staked_object_id: str = _json("stakedObjectId", default="")
    gas: Optional[str] = _json("gas", default=None)
    gas_budget: str = _json("gasBudget", default="")


@dataclass
class TxnMetaData(JsonModel):
    gas: List[SuiObjectRef] = _json("gas", default_factory=list)
    input_objects: List[Any] = _json("inputObjects", default_factory=list)
    tx_bytes: str = _json("txBytes", default="")

    def sign_serialized_sig_with(
        self, private_key: Union[Ed25519PrivateKey, bytes]
    ) -> SignedTransactionSerializedSig:
        """Sign the transaction bytes with an ed25519 key."""
        return sign_serialized(self.tx_bytes, private_key)


@dataclass
class RPCTransactionRequestParams(JsonModel):
    move_call_request_params: Optional[MoveCallRequest] = _json(
        "moveCallRequestParams", omitempty=True, default=None
    )
    transfer_object_request_params: Optional[TransferObjectRequest] = _json(
        "transferObjectRequestParams", omitempty=True, default=None
    )


@dataclass
class BatchTransactionRequest(JsonModel):
    signer: str = _json("signer", default="")
    rpc_transaction_request_params: List[RPCTransactionRequestParams] = _json(
        "RPCTransactionRequestParams", default_factory=list
    )
    gas: Optional[str] = _json("gas", default=None)
    gas_budget: str = _json("gasBudget", default="")
    sui_transaction_block_builder_mode: str = _json(
        "suiTransactionBlockBuilderMode", default=""
    )


@dataclass
class BatchTransactionResponse(JsonModel):
    gas: List[SuiObjectRef] = _json("gas", default_factory=list)
    input_objects: List[Any] = _json("inputObjects", default_factory=list)
    tx_bytes: str = _json("txBytes", default="")


@dataclass
class SuiExecuteTransactionBlockRequest(JsonModel):
    tx_bytes: str = _json("txBytes", default="")
    signature: List[str] = _json("signature", default_factory=list)
    options: SuiTransactionBlockOptions = _json(
        "options", default_factory=SuiTransactionBlockOptions
    )
    request_type: str = _json("requestType", default="")


@dataclass
class SignAndExecuteTransactionBlockRequest:
    """Transaction data together with the key that signs it before execution."""

    txn_meta_data: TxnMetaData
    private_key: Union[Ed25519PrivateKey, bytes]
    options: SuiTransactionBlockOptions = dataclasses.field(
        default_factory=SuiTransactionBlockOptions
    )
    request_type: str = ""