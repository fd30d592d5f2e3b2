from dataclasses import dataclass, field
from typing import Dict, List, Optional

import pytest

from suikit.bcs.b64 import to_base64
from suikit.errors import InvalidJsonError
from suikit.models.base import (
    FaucetCoinInfo,
    FaucetFixedAmountRequest,
    FaucetRequest,
    JsonModel,
    JsonRPCRequest,
    SuiKeyPair,
    TransactionDigest,
)


@dataclass
class Inner(JsonModel):
    object_id: str = field(default="", metadata={"json": "objectId"})


@dataclass
class Outer(JsonModel):
    inner: Inner = field(default_factory=Inner, metadata={"inline": True})
    note: str = field(default="", metadata={"omitempty": True})
    blob: bytes = b""
    digest: TransactionDigest = TransactionDigest("")
    children: List[Inner] = field(default_factory=list)
    extra: Dict[str, int] = field(default_factory=dict)
    parent: Optional[Inner] = None


def test_json_rpc_request_keys():
    request = JsonRPCRequest(id=1, method="sui_getObject", params=["0x6"])
    assert request.to_dict() == {
        "jsonrpc": "2.0",
        "id": 1,
        "method": "sui_getObject",
        "params": ["0x6"],
    }


def test_json_rpc_request_round_trip():
    request = JsonRPCRequest(id=7, method="m", params=[{"a": 1}])
    assert JsonRPCRequest.from_json(request.to_json()) == request


def test_faucet_request_uses_source_key():
    request = FaucetRequest(FaucetFixedAmountRequest(recipient="0xabc"))
    assert request.to_dict() == {"FixedAmountRequest": {"recipient": "0xabc"}}


def test_keys_match_case_insensitively():
    request = FaucetRequest.from_dict({"fixedamountrequest": {"Recipient": "0xabc"}})
    assert request.fixed_amount_request.recipient == "0xabc"


def test_faucet_coin_info_round_trip():
    info = FaucetCoinInfo(amount=10, id="0x1", transfer_tx_digest="digest")
    data = info.to_dict()
    assert data["transferTxDigest"] == "digest"
    assert FaucetCoinInfo.from_dict(data) == info


def test_missing_keys_give_defaults():
    assert FaucetCoinInfo.from_dict({}) == FaucetCoinInfo()


def test_type_mismatch_raises():
    with pytest.raises(InvalidJsonError):
        FaucetCoinInfo.from_dict({"amount": "ten"})


def test_bool_is_not_an_int():
    with pytest.raises(InvalidJsonError):
        FaucetCoinInfo.from_dict({"amount": True})


def test_invalid_json_text_raises():
    with pytest.raises(InvalidJsonError):
        FaucetCoinInfo.from_json("{not json")


def test_non_object_json_raises():
    with pytest.raises(InvalidJsonError):
        FaucetCoinInfo.from_json("[1, 2]")


def test_omitempty_and_inline():
    data = JsonModel.to_dict(Outer(inner=Inner("0x5")))
    assert "note" not in data
    assert data["objectId"] == "0x5"
    assert "inner" not in data


def test_omitempty_keeps_set_values():
    assert JsonModel.to_dict(Outer(note="kept"))["note"] == "kept"


def test_bytes_are_base64():
    outer = Outer(blob=b"\x00\x01\xff")
    assert outer.to_dict()["blob"] == to_base64(b"\x00\x01\xff")


def test_nested_round_trip():
    outer = Outer(
        inner=Inner("0x1"),
        note="n",
        blob=b"data",
        digest=TransactionDigest("D1"),
        children=[Inner("0x2"), Inner("0x3")],
        extra={"a": 1},
        parent=Inner("0x4"),
    )
    assert Outer.from_json(outer.to_json()) == outer


def test_null_gives_zero_value():
    assert FaucetRequest.from_dict({"FixedAmountRequest": None}).fixed_amount_request is None
    assert FaucetCoinInfo.from_dict({"id": None, "amount": None}) == FaucetCoinInfo()

    outer = Outer.from_dict({"children": None, "parent": None, "digest": None})
    assert outer.children == []
    assert outer.parent is None
    assert outer.digest == ""


def test_key_pair_repr_hides_private_key():
    pair = SuiKeyPair(flag=0, address="0x1", public_key=b"pk", public_key_base64="cGs=",
                      private_key=b"placeholder")
    assert "placeholder" not in repr(pair)
    assert pair.private_key == b"placeholder"