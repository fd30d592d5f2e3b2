"""Serialized signatures: building, parsing and ed25519 verification."""

import binascii
import hashlib
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional, Tuple, Union

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey, Ed25519PublicKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from suikit.bcs.b64 import from_base64, to_base64
from suikit.bcs.encoding import marshal
from suikit.constants import IntentScope
from suikit.errors import SuiError
from suikit.models.base import JsonModel
from suikit.models.intent import new_message_with_intent

INTENT_BYTES = bytes([0, 0, 0])
ED25519_PUBLIC_KEY_LENGTH = 32


class SigScheme(str, Enum):
    ED25519 = "ED25519"
    SECP256K1 = "Secp256k1"


class SigFlag(IntEnum):
    ED25519 = 0x00
    SECP256K1 = 0x01


@dataclass(frozen=True)
class HexData:
    data: bytes

    @classmethod
    def from_string(cls, value: str) -> "HexData":
        """Parse hex text, with or without a 0x prefix."""
        if value.startswith(("0x", "0X")):
            value = value[2:]
        try:
            return cls(binascii.unhexlify(value))
        except binascii.Error as err:
            raise ValueError(f"invalid hex data: {err}") from err


@dataclass(frozen=True)
class Base64Data:
    data: bytes

    @classmethod
    def from_string(cls, value: str) -> "Base64Data":
        return cls(from_base64(value))


@dataclass
class ObjectRef:
    digest: str
    object_id: HexData
    version: int


@dataclass
class SignaturePubkeyPair:
    signature_scheme: str
    signature: bytes
    pub_key: bytes


@dataclass
class SignedTransaction:
    tx_bytes: str
    sig_scheme: SigScheme
    signature: Optional[Base64Data] = None
    public_key: Optional[Base64Data] = None


@dataclass
class SignedTransactionSerializedSig(JsonModel):
    tx_bytes: str = ""
    signature: str = ""


def _blake2b256(data: bytes) -> bytes:
    return hashlib.blake2b(data, digest_size=32).digest()


def _ed25519_private_key(private_key: Union[Ed25519PrivateKey, bytes]) -> Ed25519PrivateKey:
    if isinstance(private_key, Ed25519PrivateKey):
        return private_key
    raw = bytes(private_key)
    if len(raw) not in (32, 64):
        raise ValueError("ed25519 private key must be 32 or 64 bytes")
    return Ed25519PrivateKey.from_private_bytes(raw[:32])


def message_with_intent(message: bytes) -> bytes:
    """Prefix ``message`` with the transaction-data intent bytes."""
    return INTENT_BYTES + bytes(message)


def to_serialized_signature(signature: bytes, pub_key: bytes) -> str:
    """Base64 of ``flag || signature || public key`` for an ed25519 signature."""
    return to_base64(bytes([SigFlag.ED25519]) + bytes(signature) + bytes(pub_key))


def sign_serialized(
    tx_bytes: str, private_key: Union[Ed25519PrivateKey, bytes]
) -> SignedTransactionSerializedSig:
    """Sign base64 transaction bytes and return them with the serialized signature."""
    key = _ed25519_private_key(private_key)
    digest = _blake2b256(message_with_intent(from_base64(tx_bytes)))
    signature = key.sign(digest)
    public_key = key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)
    return SignedTransactionSerializedSig(
        tx_bytes=tx_bytes, signature=to_serialized_signature(signature, public_key)
    )


def parse_signature_scheme(flag: int) -> str:
    """Scheme name for a flag byte; unknown flags read as ED25519."""
    return {
        0: "ED25519",
        1: "Secp256k1",
        2: "Secp256r1",
        3: "MultiSig",
        5: "ZkLogin",
    }.get(flag, "ED25519")


def from_serialized_signature(serialized_signature: str) -> SignaturePubkeyPair:
    """Split a serialized signature with a 32-byte public key into its parts."""
    if not serialized_signature:
        raise SuiError("multiSig is not supported")
    data = from_base64(serialized_signature)
    if len(data) < 1 + ED25519_PUBLIC_KEY_LENGTH:
        raise SuiError("serialized signature is too short")
    return SignaturePubkeyPair(
        signature_scheme=parse_signature_scheme(data[0]),
        signature=data[1:-ED25519_PUBLIC_KEY_LENGTH],
        pub_key=data[-ED25519_PUBLIC_KEY_LENGTH:],
    )


def ed25519_public_key_to_sui_address(pub_key: bytes) -> str:
    """Address derived from an ed25519 public key."""
    return "0x" + _blake2b256(bytes([SigFlag.ED25519]) + bytes(pub_key)).hex()


def verify_message(message: str, signature: str, scope: int) -> Tuple[str, bool]:
    """Verify a signature over base64 ``message`` under ``scope``.

    Returns the signer's address and whether the signature is valid.
    """
    encoded = marshal(from_base64(message))
    digest = _blake2b256(new_message_with_intent(encoded, scope))
    pair = from_serialized_signature(signature)
    try:
        Ed25519PublicKey.from_public_bytes(pair.pub_key).verify(pair.signature, digest)
        passed = True
    except (InvalidSignature, ValueError):
        passed = False
    return ed25519_public_key_to_sui_address(pair.pub_key), passed


def verify_personal_message(message: Union[str, bytes], signature: str) -> Tuple[str, bool]:
    if isinstance(message, str):
        message = message.encode("utf-8")
    return verify_message(to_base64(message), signature, IntentScope.PERSONAL_MESSAGE)


def verify_transaction(b64_message: str, signature: str) -> Tuple[str, bool]:
    return verify_message(b64_message, signature, IntentScope.TRANSACTION_DATA)