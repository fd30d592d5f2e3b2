"""Key pairs stored as base64 keystore entries and their addresses."""

import hashlib
from enum import IntEnum
from typing import Union

from suikit.bcs.b64 import from_base64, to_base64
from suikit.errors import InvalidEncryptFlagError, SuiError
from suikit.models.base import SuiKeyPair

ERROR_FLAG = 0xFF

ED25519_PUBLIC_KEY_LENGTH = 32
SECP256K1_PUBLIC_KEY_LENGTH = 33

DEFAULT_ACCOUNT_ADDRESS_LENGTH = 16
ACCOUNT_ADDRESS_20_LENGTH = 20
ACCOUNT_ADDRESS_32_LENGTH = 32


class KeyPairFlag(IntEnum):
    """Flag byte that leads a keystore entry."""

    ED25519 = 0
    SECP256K1 = 1


_PUBLIC_KEY_LENGTHS = {
    KeyPairFlag.ED25519: ED25519_PUBLIC_KEY_LENGTH,
    KeyPairFlag.SECP256K1: SECP256K1_PUBLIC_KEY_LENGTH,
}


def _flag(value: int) -> KeyPairFlag:
    try:
        return KeyPairFlag(value)
    except ValueError:
        raise InvalidEncryptFlagError() from None


def public_key_to_address(public_key: bytes, scheme: Union[int, KeyPairFlag]) -> str:
    """Address of a public key: SHA3-256 over the flag byte and the key."""
    flag = _flag(scheme)
    digest = hashlib.sha3_256(bytes([flag]) + bytes(public_key)).hexdigest()
    return "0x" + digest[: ACCOUNT_ADDRESS_32_LENGTH * 2]


def fetch_key_pair(value: str) -> SuiKeyPair:
    """Read a base64 keystore entry: flag byte, public key, private key."""
    raw = from_base64(value)
    if not raw:
        raise SuiError("empty key pair value")
    flag = _flag(raw[0])
    length = _PUBLIC_KEY_LENGTHS[flag]
    if len(raw) < 1 + length:
        raise SuiError("key pair value is too short")
    public_key = raw[1 : 1 + length]
    return SuiKeyPair(
        flag=int(flag),
        address=public_key_to_address(public_key, flag),
        public_key=public_key,
        public_key_base64=to_base64(public_key),
        private_key=raw[1 + length :],
    )