import hashlib

import pytest
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from suikit.bcs.b64 import from_base64, to_base64
from suikit.errors import BcsError, SuiError
from suikit.models.signature import (
    Base64Data,
    HexData,
    SigFlag,
    SigScheme,
    ed25519_public_key_to_sui_address,
    from_serialized_signature,
    message_with_intent,
    parse_signature_scheme,
    sign_serialized,
    to_serialized_signature,
    verify_personal_message,
    verify_transaction,
)

MESSAGE = "123456 is the thing that you need to sign"
SIGNATURE = (
    "AIjj13rXd9GFZRNPd4XNUvthHMHg5bovf8/mW4a7EYAWC6mQtAAaa0tSPhk6YpNED34/qeaCYwnN1QAsKm253gfQ6i6f"
    "ULpM+uscFuJIXoTT/JQvMo3CUlLODcGxPkUbHg=="
)
SIGNER = "0x00dccd645260cfe9145bdabb7b45b42e188af8661086aa7bb2e7f3adc1cd2785"


def _key():
    return Ed25519PrivateKey.from_private_bytes(bytes(range(32)))


def _public_bytes(key):
    return key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)


def test_verify_personal_message():
    signer, passed = verify_personal_message(MESSAGE, SIGNATURE)
    assert signer == SIGNER
    assert passed is True


def test_verify_personal_message_bytes():
    assert verify_personal_message(MESSAGE.encode(), SIGNATURE) == (SIGNER, True)


def test_tampered_message_fails():
    signer, passed = verify_personal_message(MESSAGE + "!", SIGNATURE)
    assert signer == SIGNER
    assert passed is False


def test_personal_signature_is_not_a_transaction_signature():
    _, passed = verify_transaction(to_base64(MESSAGE.encode()), SIGNATURE)
    assert passed is False


def test_signer_matches_public_key_address():
    pair = from_serialized_signature(SIGNATURE)
    assert ed25519_public_key_to_sui_address(pair.pub_key) == SIGNER


def test_from_serialized_signature_parts():
    pair = from_serialized_signature(SIGNATURE)
    raw = from_base64(SIGNATURE)
    assert pair.signature_scheme == SigScheme.ED25519
    assert pair.signature == raw[1:-32]
    assert pair.pub_key == raw[-32:]


def test_serialized_signature_round_trip():
    signature = bytes(range(64))
    pub_key = bytes(range(100, 132))
    serialized = to_serialized_signature(signature, pub_key)
    assert from_base64(serialized)[0] == SigFlag.ED25519
    pair = from_serialized_signature(serialized)
    assert pair.signature == signature
    assert pair.pub_key == pub_key


def test_empty_signature_raises():
    with pytest.raises(SuiError):
        from_serialized_signature("")


def test_short_signature_raises():
    with pytest.raises(SuiError):
        from_serialized_signature(to_base64(b"\x00\x01"))


def test_invalid_base64_signature_raises():
    with pytest.raises(BcsError):
        from_serialized_signature("not base64!")


@pytest.mark.parametrize(
    "flag, scheme",
    [(0, "ED25519"), (1, "Secp256k1"), (2, "Secp256r1"), (3, "MultiSig"), (5, "ZkLogin"), (4, "ED25519")],
)
def test_parse_signature_scheme(flag, scheme):
    assert parse_signature_scheme(flag) == scheme


def test_message_with_intent():
    assert message_with_intent(b"abc") == b"\x00\x00\x00abc"


def test_sign_serialized_produces_valid_signature():
    key = _key()
    tx = to_base64(b"tx-bytes")
    signed = sign_serialized(tx, key)
    assert signed.tx_bytes == tx
    pair = from_serialized_signature(signed.signature)
    assert pair.signature_scheme == "ED25519"
    assert pair.pub_key == _public_bytes(key)
    digest = hashlib.blake2b(message_with_intent(b"tx-bytes"), digest_size=32).digest()
    key.public_key().verify(pair.signature, digest)


def test_sign_serialized_accepts_raw_keys():
    key = _key()
    tx = to_base64(b"tx-bytes")
    expected = sign_serialized(tx, key)
    seed = bytes(range(32))
    assert sign_serialized(tx, seed) == expected
    assert sign_serialized(tx, seed + _public_bytes(key)) == expected


def test_sign_serialized_rejects_bad_key_length():
    with pytest.raises(ValueError):
        sign_serialized(to_base64(b"tx"), b"\x01\x02")


def test_hex_data_from_string():
    assert HexData.from_string("0x0aff").data == bytes([0x0A, 0xFF])
    assert HexData.from_string("0X0aff") == HexData.from_string("0aff")


def test_hex_data_invalid():
    with pytest.raises(ValueError):
        HexData.from_string("0xzz")


def test_base64_data():
    assert Base64Data.from_string(to_base64(b"payload")).data == b"payload"
    with pytest.raises(ValueError):
        Base64Data.from_string("%%%")