import pytest

from suikit.bcs.b64 import from_base64, to_base64
from suikit.constants import IntentScope
from suikit.ed25519 import Ed25519PublicKey, ed25519_public_key_to_sui_address, verify_message
from suikit.errors import SuiError

MESSAGE = "123456 is the thing that you need to sign"
SIGNATURE = (
    "AIjj13rXd9GFZRNPd4XNUvthHMHg5bovf8/mW4a7EYAWC6mQtAAaa0tSPhk6YpNED34/"
    "qeaCYwnN1QAsKm253gfQ6i6fULpM+uscFuJIXoTT/JQvMo3CUlLODcGxPkUbHg=="
)
SIGNER = "0x00dccd645260cfe9145bdabb7b45b42e188af8661086aa7bb2e7f3adc1cd2785"


def _key() -> Ed25519PublicKey:
    return Ed25519PublicKey(from_base64(SIGNATURE)[-32:])


def test_verify_personal_message_passes():
    assert _key().verify_personal_message(MESSAGE.encode(), from_base64(SIGNATURE)) is True


def test_verify_personal_message_fails_on_other_message():
    assert _key().verify_personal_message(b"something else", from_base64(SIGNATURE)) is False


def test_verify_message_returns_signer():
    signer, passed = verify_message(
        to_base64(MESSAGE.encode()), SIGNATURE, IntentScope.PERSONAL_MESSAGE
    )
    assert signer == SIGNER
    assert passed is True


def test_wrong_scope_fails():
    _, passed = verify_message(
        to_base64(MESSAGE.encode()), SIGNATURE, IntentScope.TRANSACTION_DATA
    )
    assert passed is False


def test_address_from_public_key():
    assert ed25519_public_key_to_sui_address(_key().data) == SIGNER


def test_short_signature_raises():
    with pytest.raises(SuiError):
        _key().verify_personal_message(MESSAGE.encode(), bytes(4))