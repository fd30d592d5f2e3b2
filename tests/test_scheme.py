import pytest

from suikit.errors import UnknownSignatureSchemeError
from suikit.scheme import SignatureScheme


@pytest.mark.parametrize("scheme", list(SignatureScheme))
def test_flag_round_trip(scheme):
    assert SignatureScheme.from_flag(scheme.flag()) is scheme


def test_known_flags():
    assert SignatureScheme.from_flag(0) is SignatureScheme.ED25519
    assert SignatureScheme.from_flag(1) is SignatureScheme.SECP256K1
    assert SignatureScheme.from_flag(5) is SignatureScheme.ZKLOGIN
    assert SignatureScheme.ZKLOGIN.flag() == 0x05
    assert SignatureScheme.MULTISIG.flag() == 0x03


def test_unknown_flag_raises():
    with pytest.raises(UnknownSignatureSchemeError):
        SignatureScheme.from_flag(4)


def test_sizes():
    assert SignatureScheme.ED25519.size() == 32
    assert SignatureScheme.SECP256K1.size() == 33
    assert SignatureScheme.SECP256R1.size() == 33


@pytest.mark.parametrize("scheme", [SignatureScheme.MULTISIG, SignatureScheme.ZKLOGIN])
def test_size_unsupported(scheme):
    with pytest.raises(UnknownSignatureSchemeError):
        scheme.size()


def test_values_are_wire_names():
    assert SignatureScheme("Secp256r1") is SignatureScheme.SECP256R1
    assert SignatureScheme.ED25519 == "ED25519"