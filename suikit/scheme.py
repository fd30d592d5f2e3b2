"""Signature schemes, their flag bytes and public key sizes."""

from enum import Enum

from suikit.errors import UnknownSignatureSchemeError


class SignatureScheme(str, Enum):
    ED25519 = "ED25519"
    SECP256K1 = "Secp256k1"
    SECP256R1 = "Secp256r1"
    MULTISIG = "MultiSig"
    ZKLOGIN = "ZkLogin"

    @classmethod
    def from_flag(cls, flag: int) -> "SignatureScheme":
        """Return the scheme identified by a serialized-signature flag byte."""
        for scheme, scheme_flag in _FLAGS.items():
            if scheme_flag == flag:
                return scheme
        raise UnknownSignatureSchemeError("signature flag is not supported")

    def flag(self) -> int:
        """The flag byte that identifies this scheme."""
        return _FLAGS[self]

    def size(self) -> int:
        """Length in bytes of a public key of this scheme."""
        try:
            return _SIZES[self]
        except KeyError:
            raise UnknownSignatureSchemeError("signature scheme is not supported") from None


_FLAGS = {
    SignatureScheme.ED25519: 0x00,
    SignatureScheme.SECP256K1: 0x01,
    SignatureScheme.SECP256R1: 0x02,
    SignatureScheme.MULTISIG: 0x03,
    SignatureScheme.ZKLOGIN: 0x05,
}

_SIZES = {
    SignatureScheme.ED25519: 32,
    SignatureScheme.SECP256K1: 33,
    SignatureScheme.SECP256R1: 33,
}