"""Parsing of serialized signatures by their scheme flag."""

from dataclasses import dataclass

from suikit.bcs.b64 import from_base64
from suikit.errors import SuiError, UnknownSignatureSchemeError
from suikit.scheme import SignatureScheme

_SIMPLE_SCHEMES = (
    SignatureScheme.ED25519,
    SignatureScheme.SECP256K1,
    SignatureScheme.SECP256R1,
)


@dataclass(frozen=True)
class SchemeSignaturePair:
    signature_scheme: SignatureScheme
    signature: bytes
    pub_key: bytes


def parse_serialized_signature(serialized_signature: str) -> SchemeSignaturePair:
    """Split base64 ``flag || signature || public key`` into its parts."""
    if not serialized_signature:
        raise SuiError("multiSig is not supported")
    data = from_base64(serialized_signature)
    if not data:
        raise SuiError("empty serialized signature")
    scheme = SignatureScheme.from_flag(data[0])
    if scheme is SignatureScheme.ZKLOGIN:
        raise SuiError("zkLogin signatures are not supported")
    if scheme not in _SIMPLE_SCHEMES:
        raise UnknownSignatureSchemeError("signature scheme is not supported")
    size = scheme.size()
    if len(data) < 1 + size:
        raise SuiError("serialized signature is too short")
    split = len(data) - size
    return SchemeSignaturePair(
        signature_scheme=scheme,
        signature=data[1:split],
        pub_key=data[split:],
    )