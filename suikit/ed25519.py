"""Ed25519 public keys and personal message verification."""

import hashlib
from dataclasses import dataclass
from typing import Tuple

from suikit.bcs.b64 import to_base64
from suikit.constants import IntentScope
from suikit.models.signature import verify_message as _verify_intent_message

__all__ = ["Ed25519PublicKey", "verify_message", "ed25519_public_key_to_sui_address"]

_ED25519_FLAG = 0x00


def verify_message(message: str, signature: str, scope: IntentScope) -> Tuple[str, bool]:
    """Verify a base64 message against a serialized ed25519 signature.

    Returns the signer's address and whether the signature is valid.
    """
    return _verify_intent_message(message, signature, scope)


def ed25519_public_key_to_sui_address(pub_key: bytes) -> str:
    """Derive the address of an ed25519 public key."""
    digest = hashlib.blake2b(bytes([_ED25519_FLAG]) + bytes(pub_key), digest_size=32)
    return "0x" + digest.hexdigest()[:64]


@dataclass(frozen=True)
class Ed25519PublicKey:
    """An ed25519 public key given by its raw bytes."""

    data: bytes

    def verify_personal_message(self, message: bytes, signature: bytes) -> bool:
        """Check a raw serialized signature over a personal message."""
        _, passed = verify_message(
            to_base64(bytes(message)),
            to_base64(bytes(signature)),
            IntentScope.PERSONAL_MESSAGE,
        )
        return passed