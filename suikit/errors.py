"""Exception hierarchy of the package."""

from typing import Optional


class SuiError(Exception):
    """Base class of every error raised by the package."""

    default_message = "sui error"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)


class BcsError(SuiError, ValueError):
    """Raised when a value cannot be BCS encoded or decoded."""

    default_message = "bcs error"


class InvalidJsonError(SuiError):
    default_message = "invalid json response"


class UnknownSignatureSchemeError(SuiError):
    default_message = "unknown scheme sign scheme flag"


class InvalidEncryptFlagError(SuiError):
    default_message = "invalid encrypt flag"


class NoKeyStoreInfoError(SuiError):
    default_message = "no keystore info, make sure already loaded sui.keystore"


class AddressNotInKeyStoreError(SuiError):
    default_message = "address not in keystore, make sure already loaded sui.keystore"


class InvalidAddressError(SuiError):
    default_message = "invalid address"