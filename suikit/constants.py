"""Intent scopes and network identifiers."""

from enum import IntEnum


class IntentScope(IntEnum):
    """Scope byte that prefixes every signed intent message."""

    TRANSACTION_DATA = 0
    TRANSACTION_EFFECTS = 1
    CHECKPOINT_SUMMARY = 2
    PERSONAL_MESSAGE = 3


FAUCET_LOCALNET_ENDPOINT = "http://127.0.0.1:9123/gas"

SUI_MAINNET = "mainnet"
SUI_TESTNET = "testnet"
SUI_DEVNET = "devnet"
SUI_LOCALNET = "localnet"