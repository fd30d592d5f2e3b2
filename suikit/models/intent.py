"""Intent prefixes for messages that are signed."""

from enum import IntEnum
from typing import List


class AppId(IntEnum):
    SUI = 0


class IntentVersion(IntEnum):
    V0 = 0


def intent_with_scope(scope: int) -> List[int]:
    """The three intent bytes for ``scope`` as integers."""
    return [int(scope), int(IntentVersion.V0), int(AppId.SUI)]


def new_message_with_intent(message: bytes, scope: int) -> bytes:
    """Prefix ``message`` with the intent bytes for ``scope``."""
    return bytes(intent_with_scope(scope)) + bytes(message)