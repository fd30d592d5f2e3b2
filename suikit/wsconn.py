"""JSON-RPC subscriptions over a websocket."""

import json
import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

import websocket

from suikit.errors import InvalidJsonError, SuiError
from suikit.models.base import JsonModel, JsonRPCRequest

log = logging.getLogger(__name__)


@dataclass
class CallOp:
    method: str
    params: List[Any] = field(default_factory=list)


@dataclass
class SubscriptionResp(JsonModel):
    jsonrpc: str = ""
    result: int = 0
    id: int = 0


class WsConn:
    """A websocket connection that opens subscriptions and streams messages."""

    def __init__(self, ws_url: str, connection: Any = None) -> None:
        self.ws_url = ws_url
        self.conn = connection if connection is not None else websocket.create_connection(ws_url)
        self.reader: Optional[threading.Thread] = None

    def call(self, op: CallOp, receive: Callable[[bytes], Any]) -> SubscriptionResp:
        """Subscribe with ``op`` and feed every later text message to ``receive``.

        Messages are read on a daemon thread until the connection fails.
        """
        request = JsonRPCRequest(
            id=int(time.time() * 1000), method=op.method, params=list(op.params)
        )
        self.conn.send(request.to_json())
        reply = self.conn.recv()
        try:
            data = json.loads(reply)
        except (json.JSONDecodeError, UnicodeDecodeError, TypeError) as err:
            raise InvalidJsonError(f"invalid json response: {err}") from err
        if isinstance(data, dict) and "error" in data:
            error = data["error"]
            raise SuiError(error if isinstance(error, str) else json.dumps(error))
        response = SubscriptionResp.from_dict(data)
        log.info(
            "establish successfully, subscriptionID: %d, Waiting to accept data...",
            response.result,
        )
        self.reader = threading.Thread(target=self._read_loop, args=(receive,), daemon=True)
        self.reader.start()
        return response

    def _read_loop(self, receive: Callable[[bytes], Any]) -> None:
        while True:
            try:
                opcode, data = self.conn.recv_data()
            except (websocket.WebSocketException, OSError) as err:
                log.info("websocket read stopped: %s", err)
                return
            if opcode == websocket.ABNF.OPCODE_TEXT:
                receive(data)

    def close(self) -> None:
        self.conn.close()

    def __enter__(self) -> "WsConn":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()