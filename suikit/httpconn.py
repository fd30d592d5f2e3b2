"""JSON-RPC over HTTP."""

import time
from dataclasses import dataclass, field
from typing import Any, List, Optional

import httpx

from suikit.models.base import JsonRPCRequest

DEFAULT_TIMEOUT = 5.0


@dataclass
class Operation:
    method: str
    params: List[Any] = field(default_factory=list)


class HttpConn:
    """Posts JSON-RPC requests to one endpoint and returns the raw replies."""

    def __init__(self, rpc_url: str, client: Optional[httpx.Client] = None) -> None:
        self.rpc_url = rpc_url
        self.timeout = DEFAULT_TIMEOUT
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=DEFAULT_TIMEOUT)

    def request(self, op: Operation) -> bytes:
        """Send ``op`` and return the response body, whatever its status."""
        payload = JsonRPCRequest(
            id=int(time.time() * 1000),
            method=op.method,
            params=list(op.params),
        )
        response = self._client.post(
            self.rpc_url,
            content=payload.to_json().encode("utf-8"),
            headers={"Content-Type": "application/json"},
        )
        return response.content

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpConn":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()