"""Lightweight JSON-RPC log source for Ethereum-compatible nodes.

This module provides:
- `RPC`: an async client with sane timeouts/connection limits
- Helper utilities to format block numbers and topics

HTTP transport is entirely `httpx`; this module only builds the
`eth_getLogs`/`eth_blockNumber` envelopes and maps results to `EventLog`.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import httpx

from tokenlogs.adapters.models import event_log_from_json
from tokenlogs.core.errors import RPCError
from tokenlogs.core.models import EventLog


def to_hex_block(x: int) -> str:
    """Return a 0x-prefixed hex block number."""
    return hex(x)


def topics_param(topic0s: Sequence[bytes]) -> list[list[str]]:
    """Format topic0 hashes as an OR-filter for the eth_getLogs call."""
    return [["0x" + bytes(t).hex() for t in topic0s]]


class RPC:
    """Minimal async RPC client.

    Parameters
    ----------
    url : str
        RPC endpoint URL.
    timeout_s : int
        Per-operation timeout in seconds (connect/read/write).
    max_connections : int
        Maximum concurrent connections to keep in the pool.
    transport : httpx.AsyncBaseTransport | None
        Optional transport override (e.g. `httpx.MockTransport` in tests).
    """

    def __init__(
        self,
        url: str,
        *,
        timeout_s: int = 20,
        max_connections: int = 16,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url
        self._next_id = 0
        self.client = httpx.AsyncClient(
            timeout=httpx.Timeout(
                connect=timeout_s,
                read=timeout_s,
                write=timeout_s,
                pool=max(30, timeout_s * 3),
            ),
            limits=httpx.Limits(
                max_connections=max_connections,
                max_keepalive_connections=max(1, max_connections // 2),
            ),
            http2=True,
            transport=transport,
        )

    async def _call(self, method: str, params: list[Any]) -> Any:
        self._next_id += 1
        payload = {"jsonrpc": "2.0", "id": self._next_id, "method": method, "params": params}
        r = await self.client.post(self.url, json=payload)
        r.raise_for_status()
        data = r.json()
        if "error" in data:
            e = data["error"]
            if isinstance(e, dict):
                raise RPCError(e.get("code"), e.get("message"))
            raise RPCError(None, str(e))
        return data.get("result")

    async def latest_block(self) -> int:
        """Return the latest block number as an int."""
        return int(await self._call("eth_blockNumber", []), 16)

    async def get_logs(
        self,
        *,
        address: str,
        topic0s: Sequence[bytes],
        from_block: int,
        to_block: int,
    ) -> list[EventLog]:
        """Fetch logs for an address and a set of topic0 hashes within a block range."""
        params: dict[str, Any] = {
            "address": address.lower(),
            "fromBlock": to_hex_block(from_block),
            "toBlock": to_hex_block(to_block),
        }
        if topic0s:
            params["topics"] = topics_param(topic0s)
        result = await self._call("eth_getLogs", [params])
        return [event_log_from_json(rl) for rl in result or [] if not rl.get("removed")]

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.aclose()

    async def __aenter__(self) -> RPC:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
