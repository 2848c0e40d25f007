from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from tokenlogs.core.models import EventLog


# ---------------------------------------------------------------------------
# ILogsProvider
# ---------------------------------------------------------------------------

@runtime_checkable
class ILogsProvider(Protocol):
    """
    Abstract provider for fetching EVM logs.

    Domain expectations:
    - It returns EventLog objects already mapped into internal domain models.
    - It hides the underlying RPC / file / subscription technology.
    - Retries, if any, are its own business; the decoder performs no I/O.
    """

    async def get_logs(
        self,
        *,
        address: str,
        topic0s: Sequence[bytes],
        from_block: int,
        to_block: int,
    ) -> list[EventLog]:
        """
        Return all logs for (address, topic0s) over the inclusive block range.

        Implementations:
        - RPC-based (`tokenlogs.clients.rpc.RPC`)
        - In-memory or synthetic provider for testing
        """
        ...

    async def latest_block(self) -> int:
        """Return the current chain head height."""
        ...
