"""Pydantic models for raw `eth_getLogs` result objects.

Both the RPC client and the JSON-lines replay reader validate each raw log
through `RawLog` and map it into the domain `EventLog`.
"""

from __future__ import annotations

from typing import Any

from eth_utils import decode_hex
from pydantic import BaseModel, ConfigDict, Field, field_validator

from tokenlogs.core.models import EventLog


def _quantity(v: Any) -> int:
    """Parse a JSON-RPC quantity: 0x-hex string, decimal string or int."""
    if isinstance(v, bool):
        raise ValueError("quantity must not be a bool")
    if isinstance(v, int):
        return v
    if isinstance(v, str):
        s = v.strip()
        return int(s, 16) if s[:2].lower() == "0x" else int(s)
    raise ValueError(f"invalid quantity: {v!r}")


class RawLog(BaseModel):
    """One log entry as returned by `eth_getLogs`."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    address: str
    topics: list[str] = Field(default_factory=list)
    data: str = "0x"
    block_number: int = Field(alias="blockNumber")
    log_index: int = Field(alias="logIndex")
    transaction_hash: str | None = Field(default=None, alias="transactionHash")
    removed: bool = False

    @field_validator("block_number", "log_index", mode="before")
    @classmethod
    def _parse_quantity(cls, v: Any) -> int:
        return _quantity(v)

    @field_validator("data", mode="before")
    @classmethod
    def _default_data(cls, v: Any) -> str:
        return v or "0x"

    def to_event_log(self) -> EventLog:
        return EventLog(
            address=self.address.lower(),
            topics=tuple(decode_hex(t) for t in self.topics),
            data=decode_hex(self.data),
            block_number=self.block_number,
            log_index=self.log_index,
            tx_hash=(self.transaction_hash or "").lower(),
        )


def event_log_from_json(entry: dict[str, Any]) -> EventLog:
    """Validate one raw JSON log object and map it to an `EventLog`."""
    return RawLog.model_validate(entry).to_event_log()
