"""Core data models for raw logs and decode outcomes.

This module defines:
- `EventLog`: raw log record (topics + data) as supplied by a log source.
- `Meta`: passthrough metadata carried from a log to its decoded outcome.
- `DecodedEvent`: a log matched to a known event with typed parameter values.
- `Unrecognized`: a log whose topic0 matches no known event.

Design notes
------------
- Topics and data are raw `bytes`; signature lookup is done on the 32-byte
  value directly, never on a hex string.
- Integer values are plain Python ints, so uint256 amounts keep full precision.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True, frozen=True)
class Meta:
    """Lightweight metadata for a single log, passed through unchanged."""

    block_number: int
    log_index: int
    tx_hash: str = ""
    address: str = ""


@dataclass(slots=True, frozen=True)
class EventLog:
    """Raw log as fetched from a log source, minimally normalized."""

    address: str  # lowercased 0x...
    topics: tuple[bytes, ...]  # 32-byte words, topic0 first
    data: bytes
    block_number: int
    log_index: int
    tx_hash: str = ""  # lowercased 0x...

    @property
    def topic0(self) -> bytes | None:
        return self.topics[0] if self.topics else None

    @property
    def meta(self) -> Meta:
        return Meta(
            block_number=self.block_number,
            log_index=self.log_index,
            tx_hash=self.tx_hash,
            address=self.address,
        )


@dataclass(slots=True, frozen=True)
class DecodedEvent:
    """Decoded event: matched event name plus name → typed value mapping."""

    name: str
    values: dict[str, Any] = field(hash=False)  # eq still compares values
    meta: Meta

    @property
    def block_number(self) -> int:
        return self.meta.block_number

    @property
    def log_index(self) -> int:
        return self.meta.log_index


@dataclass(slots=True, frozen=True)
class Unrecognized:
    """Outcome for a log that no registered descriptor matches."""

    topic0: bytes | None
    meta: Meta


DecodeOutcome = DecodedEvent | Unrecognized
