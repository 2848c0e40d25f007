"""Error taxonomy for registry construction, decoding and log sources.

`Unrecognized` is deliberately absent: a log that matches no known event is a
normal outcome (see `tokenlogs.core.models.Unrecognized`), not an error.
"""

from __future__ import annotations


class TokenLogsError(Exception):
    """Base class for all tokenlogs errors."""


class DuplicateSignature(TokenLogsError, ValueError):
    """Two descriptors resolve to the same signature hash."""

    def __init__(self, signature_hash: bytes, existing: str, incoming: str) -> None:
        self.signature_hash = signature_hash
        self.existing = existing
        self.incoming = incoming
        super().__init__(
            f"signature hash 0x{signature_hash.hex()} already registered for "
            f"{existing!r}, cannot register {incoming!r}"
        )


class MalformedLog(TokenLogsError, ValueError):
    """A log matched a known event but its topics/data do not fit the layout."""

    def __init__(self, event: str, reason: str) -> None:
        self.event = event
        self.reason = reason
        super().__init__(f"malformed {event} log: {reason}")


class UnsupportedType(TokenLogsError, ValueError):
    """A parameter type outside the static ABI subset the decoder handles."""


class RPCError(TokenLogsError, RuntimeError):
    """JSON-RPC error envelope returned by a node."""

    def __init__(self, code: int | None, message: str | None) -> None:
        self.code = code
        self.message = message
        super().__init__(f"RPC error: {code} {message}")
