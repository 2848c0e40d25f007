"""Core data models, configuration, and errors.

This package provides:
- Data models (EventLog, Meta, DecodedEvent, Unrecognized)
- Configuration (FetchConfig)
- Error taxonomy (DuplicateSignature, MalformedLog, ...)
"""

from tokenlogs.core.config import FetchConfig
from tokenlogs.core.errors import (
    DuplicateSignature,
    MalformedLog,
    RPCError,
    TokenLogsError,
    UnsupportedType,
)
from tokenlogs.core.models import DecodedEvent, DecodeOutcome, EventLog, Meta, Unrecognized

__all__ = [
    "FetchConfig",
    "DuplicateSignature",
    "MalformedLog",
    "RPCError",
    "TokenLogsError",
    "UnsupportedType",
    "DecodedEvent",
    "DecodeOutcome",
    "EventLog",
    "Meta",
    "Unrecognized",
]
