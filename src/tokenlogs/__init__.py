from __future__ import annotations

from .core.errors import DuplicateSignature, MalformedLog
from .core.models import DecodedEvent, EventLog, Meta, Unrecognized
from .decoding.decoder import LogDecoder
from .decoding.registries import make_erc20_registry
from .decoding.registry import add_event_spec, add_many, make_registry
from .decoding.specs import EventDescriptor, EventParam, EventRegistry

__all__ = [
    "LogDecoder",
    "make_registry",
    "make_erc20_registry",
    "add_event_spec",
    "add_many",
    "EventDescriptor",
    "EventParam",
    "EventRegistry",
    "EventLog",
    "Meta",
    "DecodedEvent",
    "Unrecognized",
    "DuplicateSignature",
    "MalformedLog",
]
