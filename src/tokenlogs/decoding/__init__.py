"""Event decoding keyed by signature hash.

This package provides:
- Event descriptor system (EventDescriptor, EventParam)
- Registry construction with duplicate detection
- `LogDecoder` that classifies raw logs and decodes them into DecodedEvent
- Pre-built registries for common token standards
"""

from tokenlogs.decoding.decoder import LogDecoder, decode_with_descriptor
from tokenlogs.decoding.registry import add_event_spec, add_many, make_registry
from tokenlogs.decoding.registry_builder import descriptor_from_signature, make_registry_from_signatures
from tokenlogs.decoding.specs import EventDescriptor, EventParam, EventRegistry, signature_hash

__all__ = [
    "LogDecoder",
    "decode_with_descriptor",
    "add_event_spec",
    "add_many",
    "make_registry",
    "descriptor_from_signature",
    "make_registry_from_signatures",
    "EventDescriptor",
    "EventParam",
    "EventRegistry",
    "signature_hash",
]
