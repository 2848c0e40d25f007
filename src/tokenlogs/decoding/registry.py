"""Signature-hash registry construction.

This module exposes:
- `make_registry(descriptors)` → EventRegistry keyed by signature hash
- `add_event_spec(registry, descriptor)` → insert one descriptor
- `add_many(registry, descriptors)` → insert multiple

Hashes are computed once here from descriptor data; nothing downstream
hard-codes topic0 literals. A registry is read-only once handed to a decoder.
"""

from __future__ import annotations

from collections.abc import Iterable

from tokenlogs.core.errors import DuplicateSignature
from tokenlogs.decoding.specs import EventDescriptor, EventRegistry


def add_event_spec(registry: EventRegistry, descriptor: EventDescriptor) -> None:
    """Insert one descriptor keyed by its signature hash.

    Raises `DuplicateSignature` if the hash is already registered, whether by
    the same signature registered twice or by a genuine collision.
    """
    key = descriptor.signature_hash
    existing = registry.get(key)
    if existing is not None:
        raise DuplicateSignature(key, existing.canonical_signature, descriptor.canonical_signature)
    registry[key] = descriptor


def add_many(registry: EventRegistry, descriptors: Iterable[EventDescriptor]) -> None:
    """Insert many descriptors into the registry."""
    for d in descriptors:
        add_event_spec(registry, d)


def make_registry(descriptors: Iterable[EventDescriptor] = ()) -> EventRegistry:
    """Build a registry from descriptors, failing on any duplicate hash."""
    reg: EventRegistry = {}
    add_many(reg, descriptors)
    return reg
