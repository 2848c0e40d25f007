"""Generic event decoder keyed by signature hash.

This module translates raw logs into `DecodedEvent` (or `Unrecognized`) using
an `EventRegistry` of `EventDescriptor`s. Indexed parameters come from
topics[1:] in declaration order; the rest come from consecutive 32-byte data
words in declaration order.

Each call is a pure function of (registry, log): the decoder keeps no
per-call state, so one instance can be shared across threads or tasks.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from tokenlogs.core.errors import MalformedLog
from tokenlogs.core.models import DecodedEvent, DecodeOutcome, EventLog, Unrecognized
from tokenlogs.decoding.registry import make_registry
from tokenlogs.decoding.specs import EventDescriptor, EventRegistry
from tokenlogs.decoding.utils import WORD_SIZE, parse_word, word_at

logger = logging.getLogger(__name__)


# ---------- helper functions ----------


def _check_layout(descriptor: EventDescriptor, log: EventLog) -> None:
    """Raise MalformedLog if topic count or data length mismatch the descriptor."""
    expected_topics = 1 + len(descriptor.indexed_params)
    if len(log.topics) != expected_topics:
        raise MalformedLog(
            descriptor.name,
            f"expected {expected_topics} topics, got {len(log.topics)}",
        )

    expected_data = WORD_SIZE * len(descriptor.data_params)
    if len(log.data) % WORD_SIZE:
        raise MalformedLog(
            descriptor.name,
            f"data length {len(log.data)} is not a multiple of {WORD_SIZE}",
        )
    if len(log.data) != expected_data:
        raise MalformedLog(
            descriptor.name,
            f"expected {expected_data} data bytes, got {len(log.data)}",
        )


def decode_with_descriptor(descriptor: EventDescriptor, log: EventLog) -> DecodedEvent:
    """Decode a log already known to match `descriptor`."""
    _check_layout(descriptor, log)

    values: dict[str, Any] = {}
    for topic, param in zip(log.topics[1:], descriptor.indexed_params):
        values[param.name] = parse_word(topic, param, event=descriptor.name)
    for i, param in enumerate(descriptor.data_params):
        values[param.name] = parse_word(word_at(log.data, i), param, event=descriptor.name)

    # Re-key in declaration order so output reads like the event definition
    ordered = {name: values[name] for name in descriptor.param_names}
    return DecodedEvent(name=descriptor.name, values=ordered, meta=log.meta)


# ---------- main decoder ----------


class LogDecoder:
    """Classify and decode logs against a fixed set of known events.

    Parameters
    ----------
    events : Iterable[EventDescriptor] | EventRegistry
        Descriptors to register, or a prebuilt registry. Building from
        descriptors raises `DuplicateSignature` on any repeated hash.
    """

    def __init__(self, events: Iterable[EventDescriptor] | EventRegistry) -> None:
        if isinstance(events, Mapping):
            self._registry: EventRegistry = dict(events)
        else:
            self._registry = make_registry(events)

    @property
    def registry(self) -> Mapping[bytes, EventDescriptor]:
        return self._registry

    def topic0s(self) -> list[bytes]:
        """Registered signature hashes, e.g. for an eth_getLogs topic filter."""
        return list(self._registry.keys())

    def classify(self, log: EventLog) -> EventDescriptor | None:
        """Return the descriptor matching topic0, or None."""
        if not log.topics:
            return None
        return self._registry.get(bytes(log.topics[0]))

    def decode(self, log: EventLog) -> DecodeOutcome:
        """Decode one log into a `DecodedEvent`, or return `Unrecognized`.

        Only a log whose topic0 matches a known event can fail, with
        `MalformedLog`, when its topics/data do not fit that event's layout.
        """
        descriptor = self.classify(log)
        if descriptor is None:
            if logger.isEnabledFor(logging.DEBUG):
                t0 = log.topic0
                logger.debug(
                    "unrecognized log %s#%s topic0=%s",
                    log.block_number,
                    log.log_index,
                    "0x" + t0.hex() if t0 is not None else None,
                )
            return Unrecognized(topic0=log.topic0, meta=log.meta)
        return decode_with_descriptor(descriptor, log)

    def decode_many(self, logs: Iterable[EventLog]) -> Iterator[DecodeOutcome]:
        """Decode logs lazily, preserving input order. MalformedLog propagates."""
        for log in logs:
            yield self.decode(log)

    def __len__(self) -> int:
        return len(self._registry)

    def __contains__(self, signature_hash: object) -> bool:
        return signature_hash in self._registry
