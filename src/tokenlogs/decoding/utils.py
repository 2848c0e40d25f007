"""Decoding utilities: ABI word access and typed word parsers."""

from __future__ import annotations

from typing import Any

from eth_utils import to_checksum_address

from tokenlogs.core.errors import MalformedLog

from .specs import EventParam, bytes_size, integer_bits, is_dynamic_type

WORD_SIZE = 32


def word_at(data: bytes, i: int) -> bytes:
    """Return the i-th 32-byte ABI word (caller guarantees it is in range)."""
    start = WORD_SIZE * i
    return data[start : start + WORD_SIZE]


def parse_word(word: bytes, param: EventParam, *, event: str) -> Any:
    """Parse one 32-byte word according to the parameter's declared type.

    Raises `MalformedLog` when the word is not a valid encoding of the type
    (wrong width, dirty padding, out-of-range integer).
    """
    if len(word) != WORD_SIZE:
        raise MalformedLog(event, f"{param.name}: expected a {WORD_SIZE}-byte word, got {len(word)} bytes")
    t = param.type

    if t == "address":
        if any(word[:12]):
            raise MalformedLog(event, f"{param.name}: address word has non-zero high bytes")
        return to_checksum_address("0x" + word[12:].hex())

    if t == "bool":
        v = int.from_bytes(word, "big")
        if v not in (0, 1):
            raise MalformedLog(event, f"{param.name}: invalid bool value {v}")
        return v == 1

    bits = integer_bits(t)
    if bits is not None:
        if t.startswith("uint"):
            v = int.from_bytes(word, "big", signed=False)
            if v >= 1 << bits:
                raise MalformedLog(event, f"{param.name}: value does not fit {t}")
            return v
        # Signed: the full word is a two's complement sign extension
        v = int.from_bytes(word, "big", signed=True)
        if not -(1 << (bits - 1)) <= v < 1 << (bits - 1):
            raise MalformedLog(event, f"{param.name}: value does not fit {t}")
        return v

    size = bytes_size(t)
    if size is not None:
        if any(word[size:]):
            raise MalformedLog(event, f"{param.name}: {t} word has non-zero padding")
        return word[:size]

    if param.indexed and is_dynamic_type(t):
        # Indexed dynamic values are stored as their keccak hash
        return word

    raise MalformedLog(event, f"{param.name}: cannot decode type {t!r}")
