"""Event descriptor primitives and registry typing.

Defines lightweight dataclasses to describe how to decode events:
- `EventParam`: one declared parameter (name, ABI type, indexed flag)
- `EventDescriptor`: one event (name, canonical signature, ordered params)
- `EventRegistry`: mapping from 32-byte signature hash → EventDescriptor
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import cached_property

from eth_utils import keccak

from tokenlogs.core.errors import UnsupportedType

_UINT_RE = re.compile(r"^uint([1-9]\d{0,2})$")
_INT_RE = re.compile(r"^int([1-9]\d{0,2})$")
_BYTES_N_RE = re.compile(r"^bytes([1-9]\d?)$")


def signature_hash(canonical_signature: str) -> bytes:
    """Return the keccak-256 digest (32 bytes) of a canonical event signature."""
    return keccak(text=canonical_signature)


def integer_bits(abi_type: str) -> int | None:
    """Bit width of a `uintN`/`intN` type, or None for any other type."""
    m = _UINT_RE.match(abi_type) or _INT_RE.match(abi_type)
    if m is None:
        return None
    bits = int(m.group(1))
    if bits == 0 or bits > 256 or bits % 8:
        return None
    return bits


def bytes_size(abi_type: str) -> int | None:
    """Size of a fixed `bytesN` type, or None for any other type."""
    m = _BYTES_N_RE.match(abi_type)
    if m is None:
        return None
    size = int(m.group(1))
    return size if 1 <= size <= 32 else None


def is_static_type(abi_type: str) -> bool:
    """True for the single-word static types: address, bool, (u)intN, bytesN."""
    if abi_type in ("address", "bool"):
        return True
    return integer_bits(abi_type) is not None or bytes_size(abi_type) is not None


def is_dynamic_type(abi_type: str) -> bool:
    """True for types whose indexed topic holds a keccak hash of the value."""
    return abi_type in ("string", "bytes") or abi_type.endswith("]") or abi_type.startswith("(")


@dataclass(frozen=True)
class EventParam:
    """Describe one declared event parameter."""

    name: str
    type: str  # e.g., "address", "uint256", "bool", "bytes32"
    indexed: bool = False


@dataclass(frozen=True)
class EventDescriptor:
    """One event definition: name, canonical signature and ordered parameters.

    The canonical signature is used verbatim for hashing. It must follow the
    on-chain convention (`uint256` not `uint`, no names, no whitespace);
    otherwise its hash matches no log and every such log is `Unrecognized`.
    """

    name: str
    canonical_signature: str
    params: tuple[EventParam, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable of params, store a tuple
        object.__setattr__(self, "params", tuple(self.params))
        names = [p.name for p in self.params]
        if len(set(names)) != len(names):
            raise ValueError(f"{self.name} declares duplicate parameter names: {names}")
        for p in self.params:
            if is_static_type(p.type):
                continue
            if p.indexed and is_dynamic_type(p.type):
                continue
            raise UnsupportedType(
                f"{self.name}.{p.name}: type {p.type!r} is not supported"
                + ("" if p.indexed else " in the data section")
            )

    @cached_property
    def signature_hash(self) -> bytes:
        return signature_hash(self.canonical_signature)

    @property
    def topic0(self) -> str:
        """0x-prefixed hex form of the signature hash, for log filters and display."""
        return "0x" + self.signature_hash.hex()

    @property
    def indexed_params(self) -> tuple[EventParam, ...]:
        return tuple(p for p in self.params if p.indexed)

    @property
    def data_params(self) -> tuple[EventParam, ...]:
        return tuple(p for p in self.params if not p.indexed)

    @property
    def param_names(self) -> tuple[str, ...]:
        return tuple(p.name for p in self.params)


# The full registry keyed by the raw 32-byte signature hash.
EventRegistry = dict[bytes, EventDescriptor]
