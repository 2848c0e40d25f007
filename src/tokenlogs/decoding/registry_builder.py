"""Registry builder utilities for creating event registries from signatures.

This module provides the tools for building descriptors from human-readable
Solidity event declarations:
- `descriptor_from_signature()` for one declaration
- `make_registry_from_signatures()` for one or several declarations

Unlike `EventDescriptor`, which hashes its canonical signature verbatim, the
builder normalizes type aliases (`uint` → `uint256`) before deriving the
canonical signature, so declarations copied from Solidity sources hash right.
"""

from __future__ import annotations

from collections.abc import Iterable

from .registry import make_registry
from .specs import EventDescriptor, EventParam, EventRegistry

_TYPE_ALIASES = {
    "uint": "uint256",
    "int": "int256",
    "byte": "bytes1",
}


# ---- Helpers: build descriptors from event signature ----
def _split_params(params_str: str) -> list[str]:
    """Split the parameter list by commas while respecting nested tuple types."""
    items: list[str] = []
    depth = 0
    buf: list[str] = []
    for ch in params_str:
        if ch == '(':
            depth += 1
            buf.append(ch)
        elif ch == ')':
            depth -= 1
            buf.append(ch)
        elif ch == ',' and depth == 0:
            items.append(''.join(buf).strip())
            buf = []
        else:
            buf.append(ch)
    if buf:
        items.append(''.join(buf).strip())
    return [i for i in items if i]


def _split_type(fragment: str) -> tuple[str, list[str]]:
    """Split a parameter fragment into its type and the trailing words.

    Tuple types may contain spaces, so they are cut at their matching
    parenthesis (plus any array suffix) rather than at the first space.
    """
    s = fragment.strip()
    if not s.startswith('('):
        tokens = s.split()
        if not tokens:
            raise ValueError(f"Invalid event parameter: {fragment!r}")
        return tokens[0], tokens[1:]

    depth = 0
    end = -1
    for i, ch in enumerate(s):
        if ch == '(':
            depth += 1
        elif ch == ')':
            depth -= 1
            if depth == 0:
                end = i + 1
                break
    if end == -1:
        raise ValueError(f"Unbalanced tuple type: {fragment!r}")
    while end < len(s) and s[end] == '[':
        close = s.find(']', end)
        if close == -1:
            raise ValueError(f"Unbalanced array suffix: {fragment!r}")
        end = close + 1
    return s[:end], s[end:].split()


def normalize_type(abi_type: str) -> str:
    """Return the canonical spelling of an ABI type.

    `uint[2]` → `uint256[2]`; `(uint a, address b)` → `(uint256,address)`.
    """
    t = abi_type.strip()
    if t.startswith('('):
        t, rest = _split_type(t)
        if rest:
            raise ValueError(f"Invalid tuple type: {abi_type!r}")
        close = t.rfind(')')
        components = [normalize_type(_split_type(c)[0]) for c in _split_params(t[1:close])]
        return "(" + ",".join(components) + ")" + t[close + 1 :]
    suffix = ""
    bracket = t.find('[')
    if bracket != -1:
        t, suffix = t[:bracket], t[bracket:]
    return _TYPE_ALIASES.get(t, t) + suffix


def _parse_param(p: str, fallback_name: str) -> EventParam:
    """Parse one parameter fragment into an EventParam."""
    abi_type, words = _split_type(p)
    indexed = "indexed" in words
    words = [w for w in words if w != "indexed"]
    if len(words) > 1:
        raise ValueError(f"Invalid event parameter: {p!r}")
    # Unnamed parameters get a positional name
    name = words[0] if words else fallback_name
    return EventParam(name, normalize_type(abi_type), indexed)


def descriptor_from_signature(signature: str) -> EventDescriptor:
    """Build an EventDescriptor from a Solidity event declaration.

    Example input:
      "Transfer(address indexed from, address indexed to, uint tokens)"
    """
    sig = signature.strip()
    if sig.startswith("event "):
        sig = sig[len("event "):].strip()
    sig = sig.rstrip(";").strip()
    open_paren = sig.find('(')
    close_paren = sig.rfind(')')
    if open_paren <= 0 or close_paren == -1 or close_paren < open_paren:
        raise ValueError(f"Invalid event signature: {signature}")
    name = sig[:open_paren].strip()
    params = [
        _parse_param(part, fallback_name=f"arg{i}")
        for i, part in enumerate(_split_params(sig[open_paren + 1 : close_paren]))
    ]
    canonical_signature = f"{name}({','.join(p.type for p in params)})"
    return EventDescriptor(name=name, canonical_signature=canonical_signature, params=tuple(params))


def make_registry_from_signatures(signatures: str | Iterable[str]) -> EventRegistry:
    """Create a registry from one or multiple event declarations.

    Args:
        signatures: Single declaration string or an iterable of them

    Returns:
        EventRegistry with one entry per declaration

    Raises:
        DuplicateSignature: if two declarations share a canonical signature
    """
    sig_list = [signatures] if isinstance(signatures, str) else list(signatures)
    return make_registry(descriptor_from_signature(s) for s in sig_list)
