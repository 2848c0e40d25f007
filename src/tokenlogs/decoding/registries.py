"""Pre-built registries for common token standards.

Registries are plain dicts and can be merged with `{**a, **b}`, but prefer
`add_many` when merging so duplicate hashes are reported.

Example
-------
>>> from tokenlogs.decoding.registries import make_erc20_registry
>>> reg = make_erc20_registry()
"""

from __future__ import annotations

from .registry_builder import make_registry_from_signatures
from .specs import EventRegistry

ERC20_TRANSFER = "Transfer(address indexed from, address indexed to, uint256 tokens)"
ERC20_APPROVAL = "Approval(address indexed tokenOwner, address indexed spender, uint256 tokens)"


def make_erc20_registry() -> EventRegistry:
    """Return registry for ERC-20 Transfer/Approval events."""
    return make_registry_from_signatures([ERC20_TRANSFER, ERC20_APPROVAL])
