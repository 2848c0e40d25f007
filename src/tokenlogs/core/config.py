from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

BlockTag = int | Literal["latest"]


@dataclass(frozen=True)
class FetchConfig:
    """Configuration for fetching and decoding a contract's logs."""

    rpc_url: str
    address: str
    from_block: int
    to_block: BlockTag
    step: int = 1_000
    timeout_s: int = 20

    def __post_init__(self) -> None:
        if self.step <= 0:
            raise ValueError("step must be a positive number of blocks")
        if isinstance(self.to_block, int) and self.from_block > self.to_block:
            raise ValueError(f"from_block ({self.from_block}) must be <= to_block ({self.to_block})")
