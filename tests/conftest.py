from unittest.mock import AsyncMock

import pytest

from tokenlogs.core.models import EventLog
from tokenlogs.decoding.decoder import LogDecoder
from tokenlogs.decoding.registries import make_erc20_registry

ALICE = "0xd8da6bf26964af9d7eed9e03e53415d37aa96045"
BOB = "0xab5801a7d398351b8be11c439e05c5b3259aec9b"
TOKEN = "0x6b175474e89094c44da98b954eedeac495271d0f"

TRANSFER_T0 = bytes.fromhex("ddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef")
APPROVAL_T0 = bytes.fromhex("8c5be1e5ebec7d5bd14f71427d1e84f3dd0314c0f7b2291e5b200ac8c7c3b925")


def address_word(address: str) -> bytes:
    return bytes(12) + bytes.fromhex(address[2:])


def uint_word(value: int) -> bytes:
    return value.to_bytes(32, "big")


def make_log(topics, data=b"", *, block_number=1, log_index=0) -> EventLog:
    return EventLog(
        address=TOKEN,
        topics=tuple(topics),
        data=data,
        block_number=block_number,
        log_index=log_index,
        tx_hash="0x" + "ab" * 32,
    )


def transfer_log(src=ALICE, dst=BOB, tokens=1, **kwargs) -> EventLog:
    return make_log([TRANSFER_T0, address_word(src), address_word(dst)], uint_word(tokens), **kwargs)


def raw_json_log(log: EventLog) -> dict:
    """Render an EventLog back into eth_getLogs JSON shape."""
    return {
        "address": log.address,
        "topics": ["0x" + t.hex() for t in log.topics],
        "data": "0x" + log.data.hex(),
        "blockNumber": hex(log.block_number),
        "logIndex": hex(log.log_index),
        "transactionHash": log.tx_hash,
        "removed": False,
    }


@pytest.fixture
def erc20_decoder() -> LogDecoder:
    return LogDecoder(make_erc20_registry())


@pytest.fixture
def mock_provider():
    provider = AsyncMock()
    provider.get_logs = AsyncMock(return_value=[])
    provider.latest_block = AsyncMock(return_value=100)
    return provider
