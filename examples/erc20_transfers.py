import asyncio
import os

from rich.console import Console

from tokenlogs.clients.rpc import RPC
from tokenlogs.core.config import FetchConfig
from tokenlogs.core.use_cases.fetch_decode import fetch_decode
from tokenlogs.decoding.decoder import LogDecoder
from tokenlogs.decoding.registries import make_erc20_registry
from tokenlogs.presentation import render_events, render_stats

console = Console()
decoder = LogDecoder(make_erc20_registry())
config = FetchConfig(
    rpc_url=os.environ.get("TOKENLOGS_RPC_URL", "https://ethereum-rpc.publicnode.com"),
    address="0xe41d2489571d322189246dafa5ebde1f4699f498",  # 0x Protocol Token (ZRX)
    from_block=6_383_820,
    to_block=6_383_840,
)


async def main():
    async with RPC(config.rpc_url, timeout_s=config.timeout_s) as client:
        result = await fetch_decode(provider=client, decoder=decoder, config=config)

    render_events(console, result.events, decoder.registry.values())
    render_stats(console, result.stats)

    # Events are plain name -> value mappings
    for ev in result.events:
        if ev.name == "Transfer":
            console.print(f"{ev.block_number}: {ev.values['from']} -> {ev.values['to']} {ev.values['tokens']}")


asyncio.run(main())
