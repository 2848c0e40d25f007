import asyncio
import logging
from pathlib import Path

import click
import httpx
from rich.console import Console
from rich.logging import RichHandler

from tokenlogs.adapters.replay import read_jsonl_logs
from tokenlogs.clients.rpc import RPC
from tokenlogs.core.config import FetchConfig
from tokenlogs.core.errors import TokenLogsError
from tokenlogs.core.use_cases.fetch_decode import decode_logs, fetch_decode
from tokenlogs.decoding.decoder import LogDecoder
from tokenlogs.decoding.registries import make_erc20_registry
from tokenlogs.decoding.registry_builder import make_registry_from_signatures
from tokenlogs.presentation import render_events, render_stats, render_topics

console = Console()

event_option = click.option(
    "--event",
    "events",
    multiple=True,
    help="Solidity event declaration, e.g. 'Transfer(address indexed from, address indexed to, uint256 tokens)'; "
    "repeat for several. Defaults to ERC-20 Transfer and Approval.",
)


def _build_decoder(events: tuple[str, ...]) -> LogDecoder:
    try:
        registry = make_registry_from_signatures(events) if events else make_erc20_registry()
    except ValueError as e:
        raise click.UsageError(str(e)) from e
    return LogDecoder(registry)


def _parse_block(value: str) -> int | str:
    if value == "latest":
        return value
    try:
        return int(value, 0)
    except ValueError as e:
        raise click.BadParameter(f"expected a block number or 'latest', got {value!r}") from e


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Debug logging")
def cli(verbose: bool) -> None:
    """tokenlogs: decode ERC-20 style event logs into typed events."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@cli.command("topics")
@event_option
def topics_cmd(events: tuple[str, ...]) -> None:
    """Print canonical signatures and topic0 hashes of the known events."""
    decoder = _build_decoder(events)
    render_topics(console, decoder.registry.values())


@cli.command("decode")
@click.argument("logs_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@event_option
def decode_cmd(logs_file: Path, events: tuple[str, ...]) -> None:
    """Decode raw logs saved as NDJSON (one eth_getLogs result object per line)."""
    decoder = _build_decoder(events)
    try:
        out = decode_logs(read_jsonl_logs(logs_file), decoder)
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    render_events(console, out.events, decoder.registry.values())
    render_stats(console, out.stats)


@cli.command("fetch")
@click.option("--rpc", required=True, envvar="TOKENLOGS_RPC_URL", help="RPC endpoint URL")
@click.option("--contract", required=True, help="Emitter contract address")
@click.option("--from-block", type=int, required=True)
@click.option("--to-block", default="latest", show_default=True, help="Block number or 'latest'")
@click.option("--step", type=int, default=1_000, show_default=True, help="Blocks per request")
@click.option("--timeout", "timeout_s", type=int, default=20, show_default=True, help="RPC timeout in seconds")
@event_option
def fetch_cmd(
    rpc: str,
    contract: str,
    from_block: int,
    to_block: str,
    step: int,
    timeout_s: int,
    events: tuple[str, ...],
) -> None:
    """Fetch a contract's logs over a block range and print the decoded events."""
    decoder = _build_decoder(events)
    try:
        config = FetchConfig(
            rpc_url=rpc,
            address=contract,
            from_block=from_block,
            to_block=_parse_block(to_block),
            step=step,
            timeout_s=timeout_s,
        )
    except ValueError as e:
        raise click.UsageError(str(e)) from e

    async def run():
        client = RPC(config.rpc_url, timeout_s=config.timeout_s)
        try:
            return await fetch_decode(provider=client, decoder=decoder, config=config)
        finally:
            await client.aclose()

    try:
        out = asyncio.run(run())
    except (TokenLogsError, httpx.HTTPError, ValueError) as e:
        raise click.ClickException(str(e)) from e
    render_events(console, out.events, decoder.registry.values())
    render_stats(console, out.stats)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
