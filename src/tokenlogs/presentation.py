"""Console rendering of decoded events with rich tables."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from rich.console import Console
from rich.table import Table

from tokenlogs.core.models import DecodedEvent
from tokenlogs.core.use_cases.fetch_decode import DecodeStats
from tokenlogs.decoding.specs import EventDescriptor


def format_value(v: Any) -> str:
    if isinstance(v, (bytes, bytearray)):
        return "0x" + bytes(v).hex()
    return str(v)


def events_table(name: str, params: Sequence[str], events: Iterable[DecodedEvent]) -> Table:
    """One table per event type; every column comes from its own decoded value."""
    table = Table(title=name, title_justify="left", expand=False)
    table.add_column("block", justify="right")
    table.add_column("log", justify="right")
    for p in params:
        table.add_column(p, overflow="fold")
    for ev in events:
        table.add_row(
            str(ev.block_number),
            str(ev.log_index),
            *(format_value(ev.values.get(p)) for p in params),
        )
    return table


def render_events(console: Console, events: Sequence[DecodedEvent], descriptors: Iterable[EventDescriptor]) -> None:
    """Print decoded events grouped by event name, in registry order."""
    for d in descriptors:
        matched = [ev for ev in events if ev.name == d.name]
        if matched:
            console.print(events_table(d.name, d.param_names, matched))


def render_stats(console: Console, stats: DecodeStats) -> None:
    console.print(
        f"[bold]summary[/]: "
        f"logs={stats.logs}  "
        f"[green]decoded[/]={stats.decoded}  "
        f"[yellow]unrecognized[/]={stats.unrecognized}  "
        f"[red]malformed[/]={stats.malformed}"
    )


def render_topics(console: Console, descriptors: Iterable[EventDescriptor]) -> None:
    table = Table(title="events", title_justify="left")
    table.add_column("event")
    table.add_column("signature")
    table.add_column("topic0")
    for d in descriptors:
        table.add_row(d.name, d.canonical_signature, d.topic0)
    console.print(table)
