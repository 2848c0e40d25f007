from __future__ import annotations

import logging
from collections.abc import Generator, Iterable
from dataclasses import dataclass, field

from tokenlogs.core.config import FetchConfig
from tokenlogs.core.errors import MalformedLog
from tokenlogs.core.interfaces import ILogsProvider
from tokenlogs.core.models import DecodedEvent, EventLog, Unrecognized
from tokenlogs.decoding.decoder import LogDecoder

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Stats
# ---------------------------------------------------------------------------


@dataclass(kw_only=True)
class DecodeStats:
    """
    Aggregated counters for a decode run.

    - `logs`: raw logs seen
    - `decoded`: logs matched and decoded
    - `unrecognized`: logs whose topic0 matched no known event
    - `malformed`: matched logs whose topics/data did not fit the layout
    - `chunks`: block ranges fetched (zero for replay)
    """

    logs: int = 0
    decoded: int = 0
    unrecognized: int = 0
    malformed: int = 0
    chunks: int = 0

    def merge(self, other: DecodeStats) -> None:
        self.logs += other.logs
        self.decoded += other.decoded
        self.unrecognized += other.unrecognized
        self.malformed += other.malformed
        self.chunks += other.chunks


@dataclass(kw_only=True)
class FetchDecodeOutput:
    events: list[DecodedEvent] = field(default_factory=list)
    stats: DecodeStats = field(default_factory=DecodeStats)
    from_block: int = 0
    to_block: int = 0


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def iter_chunks(a: int, b: int, step: int) -> Generator[tuple[int, int], None, None]:
    """Yield inclusive [start, end] block ranges of size at most `step`."""
    x = a
    while x <= b:
        y = min(b, x + step - 1)
        yield (x, y)
        x = y + 1


def decode_logs(logs: Iterable[EventLog], decoder: LogDecoder) -> FetchDecodeOutput:
    """Decode logs in order, counting outcomes.

    A `MalformedLog` is logged and counted; it never aborts the run.
    """
    out = FetchDecodeOutput()
    stats = out.stats
    for log in logs:
        stats.logs += 1
        try:
            outcome = decoder.decode(log)
        except MalformedLog as e:
            stats.malformed += 1
            logger.warning("skipping log %s#%s: %s", log.block_number, log.log_index, e)
            continue
        if isinstance(outcome, Unrecognized):
            stats.unrecognized += 1
            continue
        stats.decoded += 1
        out.events.append(outcome)
    return out


# ---------------------------------------------------------------------------
# Use case
# ---------------------------------------------------------------------------


async def fetch_decode(
    *,
    provider: ILogsProvider,
    decoder: LogDecoder,
    config: FetchConfig,
) -> FetchDecodeOutput:
    """
    Fetch a contract's logs chunk by chunk and decode them in block order.

    Logs are filtered at the source by `config.address` and the decoder's
    topic0s. Chunks are fetched sequentially, so events come out in the order
    the provider returns them. `config.rpc_url` is the provider's concern.
    """
    from_block = config.from_block
    end = await provider.latest_block() if config.to_block == "latest" else int(config.to_block)
    if from_block > end:
        raise ValueError(f"from_block ({from_block}) must be <= to_block ({end})")

    out = FetchDecodeOutput(from_block=from_block, to_block=end)
    topic0s = decoder.topic0s()
    for a, b in iter_chunks(from_block, end, config.step):
        logs = await provider.get_logs(address=config.address, topic0s=topic0s, from_block=a, to_block=b)
        chunk = decode_logs(logs, decoder)
        chunk.stats.chunks = 1
        logger.info(
            "blocks %s-%s: %s logs, %s decoded, %s unrecognized, %s malformed",
            a,
            b,
            chunk.stats.logs,
            chunk.stats.decoded,
            chunk.stats.unrecognized,
            chunk.stats.malformed,
        )
        out.events.extend(chunk.events)
        out.stats.merge(chunk.stats)
    return out
