"""File replay log source.

Reads raw `eth_getLogs` result objects saved to disk, either one JSON object
per line (NDJSON) or a single JSON array, and yields `EventLog` records.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path

from tokenlogs.adapters.models import event_log_from_json
from tokenlogs.core.models import EventLog


def read_jsonl_logs(path: Path | str) -> Iterator[EventLog]:
    """Yield logs from an NDJSON file (or a JSON array file), in file order."""
    path = Path(path)
    text = path.read_text()
    if text.lstrip().startswith("["):
        for entry in json.loads(text):
            yield event_log_from_json(entry)
        return

    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        try:
            entry = json.loads(line)
        except json.JSONDecodeError as e:
            raise ValueError(f"{path}:{lineno}: invalid JSON: {e.msg}") from e
        yield event_log_from_json(entry)
