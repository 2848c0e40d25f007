from tokenlogs.core.use_cases.fetch_decode import (
    DecodeStats,
    FetchDecodeOutput,
    decode_logs,
    fetch_decode,
    iter_chunks,
)

__all__ = [
    "DecodeStats",
    "FetchDecodeOutput",
    "decode_logs",
    "fetch_decode",
    "iter_chunks",
]
