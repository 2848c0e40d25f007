import json

import httpx
import pytest
from pydantic import ValidationError

from conftest import ALICE, BOB, TOKEN, TRANSFER_T0, raw_json_log, transfer_log
from tokenlogs.adapters.models import RawLog, event_log_from_json
from tokenlogs.adapters.replay import read_jsonl_logs
from tokenlogs.clients.rpc import RPC, topics_param
from tokenlogs.core.errors import RPCError


def test_raw_log_maps_hex_to_bytes():
    log = transfer_log(ALICE, BOB, 10, block_number=0x10, log_index=3)

    mapped = event_log_from_json(raw_json_log(log))

    assert mapped == log
    assert mapped.topic0 == TRANSFER_T0


def test_raw_log_accepts_int_quantities_and_missing_data():
    raw = RawLog.model_validate(
        {"address": TOKEN.upper().replace("0X", "0x"), "topics": [], "data": None, "blockNumber": 5, "logIndex": "2"}
    )
    log = raw.to_event_log()
    assert log.block_number == 5
    assert log.log_index == 2
    assert log.data == b""
    assert log.address == TOKEN


def test_raw_log_rejects_missing_block_number():
    with pytest.raises(ValidationError):
        RawLog.model_validate({"address": TOKEN, "topics": [], "data": "0x", "logIndex": "0x0"})


def test_read_jsonl_logs(tmp_path):
    logs = [transfer_log(tokens=i, log_index=i) for i in range(3)]
    path = tmp_path / "logs.jsonl"
    path.write_text("\n".join(json.dumps(raw_json_log(log)) for log in logs) + "\n\n")

    assert list(read_jsonl_logs(path)) == logs


def test_read_json_array_logs(tmp_path):
    logs = [transfer_log(tokens=7)]
    path = tmp_path / "logs.json"
    path.write_text(json.dumps([raw_json_log(log) for log in logs]))

    assert list(read_jsonl_logs(path)) == logs


def test_read_jsonl_logs_bad_line(tmp_path):
    path = tmp_path / "logs.jsonl"
    path.write_text(json.dumps(raw_json_log(transfer_log())) + "\n{not json\n")

    with pytest.raises(ValueError, match=":2: invalid JSON"):
        list(read_jsonl_logs(path))


def test_topics_param():
    assert topics_param([TRANSFER_T0]) == [["0x" + TRANSFER_T0.hex()]]


def _rpc_with(handler) -> RPC:
    return RPC("http://node.test", transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_rpc_get_logs():
    log = transfer_log(tokens=99, block_number=12)
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        seen.update(body)
        removed = dict(raw_json_log(log), removed=True)
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": body["id"], "result": [raw_json_log(log), removed]})

    rpc = _rpc_with(handler)
    try:
        logs = await rpc.get_logs(address=TOKEN.upper().replace("0X", "0x"), topic0s=[TRANSFER_T0], from_block=10, to_block=20)
    finally:
        await rpc.aclose()

    assert logs == [log]
    assert seen["method"] == "eth_getLogs"
    assert seen["params"] == [
        {
            "address": TOKEN,
            "fromBlock": "0xa",
            "toBlock": "0x14",
            "topics": [["0x" + TRANSFER_T0.hex()]],
        }
    ]


@pytest.mark.asyncio
async def test_rpc_latest_block():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": 1, "result": "0x1b4"})

    async with _rpc_with(handler) as rpc:
        assert await rpc.latest_block() == 436


@pytest.mark.asyncio
async def test_rpc_error_envelope():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200, json={"jsonrpc": "2.0", "id": 1, "error": {"code": -32005, "message": "query returned more than 10000 results"}}
        )

    async with _rpc_with(handler) as rpc:
        with pytest.raises(RPCError) as exc:
            await rpc.get_logs(address=TOKEN, topic0s=[], from_block=0, to_block=1)
    assert exc.value.code == -32005


@pytest.mark.asyncio
async def test_rpc_http_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503)

    async with _rpc_with(handler) as rpc:
        with pytest.raises(httpx.HTTPStatusError):
            await rpc.latest_block()
