# tests/test_relayer_api.py
from datetime import datetime

import pytest

from starlette.requests import Request

from ainoz.core import config
from ainoz.relayer.api.routers import generate as generate_router
from ainoz.relayer.services.generation import split_into_chunks
from ainoz.relayer.providers.stub import stub_response

MISSING = {"error": "Missing required fields: model and prompt"}


@pytest.mark.asyncio
async def test_health(client):
    # /health always answers 200 with status "ok" and an ISO-8601 UTC timestamp.
    r = await client.get("/health")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "ok"
    assert data["timestamp"].endswith("Z")
    assert datetime.fromisoformat(data["timestamp"].replace("Z", "+00:00")).tzinfo is not None


@pytest.mark.asyncio
async def test_generate_ok(client):
    r = await client.post("/v1/generate", json={"model": "default", "prompt": "hello world", "wallet": "W1"})
    assert r.status_code == 200
    data = r.json()
    assert data["text"] == stub_response("hello world")
    assert data["requestId"].startswith("req_")
    assert set(data) == {"text", "requestId"}


def test_stub_format():
    assert stub_response("hi") == (
        '[STUB RESPONSE] You asked: "hi". This is a placeholder response from the AINOZ relayer. '
        "In production, this would be replaced with actual LLM inference."
    )


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/v1/generate", "/v1/generate/stream"])
@pytest.mark.parametrize(
    "body",
    [None, {"model": "x"}, {"prompt": "p"}, {}, {"model": "", "prompt": "p"}, {"model": "x", "prompt": ""}],
)
async def test_missing_fields_400(client, path, body):
    # None sends no body at all
    r = await client.post(path, json=body)
    assert r.status_code == 400
    assert r.json() == MISSING


@pytest.mark.asyncio
async def test_malformed_body_400(client):
    r = await client.post("/v1/generate", content=b"{not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid request body"}


@pytest.mark.asyncio
async def test_wrong_field_type_400(client):
    r = await client.post("/v1/generate", json={"model": ["a"], "prompt": "p"})
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid request body"}


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/v1/generate", "/v1/generate/stream"])
async def test_internal_error_500_is_logged(client, monkeypatch, caplog_info, path):
    # Provider blows up: the relayer answers a fixed 500 body and logs the real cause.
    async def boom(prompt, *, model):
        raise RuntimeError("backend exploded")

    monkeypatch.setattr(generate_router, "get_generate", lambda model: boom)
    r = await client.post(path, json={"model": "m", "prompt": "p"})
    assert r.status_code == 500
    assert r.json() == {"error": "Internal server error"}
    assert "backend exploded" in caplog_info.text


@pytest.mark.asyncio
async def test_stream_ok(client):
    r = await client.post("/v1/generate/stream", json={"model": "default", "prompt": "hello world"})
    assert r.status_code == 200
    assert r.headers["content-type"] == "text/plain; charset=utf-8"
    assert "content-length" not in r.headers
    assert r.text == stub_response("hello world")


@pytest.mark.asyncio
async def test_stream_mid_exception_is_logged_and_partial_returned(client, monkeypatch, caplog_info):
    # Once the body has started the relayer cannot switch to an error status:
    # it logs the failure and the client sees 200 with a short body.
    async def broken_chunks(chunks, *, interval, is_disconnected):
        yield "partial "
        raise RuntimeError("network dropped")

    monkeypatch.setattr(generate_router, "paced_chunks", broken_chunks)
    r = await client.post("/v1/generate/stream", json={"model": "m", "prompt": "p"})
    assert r.status_code == 200
    assert r.text == "partial "
    assert "network dropped" in caplog_info.text


@pytest.mark.asyncio
async def test_cors_headers(client):
    r = await client.get("/health", headers={"Origin": "http://example.com"})
    assert r.headers.get("access-control-allow-origin") == "*"


@pytest.mark.asyncio
async def test_stream_stops_when_client_disconnects(client, monkeypatch, caplog_info):
    # The request reports a disconnect on its third check: two chunks go out, then the
    # route's chunk generator returns and nothing else is written.
    monkeypatch.setattr(config, "STREAM_INTERVAL_MS", 5)
    checks = {"count": 0}

    async def is_disconnected(self):
        checks["count"] += 1
        return checks["count"] > 2

    monkeypatch.setattr(Request, "is_disconnected", is_disconnected)

    state = {"returned": False}
    real_paced_chunks = generate_router.paced_chunks

    async def tracked(*args, **kwargs):
        async for chunk in real_paced_chunks(*args, **kwargs):
            yield chunk
        state["returned"] = True

    monkeypatch.setattr(generate_router, "paced_chunks", tracked)

    r = await client.post("/v1/generate/stream", json={"model": "m", "prompt": "hello world"})
    expected = "".join(c.data for c in split_into_chunks(stub_response("hello world"))[:2])
    assert r.status_code == 200
    assert r.text == expected == "[STUB RESPONSE]"
    assert checks["count"] == 3
    assert state["returned"] is True
    assert "client disconnected" in caplog_info.text
