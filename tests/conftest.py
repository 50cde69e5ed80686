# tests/conftest.py
import os
import asyncio
import logging
from typing import AsyncIterator, Iterable, List

import httpx
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Ensure test-friendly env (no pacing, known relayer url)
os.environ.setdefault("STREAM_INTERVAL_MS", "0")
os.environ.setdefault("AINOZ_RELAYER_URL", "http://relayer.test")
os.environ.setdefault("PROVIDER", "stub")

# IMPORTANT: import the app after envs are set
from ainoz.core import config
from ainoz.relayer.main import create_app



@pytest.fixture(autouse=True)
def _no_pacing(monkeypatch):
    # a stray .env or config reload in another test must not slow the suite down
    monkeypatch.setattr(config, "STREAM_INTERVAL_MS", 0)
    monkeypatch.setattr(config, "PROVIDER", "stub")


@pytest_asyncio.fixture
async def app():
    return create_app()


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def relayer_transport(app):
    # in-process transport for AinozClient -> relayer round trips
    return ASGITransport(app=app)


@pytest.fixture
def caplog_info(caplog):
    caplog.set_level(logging.INFO)
    return caplog


async def trickle(parts: Iterable[bytes], delay: float) -> AsyncIterator[bytes]:
    for part in parts:
        await asyncio.sleep(delay)
        yield part


class SlowTransport(httpx.AsyncBaseTransport):
    """
    Fake transport: waits `delay` seconds before answering, then sends `parts`
    one every `part_delay` seconds. Records every request it sees.
    """

    def __init__(self, *, delay: float = 0.0, parts: List[bytes] | None = None, part_delay: float = 0.0, status_code: int = 200) -> None:
        self.delay = delay
        self.parts = parts or []
        self.part_delay = part_delay
        self.status_code = status_code
        self.requests: List[httpx.Request] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        await asyncio.sleep(self.delay)
        return httpx.Response(self.status_code, content=trickle(self.parts, self.part_delay))


@pytest.fixture
def slow_transport():
    return SlowTransport
