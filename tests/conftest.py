"""
Passcheck - Test Fixtures

A local aiohttp application stands in for the Pwned Passwords range
API so breach lookups run without network access.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from aiohttp.test_utils import TestServer

from passcheck.config import EngineConfig
from passcheck.hibp.client import PwnedPasswordsClient

from range_stub import RangeServerState, make_range_app


@pytest.fixture
def range_state() -> RangeServerState:
    return RangeServerState()


@pytest_asyncio.fixture
async def range_server(range_state: RangeServerState) -> AsyncGenerator[TestServer, None]:
    server = TestServer(make_range_app(range_state))
    await server.start_server()
    yield server
    await server.close()


@pytest.fixture
def engine_config(range_server: TestServer) -> EngineConfig:
    return EngineConfig(
        api_url=f"http://{range_server.host}:{range_server.port}",
        timeout=2.0,
    )


@pytest_asyncio.fixture
async def client(engine_config: EngineConfig) -> AsyncGenerator[PwnedPasswordsClient, None]:
    async with PwnedPasswordsClient(engine_config) as c:
        yield c
