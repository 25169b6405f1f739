"""
Unit Test Fixtures.

Fixtures for unit tests - the Mender server is replaced by an
httpx.MockTransport serving scripted responses. Unit tests never touch
the network.
"""

from collections.abc import AsyncIterator

import httpx
import pytest
import pytest_asyncio

from mender_cli.api.client import MenderClient
from tests.unit.fakes import SERVER_URL, TOKEN, FakeMender


# =============================================================================
# Fake Mender Server
# =============================================================================


@pytest.fixture
def mender() -> FakeMender:
    """Fresh scripted Mender server."""
    return FakeMender()


@pytest_asyncio.fixture
async def client(mender: FakeMender) -> AsyncIterator[MenderClient]:
    """
    MenderClient wired to the fake server.

    Usage:
        async def test_census(client, mender):
            mender.paged(paths.INVENTORY_DEVICES, [...], [])
            counts = await census(client)
    """
    api_client = MenderClient(
        SERVER_URL,
        token=TOKEN,
        transport=httpx.MockTransport(mender),
    )
    yield api_client
    await api_client.close()


# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture
def mender_env(monkeypatch) -> dict[str, str]:
    """
    Provide a complete MENDER_* environment.

    Usage:
        def test_command(mender_env):
            result = runner.invoke(app, ["count-artifacts"])
    """
    env = {"MENDER_SERVER_URL": SERVER_URL, "MENDER_TOKEN": TOKEN}
    for name, value in env.items():
        monkeypatch.setenv(name, value)
    return env
