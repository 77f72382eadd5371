"""Test fixtures."""

from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
import respx

from aurrpc import AURClient
from aurrpc.testing import MockAURRPC, mock_aur_rpc

from .constants import AUR_URL
from .support.data import read_test_packages


@pytest.fixture
def mock_aur(respx_mock: respx.Router) -> MockAURRPC:
    return mock_aur_rpc(AUR_URL, respx_mock, read_test_packages())


@pytest_asyncio.fixture
async def client() -> AsyncIterator[AURClient]:
    """AUR client pointed at the mock AUR."""
    async with AURClient(base_url=AUR_URL) as client:
        yield client
