# tests/conftest.py
from __future__ import annotations

import httpx
import pytest
from solders.pubkey import Pubkey

from helium.rewards.core.config import RewardsConfig


@pytest.fixture
def config() -> RewardsConfig:
    return RewardsConfig(
        rpc_url="http://rpc.test",
        mints={"IOT": Pubkey.new_unique(), "MOBILE": Pubkey.new_unique()},
        entities_base_url="http://entities.test",
        http_timeout=5.0,
    )


@pytest.fixture
def mock_http(monkeypatch):
    """Route every httpx.AsyncClient through the given request handler."""

    def install(handler):
        transport = httpx.MockTransport(handler)
        real_client = httpx.AsyncClient

        monkeypatch.setattr(
            httpx,
            "AsyncClient",
            lambda **kw: real_client(transport=transport, **kw),
        )

    return install
