# tests/core/test_oracle.py
import httpx
import pytest
from solders.pubkey import Pubkey

from helium.rewards.core.chain.lazy_distributor import LazyDistributorAccount
from helium.rewards.core.oracle import OracleRewardsClient
from tests.helpers.chain import encode_lazy_distributor


def _distributor(*urls: str) -> tuple[LazyDistributorAccount, list[Pubkey]]:
    keys = [Pubkey.new_unique() for _ in urls]
    data = encode_lazy_distributor(list(zip(keys, urls)))
    return LazyDistributorAccount.from_bytes(data), keys


@pytest.mark.asyncio
async def test_queries_each_oracle_with_asset_id(mock_http):
    asset = Pubkey.new_unique()
    seen = []

    async def handler(request: httpx.Request):
        seen.append((request.url.host, request.url.params["assetId"]))
        if request.url.host == "oracle-1.test":
            return httpx.Response(200, json={"currentRewards": "123456789012345678901"})
        return httpx.Response(200, json={"currentRewards": 7})

    mock_http(handler)

    distributor, keys = _distributor("https://oracle-1.test/", "https://oracle-2.test/")
    rewards = await OracleRewardsClient().get_current_rewards(distributor, asset)

    assert [r.oracle for r in rewards] == keys
    assert [r.current_rewards for r in rewards] == [123456789012345678901, 7]
    assert sorted(seen) == [
        ("oracle-1.test", str(asset)),
        ("oracle-2.test", str(asset)),
    ]


@pytest.mark.asyncio
async def test_failing_oracle_yields_none_without_affecting_others(mock_http):
    async def handler(request: httpx.Request):
        if request.url.host == "down.test":
            return httpx.Response(503)
        if request.url.host == "garbled.test":
            return httpx.Response(200, json={"unexpected": True})
        return httpx.Response(200, json={"currentRewards": "42"})

    mock_http(handler)

    distributor, _ = _distributor(
        "https://down.test/", "https://ok.test/", "https://garbled.test/"
    )
    rewards = await OracleRewardsClient().get_current_rewards(
        distributor, Pubkey.new_unique()
    )

    assert [r.current_rewards for r in rewards] == [None, 42, None]


@pytest.mark.asyncio
async def test_no_oracles_makes_no_requests(mock_http):
    async def handler(request):
        raise AssertionError(f"Unexpected URL {request.url}")

    mock_http(handler)

    distributor, _ = _distributor()
    assert await OracleRewardsClient().get_current_rewards(
        distributor, Pubkey.new_unique()
    ) == []
