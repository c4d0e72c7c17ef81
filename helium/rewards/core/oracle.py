# helium/rewards/core/oracle.py
"""
Current reward lookups against lazy distributor oracles.

Each oracle listed in the distributor account serves the accrued,
not-yet-claimed rewards of an asset at ``GET {url}?assetId=<asset>``
as ``{"currentRewards": "<base units>"}``.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

import httpx
from solders.pubkey import Pubkey

from helium.rewards.core.chain.lazy_distributor import (
    LazyDistributorAccount,
    OracleConfig,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OracleReward:
    oracle: Pubkey
    current_rewards: int | None


class OracleRewardsClient:
    def __init__(self, *, timeout: float = 30.0):
        self._timeout = timeout

    async def get_current_rewards(
        self,
        distributor: LazyDistributorAccount,
        asset_id: Pubkey,
    ) -> list[OracleReward]:
        """Query every oracle of ``distributor``, preserving oracle order."""
        if not distributor.oracles:
            return []

        async with httpx.AsyncClient(timeout=self._timeout) as client:
            results = await asyncio.gather(
                *(self._query(client, o, asset_id) for o in distributor.oracles)
            )
        return list(results)

    async def _query(
        self,
        client: httpx.AsyncClient,
        oracle: OracleConfig,
        asset_id: Pubkey,
    ) -> OracleReward:
        try:
            r = await client.get(oracle.url, params={"assetId": str(asset_id)})
            r.raise_for_status()
            current = int(r.json()["currentRewards"])
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as exc:
            logger.warning(
                "Oracle %s failed to return rewards for %s: %s",
                oracle.oracle,
                asset_id,
                exc,
            )
            return OracleReward(oracle=oracle.oracle, current_rewards=None)

        return OracleReward(oracle=oracle.oracle, current_rewards=current)
