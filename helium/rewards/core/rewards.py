# helium/rewards/core/rewards.py
"""
Per-mint reward reader.

Reads never fail: a missing distributor, an RPC error or an undecodable
account all degrade to an empty reward list so that one mint cannot
abort a request covering several.
"""
from __future__ import annotations

import logging

from solders.pubkey import Pubkey

from helium.rewards.core.chain.accessor import (
    ChainAccessor,
    ChainAccessorFactory,
    SolanaChainAccessor,
)
from helium.rewards.core.chain.lazy_distributor import (
    LazyDistributorAccount,
    lazy_distributor_key,
)
from helium.rewards.core.config import RewardsConfig
from helium.rewards.core.oracle import OracleRewardsClient

logger = logging.getLogger(__name__)


def solana_accessor_factory(config: RewardsConfig) -> ChainAccessorFactory:
    def factory() -> ChainAccessor:
        return SolanaChainAccessor(
            config.rpc_url,
            commitment=config.rpc_commitment,
            timeout=config.http_timeout,
        )

    return factory


class RewardReader:
    def __init__(
        self,
        config: RewardsConfig,
        *,
        accessor_factory: ChainAccessorFactory | None = None,
        oracle_client: OracleRewardsClient | None = None,
    ):
        self._program_id = config.program_id
        self._accessor_factory = accessor_factory or solana_accessor_factory(config)
        self._oracles = oracle_client or OracleRewardsClient(
            timeout=config.http_timeout
        )

    async def read_rewards(self, mint: Pubkey, asset_id: Pubkey) -> list[int]:
        """Current rewards of ``asset_id`` under ``mint``'s distributor."""
        try:
            async with self._accessor_factory() as accessor:
                distributor_key = lazy_distributor_key(mint, self._program_id)
                data = await accessor.get_account_data(distributor_key)
                if data is None:
                    logger.info("Lazy distributor account for %s does not exist.", mint)
                    return []

                distributor = LazyDistributorAccount.from_bytes(data)
                rewards = await self._oracles.get_current_rewards(
                    distributor, asset_id
                )
        except Exception:
            logger.exception("Error fetching rewards for %s", mint)
            return []

        return [r.current_rewards for r in rewards if r.current_rewards is not None]
