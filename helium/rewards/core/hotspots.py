# helium/rewards/core/hotspots.py
"""
Hotspot metadata and rewards orchestration.

One metadata lookup, then one reward read per configured mint, run
concurrently. Only the metadata step can fail the request.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any

from solders.pubkey import Pubkey

from helium.rewards.contracts.hotspot import HotspotRewards
from helium.rewards.core.config import RewardsConfig
from helium.rewards.core.errors import (
    MalformedAssetIdentifier,
    MalformedHotspotMetadata,
)
from helium.rewards.core.metadata import HotspotMetadataClient
from helium.rewards.core.rewards import RewardReader

logger = logging.getLogger(__name__)


def parse_asset_id(metadata: dict[str, Any]) -> Pubkey:
    raw = metadata.get("asset_id")
    if not isinstance(raw, str):
        raise MalformedAssetIdentifier(f"asset_id missing or not a string: {raw!r}")
    try:
        return Pubkey.from_string(raw)
    except ValueError as exc:
        raise MalformedAssetIdentifier(f"asset_id is not a valid key: {raw!r}") from exc


def parse_is_active(metadata: dict[str, Any]) -> bool:
    try:
        value = metadata["hotspot_infos"]["iot"]["is_active"]
    except (KeyError, TypeError) as exc:
        raise MalformedHotspotMetadata(
            "hotspot_infos.iot.is_active missing from metadata"
        ) from exc
    if not isinstance(value, bool):
        raise MalformedHotspotMetadata(
            f"hotspot_infos.iot.is_active is not a boolean: {value!r}"
        )
    return value


class HotspotRewardsService:
    def __init__(
        self,
        config: RewardsConfig,
        *,
        metadata_client: HotspotMetadataClient | None = None,
        reward_reader: RewardReader | None = None,
    ):
        self._config = config
        self._metadata = metadata_client or HotspotMetadataClient(
            base_url=config.entities_base_url,
            timeout=config.http_timeout,
        )
        self._rewards = reward_reader or RewardReader(config)

    @property
    def mint_names(self) -> list[str]:
        return [name.lower() for name in self._config.mints]

    async def get_hotspot_metadata_and_rewards(self, hotspot_id: str) -> HotspotRewards:
        metadata = await self._metadata.fetch(hotspot_id)
        if not isinstance(metadata, dict):
            raise MalformedAssetIdentifier(
                f"metadata for {hotspot_id!r} is not a JSON object"
            )

        asset_id = parse_asset_id(metadata)
        is_active = parse_is_active(metadata)

        names = list(self._config.mints)
        # read_rewards never raises, so gather cannot cut a sibling short
        results = await asyncio.gather(
            *(
                self._rewards.read_rewards(self._config.mints[name], asset_id)
                for name in names
            )
        )

        logger.debug("Fetched rewards for hotspot %s (asset %s)", hotspot_id, asset_id)
        return HotspotRewards(
            asset_id=str(asset_id),
            is_active=is_active,
            rewards={name.lower(): list(r) for name, r in zip(names, results)},
        )


async def get_hotspot_metadata_and_rewards(
    hotspot_id: str,
    config: RewardsConfig | None = None,
) -> HotspotRewards:
    """Convenience entry point using process configuration by default."""
    service = HotspotRewardsService(config or RewardsConfig.from_settings())
    try:
        return await service.get_hotspot_metadata_and_rewards(hotspot_id)
    except Exception:
        logger.exception("Error in get_hotspot_metadata_and_rewards for %s", hotspot_id)
        raise
