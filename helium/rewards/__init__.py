"""Helium hotspot metadata and unclaimed rewards client."""
from helium.rewards.contracts.hotspot import HotspotRewards
from helium.rewards.core.config import RewardsConfig
from helium.rewards.core.errors import (
    HotspotRewardsError,
    MalformedAssetIdentifier,
    MalformedHotspotMetadata,
    MetadataFetchError,
)
from helium.rewards.core.hotspots import (
    HotspotRewardsService,
    get_hotspot_metadata_and_rewards,
)

__all__ = [
    "HotspotRewards",
    "HotspotRewardsError",
    "HotspotRewardsService",
    "MalformedAssetIdentifier",
    "MalformedHotspotMetadata",
    "MetadataFetchError",
    "RewardsConfig",
    "get_hotspot_metadata_and_rewards",
]
