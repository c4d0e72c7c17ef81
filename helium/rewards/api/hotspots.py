# helium/rewards/api/hotspots.py
from __future__ import annotations

from fastapi import APIRouter, Depends

from helium.rewards.api.dependencies import get_rewards_service
from helium.rewards.contracts.hotspot import HotspotRewards
from helium.rewards.core.hotspots import HotspotRewardsService

router = APIRouter(prefix="/hotspots", tags=["hotspots"])


@router.get("/{hotspot_id}/rewards", response_model=HotspotRewards)
async def get_hotspot_rewards(
    hotspot_id: str,
    service: HotspotRewardsService = Depends(get_rewards_service),
) -> HotspotRewards:
    """Asset id, IoT activity flag and current unclaimed rewards per mint."""
    return await service.get_hotspot_metadata_and_rewards(hotspot_id)
