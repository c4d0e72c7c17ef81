# helium/rewards/api/dependencies.py
from __future__ import annotations

from fastapi import HTTPException, Request

from helium.rewards.core.hotspots import HotspotRewardsService


def get_rewards_service(request: Request) -> HotspotRewardsService:
    service = getattr(request.app.state, "rewards_service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="Rewards service not initialised")
    return service
