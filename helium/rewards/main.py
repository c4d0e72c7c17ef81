# helium/rewards/main.py
"""
Hotspot rewards application factory.

Exposes the metadata-and-rewards lookup over HTTP. Serve with
``uvicorn helium.rewards.main:create_app --factory``.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI

from helium.rewards.api.discovery import router as discovery_router
from helium.rewards.api.exceptions import register_exception_handlers
from helium.rewards.api.hotspots import router as hotspots_router
from helium.rewards.core.config import RewardsConfig, settings
from helium.rewards.core.hotspots import HotspotRewardsService
from helium.rewards.core.logging import configure_logging

logger = logging.getLogger(__name__)


def create_app(
    config: RewardsConfig | None = None,
    service: HotspotRewardsService | None = None,
) -> FastAPI:
    """Build and wire the hotspot rewards FastAPI application."""
    configure_logging(settings.log_level, json=settings.log_json)
    logger.info("Creating hotspot rewards application (env=%s)", settings.app_env)

    if service is None:
        config = config or RewardsConfig.from_settings(settings)
        service = HotspotRewardsService(config)

    app = FastAPI(
        title="Helium Hotspot Rewards",
        version="0.1.0",
        description="Hotspot asset metadata and unclaimed IoT/Mobile rewards",
    )
    app.state.rewards_service = service

    register_exception_handlers(app)
    app.include_router(discovery_router)
    app.include_router(hotspots_router)

    logger.info("Serving rewards for mints: %s", ", ".join(service.mint_names))
    return app
