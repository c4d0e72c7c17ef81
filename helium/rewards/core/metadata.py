# helium/rewards/core/metadata.py
"""
Hotspot metadata lookup against the Helium entities service.

The service maps a hotspot (gateway) address to the JSON document of its
compressed NFT, including the on-chain ``asset_id`` and per-network
activity flags under ``hotspot_infos``.
"""
from __future__ import annotations

import logging
from typing import Any

import httpx

from helium.rewards.core.config import ENTITIES_BASE_URL
from helium.rewards.core.errors import MetadataFetchError

logger = logging.getLogger(__name__)


class HotspotMetadataClient:
    def __init__(
        self,
        *,
        base_url: str = ENTITIES_BASE_URL,
        timeout: float = 30.0,
    ):
        self._base = base_url.rstrip("/")
        self._timeout = timeout

    async def fetch(self, hotspot_id: str) -> dict[str, Any]:
        """Return the metadata document for ``hotspot_id`` as served."""
        url = f"{self._base}/{hotspot_id}"

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                r = await client.get(url)
                r.raise_for_status()
                return r.json()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Error fetching hotspot info for %s: HTTP %s",
                hotspot_id,
                exc.response.status_code,
            )
            raise MetadataFetchError(
                hotspot_id,
                f"service returned HTTP {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            logger.error("Error fetching hotspot info for %s: %s", hotspot_id, exc)
            raise MetadataFetchError(hotspot_id, f"request failed: {exc}") from exc
        except ValueError as exc:
            logger.error("Invalid hotspot info JSON for %s: %s", hotspot_id, exc)
            raise MetadataFetchError(hotspot_id, f"invalid JSON body: {exc}") from exc
