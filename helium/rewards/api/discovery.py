# helium/rewards/api/discovery.py
"""
Root-level health endpoint.
"""
from __future__ import annotations

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health(request: Request) -> dict:
    service = getattr(request.app.state, "rewards_service", None)
    return {
        "status": "healthy",
        "mints": service.mint_names if service else [],
    }
