# helium/rewards/api/exceptions.py
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from helium.rewards.core.errors import MalformedHotspotMetadata, MetadataFetchError

logger = logging.getLogger(__name__)


async def _metadata_fetch_error(request: Request, exc: MetadataFetchError) -> JSONResponse:
    status = 404 if exc.status_code == 404 else 502
    return JSONResponse(
        status_code=status,
        content={"error": "metadata_fetch_error", "message": str(exc)},
    )


async def _malformed_metadata(
    request: Request, exc: MalformedHotspotMetadata
) -> JSONResponse:
    logger.warning("Malformed hotspot metadata on %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=502,
        content={"error": "malformed_metadata", "message": str(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MetadataFetchError, _metadata_fetch_error)
    app.add_exception_handler(MalformedHotspotMetadata, _malformed_metadata)
