# tests/core/test_metadata.py
import httpx
import pytest

from helium.rewards.core.errors import MetadataFetchError
from helium.rewards.core.metadata import HotspotMetadataClient


@pytest.mark.asyncio
async def test_fetch_returns_document_unmodified(mock_http):
    doc = {
        "asset_id": "abc",
        "hotspot_infos": {"iot": {"is_active": True}},
        "extra": [1, 2, 3],
    }
    seen = []

    async def handler(request: httpx.Request):
        seen.append(str(request.url))
        return httpx.Response(200, json=doc)

    mock_http(handler)

    client = HotspotMetadataClient(base_url="http://entities.test/")
    result = await client.fetch("112hotspot")

    assert result == doc
    assert seen == ["http://entities.test/112hotspot"]


@pytest.mark.asyncio
async def test_fetch_not_found_raises_with_status(mock_http):
    async def handler(request):
        return httpx.Response(404, json={"error": "not found"})

    mock_http(handler)

    with pytest.raises(MetadataFetchError) as info:
        await HotspotMetadataClient(base_url="http://entities.test").fetch("nope")

    assert info.value.status_code == 404
    assert info.value.hotspot_id == "nope"
    assert isinstance(info.value.__cause__, httpx.HTTPStatusError)


@pytest.mark.asyncio
async def test_fetch_network_error_raises(mock_http):
    async def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    mock_http(handler)

    with pytest.raises(MetadataFetchError) as info:
        await HotspotMetadataClient(base_url="http://entities.test").fetch("h1")

    assert info.value.status_code is None
    assert isinstance(info.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_fetch_invalid_json_raises(mock_http):
    async def handler(request):
        return httpx.Response(200, text="<html>oops</html>")

    mock_http(handler)

    with pytest.raises(MetadataFetchError) as info:
        await HotspotMetadataClient(base_url="http://entities.test").fetch("h1")

    assert isinstance(info.value.__cause__, ValueError)
