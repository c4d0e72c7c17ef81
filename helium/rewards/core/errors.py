# helium/rewards/core/errors.py
from __future__ import annotations


class HotspotRewardsError(Exception):
    pass


class ConfigurationError(HotspotRewardsError):
    pass


class MetadataFetchError(HotspotRewardsError):
    """Hotspot metadata could not be retrieved or parsed.

    ``status_code`` is set when the service answered with a non-success
    status, ``None`` for transport and decoding failures.
    """

    def __init__(
        self,
        hotspot_id: str,
        message: str,
        status_code: int | None = None,
    ):
        self.hotspot_id = hotspot_id
        self.status_code = status_code
        super().__init__(f"Metadata for hotspot {hotspot_id!r}: {message}")


class MalformedHotspotMetadata(HotspotRewardsError):
    pass


class MalformedAssetIdentifier(MalformedHotspotMetadata):
    pass


class AccountDecodeError(HotspotRewardsError):
    pass
