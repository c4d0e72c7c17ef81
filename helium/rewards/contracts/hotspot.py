# helium/rewards/contracts/hotspot.py
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class HotspotRewards(BaseModel):
    """Asset identity, activity flag and current rewards of one hotspot.

    ``rewards`` maps the lower-cased mint name to the amounts (token base
    units) reported for it, one per answering oracle.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    asset_id: str = Field(alias="assetId")
    is_active: bool = Field(alias="isActive")
    rewards: dict[str, list[int]]

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
