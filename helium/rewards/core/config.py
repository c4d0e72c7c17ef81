# helium/rewards/core/config.py
"""
Central configuration for the hotspot rewards client.

Environment variables override defaults. ``Settings`` is the raw,
string-typed surface; ``RewardsConfig`` is the parsed, immutable struct
that is built once per process and handed to the services.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from solders.pubkey import Pubkey

from helium.rewards.core.errors import ConfigurationError

ENTITIES_BASE_URL = "https://entities.nft.helium.io"
LAZY_DISTRIBUTOR_PROGRAM_ID = "1azyuavdMyvsivtNxPoz6SucD18eDHeXzFCUPq5XU7w"


class Settings(BaseSettings):
    """Environment-driven settings with sensible defaults."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"
    log_json: bool = True

    # Solana RPC used for read-only account access
    rpc_url: str = Field(
        default="https://api.mainnet-beta.solana.com",
        description="Solana JSON-RPC endpoint",
    )
    rpc_commitment: str = Field(default="confirmed")

    # Token mints, one per rewarded network
    iot_mint: str = Field(default="iotEVVZLEywoTn1QdwNPddxPWszn3zFhEot3MfL9fns")
    mobile_mint: str = Field(default="mb1eu7TzEc71KxDpsmsKoucSSuuoGLv1drys1oP2jh6")

    entities_base_url: str = Field(
        default=ENTITIES_BASE_URL,
        description="Hotspot metadata (entities) service",
    )
    lazy_distributor_program_id: str = Field(default=LAZY_DISTRIBUTOR_PROGRAM_ID)

    http_timeout: float = Field(
        default=30.0,
        description="Timeout in seconds for metadata, oracle and RPC requests",
    )


settings = Settings()


def parse_pubkey(name: str, value: str) -> Pubkey:
    try:
        return Pubkey.from_string(value)
    except ValueError as exc:
        raise ConfigurationError(f"{name} is not a valid public key: {value!r}") from exc


@dataclass(frozen=True)
class RewardsConfig:
    """Resolved configuration shared by the orchestrator and reward reader."""

    rpc_url: str
    mints: Mapping[str, Pubkey]
    program_id: Pubkey = field(
        default_factory=lambda: Pubkey.from_string(LAZY_DISTRIBUTOR_PROGRAM_ID)
    )
    rpc_commitment: str = "confirmed"
    entities_base_url: str = ENTITIES_BASE_URL
    http_timeout: float = 30.0

    def __post_init__(self) -> None:
        # Freeze the mapping too; insertion order is the fan-out order.
        object.__setattr__(self, "mints", MappingProxyType(dict(self.mints)))

    @classmethod
    def from_settings(cls, s: Settings | None = None) -> RewardsConfig:
        s = s or settings
        return cls(
            rpc_url=s.rpc_url,
            mints={
                "IOT": parse_pubkey("IOT_MINT", s.iot_mint),
                "MOBILE": parse_pubkey("MOBILE_MINT", s.mobile_mint),
            },
            program_id=parse_pubkey(
                "LAZY_DISTRIBUTOR_PROGRAM_ID", s.lazy_distributor_program_id
            ),
            rpc_commitment=s.rpc_commitment,
            entities_base_url=s.entities_base_url,
            http_timeout=s.http_timeout,
        )
