# helium/rewards/cli.py
"""Print a hotspot's asset id, activity flag and current rewards as JSON.

    hotspot-rewards 112qB3YaH5bZkCnKA5uRH7tBtGNv2Y5B4smv1jsmvGUzgKT71QpE
"""
from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Sequence

from helium.rewards.core.config import RewardsConfig, Settings
from helium.rewards.core.errors import HotspotRewardsError
from helium.rewards.core.hotspots import HotspotRewardsService
from helium.rewards.core.logging import configure_logging

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="hotspot-rewards",
        description="Fetch Helium hotspot metadata and unclaimed IoT/Mobile rewards",
    )
    parser.add_argument("hotspot_id", help="Hotspot (gateway) address")
    parser.add_argument("--rpc-url", default=None, help="Override RPC_URL")
    parser.add_argument("--indent", type=int, default=None, help="JSON indent")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override LOG_LEVEL (logs go to stderr)",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)

    overrides = {"rpc_url": args.rpc_url} if args.rpc_url else {}
    s = Settings(**overrides)
    # stdout carries the result
    configure_logging(
        args.log_level or s.log_level, json=s.log_json, stream=sys.stderr
    )

    try:
        config = RewardsConfig.from_settings(s)
        service = HotspotRewardsService(config)
        result = asyncio.run(service.get_hotspot_metadata_and_rewards(args.hotspot_id))
    except HotspotRewardsError as exc:
        logger.error("Lookup failed for %s: %s", args.hotspot_id, exc)
        return 1

    print(json.dumps(result.to_dict(), indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
