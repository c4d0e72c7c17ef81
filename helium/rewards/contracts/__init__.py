from helium.rewards.contracts.hotspot import HotspotRewards

__all__ = ["HotspotRewards"]
