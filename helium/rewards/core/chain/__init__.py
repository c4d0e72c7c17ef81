from helium.rewards.core.chain.accessor import (
    ChainAccessor,
    ChainAccessorFactory,
    SolanaChainAccessor,
)
from helium.rewards.core.chain.lazy_distributor import (
    LazyDistributorAccount,
    OracleConfig,
    lazy_distributor_key,
)

__all__ = [
    "ChainAccessor",
    "ChainAccessorFactory",
    "SolanaChainAccessor",
    "LazyDistributorAccount",
    "OracleConfig",
    "lazy_distributor_key",
]
