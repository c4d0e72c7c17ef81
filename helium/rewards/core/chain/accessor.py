# helium/rewards/core/chain/accessor.py
"""
Read-only access to Solana accounts.

Reward lookups never sign or submit anything, so the chain is consumed
through a narrow capability rather than a wallet-backed provider.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable

from solana.rpc.async_api import AsyncClient
from solana.rpc.commitment import Commitment
from solders.keypair import Keypair
from solders.pubkey import Pubkey

logger = logging.getLogger(__name__)


class ChainAccessor(ABC):
    @abstractmethod
    async def get_account_data(self, address: Pubkey) -> bytes | None:
        """
        Return the raw data of the account at ``address``.
        Returns None when the account does not exist.
        """
        ...

    async def close(self) -> None:
        return None

    async def __aenter__(self) -> ChainAccessor:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()


ChainAccessorFactory = Callable[[], ChainAccessor]


class SolanaChainAccessor(ChainAccessor):
    """solana-py backed accessor with a throwaway identity.

    The keypair is generated per accessor and never leaves it; it only
    gives the connection an owner for log correlation.
    """

    def __init__(
        self,
        rpc_url: str,
        *,
        commitment: str = "confirmed",
        timeout: float = 30.0,
    ):
        self._identity = Keypair()
        self._client = AsyncClient(
            rpc_url,
            commitment=Commitment(commitment),
            timeout=timeout,
        )
        logger.debug(
            "Opened read-only RPC connection to %s as %s",
            rpc_url,
            self._identity.pubkey(),
        )

    @property
    def identity(self) -> Pubkey:
        return self._identity.pubkey()

    async def get_account_data(self, address: Pubkey) -> bytes | None:
        resp = await self._client.get_account_info(address)
        if resp.value is None:
            return None
        return bytes(resp.value.data)

    async def close(self) -> None:
        await self._client.close()
