# helium/rewards/core/chain/lazy_distributor.py
"""
Lazy distributor program: address derivation and account decoding.

Only the prefix of ``LazyDistributorV0`` needed to reach the oracle
configuration is decoded:

    discriminator   [u8; 8]
    version         u16
    rewards_mint    Pubkey
    rewards_escrow  Pubkey
    authority       Pubkey
    oracles         Vec<{ oracle: Pubkey, url: String }>
    bump_seed       u8
"""
from __future__ import annotations

import hashlib
import struct
from dataclasses import dataclass

from solders.pubkey import Pubkey

from helium.rewards.core.errors import AccountDecodeError

LAZY_DISTRIBUTOR_SEED = b"lazy_distributor"
LAZY_DISTRIBUTOR_DISCRIMINATOR = hashlib.sha256(
    b"account:LazyDistributorV0"
).digest()[:8]


def lazy_distributor_key(mint: Pubkey, program_id: Pubkey) -> Pubkey:
    address, _bump = Pubkey.find_program_address(
        [LAZY_DISTRIBUTOR_SEED, bytes(mint)], program_id
    )
    return address


class _Reader:
    def __init__(self, data: bytes):
        self._data = data
        self._pos = 0

    def take(self, n: int) -> bytes:
        end = self._pos + n
        if end > len(self._data):
            raise AccountDecodeError(
                f"account data truncated: need {end} bytes, have {len(self._data)}"
            )
        chunk = self._data[self._pos : end]
        self._pos = end
        return chunk

    def u8(self) -> int:
        return self.take(1)[0]

    def u16(self) -> int:
        return struct.unpack("<H", self.take(2))[0]

    def u32(self) -> int:
        return struct.unpack("<I", self.take(4))[0]

    def pubkey(self) -> Pubkey:
        return Pubkey.from_bytes(self.take(32))

    def string(self) -> str:
        raw = self.take(self.u32())
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise AccountDecodeError(f"invalid utf-8 string: {exc}") from exc


@dataclass(frozen=True)
class OracleConfig:
    oracle: Pubkey
    url: str


@dataclass(frozen=True)
class LazyDistributorAccount:
    version: int
    rewards_mint: Pubkey
    rewards_escrow: Pubkey
    authority: Pubkey
    oracles: tuple[OracleConfig, ...]
    bump_seed: int

    @classmethod
    def from_bytes(cls, data: bytes) -> LazyDistributorAccount:
        reader = _Reader(data)
        if reader.take(8) != LAZY_DISTRIBUTOR_DISCRIMINATOR:
            raise AccountDecodeError("not a LazyDistributorV0 account")

        version = reader.u16()
        rewards_mint = reader.pubkey()
        rewards_escrow = reader.pubkey()
        authority = reader.pubkey()
        oracles = tuple(
            OracleConfig(oracle=reader.pubkey(), url=reader.string())
            for _ in range(reader.u32())
        )
        return cls(
            version=version,
            rewards_mint=rewards_mint,
            rewards_escrow=rewards_escrow,
            authority=authority,
            oracles=oracles,
            bump_seed=reader.u8(),
        )
