"""Account layouts for Raydium AMM, CP-swap and CLMM pools."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass, field
from typing import Iterable

from solarb.pubkey import Pubkey, find_program_address

TICK_ARRAY_SEED = b"tick_array"
TICK_ARRAY_SIZE = 60
REWARD_NUM = 3
POOL_TICK_ARRAY_BITMAP_SEED = b"pool_tick_array_bitmap_extension"

_COIN_VAULT_OFFSET = 336
_PC_VAULT_OFFSET = 368
_COIN_MINT_OFFSET = 400
_PC_MINT_OFFSET = 432

_CP_AMM_CONFIG_OFFSET = 8
_CP_TOKEN_0_VAULT_OFFSET = 72
_CP_TOKEN_1_VAULT_OFFSET = 104
_CP_TOKEN_0_MINT_OFFSET = 168
_CP_TOKEN_1_MINT_OFFSET = 200
_CP_OBSERVATION_KEY_OFFSET = 296

# Offsets inside a CLMM pool account, discriminator included.
_CLMM_AMM_CONFIG = 9
_CLMM_TOKEN_MINT_0 = 73
_CLMM_TOKEN_MINT_1 = 105
_CLMM_TOKEN_VAULT_0 = 137
_CLMM_TOKEN_VAULT_1 = 169
_CLMM_OBSERVATION_KEY = 201
_CLMM_TICK_SPACING = 235
_CLMM_TICK_CURRENT = 269
_CLMM_MIN_LEN = _CLMM_TICK_CURRENT + 4


def _key(data: bytes, offset: int) -> Pubkey:
    return Pubkey(data[offset:offset + 32])


@dataclass(frozen=True)
class RaydiumAmmInfo:
    """Mints and vaults of a Raydium AMM v4 pool."""

    coin_mint: Pubkey
    pc_mint: Pubkey
    coin_vault: Pubkey
    pc_vault: Pubkey

    @classmethod
    def load_checked(cls, data: bytes) -> "RaydiumAmmInfo":
        """Decode a pool account; raises ValueError if it is too short."""
        data = bytes(data)
        if len(data) < _PC_MINT_OFFSET + 32:
            raise ValueError("Invalid data length for RaydiumAmmInfo")
        return cls(
            coin_mint=_key(data, _COIN_MINT_OFFSET),
            pc_mint=_key(data, _PC_MINT_OFFSET),
            coin_vault=_key(data, _COIN_VAULT_OFFSET),
            pc_vault=_key(data, _PC_VAULT_OFFSET),
        )


@dataclass(frozen=True)
class RaydiumCpAmmInfo:
    """Mints, vaults, config and observation account of a Raydium CP-swap pool."""

    token_0_mint: Pubkey
    token_1_mint: Pubkey
    token_0_vault: Pubkey
    token_1_vault: Pubkey
    amm_config: Pubkey
    observation_key: Pubkey

    @classmethod
    def load_checked(cls, data: bytes) -> "RaydiumCpAmmInfo":
        """Decode a pool account; raises ValueError if it is too short."""
        data = bytes(data)
        if len(data) < _CP_OBSERVATION_KEY_OFFSET + 32:
            raise ValueError("Invalid data length for RaydiumCpAmmInfo")
        return cls(
            token_0_mint=_key(data, _CP_TOKEN_0_MINT_OFFSET),
            token_1_mint=_key(data, _CP_TOKEN_1_MINT_OFFSET),
            token_0_vault=_key(data, _CP_TOKEN_0_VAULT_OFFSET),
            token_1_vault=_key(data, _CP_TOKEN_1_VAULT_OFFSET),
            amm_config=_key(data, _CP_AMM_CONFIG_OFFSET),
            observation_key=_key(data, _CP_OBSERVATION_KEY_OFFSET),
        )


class RewardState(enum.IntEnum):
    UNINITIALIZED = 0
    INITIALIZED = 1
    OPENING = 2
    ENDED = 3


@dataclass
class RewardInfo:
    """A CLMM pool reward slot."""

    reward_state: int = 0
    open_time: int = 0
    end_time: int = 0
    last_update_time: int = 0
    emissions_per_second_x64: int = 0
    reward_total_emissioned: int = 0
    reward_claimed: int = 0
    token_mint: Pubkey = field(default_factory=Pubkey.default)
    token_vault: Pubkey = field(default_factory=Pubkey.default)
    authority: Pubkey = field(default_factory=Pubkey.default)
    reward_growth_global_x64: int = 0

    def initialized(self) -> bool:
        """True once a reward mint has been assigned."""
        return self.token_mint != Pubkey.default()


def _default_rewards() -> tuple[RewardInfo, ...]:
    return tuple(RewardInfo() for _ in range(REWARD_NUM))


@dataclass
class PoolState:
    """A Raydium CLMM pool; load_checked fills only the fields routing needs."""

    bump: bytes = b"\0"
    amm_config: Pubkey = field(default_factory=Pubkey.default)
    owner: Pubkey = field(default_factory=Pubkey.default)
    token_mint_0: Pubkey = field(default_factory=Pubkey.default)
    token_mint_1: Pubkey = field(default_factory=Pubkey.default)
    token_vault_0: Pubkey = field(default_factory=Pubkey.default)
    token_vault_1: Pubkey = field(default_factory=Pubkey.default)
    observation_key: Pubkey = field(default_factory=Pubkey.default)
    mint_decimals_0: int = 0
    mint_decimals_1: int = 0
    tick_spacing: int = 0
    liquidity: int = 0
    sqrt_price_x64: int = 0
    tick_current: int = 0
    padding3: int = 0
    padding4: int = 0
    fee_growth_global_0_x64: int = 0
    fee_growth_global_1_x64: int = 0
    protocol_fees_token_0: int = 0
    protocol_fees_token_1: int = 0
    swap_in_amount_token_0: int = 0
    swap_out_amount_token_1: int = 0
    swap_in_amount_token_1: int = 0
    swap_out_amount_token_0: int = 0
    status: int = 0
    padding: bytes = bytes(7)
    reward_infos: tuple[RewardInfo, ...] = field(default_factory=_default_rewards)
    tick_array_bitmap: tuple[int, ...] = (0,) * 16
    total_fees_token_0: int = 0
    total_fees_claimed_token_0: int = 0
    total_fees_token_1: int = 0
    total_fees_claimed_token_1: int = 0
    fund_fees_token_0: int = 0
    fund_fees_token_1: int = 0
    open_time: int = 0
    recent_epoch: int = 0
    padding1: tuple[int, ...] = (0,) * 24
    padding2: tuple[int, ...] = (0,) * 32

    @classmethod
    def load_checked(cls, data: bytes) -> "PoolState":
        """Decode config, mints, vaults, observation, tick spacing and current tick."""
        data = bytes(data)
        if len(data) < _CLMM_MIN_LEN:
            raise ValueError("Invalid data length for RaydiumClmmPoolState")
        (tick_spacing,) = struct.unpack_from("<H", data, _CLMM_TICK_SPACING)
        (tick_current,) = struct.unpack_from("<i", data, _CLMM_TICK_CURRENT)
        return cls(
            amm_config=_key(data, _CLMM_AMM_CONFIG),
            token_mint_0=_key(data, _CLMM_TOKEN_MINT_0),
            token_mint_1=_key(data, _CLMM_TOKEN_MINT_1),
            token_vault_0=_key(data, _CLMM_TOKEN_VAULT_0),
            token_vault_1=_key(data, _CLMM_TOKEN_VAULT_1),
            observation_key=_key(data, _CLMM_OBSERVATION_KEY),
            tick_spacing=tick_spacing,
            tick_current=tick_current,
        )


def compute_tick_array_start_index(tick: int, tick_spacing: int) -> int:
    """Start tick of the tick array holding tick, rounding towards negative infinity."""
    ticks_in_array = TICK_ARRAY_SIZE * tick_spacing
    return (tick // ticks_in_array) * ticks_in_array


def get_tick_array_pubkeys(
    pool_pubkey: Pubkey,
    tick_current: int,
    tick_spacing: int,
    offsets: Iterable[int],
    raydium_clmm_program_id: Pubkey,
) -> list[Pubkey]:
    """Tick array addresses at the given array offsets from the one holding tick_current."""
    ticks_in_array = TICK_ARRAY_SIZE * tick_spacing
    base = compute_tick_array_start_index(tick_current, tick_spacing)
    return [
        find_program_address(
            [
                TICK_ARRAY_SEED,
                bytes(pool_pubkey),
                (base + offset * ticks_in_array).to_bytes(4, "big", signed=True),
            ],
            raydium_clmm_program_id,
        )[0]
        for offset in offsets
    ]