"""Account layouts for Whirlpool pools and their ticks."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

from solarb.pubkey import Pubkey

NUM_REWARDS = 3
TICK_ARRAY_SIZE = 88
DISCRIMINATOR_LEN = 8

_BODY = struct.Struct("<32s1sH2sHH16s16siQQ32s32s16s32s32s16sQ")
_REWARD = struct.Struct("<32s32s32s16s16s")


def _u128(raw: bytes) -> int:
    return int.from_bytes(raw, "little")


@dataclass(frozen=True)
class WhirlpoolRewardInfo:
    """A Whirlpool reward slot."""

    mint: Pubkey = field(default_factory=Pubkey.default)
    vault: Pubkey = field(default_factory=Pubkey.default)
    authority: Pubkey = field(default_factory=Pubkey.default)
    emissions_per_second_x64: int = 0
    growth_global_x64: int = 0

    SIZE = 128

    @classmethod
    def unpack(cls, data: bytes, offset: int) -> "WhirlpoolRewardInfo":
        mint, vault, authority, emissions, growth = _REWARD.unpack_from(data, offset)
        return cls(
            mint=Pubkey(mint),
            vault=Pubkey(vault),
            authority=Pubkey(authority),
            emissions_per_second_x64=_u128(emissions),
            growth_global_x64=_u128(growth),
        )


@dataclass(frozen=True)
class Whirlpool:
    """A Whirlpool concentrated-liquidity pool account."""

    whirlpools_config: Pubkey
    whirlpool_bump: bytes
    tick_spacing: int
    tick_spacing_seed: bytes
    fee_rate: int
    protocol_fee_rate: int
    liquidity: int
    sqrt_price: int
    tick_current_index: int
    protocol_fee_owed_a: int
    protocol_fee_owed_b: int
    token_mint_a: Pubkey
    token_vault_a: Pubkey
    fee_growth_global_a: int
    token_mint_b: Pubkey
    token_vault_b: Pubkey
    fee_growth_global_b: int
    reward_last_updated_timestamp: int
    reward_infos: tuple[WhirlpoolRewardInfo, ...]

    LEN = DISCRIMINATOR_LEN + 261 + 384

    @classmethod
    def try_deserialize(cls, data: bytes) -> "Whirlpool":
        """Decode a pool account; raises ValueError if it is too short."""
        data = bytes(data)
        if len(data) < cls.LEN:
            raise ValueError("data too short for Whirlpool")
        (config, bump, tick_spacing, tick_spacing_seed, fee_rate, protocol_fee_rate,
         liquidity, sqrt_price, tick_current_index, fee_owed_a, fee_owed_b,
         mint_a, vault_a, growth_a, mint_b, vault_b, growth_b,
         reward_timestamp) = _BODY.unpack_from(data, DISCRIMINATOR_LEN)
        rewards_start = DISCRIMINATOR_LEN + _BODY.size
        reward_infos = tuple(
            WhirlpoolRewardInfo.unpack(data, rewards_start + slot * WhirlpoolRewardInfo.SIZE)
            for slot in range(NUM_REWARDS)
        )
        return cls(
            whirlpools_config=Pubkey(config),
            whirlpool_bump=bump,
            tick_spacing=tick_spacing,
            tick_spacing_seed=tick_spacing_seed,
            fee_rate=fee_rate,
            protocol_fee_rate=protocol_fee_rate,
            liquidity=_u128(liquidity),
            sqrt_price=_u128(sqrt_price),
            tick_current_index=tick_current_index,
            protocol_fee_owed_a=fee_owed_a,
            protocol_fee_owed_b=fee_owed_b,
            token_mint_a=Pubkey(mint_a),
            token_vault_a=Pubkey(vault_a),
            fee_growth_global_a=_u128(growth_a),
            token_mint_b=Pubkey(mint_b),
            token_vault_b=Pubkey(vault_b),
            fee_growth_global_b=_u128(growth_b),
            reward_last_updated_timestamp=reward_timestamp,
            reward_infos=reward_infos,
        )


@dataclass(frozen=True)
class Tick:
    """One tick of a tick array."""

    initialized: bool = False
    liquidity_net: int = 0
    liquidity_gross: int = 0
    fee_growth_outside_a: int = 0
    fee_growth_outside_b: int = 0
    reward_growths_outside: tuple[int, ...] = (0,) * NUM_REWARDS

    @staticmethod
    def check_is_valid_start_tick(tick_index: int, tick_spacing: int) -> bool:
        """True if tick_index is the first tick of some tick array."""
        return tick_index % (tick_spacing * TICK_ARRAY_SIZE) == 0


def _default_ticks() -> tuple[Tick, ...]:
    return tuple(Tick() for _ in range(TICK_ARRAY_SIZE))


@dataclass(frozen=True)
class TickArray:
    """A run of consecutive ticks belonging to one pool."""

    start_tick_index: int = 0
    ticks: tuple[Tick, ...] = field(default_factory=_default_ticks)
    whirlpool: Pubkey = field(default_factory=Pubkey.default)