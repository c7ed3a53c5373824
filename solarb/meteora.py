"""Account layouts for Meteora DLMM pairs and DAMM v2 pools."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from solarb.constants import BIN_ARRAY, dlmm_program_id
from solarb.pubkey import Pubkey, find_program_address

DISCRIMINATOR_LEN = 8
BINS_PER_ARRAY = 70
DAMMV2_MIN_LEN = 296


def _key(data: bytes, offset: int) -> Pubkey:
    return Pubkey(data[offset:offset + 32])


def get_dammv2_info(data: bytes) -> tuple[Pubkey, Pubkey, Pubkey, Pubkey]:
    """Read the four addresses stored at bytes 168..296 of a DAMM v2 pool account."""
    data = bytes(data)
    if len(data) < DAMMV2_MIN_LEN:
        raise ValueError("Invalid data length for DAMMv2 info")
    return (_key(data, 168), _key(data, 200), _key(data, 232), _key(data, 264))


@dataclass(frozen=True)
class ProtocolFee:
    amount_x: int
    amount_y: int

    SIZE = 16
    _LAYOUT = struct.Struct("<QQ")

    @classmethod
    def unpack(cls, data: bytes, offset: int) -> "ProtocolFee":
        return cls(*cls._LAYOUT.unpack_from(data, offset))


@dataclass(frozen=True)
class RewardInfo:
    mint: Pubkey
    vault: Pubkey
    funder: Pubkey
    reward_duration: int
    reward_duration_end: int
    reward_rate: int
    last_update_time: int
    cumulative_seconds_with_empty_liquidity_reward: int

    SIZE = 144
    _LAYOUT = struct.Struct("<32s32s32sQQQQQQ")

    @classmethod
    def unpack(cls, data: bytes, offset: int) -> "RewardInfo":
        mint, vault, funder, duration, duration_end, rate_lo, rate_hi, last, cumulative = (
            cls._LAYOUT.unpack_from(data, offset)
        )
        return cls(
            mint=Pubkey(mint),
            vault=Pubkey(vault),
            funder=Pubkey(funder),
            reward_duration=duration,
            reward_duration_end=duration_end,
            reward_rate=rate_lo | (rate_hi << 64),
            last_update_time=last,
            cumulative_seconds_with_empty_liquidity_reward=cumulative,
        )


@dataclass(frozen=True)
class StaticParameters:
    base_factor: int
    filter_period: int
    decay_period: int
    reduction_factor: int
    variable_fee_control: int
    max_volatility_accumulator: int
    min_bin_id: int
    max_bin_id: int
    protocol_share: int
    padding: bytes

    SIZE = 32
    _LAYOUT = struct.Struct("<HHHHIIiiH6s")

    @classmethod
    def unpack(cls, data: bytes, offset: int) -> "StaticParameters":
        return cls(*cls._LAYOUT.unpack_from(data, offset))


@dataclass(frozen=True)
class VariableParameters:
    volatility_accumulator: int
    volatility_reference: int
    index_reference: int
    padding: bytes
    last_update_timestamp: int
    padding_1: bytes

    SIZE = 32
    _LAYOUT = struct.Struct("<IIi4sq8s")

    @classmethod
    def unpack(cls, data: bytes, offset: int) -> "VariableParameters":
        return cls(*cls._LAYOUT.unpack_from(data, offset))


_HEAD = struct.Struct("<1s2sBiHBB2sBB")
_BITMAP = struct.Struct("<16Q")
_TAIL = struct.Struct("<q32s32s32sQQ8sQ32s24s")


@dataclass(frozen=True)
class LbPair:
    """The DLMM liquidity-book pair account body, without its discriminator."""

    parameters: StaticParameters
    v_parameters: VariableParameters
    bump_seed: bytes
    bin_step_seed: bytes
    pair_type: int
    active_id: int
    bin_step: int
    status: int
    require_base_factor_seed: int
    base_factor_seed: bytes
    activation_type: int
    padding_0: int
    token_x_mint: Pubkey
    token_y_mint: Pubkey
    reserve_x: Pubkey
    reserve_y: Pubkey
    protocol_fee: ProtocolFee
    padding_1: bytes
    reward_infos: tuple[RewardInfo, RewardInfo]
    oracle: Pubkey
    bin_array_bitmap: tuple[int, ...]
    last_updated_at: int
    padding_2: bytes
    pre_activation_swap_address: Pubkey
    base_key: Pubkey
    activation_point: int
    pre_activation_duration: int
    padding_3: bytes
    padding_4: int
    creator: Pubkey
    reserved: bytes

    SIZE = 896

    @classmethod
    def from_bytes(cls, data: bytes) -> "LbPair":
        """Decode a pair from the start of data; raises ValueError if it is too short."""
        data = bytes(data)
        if len(data) < cls.SIZE:
            raise ValueError("Data is too small for LbPair")
        (bump_seed, bin_step_seed, pair_type, active_id, bin_step, status,
         require_base_factor_seed, base_factor_seed, activation_type, padding_0) = (
            _HEAD.unpack_from(data, 64)
        )
        (last_updated_at, padding_2, pre_activation_swap_address, base_key,
         activation_point, pre_activation_duration, padding_3, padding_4,
         creator, reserved) = _TAIL.unpack_from(data, 704)
        return cls(
            parameters=StaticParameters.unpack(data, 0),
            v_parameters=VariableParameters.unpack(data, 32),
            bump_seed=bump_seed,
            bin_step_seed=bin_step_seed,
            pair_type=pair_type,
            active_id=active_id,
            bin_step=bin_step,
            status=status,
            require_base_factor_seed=require_base_factor_seed,
            base_factor_seed=base_factor_seed,
            activation_type=activation_type,
            padding_0=padding_0,
            token_x_mint=_key(data, 80),
            token_y_mint=_key(data, 112),
            reserve_x=_key(data, 144),
            reserve_y=_key(data, 176),
            protocol_fee=ProtocolFee.unpack(data, 208),
            padding_1=data[224:256],
            reward_infos=(RewardInfo.unpack(data, 256), RewardInfo.unpack(data, 400)),
            oracle=_key(data, 544),
            bin_array_bitmap=_BITMAP.unpack_from(data, 576),
            last_updated_at=last_updated_at,
            padding_2=padding_2,
            pre_activation_swap_address=Pubkey(pre_activation_swap_address),
            base_key=Pubkey(base_key),
            activation_point=activation_point,
            pre_activation_duration=pre_activation_duration,
            padding_3=padding_3,
            padding_4=padding_4,
            creator=Pubkey(creator),
            reserved=reserved,
        )


@dataclass(frozen=True)
class DlmmInfo:
    """The parts of a DLMM pair needed to route a swap through it."""

    token_x_mint: Pubkey
    token_y_mint: Pubkey
    token_x_vault: Pubkey
    token_y_vault: Pubkey
    oracle: Pubkey
    active_id: int
    lb_pair: LbPair

    @classmethod
    def load_checked(cls, data: bytes) -> "DlmmInfo":
        """Decode a full pair account; raises ValueError if it is too short."""
        data = bytes(data)
        if len(data) < DISCRIMINATOR_LEN + LbPair.SIZE:
            raise ValueError("Invalid data length for DlmmInfo")
        lb_pair = LbPair.from_bytes(data[DISCRIMINATOR_LEN:DISCRIMINATOR_LEN + LbPair.SIZE])
        return cls(
            token_x_mint=lb_pair.token_x_mint,
            token_y_mint=lb_pair.token_y_mint,
            token_x_vault=lb_pair.reserve_x,
            token_y_vault=lb_pair.reserve_y,
            oracle=lb_pair.oracle,
            active_id=lb_pair.active_id,
            lb_pair=lb_pair,
        )

    def get_token_and_sol_vaults(self, mint: Pubkey, sol_mint: Pubkey) -> tuple[Pubkey, Pubkey]:
        """Return (token vault, base vault), preferring the side that holds sol_mint."""
        if sol_mint == self.token_x_mint:
            return self.token_y_vault, self.token_x_vault
        if sol_mint == self.token_y_mint:
            return self.token_x_vault, self.token_y_vault
        if mint == self.token_x_mint:
            return self.token_x_vault, self.token_y_vault
        return self.token_y_vault, self.token_x_vault

    def calculate_bin_arrays(self, pair_pubkey: Pubkey) -> list[Pubkey]:
        """Addresses of the bin arrays just below, at and just above the active bin."""
        index = self.bin_id_to_bin_array_index(self.active_id)
        return [self._bin_array_address(pair_pubkey, index + offset) for offset in (-1, 0, 1)]

    def bin_id_to_bin_array_index(self, bin_id: int) -> int:
        """Index of the bin array holding bin_id, rounding towards negative infinity."""
        return bin_id // BINS_PER_ARRAY

    @staticmethod
    def _bin_array_address(pair: Pubkey, index: int) -> Pubkey:
        seeds = [BIN_ARRAY, bytes(pair), index.to_bytes(8, "little", signed=True)]
        return find_program_address(seeds, dlmm_program_id())[0]