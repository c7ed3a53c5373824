import struct

import pytest

from solarb.constants import raydium_clmm_program_id
from solarb.pubkey import Pubkey
from solarb.raydium import (
    TICK_ARRAY_SIZE,
    PoolState,
    RaydiumAmmInfo,
    RaydiumCpAmmInfo,
    RewardInfo,
    RewardState,
    compute_tick_array_start_index,
    get_tick_array_pubkeys,
)


def key(n: int) -> bytes:
    return bytes([n]) * 32


def test_amm_info_offsets():
    data = bytearray(464)
    data[336:368] = key(1)
    data[368:400] = key(2)
    data[400:432] = key(3)
    data[432:464] = key(4)
    info = RaydiumAmmInfo.load_checked(bytes(data))
    assert info.coin_vault == Pubkey(key(1))
    assert info.pc_vault == Pubkey(key(2))
    assert info.coin_mint == Pubkey(key(3))
    assert info.pc_mint == Pubkey(key(4))


def test_amm_info_too_short():
    with pytest.raises(ValueError):
        RaydiumAmmInfo.load_checked(bytes(463))


def test_cp_amm_info_offsets():
    data = bytearray(328)
    data[8:40] = key(1)
    data[72:104] = key(2)
    data[104:136] = key(3)
    data[168:200] = key(4)
    data[200:232] = key(5)
    data[296:328] = key(6)
    info = RaydiumCpAmmInfo.load_checked(bytes(data))
    assert info.amm_config == Pubkey(key(1))
    assert info.token_0_vault == Pubkey(key(2))
    assert info.token_1_vault == Pubkey(key(3))
    assert info.token_0_mint == Pubkey(key(4))
    assert info.token_1_mint == Pubkey(key(5))
    assert info.observation_key == Pubkey(key(6))


def test_cp_amm_info_too_short():
    with pytest.raises(ValueError):
        RaydiumCpAmmInfo.load_checked(bytes(327))


def test_reward_state_lookup_by_value():
    states = list(RewardState)
    assert [RewardState(i) for i in range(4)] == states
    with pytest.raises(ValueError):
        RewardState(4)


def test_reward_info_initialized():
    assert not RewardInfo(authority=Pubkey(key(1))).initialized()
    assert RewardInfo(token_mint=Pubkey(key(2))).initialized()


def clmm_data() -> bytes:
    data = bytearray(273)
    data[9:41] = key(1)
    data[41:73] = key(2)
    data[73:105] = key(3)
    data[105:137] = key(4)
    data[137:169] = key(5)
    data[169:201] = key(6)
    data[201:233] = key(7)
    struct.pack_into("<H", data, 235, 10)
    data[237:269] = b"\xff" * 32
    struct.pack_into("<i", data, 269, -1234)
    return bytes(data)


def test_pool_state_fields():
    state = PoolState.load_checked(clmm_data())
    assert state.amm_config == Pubkey(key(1))
    assert state.token_mint_0 == Pubkey(key(3))
    assert state.token_mint_1 == Pubkey(key(4))
    assert state.token_vault_0 == Pubkey(key(5))
    assert state.token_vault_1 == Pubkey(key(6))
    assert state.observation_key == Pubkey(key(7))
    assert state.tick_spacing == 10
    assert state.tick_current == -1234


def test_pool_state_skipped_fields_default():
    state = PoolState.load_checked(clmm_data())
    assert state.owner == Pubkey.default()
    assert state.liquidity == 0
    assert state.sqrt_price_x64 == 0
    assert not any(info.initialized() for info in state.reward_infos)


def test_pool_state_too_short():
    with pytest.raises(ValueError):
        PoolState.load_checked(clmm_data()[:-1])


@pytest.mark.parametrize("tick", [-1000, -61, -60, -1, 0, 1, 59, 60, 12345])
@pytest.mark.parametrize("spacing", [1, 10, 64])
def test_start_index_bounds(tick, spacing):
    span = TICK_ARRAY_SIZE * spacing
    start = compute_tick_array_start_index(tick, spacing)
    assert start % span == 0
    assert start <= tick < start + span


def test_negative_tick_rounds_down():
    assert compute_tick_array_start_index(-1, 1) == -TICK_ARRAY_SIZE


def test_tick_array_pubkeys_count_and_distinct():
    pool = Pubkey(key(8))
    keys = get_tick_array_pubkeys(pool, 100, 1, [-1, 0, 1], raydium_clmm_program_id())
    assert len(keys) == 3
    assert len(set(keys)) == 3


def test_tick_array_pubkeys_offset_matches_shifted_tick():
    pool = Pubkey(key(8))
    program = raydium_clmm_program_id()
    shifted = get_tick_array_pubkeys(pool, -5, 4, [1], program)
    direct = get_tick_array_pubkeys(pool, -5 + TICK_ARRAY_SIZE * 4, 4, [0], program)
    assert shifted == direct


def test_tick_array_pubkeys_same_array_same_key():
    pool = Pubkey(key(8))
    program = raydium_clmm_program_id()
    assert get_tick_array_pubkeys(pool, 1, 1, [0], program) == get_tick_array_pubkeys(
        pool, 59, 1, [0], program
    )