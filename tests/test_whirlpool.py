from dataclasses import replace

import pytest

from solarb.constants import MAX_TICK_INDEX, MIN_TICK_INDEX, whirlpool_program_id
from solarb.pubkey import Pubkey, find_program_address
from solarb.whirlpool import (
    derive_first_tick_array_start_tick,
    derive_next_start_tick_in_seq,
    derive_start_tick,
    derive_tick_array_start_indexes,
    extend_tick_arrays,
    get_tick_array_address,
    update_tick_array_accounts_for_onchain,
)
from solarb.whirlpool_state import TICK_ARRAY_SIZE, Tick, Whirlpool

POOL = Pubkey(bytes([9]) * 32)


@pytest.mark.parametrize("tick", [-100000, -5633, -5632, -1, 0, 1, 5631, 5632, 99999])
@pytest.mark.parametrize("spacing", [1, 8, 64])
def test_derive_start_tick_bounds_the_tick(tick, spacing):
    start = derive_start_tick(tick, spacing)
    size = TICK_ARRAY_SIZE * spacing
    assert start <= tick < start + size
    assert Tick.check_is_valid_start_tick(start, spacing)


def test_derive_start_tick_on_boundary_is_identity():
    assert derive_start_tick(-TICK_ARRAY_SIZE * 64, 64) == -TICK_ARRAY_SIZE * 64
    assert derive_start_tick(0, 64) == 0


def test_first_start_tick_shift():
    size = TICK_ARRAY_SIZE * 64
    last_tick = size - 1
    assert derive_first_tick_array_start_tick(last_tick, 64, False) == 0
    assert derive_first_tick_array_start_tick(last_tick, 64, True) == size


def test_next_start_tick_directions():
    size = TICK_ARRAY_SIZE * 64
    assert derive_next_start_tick_in_seq(0, 64, True) == -size
    assert derive_next_start_tick_in_seq(0, 64, False) == size


def test_next_start_tick_out_of_bounds():
    assert derive_next_start_tick_in_seq(MAX_TICK_INDEX - 10, 1, False) is None
    assert derive_next_start_tick_in_seq(MIN_TICK_INDEX + 10, 1, True) is None


def test_start_indexes_form_a_sequence():
    size = TICK_ARRAY_SIZE * 64
    first, second, third = derive_tick_array_start_indexes(1000, 64, True)
    assert first == derive_start_tick(1000, 64)
    assert second == first - size
    assert third == second - size
    first, second, third = derive_tick_array_start_indexes(1000, 64, False)
    assert second == first + size
    assert third == second + size


def test_start_indexes_stop_at_bounds():
    start = derive_start_tick(MAX_TICK_INDEX - 1, 1)
    first, second, third = derive_tick_array_start_indexes(MAX_TICK_INDEX - 1, 1, False)
    assert first == start
    assert second is None
    assert third is None


def test_tick_array_address_seeds_decimal_text():
    program = whirlpool_program_id()
    expected = find_program_address([b"tick_array", bytes(POOL), b"-5632"], program)[0]
    assert get_tick_array_address(POOL, -5632, program) == expected


def test_tick_array_address_differs_by_start():
    program = whirlpool_program_id()
    assert get_tick_array_address(POOL, 0, program) != get_tick_array_address(POOL, 5632, program)


def _pool(tick_spacing, tick_current_index):
    zero = Whirlpool.try_deserialize(bytes(Whirlpool.LEN))
    return replace(zero, tick_spacing=tick_spacing, tick_current_index=tick_current_index)


def test_onchain_accounts_order_and_flags():
    program = whirlpool_program_id()
    size = TICK_ARRAY_SIZE * 64
    pool = _pool(64, 100)
    metas = update_tick_array_accounts_for_onchain(pool, POOL, program)
    assert [m.pubkey for m in metas] == [
        get_tick_array_address(POOL, size, program),
        get_tick_array_address(POOL, 0, program),
        get_tick_array_address(POOL, -size, program),
    ]
    assert all(m.is_writable and not m.is_signer for m in metas)


def _seeded(start):
    return find_program_address(
        [b"tick_array", bytes(POOL), start.to_bytes(4, "little", signed=True)],
        whirlpool_program_id(),
    )[0]


def test_extend_empty_adds_current_array():
    assert extend_tick_arrays(POOL, [], True, 64, 100) == [_seeded(0)]


def test_extend_one_array_moves_in_direction():
    existing = Pubkey(bytes([1]) * 32)
    size = TICK_ARRAY_SIZE * 64
    assert extend_tick_arrays(POOL, [existing], True, 64, 100) == [existing, _seeded(size)]
    assert extend_tick_arrays(POOL, [existing], False, 64, 100) == [existing, _seeded(-size)]


def test_extend_skips_duplicate_and_leaves_input_alone():
    arrays = [_seeded(0)]
    result = extend_tick_arrays(POOL, arrays + [_seeded(5)] * 2, True, 64, 100)
    assert len(result) == 3
    assert arrays == [_seeded(0)]


def test_extend_truncates_negative_tick_towards_zero():
    result = extend_tick_arrays(POOL, [], True, 64, -100)
    assert result == [_seeded(0)]