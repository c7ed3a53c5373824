"""Tick array start indexes and addresses for Whirlpool swaps."""

from __future__ import annotations

from typing import Iterable, Optional

from solarb.constants import MAX_TICK_INDEX, MIN_TICK_INDEX, whirlpool_program_id
from solarb.pubkey import AccountMeta, Pubkey, find_program_address
from solarb.whirlpool_state import TICK_ARRAY_SIZE, Whirlpool

TickArrayStartIndexes = tuple[int, Optional[int], Optional[int]]


def _ticks_in_array(tick_spacing: int) -> int:
    return TICK_ARRAY_SIZE * tick_spacing


def _truncated_rem(value: int, divisor: int) -> int:
    rem = abs(value) % abs(divisor)
    return -rem if value < 0 else rem


def derive_start_tick(curr_tick: int, tick_spacing: int) -> int:
    """Start tick of the array holding curr_tick, rounding towards negative infinity."""
    size = _ticks_in_array(tick_spacing)
    return (curr_tick // size) * size


def derive_first_tick_array_start_tick(curr_tick: int, tick_spacing: int, shifted: bool) -> int:
    """Start tick of the first array a swap touches; shifted moves one spacing up first."""
    tick = curr_tick + tick_spacing if shifted else curr_tick
    return derive_start_tick(tick, tick_spacing)


def derive_next_start_tick_in_seq(start_tick: int, tick_spacing: int, a_to_b: bool) -> Optional[int]:
    """Start tick of the next array in swap direction, or None past the tick bounds."""
    size = _ticks_in_array(tick_spacing)
    candidate = start_tick - size if a_to_b else start_tick + size
    if MIN_TICK_INDEX < candidate < MAX_TICK_INDEX:
        return candidate
    return None


def derive_tick_array_start_indexes(curr_tick: int, tick_spacing: int, a_to_b: bool) -> TickArrayStartIndexes:
    """Start ticks of up to three consecutive arrays a swap may cross."""
    first = derive_first_tick_array_start_tick(curr_tick, tick_spacing, not a_to_b)
    second = derive_next_start_tick_in_seq(first, tick_spacing, a_to_b)
    third = None if second is None else derive_next_start_tick_in_seq(second, tick_spacing, a_to_b)
    return first, second, third


def get_tick_array_address(whirlpool: Pubkey, start_tick_index: int, program_id: Pubkey) -> Pubkey:
    """Address of a tick array; the start index is seeded as decimal text."""
    seeds = [b"tick_array", bytes(whirlpool), str(start_tick_index).encode()]
    return find_program_address(seeds, program_id)[0]


def update_tick_array_accounts_for_onchain(
    whirlpool: Whirlpool, whirlpool_pk: Pubkey, whirlpool_program_id: Pubkey
) -> list[AccountMeta]:
    """Writable tick array accounts: one above, the current one, and one below."""
    forward = derive_tick_array_start_indexes(whirlpool.tick_current_index, whirlpool.tick_spacing, True)
    reverse = derive_tick_array_start_indexes(whirlpool.tick_current_index, whirlpool.tick_spacing, False)
    starts = (
        reverse[1] if reverse[1] is not None else reverse[0],
        forward[0],
        forward[1] if forward[1] is not None else forward[0],
    )
    return [
        AccountMeta.writable(get_tick_array_address(whirlpool_pk, start, whirlpool_program_id), False)
        for start in starts
    ]


def extend_tick_arrays(
    whirlpool: Pubkey,
    tick_arrays: Iterable[Pubkey],
    a_to_b: bool,
    tick_spacing: int,
    tick_current_index: int,
) -> list[Pubkey]:
    """Return the tick arrays with one more array in swap direction appended if absent."""
    arrays = list(tick_arrays)
    offset = 0
    if len(arrays) in (1, 2):
        offset = 1 if a_to_b else -1
    size = _ticks_in_array(tick_spacing)
    start = tick_current_index - _truncated_rem(tick_current_index, size) + offset * size
    address, _ = find_program_address(
        [b"tick_array", bytes(whirlpool), start.to_bytes(4, "little", signed=True)],
        whirlpool_program_id(),
    )
    if address not in arrays:
        arrays.append(address)
    return arrays