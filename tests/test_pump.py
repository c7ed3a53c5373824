import pytest

from solarb.constants import pump_program_id
from solarb.pubkey import Pubkey, find_program_address
from solarb.pump import PumpAmmInfo, get_pump_info

HEADER = 43


def key(n: int) -> bytes:
    return bytes([n]) * 32


def pump_data(body_len: int, creator: bytes = key(9)) -> bytes:
    body = bytearray(body_len)
    body[0:32] = key(1)
    body[32:64] = key(2)
    body[96:128] = key(3)
    body[128:160] = key(4)
    if body_len >= 200:
        body[168:200] = creator
    return bytes(HEADER) + bytes(body)


def test_reads_mints_and_vaults():
    info = PumpAmmInfo.load_checked(pump_data(300))
    assert info.base_mint == Pubkey(key(1))
    assert info.quote_mint == Pubkey(key(2))
    assert info.pool_base_token_account == Pubkey(key(3))
    assert info.pool_quote_token_account == Pubkey(key(4))


def test_coin_creator_used_when_body_long_enough():
    info = PumpAmmInfo.load_checked(pump_data(257))
    expected, _ = find_program_address([b"creator_vault", key(9)], pump_program_id())
    assert info.coin_creator_vault_authority == expected


def test_short_body_uses_default_creator():
    info = PumpAmmInfo.load_checked(pump_data(256))
    expected, _ = find_program_address([b"creator_vault", bytes(32)], pump_program_id())
    assert info.coin_creator_vault_authority == expected


def test_different_creators_give_different_authorities():
    first = PumpAmmInfo.load_checked(pump_data(300, key(9)))
    second = PumpAmmInfo.load_checked(pump_data(300, key(10)))
    assert first.coin_creator_vault_authority != second.coin_creator_vault_authority
    assert first.base_mint == second.base_mint


@pytest.mark.parametrize("body_len", [0, 100, 135])
def test_too_short_raises(body_len):
    with pytest.raises(ValueError):
        PumpAmmInfo.load_checked(bytes(HEADER) + bytes(body_len))


def test_empty_data_raises():
    with pytest.raises(ValueError):
        PumpAmmInfo.load_checked(b"")


def test_get_pump_info_reads_raw_offset():
    data = bytearray(250)
    data[168:200] = key(7)
    assert get_pump_info(bytes(data)) == Pubkey(key(7))


def test_get_pump_info_short_raises():
    with pytest.raises(ValueError):
        get_pump_info(bytes(190))