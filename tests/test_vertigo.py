import pytest

from solarb.pubkey import Pubkey, is_on_curve
from solarb.vertigo import VertigoInfo, VertigoPool, derive_vault_address


def key(n: int) -> Pubkey:
    return Pubkey(bytes([n]) * 32)


def pool_bytes() -> bytes:
    return bytes(key(1)) + bytes(key(2)) + bytes(key(3))


def test_deserialize_fields():
    pool = VertigoPool.try_deserialize(pool_bytes())
    assert pool.mint_a == key(1)
    assert pool.mint_b == key(2)
    assert pool.owner == key(3)


def test_round_trip():
    pool = VertigoPool(key(5), key(6), key(7))
    assert VertigoPool.try_deserialize(bytes(pool)) == pool


def test_short_input_raises():
    with pytest.raises(ValueError):
        VertigoPool.try_deserialize(pool_bytes()[:-1])


def test_trailing_bytes_raise():
    with pytest.raises(ValueError):
        VertigoPool.try_deserialize(pool_bytes() + b"\0")


def test_load_checked_keeps_pool_address():
    info = VertigoInfo.load_checked(pool_bytes(), key(9))
    assert info.pool == key(9)
    assert (info.mint_a, info.mint_b) == (key(1), key(2))


def test_load_checked_propagates_error():
    with pytest.raises(ValueError):
        VertigoInfo.load_checked(b"", key(9))


def test_vaults_swap_with_base_mint():
    info = VertigoInfo.load_checked(pool_bytes(), key(9))
    token_a, base_a = info.get_token_and_sol_vaults(str(key(1)), key(4))
    token_b, base_b = info.get_token_and_sol_vaults(str(key(2)), key(4))
    assert (token_a, base_a) == (base_b, token_b)
    assert token_a != base_a


def test_unknown_base_mint_treated_as_mint_b():
    info = VertigoInfo.load_checked(pool_bytes(), key(9))
    assert info.get_token_and_sol_vaults("unknown", key(4)) == info.get_token_and_sol_vaults(
        str(key(2)), key(4)
    )


def test_derive_vault_address_properties():
    address, bump = derive_vault_address(key(9), key(1))
    assert 0 <= bump <= 255
    assert not is_on_curve(bytes(address))
    assert derive_vault_address(key(9), key(1)) == (address, bump)
    assert derive_vault_address(key(9), key(2))[0] != address


def test_vault_seed_differs_from_pool_vaults():
    info = VertigoInfo.load_checked(pool_bytes(), key(9))
    _, base_vault = info.get_token_and_sol_vaults(str(key(1)), key(4))
    assert derive_vault_address(key(9), key(1))[0] != base_vault