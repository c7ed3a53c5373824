"""Account layout for Pump AMM pools."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from solarb.constants import pump_program_id
from solarb.pubkey import Pubkey, find_program_address

logger = logging.getLogger(__name__)

# discriminator, bump, index, creator
_HEADER_LEN = 8 + 1 + 2 + 32
_BODY_MIN_LEN = 5 * 32
_COIN_CREATOR_MIN_LEN = 257
_COIN_CREATOR_OFFSET = 168


def _key(data: bytes, offset: int) -> Pubkey:
    chunk = data[offset:offset + 32]
    if len(chunk) != 32:
        raise ValueError(f"no 32-byte address at offset {offset}")
    return Pubkey(chunk)


@dataclass(frozen=True)
class PumpAmmInfo:
    """Mints and vaults of a Pump AMM pool."""

    base_mint: Pubkey
    quote_mint: Pubkey
    pool_base_token_account: Pubkey
    pool_quote_token_account: Pubkey
    coin_creator_vault_authority: Pubkey

    @classmethod
    def load_checked(cls, data: bytes) -> "PumpAmmInfo":
        """Decode a pool account; raises ValueError if it is too short."""
        body = bytes(data)[_HEADER_LEN:]
        if len(body) < _BODY_MIN_LEN:
            raise ValueError("Invalid data length for PumpAmmInfo")
        logger.debug("pump pool body length: %d", len(body))

        if len(body) < _COIN_CREATOR_MIN_LEN:
            coin_creator = Pubkey.default()
        else:
            coin_creator = _key(body, _COIN_CREATOR_OFFSET)
        authority, _ = find_program_address(
            [b"creator_vault", bytes(coin_creator)], pump_program_id()
        )
        logger.debug("coin creator vault authority: %s", authority)

        return cls(
            base_mint=_key(body, 0),
            quote_mint=_key(body, 32),
            pool_base_token_account=_key(body, 96),
            pool_quote_token_account=_key(body, 128),
            coin_creator_vault_authority=authority,
        )


def get_pump_info(data: bytes) -> Pubkey:
    """Read the address stored at bytes 168..200 of a pool account."""
    return _key(bytes(data), _COIN_CREATOR_OFFSET)