"""Account layout for Solfi pools."""

from __future__ import annotations

from dataclasses import dataclass

from solarb.pubkey import Pubkey

_BASE_MINT = 2664
_QUOTE_MINT = 2696
_BASE_VAULT = 2736
_QUOTE_VAULT = 2768
MIN_LEN = _QUOTE_VAULT + 32


@dataclass(frozen=True)
class SolfiInfo:
    """Mints and vaults of a Solfi pool."""

    base_mint: Pubkey
    quote_mint: Pubkey
    base_vault: Pubkey
    quote_vault: Pubkey

    @classmethod
    def load_checked(cls, data: bytes) -> "SolfiInfo":
        """Decode a pool account; raises ValueError if it is too short."""
        data = bytes(data)
        if len(data) < MIN_LEN:
            raise ValueError("Invalid data length for SolfiInfo")
        return cls(
            base_mint=Pubkey(data[_BASE_MINT:_BASE_MINT + 32]),
            quote_mint=Pubkey(data[_QUOTE_MINT:_QUOTE_MINT + 32]),
            base_vault=Pubkey(data[_BASE_VAULT:_BASE_VAULT + 32]),
            quote_vault=Pubkey(data[_QUOTE_VAULT:_QUOTE_VAULT + 32]),
        )