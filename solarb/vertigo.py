"""Account layout and vault addresses for Vertigo pools."""

from __future__ import annotations

from dataclasses import dataclass

from solarb.constants import vertigo_program_id
from solarb.pubkey import Pubkey, find_program_address

POOL_LEN = 3 * 32


@dataclass(frozen=True)
class VertigoPool:
    """The serialized pool account: two mints and an owner."""

    mint_a: Pubkey
    mint_b: Pubkey
    owner: Pubkey

    @classmethod
    def try_deserialize(cls, data: bytes) -> "VertigoPool":
        """Decode exactly one pool; raises ValueError on short or trailing input."""
        data = bytes(data)
        if len(data) < POOL_LEN:
            raise ValueError("Failed to deserialize VertigoPool: Unexpected length of input")
        if len(data) > POOL_LEN:
            raise ValueError("Failed to deserialize VertigoPool: Not all bytes read")
        return cls(Pubkey(data[0:32]), Pubkey(data[32:64]), Pubkey(data[64:96]))

    def __bytes__(self) -> bytes:
        return bytes(self.mint_a) + bytes(self.mint_b) + bytes(self.owner)


def _pool_vault_address(pool: Pubkey, mint: Pubkey) -> Pubkey:
    return find_program_address([bytes(pool), bytes(mint)], vertigo_program_id())[0]


@dataclass(frozen=True)
class VertigoInfo:
    """The mints of a Vertigo pool together with its address."""

    mint_a: Pubkey
    mint_b: Pubkey
    pool: Pubkey

    @classmethod
    def load_checked(cls, data: bytes, pool: Pubkey) -> "VertigoInfo":
        """Decode a pool account for the pool at the given address."""
        decoded = VertigoPool.try_deserialize(data)
        return cls(mint_a=decoded.mint_a, mint_b=decoded.mint_b, pool=pool)

    def get_token_and_sol_vaults(self, base_mint: str, sol_mint: Pubkey) -> tuple[Pubkey, Pubkey]:
        """Return (token vault, base vault) for the given base mint address text."""
        if base_mint == str(self.mint_a):
            token_mint, base = self.mint_b, self.mint_a
        else:
            token_mint, base = self.mint_a, self.mint_b
        return (
            _pool_vault_address(self.pool, token_mint),
            _pool_vault_address(self.pool, base),
        )


def derive_vault_address(pool: Pubkey, mint: Pubkey) -> tuple[Pubkey, int]:
    """Derive the vault address and bump of a mint inside a pool."""
    return find_program_address([b"vault", bytes(pool), bytes(mint)], vertigo_program_id())