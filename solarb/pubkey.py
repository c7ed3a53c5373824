"""Public keys, base58 text encoding and program-derived addresses."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Iterable, Union

PUBKEY_BYTES = 32
MAX_SEED_LEN = 32
MAX_SEEDS = 16
PDA_MARKER = b"ProgramDerivedAddress"

_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {char: value for value, char in enumerate(_ALPHABET)}

# Curve25519 field prime and the twisted Edwards constant d.
_P = 2**255 - 19
_D = (-121665 * pow(121666, _P - 2, _P)) % _P

Seed = Union[bytes, bytearray, memoryview, "Pubkey"]


def b58encode(data: bytes) -> str:
    """Encode bytes as base58 text using the Bitcoin alphabet."""
    data = bytes(data)
    stripped = data.lstrip(b"\0")
    zeros = len(data) - len(stripped)
    number = int.from_bytes(stripped, "big")
    digits = []
    while number:
        number, rem = divmod(number, 58)
        digits.append(_ALPHABET[rem])
    return "1" * zeros + "".join(reversed(digits))


def b58decode(text: str) -> bytes:
    """Decode base58 text; raises ValueError on characters outside the alphabet."""
    number = 0
    for char in text:
        try:
            number = number * 58 + _INDEX[char]
        except KeyError:
            raise ValueError(f"invalid base58 character {char!r}") from None
    zeros = len(text) - len(text.lstrip("1"))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big") if number else b""
    return b"\0" * zeros + body


def is_on_curve(data: bytes) -> bool:
    """Return True if 32 bytes decompress to a point on the ed25519 curve."""
    data = bytes(data)
    if len(data) != PUBKEY_BYTES:
        raise ValueError("an ed25519 point is 32 bytes long")
    y = (int.from_bytes(data, "little") & ((1 << 255) - 1)) % _P
    yy = y * y % _P
    u = (yy - 1) % _P
    v = (_D * yy + 1) % _P
    if u == 0:
        return True
    if v == 0:
        return False
    x2 = u * pow(v, _P - 2, _P) % _P
    return pow(x2, (_P - 1) // 2, _P) == 1


@dataclass(frozen=True, order=True)
class Pubkey:
    """A 32-byte account address."""

    raw: bytes

    def __post_init__(self) -> None:
        raw = bytes(self.raw)
        if len(raw) != PUBKEY_BYTES:
            raise ValueError(f"a public key is {PUBKEY_BYTES} bytes, got {len(raw)}")
        object.__setattr__(self, "raw", raw)

    @classmethod
    def from_base58(cls, text: str) -> "Pubkey":
        """Parse a base58 address."""
        return cls(b58decode(text))

    @classmethod
    def default(cls) -> "Pubkey":
        """The all-zero address."""
        return cls(bytes(PUBKEY_BYTES))

    def __str__(self) -> str:
        return b58encode(self.raw)

    def __repr__(self) -> str:
        return f"Pubkey({self})"

    def __bytes__(self) -> bytes:
        return self.raw


@dataclass(frozen=True)
class AccountMeta:
    """An account reference inside an instruction."""

    pubkey: Pubkey
    is_signer: bool
    is_writable: bool

    @classmethod
    def writable(cls, pubkey: Pubkey, is_signer: bool) -> "AccountMeta":
        return cls(pubkey, is_signer, True)

    @classmethod
    def readonly(cls, pubkey: Pubkey, is_signer: bool) -> "AccountMeta":
        return cls(pubkey, is_signer, False)


def _seed_bytes(seeds: Iterable[Seed]) -> list[bytes]:
    parts = [bytes(seed) for seed in seeds]
    if len(parts) > MAX_SEEDS:
        raise ValueError(f"at most {MAX_SEEDS} seeds are allowed")
    for part in parts:
        if len(part) > MAX_SEED_LEN:
            raise ValueError(f"a seed is at most {MAX_SEED_LEN} bytes")
    return parts


def create_program_address(seeds: Iterable[Seed], program_id: Pubkey) -> Pubkey:
    """Hash seeds into an address; raises ValueError if the result lies on the curve."""
    digest = hashlib.sha256()
    for part in _seed_bytes(seeds):
        digest.update(part)
    digest.update(bytes(program_id))
    digest.update(PDA_MARKER)
    candidate = digest.digest()
    if is_on_curve(candidate):
        raise ValueError("derived address lies on the ed25519 curve")
    return Pubkey(candidate)


def find_program_address(seeds: Iterable[Seed], program_id: Pubkey) -> tuple[Pubkey, int]:
    """Find the first off-curve address, trying bump seeds from 255 down to 0."""
    parts = _seed_bytes(seeds)
    if len(parts) >= MAX_SEEDS:
        raise ValueError(f"at most {MAX_SEEDS - 1} seeds leave room for a bump")
    for bump in range(255, -1, -1):
        try:
            return create_program_address([*parts, bytes([bump])], program_id), bump
        except ValueError:
            continue
    raise ValueError("no viable bump seed found")


def derive_vault_token_account(program_id: Pubkey, mint: Pubkey) -> tuple[Pubkey, int]:
    """Derive the vault token account address for a mint."""
    return find_program_address([b"vault_token_account", bytes(mint)], program_id)