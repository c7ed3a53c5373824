"""Bot configuration read from environment variables."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

DEFAULT_RPC_URL = "https://api.mainnet-beta.solana.com"
_WALLET_ENV = "WALLET_PRIVATE_KEY"
_UINT = re.compile(r"\+?[0-9]+")


@dataclass
class BotConfig:
    compute_unit_limit: int


@dataclass
class MintConfig:
    mint: str
    raydium_pool_list: Optional[list[str]] = None
    raydium_cp_pool_list: Optional[list[str]] = None
    raydium_clmm_pool_list: Optional[list[str]] = None
    meteora_dlmm_pool_list: Optional[list[str]] = None
    meteora_damm_pool_list: Optional[list[str]] = None
    meteora_damm_v2_pool_list: Optional[list[str]] = None
    pump_pool_list: Optional[list[str]] = None
    whirlpool_pool_list: Optional[list[str]] = None
    solfi_pool_list: Optional[list[str]] = None
    vertigo_pool_list: Optional[list[str]] = None
    lookup_table_accounts: Optional[list[str]] = None
    process_delay: int = 1000


@dataclass
class RoutingConfig:
    mint_config_list: list[MintConfig]


@dataclass
class RpcConfig:
    url: str


@dataclass
class SpamConfig:
    enabled: bool
    sending_rpc_urls: list[str]
    compute_unit_price: int
    max_retries: Optional[int]


@dataclass
class WalletConfig:
    private_key: str


@dataclass
class FlashloanConfig:
    enabled: bool


def _parse_uint(value: Optional[str], bits: int) -> Optional[int]:
    if value is None or not _UINT.fullmatch(value):
        return None
    number = int(value)
    return number if number < (1 << bits) else None


class _Env:
    def __init__(self, environ: Mapping[str, str]) -> None:
        self._environ = environ

    def text(self, key: str, default: str) -> str:
        return self._environ.get(key, default)

    def flag(self, key: str, default: bool) -> bool:
        value = self._environ.get(key)
        return default if value is None else value.lower() == "true"

    def uint(self, key: str, default: int, bits: int) -> int:
        parsed = _parse_uint(self._environ.get(key), bits)
        return default if parsed is None else parsed

    def optional_uint(self, key: str, bits: int) -> Optional[int]:
        return _parse_uint(self._environ.get(key), bits)

    def string_list(self, key: str) -> list[str]:
        value = self._environ.get(key)
        if not value:
            return []
        return [item.strip() for item in value.split(",")]


@dataclass
class Config:
    bot: BotConfig
    routing: RoutingConfig
    rpc: RpcConfig
    spam: Optional[SpamConfig]
    wallet: WalletConfig
    flashloan: Optional[FlashloanConfig]

    @classmethod
    def load(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """Build the configuration from a mapping, or from the process environment and .env."""
        if environ is None:
            load_dotenv()
            environ = os.environ
        env = _Env(environ)

        bot = BotConfig(compute_unit_limit=env.uint("BOT_COMPUTE_UNIT_LIMIT", 600000, 32))
        rpc = RpcConfig(url=env.text("RPC_URL", DEFAULT_RPC_URL))
        wallet = WalletConfig(private_key=env.text(_WALLET_ENV, str()))

        spam = None
        if env.flag("SPAM_ENABLED", False):
            spam = SpamConfig(
                enabled=True,
                sending_rpc_urls=env.string_list("SPAM_SENDING_RPC_URLS"),
                compute_unit_price=env.uint("SPAM_COMPUTE_UNIT_PRICE", 1000, 64),
                max_retries=env.optional_uint("SPAM_MAX_RETRIES", 64),
            )

        flashloan = FlashloanConfig(enabled=True) if env.flag("FLASHLOAN_ENABLED", False) else None

        mints = []
        mint = env.text("MINT_1", "")
        if mint:
            mints.append(
                MintConfig(
                    mint=mint,
                    raydium_pool_list=env.string_list("MINT_1_RAYDIUM_POOL_LIST"),
                    pump_pool_list=env.string_list("MINT_1_PUMP_POOL_LIST"),
                    process_delay=env.uint("MINT_1_PROCESS_DELAY", 1000, 64),
                )
            )

        return cls(
            bot=bot,
            routing=RoutingConfig(mint_config_list=mints),
            rpc=rpc,
            spam=spam,
            wallet=wallet,
            flashloan=flashloan,
        )