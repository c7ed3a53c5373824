"""Program ids and well-known account addresses used when routing swaps."""

from __future__ import annotations

import random
from typing import Optional

from solarb.pubkey import Pubkey

BIN_ARRAY = b"bin_array"

PUMP_PROGRAM_ID = "pAMMBay6oceH9fJKBRHGP5D4bD4sWpmSwMn52FMfXEA"
PUMP_FEE_WALLET = "JCRGumoE9Qi5BBgULTgdgTLjSgkCMSbF62ZZfGs84JeU"

WHIRLPOOL_PROGRAM_ID = "whirLbMiicVdio4qvUfM5KAg6Ct8VwpYzGff3uctyCc"
MAX_TICK_INDEX = 443636
MIN_TICK_INDEX = -443636

FLASHLOAN_FEE_COLLECTOR = "6AGB9kqgSp2mQXwYpdrV4QVV8urvCaDS35U1wsLssy6H"
FEE_COLLECTORS = (
    "GPpkDpzCDmYJY5qNhYmM14c7rct1zmkjWc2CjR5g7RZ1",
    "J6c7noBHvWju4mMA3wXt3igbBSp2m9ATbA6cjMtAUged",
    "BjsfwxDu7GX7RRW6oSRTpMkASdXAgCcHnXEcatqSfuuY",
)


def dlmm_program_id() -> Pubkey:
    return Pubkey.from_base58("LBUZKhRxPF3XUpBCjp4YzTKgLccjZhTSDM9YuVaPwxo")


def dlmm_event_authority() -> Pubkey:
    return Pubkey.from_base58("D1ZN9Wj1fRSUQfCjhvnu1hqDMT7hzjzBBpi12nVniYD6")


def damm_program_id() -> Pubkey:
    return Pubkey.from_base58("Eo7WjKq67rjJQSZxS6z3YkapzY3eMj6Xy8X5EQVn5UaB")


def vault_program_id() -> Pubkey:
    return Pubkey.from_base58("24Uqj9JCLxUeoC3hGfh5W3s9FM9uCHDS2SG3LYwBpyTi")


def damm_v2_program_id() -> Pubkey:
    return Pubkey.from_base58("cpamdpZCGKUy5JxQXB4dcpGPiikHawvSWAd6mEn1sGG")


def damm_v2_event_authority() -> Pubkey:
    return Pubkey.from_base58("3rmHSu74h1ZcmAisVcWerTCiRDQbUrBKmcwptYGjHfet")


def damm_v2_pool_authority() -> Pubkey:
    return Pubkey.from_base58("HLnpSz9h2S4hiLQ43rnSD9XkcUThA7B8hQMKmDaiTLcC")


def pump_program_id() -> Pubkey:
    return Pubkey.from_base58(PUMP_PROGRAM_ID)


def pump_fee_wallet() -> Pubkey:
    return Pubkey.from_base58(PUMP_FEE_WALLET)


def pump_global_config() -> Pubkey:
    return Pubkey.from_base58("ADyA8hdefvWN2dbGGWFotbzWxrAvLW83WG6QCVXvJKqw")


def pump_authority() -> Pubkey:
    return Pubkey.from_base58("GS4CU59F31iL7aR2Q8zVS8DRrcRnXX1yjQ66TqNVQnaR")


def raydium_program_id() -> Pubkey:
    return Pubkey.from_base58("675kPX9MHTjS2zt1qfr1NYHuzeLXfQM9H24wFSUt1Mp8")


def raydium_authority() -> Pubkey:
    return Pubkey.from_base58("5Q544fKrFoe6tsEbD7S8EmxGTJYAKtTVhAW5Q5pge4j1")


def raydium_cp_program_id() -> Pubkey:
    return Pubkey.from_base58("CPMMoo8L3F4NbTegBCKVNunggL7H1ZpdTHKxQB5qKP1C")


def raydium_cp_authority() -> Pubkey:
    return Pubkey.from_base58("GpMZbSM2GgvTKHJirzeGfMFoaZ8UR2X7F4v8vHTvxFbL")


def raydium_clmm_program_id() -> Pubkey:
    return Pubkey.from_base58("CAMMCzo5YL8w4VFF8KVHrK22GGUsp5VTaW7grrKgrWqK")


def solfi_program_id() -> Pubkey:
    return Pubkey.from_base58("SoLFiHG9TfgtdUXUjWAxi3LtvYuFyDLVhBWxdMZxyCe")


def vertigo_program_id() -> Pubkey:
    return Pubkey.from_base58("vrTGoBuy5rYSxAfV3jaRJWHH6nN9WK4NRExGxsk1bCJ")


def whirlpool_program_id() -> Pubkey:
    return Pubkey.from_base58(WHIRLPOOL_PROGRAM_ID)


def executor_program_id() -> Pubkey:
    return Pubkey.from_base58("MEViEnscUm6tsQRoGd9h6nLQaQspKj7DB2M5FwM3Xvz")


def memo_program_id() -> Pubkey:
    return Pubkey.from_base58("MemoSq4gqABAXKb96qnH8TysNcWxMyWCqXgDLGmfcHr")


def sysvar_instructions_id() -> Pubkey:
    return Pubkey.from_base58("Sysvar1nstructions1111111111111111111111111")


def usdc_mint() -> Pubkey:
    return Pubkey.from_base58("EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v")


def fee_collector(use_flashloan: bool, rng: Optional[random.Random] = None) -> Pubkey:
    """Pick the fee collector account: fixed with a flash loan, else one of three at random."""
    if use_flashloan:
        return Pubkey.from_base58(FLASHLOAN_FEE_COLLECTOR)
    chooser = rng if rng is not None else random
    return Pubkey.from_base58(chooser.choice(FEE_COLLECTORS))