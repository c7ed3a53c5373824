# solarb

Building blocks for routing arbitrage across Solana DEX pools, in plain Python.

The package decodes the on-chain account layouts of several DEX programs, derives the
program addresses (PDAs) those programs expect, and loads the bot's settings from the
environment. You fetch the raw account bytes yourself and hand them to the decoders.

## What is inside

- `solarb.pubkey`: the frozen `Pubkey` dataclass (`Pubkey.from_base58`,
  `Pubkey.default`, `str()` gives base58, `bytes()` the 32 raw bytes) and
  `AccountMeta` (`AccountMeta.writable`, `AccountMeta.readonly`); base58 encoding with
  `b58encode` and `b58decode`; the ed25519 curve check `is_on_curve`; PDA derivation
  with `create_program_address`, `find_program_address` (bumps tried from 255 down) and
  `derive_vault_token_account`.
- `solarb.config`: `Config.load(environ=None)` builds a `Config` holding `BotConfig`,
  `RoutingConfig` (a list of `MintConfig`), `RpcConfig`, `WalletConfig` and the optional
  `SpamConfig` and `FlashloanConfig`.
- `solarb.constants`: program ids and fixed accounts for Meteora (DLMM, DAMM, DAMM v2,
  vault), Pump, Raydium (AMM, CP, CLMM), Solfi, Vertigo and Whirlpool, plus
  `executor_program_id`, `memo_program_id`, `sysvar_instructions_id`, `usdc_mint`,
  the tick bounds `MIN_TICK_INDEX` / `MAX_TICK_INDEX`, and
  `fee_collector(use_flashloan, rng=None)`, which returns a fixed account when a flash
  loan is used and otherwise one of three accounts picked at random.
- `solarb.meteora`: `get_dammv2_info` for DAMM v2 pools; `LbPair` and `DlmmInfo` for
  DLMM pairs, with `get_token_and_sol_vaults`, `bin_id_to_bin_array_index` and
  `calculate_bin_arrays` (the bin arrays below, at and above the active bin).
- `solarb.pump`: `PumpAmmInfo.load_checked` (mints, pool token accounts and the
  coin-creator vault authority) and `get_pump_info`.
- `solarb.raydium`: `RaydiumAmmInfo`, `RaydiumCpAmmInfo`, the CLMM `PoolState`
  (`load_checked` fills config, mints, vaults, observation key, tick spacing and
  current tick), `RewardState`, `RewardInfo`, `compute_tick_array_start_index` and
  `get_tick_array_pubkeys`.
- `solarb.solfi`: `SolfiInfo`.
- `solarb.vertigo`: `VertigoPool` (exactly 96 bytes: two mints and an owner),
  `VertigoInfo` with `get_token_and_sol_vaults`, and `derive_vault_address`.
- `solarb.whirlpool_state`: `Whirlpool.try_deserialize`, `WhirlpoolRewardInfo`,
  `TickArray`, and `Tick` with `Tick.check_is_valid_start_tick`.
- `solarb.whirlpool`: `derive_start_tick`, `derive_first_tick_array_start_tick`,
  `derive_next_start_tick_in_seq`, `derive_tick_array_start_indexes`,
  `get_tick_array_address` (start index seeded as decimal text),
  `update_tick_array_accounts_for_onchain` (three writable tick array accounts) and
  `extend_tick_arrays` (returns a new list with one more tick array appended when it is
  not already there; its start index is seeded as 4 little-endian bytes).

Decoders raise `ValueError` when the account data is too short for the layout they read.

## Configuration

Given a mapping, `Config.load` reads only that mapping. Called with no argument, it
first loads a `.env` file (if there is one) into the process environment and then reads
`os.environ`.

| Variable | Meaning | Default |
| --- | --- | --- |
| `BOT_COMPUTE_UNIT_LIMIT` | compute unit limit (32-bit unsigned) | `600000` |
| `RPC_URL` | RPC endpoint | `https://api.mainnet-beta.solana.com` |
| `WALLET_PRIVATE_KEY` | base58 wallet key | empty |
| `SPAM_ENABLED` | `true` (any case) turns on the spam settings | off |
| `SPAM_SENDING_RPC_URLS` | comma-separated endpoints | empty |
| `SPAM_COMPUTE_UNIT_PRICE` | compute unit price | `1000` |
| `SPAM_MAX_RETRIES` | retries when sending | unset |
| `FLASHLOAN_ENABLED` | `true` (any case) turns on flash loans | off |
| `MINT_1` | mint to route | unset |
| `MINT_1_RAYDIUM_POOL_LIST` | comma-separated Raydium pools | empty |
| `MINT_1_PUMP_POOL_LIST` | comma-separated Pump pools | empty |
| `MINT_1_PROCESS_DELAY` | delay in milliseconds | `1000` |

Numbers that do not parse as unsigned integers of the right width fall back to their
default. List items are stripped of surrounding whitespace. Only one mint, `MINT_1`, is
read; its other pool lists stay `None`.

```python
from solarb.config import Config

config = Config.load({"RPC_URL": "http://localhost:8899", "SPAM_ENABLED": "true"})
print(config.rpc.url, config.bot.compute_unit_limit, config.spam.compute_unit_price)
```

## Decoding pools and deriving addresses

```python
from solarb.constants import whirlpool_program_id
from solarb.meteora import DlmmInfo
from solarb.pubkey import Pubkey, find_program_address
from solarb.whirlpool import derive_tick_array_start_indexes, get_tick_array_address
from solarb.whirlpool_state import Whirlpool

# Any PDA: seeds are bytes, the result is the address and its bump seed.
address, bump = find_program_address([b"global_volume_accumulator"], whirlpool_program_id())

# Raw account data fetched elsewhere:
pair = DlmmInfo.load_checked(dlmm_account_bytes)
bin_arrays = pair.calculate_bin_arrays(Pubkey.from_base58(pair_address))

pool = Whirlpool.try_deserialize(whirlpool_account_bytes)
first, second, third = derive_tick_array_start_indexes(
    pool.tick_current_index, pool.tick_spacing, True
)
tick_array = get_tick_array_address(Pubkey.from_base58(pool_address), first, whirlpool_program_id())
```

## What it does not do

This is a library with no command to run. It does not connect to an RPC node, fetch
accounts or prices, build, sign or send transactions, or run a monitoring loop looking
for arbitrage opportunities; those steps are left to the code that uses it.

## Tests

The test suite uses pytest and is installed with the `test` extra:

```
pip install -e .[test]
pytest
```