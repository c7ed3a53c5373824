"""Solana DEX account decoding, PDA derivation and arbitrage routing settings."""

__version__ = "0.1.0"