"""Pricing services for token USD values."""

from badger_accounts.pricing.coingecko import CoinGeckoPricing

__all__ = [
    "CoinGeckoPricing",
]
