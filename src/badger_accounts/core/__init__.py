"""Core functionality including models, registry, valuation, and aggregator."""

from badger_accounts.core.aggregator import AccountAggregator, PriceSource, UserDataSource
from badger_accounts.core.models import (
    PriceTable,
    SettState,
    TokenInfo,
    UserAccountSummary,
    VaultAccountView,
    VaultBalanceRecord,
    VaultConfig,
)
from badger_accounts.core.registry import VaultRegistry
from badger_accounts.core.valuation import get_usd_value, sum_usd, value_sett_balance

__all__ = [
    "AccountAggregator",
    "PriceSource",
    "PriceTable",
    "SettState",
    "TokenInfo",
    "UserAccountSummary",
    "UserDataSource",
    "VaultAccountView",
    "VaultBalanceRecord",
    "VaultConfig",
    "VaultRegistry",
    "get_usd_value",
    "sum_usd",
    "value_sett_balance",
]
