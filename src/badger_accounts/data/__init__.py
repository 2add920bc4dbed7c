"""Static sett configuration."""

from badger_accounts.data.loader import (
    DEFAULT_SETTS_PATH,
    get_sett_configs,
    load_registry,
    load_setts,
)

__all__ = [
    "DEFAULT_SETTS_PATH",
    "get_sett_configs",
    "load_registry",
    "load_setts",
]
