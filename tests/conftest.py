"""Pytest configuration and shared fixtures for badger-accounts tests."""

from decimal import Decimal

import pytest

from badger_accounts.core.models import VaultConfig
from badger_accounts.core.registry import VaultRegistry
from factories import BADGER_SETT, BADGER_TOKEN, DIGG_SETT, DIGG_TOKEN, WBTC_SETT, WBTC_TOKEN


@pytest.fixture
def registry() -> VaultRegistry:
    return VaultRegistry(
        [
            VaultConfig(sett_token=BADGER_SETT, name="Badger", symbol="BADGER", deposit_token=BADGER_TOKEN),
            VaultConfig(sett_token=DIGG_SETT, name="Digg", symbol="DIGG", deposit_token=DIGG_TOKEN),
            VaultConfig(sett_token=WBTC_SETT, name="Curve.fi renBTC/wBTC", symbol="crvRenWBTC", deposit_token=WBTC_TOKEN),
        ]
    )


@pytest.fixture
def prices() -> dict[str, Decimal]:
    return {
        BADGER_TOKEN: Decimal("3"),
        DIGG_TOKEN: Decimal("2"),
    }
