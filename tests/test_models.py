"""Tests for Pydantic data models."""

from decimal import Decimal

from badger_accounts.core.models import (
    UserAccountSummary,
    VaultAccountView,
    VaultBalanceRecord,
    VaultConfig,
)
from factories import BADGER_SETT, BADGER_TOKEN, make_balance


def test_vault_config_accepts_camel_case():
    """Test VaultConfig parses the settToken alias."""
    config = VaultConfig.model_validate({"settToken": BADGER_SETT, "name": "Badger", "symbol": "BADGER"})

    assert config.sett_token == BADGER_SETT
    assert config.deposit_token is None


def test_balance_record_coerces_subgraph_strings():
    """Test raw subgraph integer strings become Decimals."""
    raw = make_balance(
        BADGER_SETT,
        BADGER_TOKEN,
        price_per_full_share="1050000000000000000",
        net_share_deposit="123456789012345678901234",
        gross_deposit="50",
        gross_withdraw="10",
        decimals=18,
    )
    raw["sett"]["token"]["decimals"] = "18"

    record = VaultBalanceRecord.model_validate(raw)

    assert record.sett.price_per_full_share == Decimal("1050000000000000000")
    assert record.net_share_deposit == Decimal("123456789012345678901234")
    assert record.gross_deposit == Decimal("50")
    assert record.gross_withdraw == Decimal("10")
    assert record.sett.token.decimals == 18


def test_summary_serializes_with_camel_case_keys():
    """Test the summary dumps with the keys API consumers expect."""
    view = VaultAccountView(
        id=BADGER_SETT,
        name="Badger",
        asset="BADGER",
        value=Decimal("600"),
        earned_value=Decimal("480"),
    )
    summary = UserAccountSummary(
        id="0xUser",
        value=Decimal("600"),
        earned_value=Decimal("480"),
        sett_accounts=[view],
    )

    data = summary.model_dump(mode="json", by_alias=True)

    assert set(data) == {"id", "value", "earnedValue", "settAccounts"}
    assert data["settAccounts"][0]["earnedValue"] == "480"
    assert data["settAccounts"][0]["asset"] == "BADGER"
