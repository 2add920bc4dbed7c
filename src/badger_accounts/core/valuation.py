"""Per-sett position valuation."""

import logging
from collections.abc import Iterable
from decimal import Decimal, localcontext

from badger_accounts.core.models import PriceTable, VaultAccountView, VaultBalanceRecord, VaultConfig

logger = logging.getLogger(__name__)

# DIGG rebases its supply, so pricePerFullShare alone misstates the share value
REBASING_SYMBOL = "digg"

PRICE_PER_SHARE_SCALE = Decimal(10**18)

DECIMAL_PRECISION = 50


def get_usd_value(token: str, amount: Decimal, prices: PriceTable) -> Decimal:
    """
    Convert a token amount to USD.

    Parameters
    ----------
    token : str
        Token address
    amount : Decimal
        Amount in whole tokens
    prices : PriceTable
        Mapping of lower-cased token address to USD price

    Returns
    -------
    Decimal
        USD value, zero if the token has no price

    """
    return amount * prices.get(token.lower(), Decimal("0"))


def sum_usd(amounts: Iterable[Decimal]) -> Decimal:
    """Sum USD amounts at valuation precision, zero for no amounts."""
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        return sum(amounts, Decimal("0"))


def is_rebasing(config: VaultConfig) -> bool:
    """Check whether a sett holds the rebasing asset."""
    return config.symbol.lower() == REBASING_SYMBOL


def value_sett_balance(
    record: VaultBalanceRecord,
    config: VaultConfig,
    prices: PriceTable,
) -> VaultAccountView:
    """
    Value a user's balance in a single sett.

    Share balances are converted to underlying tokens through the sett's
    price per full share. For the rebasing sett the share value is taken from
    balance / totalSupply instead, and lifetime deposits and withdrawals are
    rescaled by the same correction so earnings stay consistent.

    Parameters
    ----------
    record : VaultBalanceRecord
        User's raw sett accounting
    config : VaultConfig
        Static configuration of the sett
    prices : PriceTable
        Mapping of lower-cased token address to USD price

    Returns
    -------
    VaultAccountView
        USD value and earnings of the position

    """
    sett = record.sett

    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION

        ratio: Decimal | None = Decimal(1)
        price_per_full_share = sett.price_per_full_share / PRICE_PER_SHARE_SCALE

        if is_rebasing(config):
            if not sett.total_supply:
                logger.warning("Sett %s has no share supply, valuing at zero", sett.id)
                return _view(config, Decimal("0"), Decimal("0"))
            share_value = sett.balance / sett.total_supply
            if price_per_full_share:
                ratio = share_value / price_per_full_share
            else:
                # Deposits cannot be rescaled without a share price
                logger.warning("Sett %s has no share price, valuing earnings at zero", sett.id)
                ratio = None
            price_per_full_share = share_value

        sett_tokens = price_per_full_share * record.net_share_deposit
        scale = Decimal(10) ** sett.token.decimals
        balance = sett_tokens / scale

        if ratio is None:
            earned = Decimal("0")
        else:
            gross_deposit = record.gross_deposit * ratio
            gross_withdraw = record.gross_withdraw * ratio
            earned = (sett_tokens - gross_deposit + gross_withdraw) / scale

        if sett.token.id.lower() not in prices:
            logger.warning("No USD price for token %s, valuing sett %s at zero", sett.token.id, sett.id)

        earned_usd = get_usd_value(sett.token.id, earned, prices)
        balance_usd = get_usd_value(sett.token.id, balance, prices)

    logger.debug("Valued sett %s: balance=%s earned=%s", config.sett_token, balance_usd, earned_usd)
    return _view(config, balance_usd, earned_usd)


def _view(config: VaultConfig, value: Decimal, earned_value: Decimal) -> VaultAccountView:
    return VaultAccountView(
        id=config.sett_token,
        name=config.name,
        asset=config.symbol,
        value=value,
        earned_value=earned_value,
    )
