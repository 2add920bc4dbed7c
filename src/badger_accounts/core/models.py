"""Data models for sett configuration, subgraph balances, and account summaries."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

# Mapping of lower-cased token address to USD unit price
PriceTable = dict[str, Decimal]


class VaultConfig(BaseModel):
    """
    Static configuration for a known sett.

    Attributes
    ----------
    sett_token : str
        Sett (vault share) token address, as indexed by the subgraph
    name : str
        Display name
    symbol : str
        Underlying asset symbol (e.g., 'BADGER', 'DIGG')
    deposit_token : str, optional
        Address of the token accepted for deposits

    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    sett_token: str = Field(alias="settToken")
    name: str
    symbol: str
    deposit_token: str | None = Field(default=None, alias="depositToken")


class TokenInfo(BaseModel):
    """Underlying token of a sett."""

    id: str
    decimals: int


class SettState(BaseModel):
    """
    Sett fields indexed by the subgraph.

    Attributes
    ----------
    id : str
        Sett token address
    balance : Decimal
        Total underlying tokens held by the sett
    total_supply : Decimal
        Total sett shares outstanding
    price_per_full_share : Decimal
        Underlying tokens per share, scaled by 10^18
    token : TokenInfo
        Underlying token

    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str | None = None
    symbol: str | None = None
    balance: Decimal = Decimal("0")
    total_supply: Decimal = Field(default=Decimal("0"), alias="totalSupply")
    price_per_full_share: Decimal = Field(alias="pricePerFullShare")
    token: TokenInfo


class VaultBalanceRecord(BaseModel):
    """
    A user's raw accounting in a single sett.

    Attributes
    ----------
    sett : SettState
        Sett the balance belongs to
    net_share_deposit : Decimal
        Shares currently held
    gross_deposit : Decimal
        Lifetime underlying tokens deposited
    gross_withdraw : Decimal
        Lifetime underlying tokens withdrawn

    """

    model_config = ConfigDict(populate_by_name=True)

    sett: SettState
    net_share_deposit: Decimal = Field(alias="netShareDeposit")
    gross_deposit: Decimal = Field(alias="grossDeposit")
    gross_withdraw: Decimal = Field(alias="grossWithdraw")


class VaultAccountView(BaseModel):
    """
    USD valuation of a user's position in one sett.

    Attributes
    ----------
    id : str
        Sett token address
    name : str
        Sett display name
    asset : str
        Underlying asset symbol
    value : Decimal
        Current position value in USD
    earned_value : Decimal
        Lifetime earnings in USD

    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    asset: str
    value: Decimal
    earned_value: Decimal = Field(alias="earnedValue")


class UserAccountSummary(BaseModel):
    """
    Aggregated account view across all setts.

    Attributes
    ----------
    id : str
        User address exactly as requested
    value : Decimal
        Total position value in USD
    earned_value : Decimal
        Total earnings in USD
    sett_accounts : list[VaultAccountView]
        Per-sett valuations in subgraph order

    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    value: Decimal
    earned_value: Decimal = Field(alias="earnedValue")
    sett_accounts: list[VaultAccountView] = Field(default_factory=list, alias="settAccounts")
