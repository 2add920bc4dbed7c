"""Account aggregator combining subgraph balances and token prices into a summary."""

import logging
from typing import Any, Protocol

from badger_accounts.core.models import PriceTable, UserAccountSummary, VaultAccountView, VaultBalanceRecord
from badger_accounts.core.registry import VaultRegistry
from badger_accounts.core.valuation import sum_usd, value_sett_balance
from badger_accounts.exceptions import InternalInconsistencyError, InvalidInputError, NotFoundError

logger = logging.getLogger(__name__)


class UserDataSource(Protocol):
    """
    Source of indexed user balances.

    Methods
    -------
    fetch_user_balances(user_id)
        Return ``{"user": {"settBalances": [...]}}`` or ``{"user": None}``

    """

    def fetch_user_balances(self, user_id: str) -> dict[str, Any]: ...


class PriceSource(Protocol):
    """Source of current USD token prices."""

    def get_prices(self) -> PriceTable: ...


class AccountAggregator:
    """
    Builds a user's account summary across all setts.

    Workflow:
    1. Validate the user identifier
    2. Fetch the user's sett balances (lower-cased address)
    3. Fetch current token prices
    4. Value each sett balance
    5. Sum into account totals

    Parameters
    ----------
    user_source : UserDataSource
        Indexed balance provider (e.g., the Badger subgraph)
    price_source : PriceSource
        USD price provider
    registry : VaultRegistry
        Known setts

    """

    def __init__(
        self,
        user_source: UserDataSource,
        price_source: PriceSource,
        registry: VaultRegistry,
    ) -> None:
        self.user_source = user_source
        self.price_source = price_source
        self.registry = registry

    def get_user_account_summary(self, user_id: str | None) -> UserAccountSummary:
        """
        Retrieve a user's account value and earnings across all setts.

        Parameters
        ----------
        user_id : str | None
            User Ethereum address, in any letter case

        Returns
        -------
        UserAccountSummary
            Totals and per-sett valuations

        Raises
        ------
        InvalidInputError
            If user_id is missing or empty
        NotFoundError
            If the user has never interacted with a sett
        InternalInconsistencyError
            If a balance references a sett missing from the registry

        """
        if not user_id:
            msg = "userId is required"
            raise InvalidInputError(msg)

        # Subgraph addresses are all lower case
        user_data = self.user_source.fetch_user_balances(user_id.lower())
        user = user_data.get("user") if user_data else None
        if not user:
            msg = f"{user_id} is not a protocol participant"
            raise NotFoundError(msg)

        prices = self.price_source.get_prices()

        records = [VaultBalanceRecord.model_validate(raw) for raw in user.get("settBalances") or []]
        sett_accounts = [self._value_record(record, prices) for record in records]

        summary = UserAccountSummary(
            id=user_id,
            value=sum_usd(account.value for account in sett_accounts),
            earned_value=sum_usd(account.earned_value for account in sett_accounts),
            sett_accounts=sett_accounts,
        )
        logger.info(
            "Account %s: %d setts, value=%s earned=%s",
            user_id,
            len(sett_accounts),
            summary.value,
            summary.earned_value,
        )
        return summary

    def _value_record(self, record: VaultBalanceRecord, prices: PriceTable) -> VaultAccountView:
        config = self.registry.get(record.sett.id)

        # A sett indexed by the subgraph but absent from the registry is a config issue
        if config is None:
            logger.error("Sett %s is missing from the sett registry", record.sett.id)
            msg = "Unable to fetch user account"
            raise InternalInconsistencyError(msg)

        return value_sett_balance(record, config, prices)
