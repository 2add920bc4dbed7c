"""Registry of known setts keyed by sett token address."""

from collections.abc import Iterable, Iterator
from types import MappingProxyType

from badger_accounts.core.models import VaultConfig


class VaultRegistry:
    """
    Immutable lookup of sett configuration by sett token address.

    The registry is built once from the static sett list and passed to the
    aggregator, so tests can substitute their own set of setts.

    Parameters
    ----------
    configs : Iterable[VaultConfig]
        Sett configurations in display order

    Raises
    ------
    ValueError
        If two configurations share a sett token address

    """

    def __init__(self, configs: Iterable[VaultConfig]) -> None:
        by_token: dict[str, VaultConfig] = {}
        for config in configs:
            if config.sett_token in by_token:
                msg = f"Duplicate sett token in registry: {config.sett_token}"
                raise ValueError(msg)
            by_token[config.sett_token] = config
        self._by_token = MappingProxyType(by_token)

    def get(self, sett_token: str) -> VaultConfig | None:
        """
        Get sett configuration by exact token address.

        Parameters
        ----------
        sett_token : str
            Sett token address

        Returns
        -------
        VaultConfig | None
            Configuration or None if the sett is unknown

        """
        return self._by_token.get(sett_token)

    def deposit_tokens(self) -> list[str]:
        """Deposit token addresses of all configured setts, without duplicates."""
        tokens = []
        for config in self:
            if config.deposit_token and config.deposit_token not in tokens:
                tokens.append(config.deposit_token)
        return tokens

    def __contains__(self, sett_token: object) -> bool:
        return sett_token in self._by_token

    def __iter__(self) -> Iterator[VaultConfig]:
        return iter(self._by_token.values())

    def __len__(self) -> int:
        return len(self._by_token)
