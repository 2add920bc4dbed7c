"""CoinGecko pricing service for fetching token USD prices."""

import logging
from collections.abc import Iterable
from decimal import Decimal

import httpx

from badger_accounts.core.models import PriceTable
from badger_accounts.exceptions import PriceFeedError

logger = logging.getLogger(__name__)


class CoinGeckoPricing:
    """
    Fetches Ethereum token prices from the CoinGecko API.

    Parameters
    ----------
    token_addresses : Iterable[str]
        Tokens priced when ``get_prices`` is called without arguments
    base_url : str
        CoinGecko API base URL
    timeout : float
        Request timeout in seconds
    transport : httpx.BaseTransport | None
        Custom transport (e.g., ``httpx.MockTransport`` in tests)

    """

    BASE_URL = "https://api.coingecko.com/api/v3"

    def __init__(
        self,
        token_addresses: Iterable[str] = (),
        base_url: str = BASE_URL,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.token_addresses = [address.lower() for address in token_addresses]
        self.base_url = base_url
        self.client = httpx.Client(timeout=timeout, transport=transport)

    def get_prices(self, token_addresses: Iterable[str] | None = None) -> PriceTable:
        """
        Fetch USD prices for multiple tokens.

        Parameters
        ----------
        token_addresses : Iterable[str] | None
            Token addresses to price, defaults to the configured tokens

        Returns
        -------
        PriceTable
            Mapping of lower-cased token address to USD price. Tokens
            CoinGecko does not know are absent.

        Raises
        ------
        PriceFeedError
            If the API request fails

        Examples
        --------
        >>> pricing = CoinGeckoPricing()
        >>> prices = pricing.get_prices(["0x3472A5A71965499acd81997a54BBA8D852C6E53d"])  # BADGER

        """
        addresses = (
            [address.lower() for address in token_addresses] if token_addresses is not None else self.token_addresses
        )
        if not addresses:
            return {}

        data = self._fetch_token_prices(addresses)

        prices = {}
        for address, price_info in data.items():
            if isinstance(price_info, dict) and price_info.get("usd") is not None:
                prices[address.lower()] = Decimal(str(price_info["usd"]))

        logger.debug("Fetched %d of %d token prices", len(prices), len(addresses))
        return prices

    def _fetch_token_prices(self, addresses: list[str]) -> dict:
        """
        Fetch prices from the CoinGecko token price endpoint.

        Parameters
        ----------
        addresses : list[str]
            Token contract addresses

        Returns
        -------
        dict
            Raw API response keyed by token address

        """
        url = f"{self.base_url}/simple/token_price/ethereum"
        params = {
            "contract_addresses": ",".join(addresses),
            "vs_currencies": "usd",
        }

        try:
            response = self.client.get(url, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.TimeoutException as e:
            msg = f"Request timeout: {e}"
            raise PriceFeedError(msg) from e
        except httpx.HTTPStatusError as e:
            msg = f"HTTP error {e.response.status_code}: {e}"
            raise PriceFeedError(msg) from e
        except httpx.HTTPError as e:
            msg = f"HTTP request failed: {e}"
            raise PriceFeedError(msg) from e
        except ValueError as e:
            msg = f"Invalid JSON response: {e}"
            raise PriceFeedError(msg) from e

    def close(self) -> None:
        """Close HTTP client."""
        self.client.close()

    def __enter__(self) -> "CoinGeckoPricing":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
