"""Badger subgraph GraphQL client for fetching user sett balances."""

import logging
from typing import Any

import httpx

from badger_accounts.exceptions import SubgraphError

logger = logging.getLogger(__name__)


class BadgerSubgraphClient:
    """
    Client for the Badger DAO subgraph.

    Parameters
    ----------
    base_url : str
        GraphQL endpoint URL
    timeout : float
        Request timeout in seconds
    transport : httpx.BaseTransport | None
        Custom transport (e.g., ``httpx.MockTransport`` in tests)

    """

    BASE_URL = "https://api.thegraph.com/subgraphs/name/axejintao/badger-dao"

    USER_BALANCES_QUERY = """
    query GetUserBalances($id: ID!) {
      user(id: $id) {
        settBalances {
          sett {
            id
            name
            symbol
            balance
            totalSupply
            pricePerFullShare
            token {
              id
              decimals
            }
          }
          netShareDeposit
          grossDeposit
          grossWithdraw
        }
      }
    }
    """

    def __init__(
        self,
        base_url: str = BASE_URL,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url
        self.client = httpx.Client(timeout=timeout, transport=transport)

    def _execute_query(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Execute a GraphQL query.

        Parameters
        ----------
        query : str
            GraphQL query string
        variables : dict[str, Any] | None
            Query variables

        Returns
        -------
        dict[str, Any]
            The ``data`` member of the response

        Raises
        ------
        SubgraphError
            If the request fails or the response carries GraphQL errors

        """
        payload: dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        try:
            response = self.client.post(self.base_url, json=payload)
            response.raise_for_status()
            result = response.json()
        except httpx.TimeoutException as e:
            msg = f"Request timeout: {e}"
            raise SubgraphError(msg) from e
        except httpx.HTTPStatusError as e:
            msg = f"HTTP error {e.response.status_code}: {e}"
            raise SubgraphError(msg) from e
        except httpx.HTTPError as e:
            msg = f"HTTP request failed: {e}"
            raise SubgraphError(msg) from e
        except ValueError as e:
            msg = f"Invalid JSON response: {e}"
            raise SubgraphError(msg) from e

        if result.get("errors"):
            error_messages = [e.get("message", "Unknown error") for e in result["errors"]]
            msg = f"GraphQL errors: {'; '.join(error_messages)}"
            raise SubgraphError(msg)

        return result.get("data") or {}

    def fetch_user_balances(self, user_id: str) -> dict[str, Any]:
        """
        Fetch raw sett balances for a user.

        Parameters
        ----------
        user_id : str
            Lower-cased user address

        Returns
        -------
        dict[str, Any]
            ``{"user": {"settBalances": [...]}}``, or ``{"user": None}`` when
            the subgraph has no record of the address

        """
        logger.debug("Querying subgraph for %s", user_id)
        data = self._execute_query(self.USER_BALANCES_QUERY, {"id": user_id})
        return {"user": data.get("user")}

    def close(self) -> None:
        """Close the HTTP client."""
        self.client.close()

    def __enter__(self) -> "BadgerSubgraphClient":
        """Context manager entry."""
        return self

    def __exit__(
        self,
        exc_type: type | None,
        exc_val: Exception | None,
        exc_tb: object | None,
    ) -> None:
        """Context manager exit."""
        self.close()
