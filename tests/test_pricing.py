"""Tests for the CoinGecko pricing service."""

from decimal import Decimal

import httpx
import pytest

from badger_accounts.exceptions import PriceFeedError
from badger_accounts.pricing import CoinGeckoPricing
from factories import BADGER_TOKEN, DIGG_TOKEN


def _pricing(handler, tokens=()) -> CoinGeckoPricing:
    return CoinGeckoPricing(tokens, base_url="https://prices.test/api/v3", transport=httpx.MockTransport(handler))


def test_get_prices_for_configured_tokens():
    """Test configured tokens are priced when no addresses are given."""
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={BADGER_TOKEN: {"usd": 3.25}, DIGG_TOKEN: {"usd": 41000}})

    with _pricing(handler, [BADGER_TOKEN.upper().replace("0X", "0x"), DIGG_TOKEN]) as pricing:
        prices = pricing.get_prices()

    assert prices == {BADGER_TOKEN: Decimal("3.25"), DIGG_TOKEN: Decimal("41000")}
    assert requests[0].url.path == "/api/v3/simple/token_price/ethereum"
    assert requests[0].url.params["contract_addresses"] == f"{BADGER_TOKEN},{DIGG_TOKEN}"
    assert requests[0].url.params["vs_currencies"] == "usd"


def test_unpriced_tokens_are_absent():
    """Test tokens CoinGecko does not return are left out."""
    with _pricing(lambda request: httpx.Response(200, json={BADGER_TOKEN: {"usd": 3}, DIGG_TOKEN: {}})) as pricing:
        prices = pricing.get_prices([BADGER_TOKEN, DIGG_TOKEN])

    assert prices == {BADGER_TOKEN: Decimal("3")}


def test_no_tokens_skips_request():
    """Test an empty token list makes no request."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("unexpected request")

    with _pricing(handler) as pricing:
        assert pricing.get_prices() == {}


def test_rate_limit_raises():
    """Test HTTP failures become PriceFeedError."""
    with _pricing(lambda request: httpx.Response(429, json={"error": "rate limited"})) as pricing:
        with pytest.raises(PriceFeedError, match="HTTP error 429"):
            pricing.get_prices([BADGER_TOKEN])


def test_timeout_raises():
    """Test timeouts become PriceFeedError."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with _pricing(handler) as pricing:
        with pytest.raises(PriceFeedError, match="Request timeout"):
            pricing.get_prices([BADGER_TOKEN])
