"""
Pytest configuration and fixtures for the exchange rates app.

The rates service is replaced by FakeRatesClient; the cache is the real
DjangoCacheStore on the LocMem backend, cleared around every test.
"""

import pytest
from django.core.cache import caches

from currencies.cache import DjangoCacheStore
from currencies.services import CurrencyCatalog, ExchangeRateResolver
from external.api_clients import APINotFoundError

LATEST_RESPONSE = {
    "base": "EUR",
    "date": "2023-01-06",
    "rates": {"USD": 1.0642, "GBP": 0.88, "JPY": 140.2},
}

HISTORY_RESPONSE = {
    "base": "EUR",
    "start_at": "2023-01-02",
    "end_at": "2023-01-04",
    "rates": {
        "2023-01-04": {"USD": 1.0598, "GBP": 0.8812},
        "2023-01-02": {"USD": 1.0683, "GBP": 0.8860},
        "2023-01-03": {"USD": 1.0545, "GBP": 0.8834},
    },
}


class FakeRatesClient:
    """Stands in for ExchangeRatesClient and records every call."""

    def __init__(self, history=None, latest=None, error=None):
        self.history = history if history is not None else HISTORY_RESPONSE
        self.latest = latest if latest is not None else LATEST_RESPONSE
        self.error = error
        self.calls = []

    def get(self, endpoint, params=None):
        self.calls.append((endpoint, params))
        if self.error is not None:
            raise self.error
        if endpoint == "/history":
            return self.history
        if endpoint == "/latest":
            return self.latest
        raise APINotFoundError(f"Unknown endpoint {endpoint}")

    def endpoints(self):
        return [endpoint for endpoint, _ in self.calls]


@pytest.fixture(autouse=True)
def clear_cache():
    caches["default"].clear()
    yield
    caches["default"].clear()


@pytest.fixture
def fake_client():
    return FakeRatesClient()


@pytest.fixture
def cache_store():
    return DjangoCacheStore()


@pytest.fixture
def resolver(fake_client, cache_store):
    return ExchangeRateResolver(client=fake_client, cache_store=cache_store)


@pytest.fixture
def catalog(fake_client, cache_store):
    return CurrencyCatalog(client=fake_client, cache_store=cache_store)
