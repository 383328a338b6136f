import pytest
from rest_framework.test import APIClient as DRFClient

from currencies.api import views
from currencies.services import CurrencyCatalog, ExchangeRateResolver
from external.api_clients import APIResponseError, APITimeoutError

RATES_URL = "/api/rates/"
CURRENCIES_URL = "/api/currencies/"


@pytest.fixture
def api(monkeypatch, fake_client, cache_store):
    monkeypatch.setattr(
        views,
        "get_exchange_rate_resolver",
        lambda: ExchangeRateResolver(fake_client, cache_store),
    )
    monkeypatch.setattr(
        views,
        "get_currency_catalog",
        lambda: CurrencyCatalog(fake_client, cache_store),
    )
    return DRFClient()


def rates_params(**overrides):
    params = {
        "report_by": "EUR",
        "currency": "USD",
        "start_date": "2023-01-02",
        "end_date": "2023-01-04",
    }
    params.update(overrides)
    return params


class TestExchangeRateRangeView:
    def test_single_target(self, api):
        response = api.get(RATES_URL, rates_params())

        assert response.status_code == 200
        assert response.json() == {
            "base": "EUR",
            "target": "USD",
            "start_date": "2023-01-02",
            "end_date": "2023-01-04",
            "rates": {
                "2023-01-02": 1.0683,
                "2023-01-03": 1.0545,
                "2023-01-04": 1.0598,
            },
        }

    def test_multiple_targets(self, api):
        response = api.get(RATES_URL, rates_params(currency="usd,GBP"))

        assert response.status_code == 200
        body = response.json()
        assert body["target"] == ["USD", "GBP"]
        assert list(body["rates"]) == ["2023-01-02", "2023-01-03", "2023-01-04"]
        assert body["rates"]["2023-01-02"] == {"USD": 1.0683, "GBP": 0.886}

    def test_same_currency(self, api, fake_client):
        response = api.get(
            RATES_URL,
            rates_params(
                currency="EUR", start_date="2023-01-06", end_date="2023-01-09"
            ),
        )

        assert response.json()["rates"] == {"2023-01-06": 1.0, "2023-01-09": 1.0}
        assert "/history" not in fake_client.endpoints()

    def test_repeat_request_is_served_from_cache(self, api, fake_client):
        api.get(RATES_URL, rates_params())
        api.get(RATES_URL, rates_params())

        assert fake_client.endpoints().count("/history") == 1

    def test_bust_cache(self, api, fake_client):
        api.get(RATES_URL, rates_params())
        api.get(RATES_URL, rates_params(bust_cache="true"))

        assert fake_client.endpoints().count("/history") == 2

    def test_cache_disabled(self, api, fake_client):
        api.get(RATES_URL, rates_params(cache="false"))
        api.get(RATES_URL, rates_params())

        assert fake_client.endpoints().count("/history") == 2

    def test_unsupported_currency(self, api, fake_client):
        response = api.get(RATES_URL, rates_params(currency="XYZ"))

        assert response.status_code == 400
        assert "XYZ" in response.json()["error"]
        assert "/history" not in fake_client.endpoints()

    def test_malformed_currency(self, api):
        response = api.get(RATES_URL, rates_params(report_by="US"))

        assert response.status_code == 400
        assert "error" in response.json()

    def test_start_after_end(self, api, fake_client):
        response = api.get(
            RATES_URL, rates_params(start_date="2023-02-01", end_date="2023-01-01")
        )

        assert response.status_code == 400
        assert response.json()["error"] == (
            "start_date must be before or equal to end_date."
        )
        assert fake_client.calls == []

    def test_missing_parameters(self, api):
        response = api.get(RATES_URL, {"report_by": "EUR"})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Invalid request parameters."
        assert set(body["fields"]) >= {"currency", "start_date", "end_date"}

    def test_network_failure(self, api, fake_client):
        api.get(CURRENCIES_URL)
        fake_client.error = APITimeoutError("timed out")

        response = api.get(RATES_URL, rates_params())

        assert response.status_code == 503

    def test_upstream_failure(self, api, fake_client):
        api.get(CURRENCIES_URL)
        fake_client.error = APIResponseError("boom", status_code=500)

        response = api.get(RATES_URL, rates_params())

        assert response.status_code == 502
        assert response.json() == {"error": "Failed to get exchange rates: boom"}


class TestCurrencyListView:
    def test_lists_currencies(self, api):
        response = api.get(CURRENCIES_URL)

        assert response.status_code == 200
        assert response.json() == {
            "count": 4,
            "currencies": ["EUR", "GBP", "JPY", "USD"],
        }

    def test_bust_cache(self, api, fake_client):
        api.get(CURRENCIES_URL)
        api.get(CURRENCIES_URL, {"bust_cache": "1"})

        assert fake_client.endpoints() == ["/latest", "/latest"]

    def test_network_failure(self, api, fake_client):
        fake_client.error = APITimeoutError("timed out")

        response = api.get(CURRENCIES_URL)

        assert response.status_code == 503

    def test_invalid_flag(self, api, fake_client):
        response = api.get(CURRENCIES_URL, {"bust_cache": "maybe"})

        assert response.status_code == 400
        assert set(response.json()) == {"error", "fields"}
        assert "bust_cache" in response.json()["fields"]
        assert fake_client.calls == []
