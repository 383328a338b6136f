from collections.abc import Iterable
from datetime import date

from external.api_clients.exchangerates.schemas import (
    HistoryResponse,
    LatestRatesResponse,
)

from .base import BaseService


class RatesService(BaseService):
    """
    Service for exchange rate operations.

    Wraps the two endpoints of the exchange rates API: the latest
    rates and the history of rates over a date range.
    """

    def get_latest(self) -> LatestRatesResponse:
        """
        Get the latest exchange rates for the service's default base.

        Returns:
            LatestRatesResponse containing the base currency and a
            dictionary of currency codes to rates.
        """
        response = self._client.get("/latest", params={})
        return self._parse_response(response, LatestRatesResponse)

    def get_history(
        self,
        base: str,
        start_at: date,
        end_at: date,
        symbols: Iterable[str],
    ) -> HistoryResponse:
        """
        Get exchange rates for a date range.

        Args:
            base: Base currency code (e.g., 'USD', 'EUR')
            start_at: Start of the date range (inclusive)
            end_at: End of the date range (inclusive)
            symbols: Target currency codes, sent comma-joined

        Returns:
            HistoryResponse whose rates dict is keyed by date, with each
            value being a dict of currency codes to rates.
        """
        params = {
            "base": base,
            "start_at": start_at.isoformat(),
            "end_at": end_at.isoformat(),
            "symbols": ",".join(symbols),
        }

        response = self._client.get("/history", params=params)
        return self._parse_response(response, HistoryResponse)
