import logging
from collections.abc import Collection
from datetime import date

from currencies.cache import (
    CacheStore,
    attempt_to_resolve_from_cache,
    build_cache_key,
)
from currencies.types import (
    DEFAULT_CACHE_OPTIONS,
    CacheOptions,
    DateRange,
    MultiRateSeries,
    RateSeries,
)
from currencies.validation import (
    validate_currency_code,
    validate_currency_codes,
    validate_is_string_or_array,
    validate_start_and_end_dates,
)
from external.api_clients.exchangerates.schemas import HistoryResponse
from external.api_clients.exchangerates.services import RatesService

logger = logging.getLogger(__name__)

SAME_CURRENCY_RATE = 1.0


class ExchangeRateResolver:
    """
    Resolves exchange rates over a date range.

    The resolver follows a "cache first" approach:
    1. Validate the request
    2. Return the cached series if there is one (unless busting)
    3. Otherwise build the series locally (same currency) or fetch it
    4. Store the series in the cache and return it

    Both collaborators are required; nothing is constructed implicitly.
    """

    def __init__(self, client, cache_store: CacheStore):
        """
        Initialize the resolver.

        Args:
            client: Object exposing ``get(endpoint, params=None)``
                    (an ExchangeRatesClient in production)
            cache_store: Where resolved series are cached
        """
        self._rates = RatesService(client)
        self._cache_store = cache_store

    def resolve_range(
        self,
        base: str,
        target: str | Collection[str],
        start: date | str,
        end: date | str,
        options: CacheOptions = DEFAULT_CACHE_OPTIONS,
    ) -> RateSeries | MultiRateSeries:
        """
        Get the exchange rates between ``start`` and ``end``.

        Args:
            base: Base currency code (e.g., 'USD')
            target: Target currency code, or a collection of codes
            start: First day of the range (inclusive)
            end: Last day of the range (inclusive)
            options: Cache control for this call

        Returns:
            For a single target, a dict of ISO date -> rate. For a
            collection of targets, a dict of ISO date -> {currency: rate}.
            Dates are in ascending order.

        Raises:
            ExchangeRateError: If the request is invalid
            APIClientError: If the rates service call fails
        """
        base = validate_currency_code(base)
        date_range = validate_start_and_end_dates(start, end)
        validate_is_string_or_array(target)

        if isinstance(target, str):
            target = validate_currency_code(target)
        else:
            target = validate_currency_codes(target)

        cache_key = build_cache_key(base, target, date_range)

        cached_series = attempt_to_resolve_from_cache(
            self._cache_store, cache_key, options
        )
        if cached_series is not None:
            return cached_series

        if base == target:
            series = self._same_currency_series(date_range)
        else:
            series = self._fetch_series(base, target, date_range)

        if options.should_cache:
            self._cache_store.set(cache_key, series)
            logger.debug(f"Cached {len(series)} rates under {cache_key}")

        return series

    def _same_currency_series(self, date_range: DateRange) -> RateSeries:
        """
        Build a same-currency series without calling the rates service.

        The rate is always 1.0. Weekends are left out, matching the
        business-day series the service returns for real pairs.
        """
        return {day.isoformat(): SAME_CURRENCY_RATE for day in date_range.weekdays()}

    def _fetch_series(
        self,
        base: str,
        target: str | list[str],
        date_range: DateRange,
    ) -> RateSeries | MultiRateSeries:
        symbols = [target] if isinstance(target, str) else sorted(set(target))

        logger.debug(
            f"Fetching {base}→{','.join(symbols)} "
            f"from {date_range.start} to {date_range.end}"
        )

        response = self._rates.get_history(
            base=base,
            start_at=date_range.start,
            end_at=date_range.end,
            symbols=symbols,
        )

        if isinstance(target, str):
            series = self._flatten(response, target, date_range)
        else:
            series = self._nested(response, symbols, date_range)

        logger.info(
            f"Fetched {len(series)} days of rates for {base}→{','.join(symbols)}"
        )
        return series

    def _flatten(
        self, response: HistoryResponse, target: str, date_range: DateRange
    ) -> RateSeries:
        series: RateSeries = {}
        for day, rates in self._days_in_range(response, date_range):
            if target not in rates:
                logger.warning(f"No {target} rate returned for {day}, skipping")
                continue
            series[day.isoformat()] = rates[target]
        return series

    def _nested(
        self, response: HistoryResponse, symbols: list[str], date_range: DateRange
    ) -> MultiRateSeries:
        series: MultiRateSeries = {}
        for day, rates in self._days_in_range(response, date_range):
            missing = [code for code in symbols if code not in rates]
            if missing:
                logger.warning(f"No rates for {', '.join(missing)} on {day}")
            series[day.isoformat()] = dict(rates)
        return series

    def _days_in_range(
        self, response: HistoryResponse, date_range: DateRange
    ) -> list[tuple[date, dict[str, float]]]:
        """Response days inside the requested range, in ascending order."""
        days = []
        for day, rates in response.rates.items():
            if not date_range.contains(day):
                logger.debug(f"Dropping {day}, outside the requested range")
                continue
            days.append((day, rates))
        return sorted(days, key=lambda item: item[0])
