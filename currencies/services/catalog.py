import logging

from currencies.cache import (
    CacheStore,
    attempt_to_resolve_from_cache,
    build_currencies_cache_key,
)
from currencies.types import DEFAULT_CACHE_OPTIONS, CacheOptions
from currencies.validation import validate_currency_code
from external.api_clients.exchangerates.services import RatesService

logger = logging.getLogger(__name__)


class CurrencyCatalog:
    """Currencies the rates service can quote, cached like any other result."""

    def __init__(self, client, cache_store: CacheStore):
        self._rates = RatesService(client)
        self._cache_store = cache_store

    def list_currencies(
        self, options: CacheOptions = DEFAULT_CACHE_OPTIONS
    ) -> list[str]:
        """
        Get the supported currency codes.

        The list is the base currency of the latest rates plus every
        currency quoted against it.

        Returns:
            Unique upper-case codes in alphabetical order
        """
        cache_key = build_currencies_cache_key()

        cached_currencies = attempt_to_resolve_from_cache(
            self._cache_store, cache_key, options
        )
        if cached_currencies is not None:
            return cached_currencies

        response = self._rates.get_latest()
        currencies = sorted(
            {response.base.upper(), *(code.upper() for code in response.rates)}
        )

        logger.info(f"Fetched {len(currencies)} supported currencies")

        if options.should_cache:
            self._cache_store.set(cache_key, currencies)

        return currencies

    def is_supported(
        self, code: str, options: CacheOptions = DEFAULT_CACHE_OPTIONS
    ) -> bool:
        """Check that a well-formed code is quoted by the rates service."""
        return validate_currency_code(code) in self.list_currencies(options)
