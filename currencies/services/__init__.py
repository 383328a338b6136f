from currencies.cache import DjangoCacheStore
from external.api_clients.exchangerates import ExchangeRatesClient

from .catalog import CurrencyCatalog
from .exchange_rate import ExchangeRateResolver

__all__ = [
    "CurrencyCatalog",
    "ExchangeRateResolver",
    "get_currency_catalog",
    "get_exchange_rate_resolver",
    "get_rates_client",
    "reset_rates_client",
]


# Global instance so every service shares one HTTP session
_rates_client: ExchangeRatesClient | None = None


def get_rates_client() -> ExchangeRatesClient:
    """Get the global ExchangeRatesClient instance."""
    global _rates_client
    if _rates_client is None:
        _rates_client = ExchangeRatesClient()
    return _rates_client


def reset_rates_client() -> None:
    """Close and forget the global client. Useful when API settings change."""
    global _rates_client
    if _rates_client is not None:
        _rates_client.close()
    _rates_client = None


def get_exchange_rate_resolver() -> ExchangeRateResolver:
    """Build a resolver wired to the configured rates API and cache."""
    return ExchangeRateResolver(
        client=get_rates_client(),
        cache_store=DjangoCacheStore(),
    )


def get_currency_catalog() -> CurrencyCatalog:
    """Build a catalog wired to the configured rates API and cache."""
    return CurrencyCatalog(
        client=get_rates_client(),
        cache_store=DjangoCacheStore(),
    )
