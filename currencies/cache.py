import logging
from abc import ABC, abstractmethod
from collections.abc import Collection
from typing import Any

from django.conf import settings
from django.core.cache import caches

from .types import CacheOptions, DateRange

logger = logging.getLogger(__name__)

DEFAULT_CACHE_PREFIX = "exchange_rates"
CURRENCIES_CACHE_KEY = "currencies"


def get_cache_prefix() -> str:
    return getattr(settings, "EXCHANGE_RATES_CACHE_PREFIX", DEFAULT_CACHE_PREFIX)


def canonical_targets(target: str | Collection[str]) -> str:
    """
    Render the target(s) of a request as they appear in a cache key.

    A single code is written bare. A collection is deduplicated, sorted
    and bracketed, so ``["GBP", "EUR"]`` and ``("EUR", "GBP")`` share a key
    while ``"EUR"`` and ``["EUR"]`` (which resolve to differently shaped
    series) don't.
    """
    if isinstance(target, str):
        return target.upper()
    codes = sorted({code.upper() for code in target})
    return "[" + ",".join(codes) + "]"


def build_cache_key(
    base: str,
    target: str | Collection[str],
    date_range: DateRange,
    prefix: str | None = None,
) -> str:
    """
    Build the cache key for a date range request.

    Args:
        base: Base currency code
        target: Target currency code or collection of codes
        date_range: The requested date range
        prefix: Key prefix (defaults to EXCHANGE_RATES_CACHE_PREFIX)

    Returns:
        A key such as 'exchange_rates:USD:EUR:2023-01-01:2023-01-31'
    """
    prefix = prefix or get_cache_prefix()
    return ":".join(
        [
            prefix,
            base.upper(),
            canonical_targets(target),
            date_range.start.isoformat(),
            date_range.end.isoformat(),
        ]
    )


def build_currencies_cache_key(prefix: str | None = None) -> str:
    return f"{prefix or get_cache_prefix()}:{CURRENCIES_CACHE_KEY}"


class CacheStore(ABC):
    """
    Key-value store used to avoid repeat calls to the rates service.

    Implementations own expiry and per-key atomicity. Errors raised by
    the underlying backend must propagate to the caller.
    """

    @abstractmethod
    def get(self, key: str) -> Any | None:
        pass

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        pass


class DjangoCacheStore(CacheStore):
    """CacheStore backed by one of the project's Django cache aliases."""

    def __init__(self, alias: str | None = None, timeout: int | None = None):
        self.alias = alias or getattr(settings, "EXCHANGE_RATES_CACHE_ALIAS", "default")
        self.timeout = (
            timeout
            if timeout is not None
            else getattr(settings, "EXCHANGE_RATES_CACHE_TIMEOUT", None)
        )

    @property
    def backend(self):
        return caches[self.alias]

    def get(self, key: str) -> Any | None:
        return self.backend.get(key)

    def set(self, key: str, value: Any) -> None:
        self.backend.set(key, value, timeout=self.timeout)

    def delete(self, key: str) -> None:
        self.backend.delete(key)


def attempt_to_resolve_from_cache(
    store: CacheStore, key: str, options: CacheOptions
) -> Any | None:
    """
    Look ``key`` up in the cache, or bust it.

    When ``options.bust_cache`` is set, the entry is deleted and this
    returns None so the caller fetches a fresh value. Otherwise the
    cached value is returned as-is, or None when there isn't one.
    """
    if options.bust_cache:
        logger.debug(f"Busting cache for {key}")
        store.delete(key)
        return None

    cached_value = store.get(key)
    if cached_value is None:
        logger.debug(f"Cache miss for {key}")
    else:
        logger.debug(f"Cache hit for {key}")
    return cached_value
