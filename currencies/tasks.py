import logging
from datetime import date, timedelta

from celery import shared_task

from external.api_clients import APINetworkError

from .services import get_currency_catalog, get_exchange_rate_resolver
from .types import CacheOptions

logger = logging.getLogger(__name__)

REFRESH = CacheOptions(should_cache=True, bust_cache=True)


@shared_task(
    autoretry_for=(APINetworkError,),
    retry_backoff=True,
    retry_backoff_max=600,
    max_retries=3,
)
def refresh_currency_list() -> dict:
    """
    Replace the cached currency list with a fresh one.

    Designed to run daily via Celery Beat.

    Returns:
        Dict with task result summary
    """
    currencies = get_currency_catalog().list_currencies(REFRESH)

    logger.info(f"Refreshed currency list: {len(currencies)} currencies")

    return {
        "status": "success",
        "currencies": len(currencies),
    }


@shared_task(
    autoretry_for=(APINetworkError,),
    retry_backoff=True,
    retry_backoff_max=600,
    max_retries=3,
)
def warm_exchange_rates(
    base: str,
    targets: list[str],
    days: int = 30,
    end_date: str | None = None,
) -> dict:
    """
    Replace the cached series for the last ``days`` days.

    Args:
        base: Base currency code
        targets: Target currency codes
        days: Length of the range, ending on end_date
        end_date: Last day of the range (default: today). Format: YYYY-MM-DD

    Returns:
        Dict with task result summary
    """
    end = date.fromisoformat(end_date) if end_date else date.today()
    start = end - timedelta(days=days - 1)

    logger.info(f"Warming {base}→{','.join(targets)} rates from {start} to {end}")

    series = get_exchange_rate_resolver().resolve_range(
        base, targets, start, end, REFRESH
    )

    return {
        "status": "success",
        "base": base,
        "start_date": str(start),
        "end_date": str(end),
        "days_cached": len(series),
    }
