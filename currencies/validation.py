"""
Input checks for exchange rate requests.

These are format checks only. They never touch the cache or the network,
so a request that fails here has no side effects.
"""

from collections.abc import Collection
from datetime import date
from typing import Any

from .exceptions import InvalidCurrencyError, InvalidTargetShapeError
from .types import DateRange

TARGET_COLLECTION_TYPES = (list, tuple, set, frozenset)


def validate_currency_code(code: Any) -> str:
    """
    Check that ``code`` looks like a currency code.

    Args:
        code: The value to check, e.g. 'usd' or 'EUR'

    Returns:
        The upper-cased code

    Raises:
        InvalidCurrencyError: If the value isn't a 3-letter string
    """
    if not isinstance(code, str):
        raise InvalidCurrencyError(
            f"Currency code must be a string, got {type(code).__name__}."
        )

    normalized = code.strip().upper()
    if len(normalized) != 3 or not (normalized.isascii() and normalized.isalpha()):
        raise InvalidCurrencyError(f"'{code}' is not a valid currency code.")

    return normalized


def validate_currency_codes(codes: Collection[Any]) -> list[str]:
    """Validate every code of a non-empty collection, stopping at the first bad one."""
    if not codes:
        raise InvalidCurrencyError("At least one currency code is required.")

    return [validate_currency_code(code) for code in codes]


def validate_is_string_or_array(value: Any) -> None:
    if isinstance(value, str):
        return

    if not isinstance(value, TARGET_COLLECTION_TYPES):
        raise InvalidTargetShapeError(
            f"Target must be a currency code or a list of currency codes, "
            f"got {type(value).__name__}."
        )

    if not value:
        raise InvalidTargetShapeError("Target list must not be empty.")


def validate_start_and_end_dates(start: date | str, end: date | str) -> DateRange:
    """
    Check that ``start`` isn't after ``end``.

    Dates in the future are accepted; whether the upstream service has
    data for them is reported by the service itself.

    Raises:
        InvalidDateRangeError: If either date is malformed or start > end
    """
    return DateRange(start, end)
