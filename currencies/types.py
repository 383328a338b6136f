from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from .exceptions import InvalidDateRangeError

RateSeries = dict[str, float]
MultiRateSeries = dict[str, dict[str, float]]


def to_date(value: date | str) -> date:
    """Coerce a date, datetime or ISO 'YYYY-MM-DD' string to a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value)
        except ValueError:
            raise InvalidDateRangeError(f"'{value}' is not a valid YYYY-MM-DD date.")
    raise InvalidDateRangeError(f"Expected a date, got {type(value).__name__}.")


@dataclass(frozen=True)
class DateRange:
    """An inclusive range of calendar days."""

    start: date
    end: date

    def __post_init__(self):
        object.__setattr__(self, "start", to_date(self.start))
        object.__setattr__(self, "end", to_date(self.end))
        if self.start > self.end:
            raise InvalidDateRangeError(
                f"The start date {self.start} must be before or equal to "
                f"the end date {self.end}."
            )

    def days(self) -> Iterator[date]:
        for offset in range((self.end - self.start).days + 1):
            yield self.start + timedelta(days=offset)

    def weekdays(self) -> Iterator[date]:
        return (day for day in self.days() if day.weekday() < 5)

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


@dataclass(frozen=True)
class CacheOptions:
    """
    Per-call cache control.

    Attributes:
        should_cache: Store a freshly fetched result in the cache
        bust_cache: Delete any cached result first and fetch a fresh one.
                    Only the call receiving these options is affected.
    """

    should_cache: bool = True
    bust_cache: bool = False


DEFAULT_CACHE_OPTIONS = CacheOptions()
