import datetime
from typing import Any

from pydantic import BaseModel, field_validator


def _iso_date(value: Any) -> Any:
    if isinstance(value, datetime.date):
        return value
    is_iso = isinstance(value, str) and len(value) == 10 and value[4] == value[7] == "-"
    if not is_iso:
        raise ValueError(f"{value!r} is not a YYYY-MM-DD date")
    return datetime.date.fromisoformat(value)


class LatestRatesResponse(BaseModel):
    """Schema for the latest exchange rates response."""

    base: str
    date: datetime.date | None = None
    rates: dict[str, float]


class HistoryResponse(BaseModel):
    """Schema for the date range (history) response."""

    base: str | None = None
    start_at: datetime.date | None = None
    end_at: datetime.date | None = None
    rates: dict[datetime.date, dict[str, float]]  # date -> {currency: rate}

    @field_validator("rates", mode="before")
    @classmethod
    def parse_iso_dates(cls, value: Any) -> Any:
        """Keys must be YYYY-MM-DD strings, not timestamps."""
        if not isinstance(value, dict):
            return value
        return {_iso_date(key): rates for key, rates in value.items()}
