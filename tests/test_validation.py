from datetime import date, datetime

import pytest

from currencies.exceptions import (
    InvalidCurrencyError,
    InvalidDateRangeError,
    InvalidTargetShapeError,
)
from currencies.types import DateRange
from currencies.validation import (
    validate_currency_code,
    validate_currency_codes,
    validate_is_string_or_array,
    validate_start_and_end_dates,
)


class TestValidateCurrencyCode:
    def test_accepts_and_upper_cases(self):
        assert validate_currency_code("usd") == "USD"
        assert validate_currency_code(" Eur ") == "EUR"

    @pytest.mark.parametrize("code", ["US", "EURO", "", "U5D", "12", "€UR"])
    def test_rejects_malformed_codes(self, code):
        with pytest.raises(InvalidCurrencyError):
            validate_currency_code(code)

    def test_rejects_non_strings(self):
        with pytest.raises(InvalidCurrencyError):
            validate_currency_code(123)

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            validate_currency_code("US")


class TestValidateCurrencyCodes:
    def test_returns_canonical_codes(self):
        assert validate_currency_codes(["usd", "GBP"]) == ["USD", "GBP"]

    def test_fails_on_first_offender(self):
        with pytest.raises(InvalidCurrencyError, match="'XX'"):
            validate_currency_codes(["USD", "XX", "Y"])

    def test_rejects_empty(self):
        with pytest.raises(InvalidCurrencyError):
            validate_currency_codes([])


class TestValidateIsStringOrArray:
    @pytest.mark.parametrize(
        "value", ["EUR", ["EUR"], ("EUR", "USD"), {"EUR"}, frozenset({"GBP"})]
    )
    def test_accepts_codes_and_collections(self, value):
        validate_is_string_or_array(value)

    @pytest.mark.parametrize("value", [42, 1.5, None, {"EUR": 1}, b"EUR"])
    def test_rejects_other_shapes(self, value):
        with pytest.raises(InvalidTargetShapeError):
            validate_is_string_or_array(value)

    def test_rejects_empty_collection(self):
        with pytest.raises(InvalidTargetShapeError):
            validate_is_string_or_array([])


class TestValidateStartAndEndDates:
    def test_returns_date_range(self):
        date_range = validate_start_and_end_dates(date(2023, 1, 1), date(2023, 1, 31))
        assert date_range == DateRange(date(2023, 1, 1), date(2023, 1, 31))

    def test_same_day_is_valid(self):
        date_range = validate_start_and_end_dates("2023-01-05", "2023-01-05")
        assert list(date_range.days()) == [date(2023, 1, 5)]

    def test_start_after_end(self):
        with pytest.raises(InvalidDateRangeError):
            validate_start_and_end_dates(date(2023, 2, 1), date(2023, 1, 1))

    def test_future_dates_are_allowed(self):
        validate_start_and_end_dates(date(2999, 1, 1), date(2999, 1, 2))

    def test_datetimes_are_truncated(self):
        date_range = validate_start_and_end_dates(
            datetime(2023, 1, 2, 15, 30), datetime(2023, 1, 3, 8, 0)
        )
        assert date_range.start == date(2023, 1, 2)
        assert date_range.end == date(2023, 1, 3)

    @pytest.mark.parametrize("value", ["2023-13-01", "yesterday", 20230101])
    def test_malformed_dates(self, value):
        with pytest.raises(InvalidDateRangeError):
            validate_start_and_end_dates(value, date(2023, 1, 1))


class TestDateRange:
    def test_weekdays_skip_weekends(self):
        # 2023-01-06 is a Friday
        date_range = DateRange(date(2023, 1, 6), date(2023, 1, 9))
        assert list(date_range.weekdays()) == [date(2023, 1, 6), date(2023, 1, 9)]

    def test_is_immutable(self):
        date_range = DateRange(date(2023, 1, 1), date(2023, 1, 2))
        with pytest.raises(AttributeError):
            date_range.start = date(2022, 1, 1)

    def test_days_up_to_the_last_representable_day(self):
        date_range = DateRange(date(9999, 12, 30), date.max)
        assert list(date_range.days()) == [date(9999, 12, 30), date.max]

    def test_contains(self):
        date_range = DateRange(date(2023, 1, 1), date(2023, 1, 2))
        assert date_range.contains(date(2023, 1, 2))
        assert not date_range.contains(date(2023, 1, 3))
