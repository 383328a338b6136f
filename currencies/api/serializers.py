from typing import Any

from rest_framework import serializers


class ExchangeRateRangeRequestSerializer(serializers.Serializer):
    report_by = serializers.CharField(
        help_text="Base currency code (e.g., USD)",
    )
    currency = serializers.CharField(
        help_text="Target currency code, or comma-separated codes (e.g., EUR,GBP)",
    )
    start_date = serializers.DateField(
        help_text="Start date of the range (inclusive)",
    )
    end_date = serializers.DateField(
        help_text="End date of the range (inclusive)",
    )
    cache = serializers.BooleanField(
        default=True,
        help_text="Store the result in the cache",
    )
    bust_cache = serializers.BooleanField(
        default=False,
        help_text="Ignore and replace any cached result",
    )

    def validate_currency(self, value: str) -> str | list[str]:
        """A comma in the value means a list of targets."""
        if "," not in value:
            return value.strip()
        codes = [code.strip() for code in value.split(",") if code.strip()]
        if not codes:
            raise serializers.ValidationError("At least one currency is required.")
        return codes

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:
        """Cross-field validation."""
        if attrs["start_date"] > attrs["end_date"]:
            raise serializers.ValidationError(
                "start_date must be before or equal to end_date."
            )
        return attrs


class CurrencyListRequestSerializer(serializers.Serializer):
    bust_cache = serializers.BooleanField(
        default=False,
        help_text="Ignore and replace the cached currency list",
    )
