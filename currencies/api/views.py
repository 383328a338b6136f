import logging

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from currencies.exceptions import ExchangeRateError
from currencies.services import get_currency_catalog, get_exchange_rate_resolver
from currencies.types import CacheOptions
from external.api_clients import APIClientError, APINetworkError

from .serializers import (
    CurrencyListRequestSerializer,
    ExchangeRateRangeRequestSerializer,
)

logger = logging.getLogger(__name__)


def invalid_request_response(errors: dict) -> Response:
    """Report serializer errors as {"error": message, "fields": {field: [...]}}."""
    non_field_errors = errors.get("non_field_errors")
    message = (
        str(non_field_errors[0]) if non_field_errors else "Invalid request parameters."
    )
    return Response(
        {"error": message, "fields": errors}, status=status.HTTP_400_BAD_REQUEST
    )


def upstream_error_response(error: APIClientError) -> Response:
    """Map a rates service failure to a gateway error."""
    if isinstance(error, APINetworkError):
        status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    else:
        status_code = status.HTTP_502_BAD_GATEWAY

    logger.warning(f"Exchange rates service failed: {error}")
    return Response(
        {"error": f"Failed to get exchange rates: {error.message}"},
        status=status_code,
    )


class ExchangeRateRangeView(APIView):
    """
    API View for exchange rates over a date range.

    GET /api/rates/

    Query Parameters:
    - report_by: Base currency code
    - currency: Target currency code, or comma-separated codes
    - start_date, end_date: The date range (inclusive)
    - cache: Store the result (default true)
    - bust_cache: Replace any cached result (default false)

    Response:
    - The request echoed back
    - rates: date -> rate, or date -> {currency: rate} for several targets
    """

    def get(self, request: Request) -> Response:
        serializer = ExchangeRateRangeRequestSerializer(
            data=request.query_params.dict()
        )
        if not serializer.is_valid():
            return invalid_request_response(serializer.errors)

        base = serializer.validated_data["report_by"]
        target = serializer.validated_data["currency"]
        start_date = serializer.validated_data["start_date"]
        end_date = serializer.validated_data["end_date"]
        options = CacheOptions(
            should_cache=serializer.validated_data["cache"],
            bust_cache=serializer.validated_data["bust_cache"],
        )

        targets = [target] if isinstance(target, str) else target
        catalog = get_currency_catalog()
        resolver = get_exchange_rate_resolver()

        try:
            unsupported = [
                code for code in [base, *targets] if not catalog.is_supported(code)
            ]
            if unsupported:
                return Response(
                    {"error": f"Unsupported currency: {', '.join(unsupported)}"},
                    status=status.HTTP_400_BAD_REQUEST,
                )
            rates = resolver.resolve_range(base, target, start_date, end_date, options)
        except ExchangeRateError as e:
            return Response({"error": e.message}, status=status.HTTP_400_BAD_REQUEST)
        except APIClientError as e:
            return upstream_error_response(e)

        return Response(
            {
                "base": base.upper(),
                "target": target.upper()
                if isinstance(target, str)
                else [code.upper() for code in target],
                "start_date": start_date,
                "end_date": end_date,
                "rates": rates,
            }
        )


class CurrencyListView(APIView):
    """
    API View for the supported currencies.

    GET /api/currencies/
    """

    def get(self, request: Request) -> Response:
        serializer = CurrencyListRequestSerializer(data=request.query_params.dict())
        if not serializer.is_valid():
            return invalid_request_response(serializer.errors)

        catalog = get_currency_catalog()
        options = CacheOptions(bust_cache=serializer.validated_data["bust_cache"])

        try:
            currencies = catalog.list_currencies(options)
        except APIClientError as e:
            return upstream_error_response(e)

        return Response({"count": len(currencies), "currencies": currencies})
