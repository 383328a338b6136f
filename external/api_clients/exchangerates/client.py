from typing import Any

from django.conf import settings

from external.api_clients.client import APIClient

DEFAULT_API_URL = "https://api.exchangeratesapi.io"


class ExchangeRatesClient(APIClient):
    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: int | None = None,
    ) -> None:
        resolved_api_key = api_key or getattr(settings, "EXCHANGE_RATES_API_KEY", None)
        resolved_base_url = base_url or getattr(
            settings, "EXCHANGE_RATES_API_URL", DEFAULT_API_URL
        )
        resolved_timeout = timeout or getattr(
            settings, "EXCHANGE_RATES_API_TIMEOUT", 30
        )

        super().__init__(
            api_key=resolved_api_key,
            base_url=resolved_base_url,
            timeout=resolved_timeout,
        )

    def _get_default_params(self) -> dict[str, Any]:
        params = super()._get_default_params()
        if self.api_key:
            params["access_key"] = self.api_key
        return params
