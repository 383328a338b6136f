import logging
from typing import Any

import requests

from .exceptions import (
    APIAuthenticationError,
    APIClientError,
    APIConnectionError,
    APINotFoundError,
    APIRateLimitError,
    APIResponseError,
    APITimeoutError,
)

logger = logging.getLogger(__name__)


class APIClient:
    """
    Base API client that provides HTTP methods with error handling.

    Responses are never cached here. Callers that want caching own it,
    so that invalidating their cache always reaches the network.
    """

    base_url: str = ""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: int = 30,
    ):
        self.api_key = api_key
        if base_url:
            self.base_url = base_url
        self.timeout = timeout
        self._session = requests.Session()

    def _get_default_headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
        }

    def _get_default_params(self) -> dict[str, Any]:
        return {}

    def _build_url(self, endpoint: str) -> str:
        base = self.base_url.rstrip("/")
        endpoint = endpoint.lstrip("/")
        return f"{base}/{endpoint}"

    def _handle_response(self, response: requests.Response) -> Any:
        """
        Handle the API response and raise appropriate exceptions.

        Args:
            response: The requests Response object

        Returns:
            The parsed JSON response

        Raises:
            APIAuthenticationError: If authentication fails (401)
            APINotFoundError: If resource not found (404)
            APIRateLimitError: If rate limit exceeded (429)
            APIResponseError: For other error status codes or a non-JSON body
        """
        try:
            response.raise_for_status()
            return response.json()
        except requests.exceptions.HTTPError:
            status_code = response.status_code

            try:
                error_body = response.json()
                error_message = error_body.get(
                    "message", error_body.get("error", str(error_body))
                )
            except (ValueError, AttributeError):
                error_message = response.text or f"HTTP {status_code} error"

            if status_code == 401:
                raise APIAuthenticationError(error_message)
            elif status_code == 404:
                raise APINotFoundError(error_message)
            elif status_code == 429:
                retry_after = response.headers.get("Retry-After")
                raise APIRateLimitError(
                    error_message,
                    retry_after=int(retry_after)
                    if retry_after and retry_after.isdigit()
                    else None,
                )
            else:
                raise APIResponseError(error_message, status_code=status_code)
        except ValueError as e:
            raise APIResponseError(
                f"Invalid JSON response: {e}", status_code=response.status_code
            )

    def _request(
        self,
        method: str,
        endpoint: str,
        params: dict | None = None,
        headers: dict | None = None,
        **kwargs,
    ) -> Any:
        """
        Make an HTTP request to the API.

        Args:
            method: HTTP method
            endpoint: API endpoint (will be appended to base_url)
            params: Query parameters
            headers: Additional headers (merged with defaults)
            **kwargs: Additional arguments passed to requests

        Returns:
            The parsed JSON response

        Raises:
            APIClientError: For any API-related errors
        """
        url = self._build_url(endpoint)

        request_headers = self._get_default_headers()
        if headers:
            request_headers.update(headers)

        request_params = self._get_default_params()
        if params:
            request_params.update(params)

        logger.debug(f"Making {method} request to {url}")

        try:
            response = self._session.request(
                method=method.upper(),
                url=url,
                params=request_params,
                headers=request_headers,
                timeout=self.timeout,
                **kwargs,
            )
        except requests.exceptions.Timeout:
            raise APITimeoutError(f"Request to {url} timed out after {self.timeout}s")
        except requests.exceptions.ConnectionError as e:
            raise APIConnectionError(f"Connection error to {url}: {e}")
        except requests.exceptions.RequestException as e:
            raise APIClientError(f"Request failed: {e}")

        return self._handle_response(response)

    def get(
        self,
        endpoint: str,
        params: dict | None = None,
        headers: dict | None = None,
        **kwargs,
    ) -> Any:
        """
        Make a GET request.

        Args:
            endpoint: API endpoint
            params: Query parameters
            headers: Additional headers
            **kwargs: Additional arguments

        Returns:
            The parsed JSON response
        """
        return self._request(
            method="GET",
            endpoint=endpoint,
            params=params,
            headers=headers,
            **kwargs,
        )

    def close(self) -> None:
        """Close the underlying session."""
        self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
