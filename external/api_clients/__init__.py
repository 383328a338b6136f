from .client import APIClient
from .exceptions import (
    APIAuthenticationError,
    APIClientError,
    APIConnectionError,
    APINetworkError,
    APINotFoundError,
    APIRateLimitError,
    APIResponseError,
    APITimeoutError,
)

__all__ = [
    # Base client
    "APIClient",
    # Exceptions
    "APIClientError",
    "APINetworkError",
    "APIConnectionError",
    "APITimeoutError",
    "APIResponseError",
    "APIAuthenticationError",
    "APIRateLimitError",
    "APINotFoundError",
]
