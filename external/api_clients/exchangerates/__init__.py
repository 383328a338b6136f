from .client import ExchangeRatesClient
from .schemas import HistoryResponse, LatestRatesResponse
from .services import RatesService

__all__ = [
    # Main client
    "ExchangeRatesClient",
    # Services
    "RatesService",
    # Schemas
    "LatestRatesResponse",
    "HistoryResponse",
]
