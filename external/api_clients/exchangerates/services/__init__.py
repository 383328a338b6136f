from .base import BaseService
from .rates import RatesService

__all__ = [
    "BaseService",
    "RatesService",
]
