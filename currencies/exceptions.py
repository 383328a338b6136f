class ExchangeRateError(Exception):
    """Base exception for invalid exchange rate requests."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidCurrencyError(ExchangeRateError, ValueError):
    """Raised when a currency code is not a well-formed 3-letter code."""

    pass


class InvalidTargetShapeError(ExchangeRateError, ValueError):
    """Raised when the target is neither a code nor a collection of codes."""

    pass


class InvalidDateRangeError(ExchangeRateError, ValueError):
    """Raised when the date range is malformed or starts after it ends."""

    pass
