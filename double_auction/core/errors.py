"""
Exceptions raised by the order book matcher.
"""


class MarketError(Exception):
    """Base error for market operations. Carries a human-readable message."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NoOrdersAvailable(MarketError):
    """Raised when resolution is attempted while one side of the book is empty."""

    def __init__(self, message: str = "No orders available"):
        super().__init__(message)


class InvalidOrder(MarketError):
    """Raised on submission when opt-in order validation rejects an order."""
