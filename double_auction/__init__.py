"""
Single-asset continuous double-auction matcher.
"""

from .core import (
    BuyOrder,
    SellOrder,
    Trade,
    Market,
    MarketError,
    NoOrdersAvailable,
)

__version__ = "0.1.0"

__all__ = [
    "BuyOrder",
    "SellOrder",
    "Trade",
    "Market",
    "MarketError",
    "NoOrdersAvailable",
]
