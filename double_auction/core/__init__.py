"""
Core matching components.

This module contains the order and trade data structures, the order
book, and the Market matcher for the double auction.
"""

from .order import BuyOrder, SellOrder, Debit, Credit, Transaction, Trade
from .order_types import OrderSide
from .order_book import OrderBook, OrderBookSnapshot
from .errors import MarketError, NoOrdersAvailable, InvalidOrder
from .matching_engine import Market

__all__ = [
    "BuyOrder",
    "SellOrder",
    "Debit",
    "Credit",
    "Transaction",
    "Trade",
    "OrderSide",
    "OrderBook",
    "OrderBookSnapshot",
    "MarketError",
    "NoOrdersAvailable",
    "InvalidOrder",
    "Market",
]
