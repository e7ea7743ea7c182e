"""
Order book storage for the double auction.

The book keeps pending buy and sell orders in insertion order and only
puts them in price order when asked to. Sorting is stable, so orders
at the same price keep their arrival order.
"""

import dataclasses
import logging
from typing import Dict, List, NamedTuple, Optional, Tuple, Any

from .order import BuyOrder, SellOrder

logger = logging.getLogger(__name__)


class OrderBookSnapshot(NamedTuple):
    """
    Read-only view of the book at one moment.

    Holds copies of the resting orders, best first on each side, so
    callers never alias the book's internal state.
    """

    buy_orders: Tuple[BuyOrder, ...]
    sell_orders: Tuple[SellOrder, ...]

    @property
    def best_bid(self) -> Optional[int]:
        return self.buy_orders[0].bid if self.buy_orders else None

    @property
    def best_ask(self) -> Optional[int]:
        return self.sell_orders[0].ask if self.sell_orders else None

    def to_dict(self) -> Dict[str, Any]:
        """Convert snapshot to dictionary for serialization."""
        return {
            "buy_orders": [order.to_dict() for order in self.buy_orders],
            "sell_orders": [order.to_dict() for order in self.sell_orders],
        }


class OrderBook:
    """
    Pending buy and sell orders for a single asset.

    Orders are stored unsorted at rest. sort_orders() puts bids highest
    first and asks lowest first.
    """

    def __init__(self):
        """Initialize an empty order book."""
        self.buy_orders: List[BuyOrder] = []
        self.sell_orders: List[SellOrder] = []

    def add_buy_order(self, order: BuyOrder) -> None:
        """
        Append a copy of a buy order to the book.

        Args:
            order: The order to add
        """
        self.buy_orders.append(dataclasses.replace(order))
        logger.debug(f"Added buy order for {order.account_id} at {order.bid} x {order.amount}")

    def add_sell_order(self, order: SellOrder) -> None:
        """
        Append a copy of a sell order to the book.

        Args:
            order: The order to add
        """
        self.sell_orders.append(dataclasses.replace(order))
        logger.debug(f"Added sell order for {order.account_id} at {order.ask} x {order.amount}")

    def sort_orders(self) -> None:
        """Sort bids descending and asks ascending, keeping arrival order among ties."""
        self.buy_orders.sort(key=lambda order: order.bid, reverse=True)
        self.sell_orders.sort(key=lambda order: order.ask)

    def best_pair(self) -> Tuple[Optional[BuyOrder], Optional[SellOrder]]:
        """
        Get the best buy and best sell order.

        Assumes sort_orders() was called since the last mutation. Either
        element is None when that side is empty.
        """
        best_buy = self.buy_orders[0] if self.buy_orders else None
        best_sell = self.sell_orders[0] if self.sell_orders else None
        return best_buy, best_sell

    def prune_filled(self) -> int:
        """
        Drop every order whose amount is no longer positive.

        Returns:
            Number of orders removed across both sides
        """
        before = len(self.buy_orders) + len(self.sell_orders)
        self.buy_orders = [order for order in self.buy_orders if order.amount > 0]
        self.sell_orders = [order for order in self.sell_orders if order.amount > 0]
        removed = before - len(self.buy_orders) - len(self.sell_orders)
        if removed:
            logger.debug(f"Pruned {removed} exhausted orders")
        return removed

    def snapshot(self) -> OrderBookSnapshot:
        """
        Sort the book and return copies of both sides.

        Returns:
            OrderBookSnapshot with best orders first
        """
        self.sort_orders()
        return OrderBookSnapshot(
            buy_orders=tuple(dataclasses.replace(order) for order in self.buy_orders),
            sell_orders=tuple(dataclasses.replace(order) for order in self.sell_orders),
        )

    def get_bbo(self) -> Tuple[Optional[int], Optional[int]]:
        """
        Get Best Bid and Offer (BBO).

        Returns:
            Tuple of (best_bid, best_ask) prices
        """
        best_bid = max((order.bid for order in self.buy_orders), default=None)
        best_ask = min((order.ask for order in self.sell_orders), default=None)
        return best_bid, best_ask

    def is_empty(self) -> bool:
        """Check if both sides of the book are empty."""
        return not self.buy_orders and not self.sell_orders

    def __len__(self) -> int:
        """Return number of resting orders on both sides."""
        return len(self.buy_orders) + len(self.sell_orders)

    def get_statistics(self) -> Dict[str, Any]:
        """Get order book statistics."""
        best_bid, best_ask = self.get_bbo()
        spread = best_ask - best_bid if best_bid is not None and best_ask is not None else None

        return {
            "best_bid": best_bid,
            "best_ask": best_ask,
            "spread": spread,
            "buy_orders": len(self.buy_orders),
            "sell_orders": len(self.sell_orders),
            "total_buy_amount": sum(order.amount for order in self.buy_orders),
            "total_sell_amount": sum(order.amount for order in self.sell_orders),
        }
