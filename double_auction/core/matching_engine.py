"""
Order book matcher for a single-asset continuous double auction.

This module contains the Market class, which accepts buy and sell limit
orders and, on request, resolves the best bid against the best ask into
at most one trade per call.
"""

import logging
from contextlib import nullcontext
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Union

from .errors import InvalidOrder, NoOrdersAvailable
from .order import BuyOrder, SellOrder, Trade
from .order_book import OrderBook, OrderBookSnapshot
from .order_types import price_crosses
from .validators import validate_order
from ..utils.logger import MarketLogger
from ..utils.performance import PerformanceMonitor, measure_latency

logger = logging.getLogger(__name__)


class Market:
    """
    Continuous double-auction matcher.

    Features:
    - Buy and sell limit orders held in a single book
    - Price ordering with arrival order kept among equal prices
    - One best-pair match per resolve_orders() call
    - Optional submission validation, trade callbacks and latency metrics

    The market is not thread-safe. Callers sharing an instance across
    threads must hold their own lock around each submit or resolve.
    """

    def __init__(
        self,
        validate_orders: bool = False,
        max_price: Optional[int] = None,
        max_amount: Optional[int] = None,
        performance_monitor: Optional[PerformanceMonitor] = None,
    ):
        """
        Initialize an empty market.

        Args:
            validate_orders: Reject invalid orders on submission
            max_price: Upper bound on limit prices when validating
            max_amount: Upper bound on amounts when validating
            performance_monitor: Records submit and resolve latency if given
        """
        self.order_book = OrderBook()
        self.validate_orders = validate_orders
        self.max_price = max_price
        self.max_amount = max_amount
        self.performance_monitor = performance_monitor
        self.market_logger = MarketLogger()

        self.trade_callbacks: List[Callable[[Trade], None]] = []

        # Statistics
        self.total_buy_orders = 0
        self.total_sell_orders = 0
        self.total_trades_executed = 0
        self.total_matched_amount = 0
        self.start_time = datetime.now(timezone.utc)

        logger.info("Market initialized")

    def submit_buy_order(self, order: BuyOrder) -> None:
        """
        Place a buy order in the book.

        Args:
            order: The order to submit. The book keeps its own copy.

        Raises:
            InvalidOrder: Only when validation is enabled and the order fails it
        """
        with self._measure("submit"):
            self._check_order(order)
            self.order_book.add_buy_order(order)
            self.total_buy_orders += 1
        self.market_logger.log_order_submission(order.side.value, order.account_id, order.bid, order.amount)

    def submit_sell_order(self, order: SellOrder) -> None:
        """
        Place a sell order in the book.

        Args:
            order: The order to submit. The book keeps its own copy.

        Raises:
            InvalidOrder: Only when validation is enabled and the order fails it
        """
        with self._measure("submit"):
            self._check_order(order)
            self.order_book.add_sell_order(order)
            self.total_sell_orders += 1
        self.market_logger.log_order_submission(order.side.value, order.account_id, order.ask, order.amount)

    def _check_order(self, order: Union[BuyOrder, SellOrder]) -> None:
        if not self.validate_orders:
            return

        is_valid, error = validate_order(order, self.max_price, self.max_amount)
        if not is_valid:
            self.market_logger.log_error("submit", error, order.account_id)
            raise InvalidOrder(error)

    def get_order_book(self) -> OrderBookSnapshot:
        """
        Get the current book, best orders first.

        Bids are ordered highest first and asks lowest first. The returned
        snapshot holds copies; mutating it does not affect the market.
        """
        return self.order_book.snapshot()

    def resolve_orders(self) -> List[Trade]:
        """
        Match the best bid against the best ask.

        Produces at most one trade. To clear every crossing pair, call
        repeatedly until an empty list is returned.

        Returns:
            A single-element list with the trade, or an empty list when the
            best prices do not cross

        Raises:
            NoOrdersAvailable: If either side of the book is empty
        """
        with self._measure("resolve"):
            trades = self._resolve()

        self.total_trades_executed += len(trades)
        self._notify_trades(trades)
        return trades

    def _resolve(self) -> List[Trade]:
        book = self.order_book
        book.sort_orders()

        best_buy, best_sell = book.best_pair()
        if best_buy is None or best_sell is None:
            logger.warning(
                f"Cannot resolve: {len(book.buy_orders)} buy orders, {len(book.sell_orders)} sell orders"
            )
            raise NoOrdersAvailable()

        logger.debug(f"Best bid {best_buy.bid}, best ask {best_sell.ask}")

        if not price_crosses(best_sell.ask, best_buy.bid):
            return []

        trade = Trade.between(best_buy, best_sell)

        filled = min(best_buy.amount, best_sell.amount)
        best_buy.amount -= filled
        best_sell.amount -= filled
        book.prune_filled()

        self.total_matched_amount += filled
        self.market_logger.log_trade_execution(
            best_buy.account_id, best_buy.bid, best_sell.account_id, best_sell.ask, filled
        )

        return [trade]

    def _measure(self, operation: str):
        if self.performance_monitor is None:
            return nullcontext()
        return measure_latency(self.performance_monitor, operation)

    def add_trade_callback(self, callback: Callable[[Trade], None]) -> None:
        """Add callback for trade executions."""
        self.trade_callbacks.append(callback)

    def _notify_trades(self, trades: List[Trade]) -> None:
        """Notify trade callbacks."""
        for trade in trades:
            for callback in self.trade_callbacks:
                try:
                    callback(trade)
                except Exception as e:
                    logger.error(f"Error in trade callback: {str(e)}")

    def get_statistics(self) -> Dict[str, Any]:
        """Get market statistics."""
        uptime = datetime.now(timezone.utc) - self.start_time
        book_stats = self.order_book.get_statistics()

        return {
            "uptime_seconds": uptime.total_seconds(),
            "total_buy_orders": self.total_buy_orders,
            "total_sell_orders": self.total_sell_orders,
            "total_trades_executed": self.total_trades_executed,
            "total_matched_amount": self.total_matched_amount,
            "resting_buy_orders": book_stats["buy_orders"],
            "resting_sell_orders": book_stats["sell_orders"],
            "best_bid": book_stats["best_bid"],
            "best_ask": book_stats["best_ask"],
        }
