#!/usr/bin/env python3
"""
Demo entry point for the double auction.

This script builds a market from the environment settings, submits a
small scripted set of orders, drains every crossing pair by resolving
repeatedly, and prints the trades and the remaining book as JSON.
"""

import json
import sys
from typing import Any, Dict, List

from double_auction.config.settings import get_settings, Settings
from double_auction.core import BuyOrder, Market, MarketError, Trade
from double_auction.core.order import order_from_dict
from double_auction.utils.logger import setup_logging, get_logger, create_audit_logger, log_trade_audit
from double_auction.utils.performance import get_performance_monitor

logger = get_logger(__name__)


DEMO_ORDERS = [
    {"side": "buy", "account_id": "buyerC", "bid": 98, "amount": 1},
    {"side": "buy", "account_id": "buyerB", "bid": 95, "amount": 1},
    {"side": "buy", "account_id": "buyerA", "bid": 99, "amount": 2},
    {"side": "buy", "account_id": "buyer", "bid": 100, "amount": 1},
    {"side": "sell", "account_id": "sellerB", "ask": 110, "amount": 1},
    {"side": "sell", "account_id": "sellerA", "ask": 99, "amount": 1},
    {"side": "sell", "account_id": "seller", "ask": 100, "amount": 1},
    {"side": "sell", "account_id": "sellerC", "ask": 109, "amount": 1},
]


def build_market(settings: Settings) -> Market:
    """Create a market configured from settings."""
    monitor = get_performance_monitor() if settings.enable_performance_monitoring else None
    return Market(
        validate_orders=settings.validate_orders,
        max_price=settings.max_price,
        max_amount=settings.max_amount,
        performance_monitor=monitor,
    )


def submit_orders(market: Market, order_data: List[Dict[str, Any]]) -> None:
    """Parse order dictionaries and place each on its side of the book."""
    for data in order_data:
        order = order_from_dict(data)
        if isinstance(order, BuyOrder):
            market.submit_buy_order(order)
        else:
            market.submit_sell_order(order)


def drain(market: Market) -> List[Trade]:
    """
    Resolve until the best prices no longer cross or a side runs out.

    Returns:
        Every trade produced, in execution order
    """
    market.market_logger.log_system_event("DRAIN_START", f"resting_orders={len(market.order_book)}")
    trades: List[Trade] = []
    while True:
        try:
            resolved = market.resolve_orders()
        except MarketError as e:
            logger.info(f"Stopped resolving: {e.message}")
            break
        if not resolved:
            break
        trades.extend(resolved)
    market.market_logger.log_system_event("DRAIN_END", f"trades={len(trades)}")
    return trades


def main():
    """Main entry point."""
    try:
        settings = get_settings()
    except ValueError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)

    setup_logging(
        level="DEBUG" if settings.debug else settings.log_level,
        log_file=settings.log_file
    )
    audit_logger = create_audit_logger(settings.audit_log_file)

    market = build_market(settings)
    market.add_trade_callback(lambda trade: log_trade_audit(audit_logger, trade.to_dict()))

    submit_orders(market, DEMO_ORDERS)

    trades = drain(market)
    logger.info(f"Demo finished: {len(trades)} trades executed")

    print(json.dumps({
        "trades": [trade.to_dict() for trade in trades],
        "order_book": market.get_order_book().to_dict(),
        "statistics": market.get_statistics(),
    }, indent=2))


if __name__ == "__main__":
    main()
