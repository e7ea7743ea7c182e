"""
Tests for the demo session helpers.
"""

import unittest

from double_auction.core.matching_engine import Market
from main import DEMO_ORDERS, submit_orders, drain


class TestDemoSession(unittest.TestCase):
    """Test cases for order loading and draining."""

    def test_submit_orders_places_each_side(self):
        market = Market()

        submit_orders(market, [
            {"side": "BUY", "account_id": "buyer", "bid": 100, "amount": 1},
            {"side": "sell", "account_id": "seller", "ask": 101, "amount": 2},
        ])

        buy_orders, sell_orders = market.get_order_book()
        self.assertEqual([o.account_id for o in buy_orders], ["buyer"])
        self.assertEqual([o.account_id for o in sell_orders], ["seller"])

    def test_demo_orders_drain_to_uncrossed_book(self):
        market = Market()
        submit_orders(market, DEMO_ORDERS)

        trades = drain(market)

        self.assertEqual(len(trades), 1)
        self.assertEqual(trades[0].buyer.account_id, "buyer")
        self.assertEqual(trades[0].seller.account_id, "sellerA")
        snapshot = market.get_order_book()
        self.assertEqual(snapshot.best_bid, 99)
        self.assertEqual(snapshot.best_ask, 100)

    def test_drain_stops_when_a_side_runs_out(self):
        market = Market()
        submit_orders(market, [
            {"side": "buy", "account_id": "buyer", "bid": 100, "amount": 1},
            {"side": "sell", "account_id": "seller", "ask": 100, "amount": 1},
        ])

        trades = drain(market)

        self.assertEqual(len(trades), 1)
        self.assertEqual(len(market.order_book), 0)


if __name__ == '__main__':
    unittest.main()
