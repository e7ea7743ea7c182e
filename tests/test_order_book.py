"""
Tests for order book storage, sorting and pruning.
"""

import unittest

from double_auction.core.order import BuyOrder, SellOrder
from double_auction.core.order_book import OrderBook


class TestOrderBook(unittest.TestCase):
    """Test cases for the order book."""

    def setUp(self):
        """Set up test fixtures."""
        self.book = OrderBook()

    def test_orders_unsorted_at_rest(self):
        """Orders keep arrival order until the book is sorted."""
        self.book.add_buy_order(BuyOrder("a", 95, 1))
        self.book.add_buy_order(BuyOrder("b", 99, 1))

        self.assertEqual([o.account_id for o in self.book.buy_orders], ["a", "b"])

        self.book.sort_orders()
        self.assertEqual([o.account_id for o in self.book.buy_orders], ["b", "a"])

    def test_best_pair(self):
        self.assertEqual(self.book.best_pair(), (None, None))

        self.book.add_buy_order(BuyOrder("b", 99, 1))
        self.book.add_sell_order(SellOrder("s2", 105, 1))
        self.book.add_sell_order(SellOrder("s1", 101, 1))
        self.book.sort_orders()

        best_buy, best_sell = self.book.best_pair()
        self.assertEqual(best_buy.account_id, "b")
        self.assertEqual(best_sell.account_id, "s1")

    def test_prune_filled_drops_non_positive_amounts(self):
        """Orders with zero or negative amounts are removed from both sides."""
        self.book.add_buy_order(BuyOrder("keep", 100, 1))
        self.book.add_buy_order(BuyOrder("zero", 100, 0))
        self.book.add_sell_order(SellOrder("negative", 100, -2))

        removed = self.book.prune_filled()

        self.assertEqual(removed, 2)
        self.assertEqual([o.account_id for o in self.book.buy_orders], ["keep"])
        self.assertEqual(self.book.sell_orders, [])

    def test_snapshot_is_sorted_copy(self):
        self.book.add_sell_order(SellOrder("high", 110, 1))
        self.book.add_sell_order(SellOrder("low", 100, 1))

        snapshot = self.book.snapshot()

        self.assertEqual(snapshot.best_ask, 100)
        self.assertIsNone(snapshot.best_bid)
        self.assertIsInstance(snapshot.sell_orders, tuple)
        self.assertIsNot(snapshot.sell_orders[0], self.book.sell_orders[0])
        self.assertEqual(snapshot.to_dict()["sell_orders"][0]["account_id"], "low")

    def test_statistics(self):
        self.book.add_buy_order(BuyOrder("b1", 98, 2))
        self.book.add_buy_order(BuyOrder("b2", 99, 3))
        self.book.add_sell_order(SellOrder("s1", 102, 4))

        stats = self.book.get_statistics()

        self.assertEqual(self.book.get_bbo(), (99, 102))
        self.assertEqual(stats["spread"], 3)
        self.assertEqual(stats["total_buy_amount"], 5)
        self.assertEqual(stats["total_sell_amount"], 4)
        self.assertEqual(len(self.book), 3)
        self.assertFalse(self.book.is_empty())

    def test_empty_statistics(self):
        stats = self.book.get_statistics()

        self.assertTrue(self.book.is_empty())
        self.assertIsNone(stats["best_bid"])
        self.assertIsNone(stats["spread"])


if __name__ == '__main__':
    unittest.main()
