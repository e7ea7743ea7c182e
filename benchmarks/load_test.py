"""
Load testing and benchmarking for the double auction.

Measures how fast orders can be submitted and how fast a crossed book
can be drained one resolve_orders() call at a time.
"""

import random
import statistics
import time
from typing import List, Dict, Any, Tuple

from double_auction.core import BuyOrder, SellOrder, Market, NoOrdersAvailable
from double_auction.utils.performance import get_performance_monitor, LatencyTracker


class LoadTester:
    """
    Load testing utility for the market.
    """

    def __init__(self, seed: int = 42):
        """Initialize load tester."""
        self.random = random.Random(seed)
        self.performance_monitor = get_performance_monitor()
        self.results = []

    def generate_random_orders(self, count: int, mid_price: int = 100, spread: int = 10) -> Tuple[List[BuyOrder], List[SellOrder]]:
        """
        Generate random buy and sell orders around a mid price.

        Args:
            count: Number of orders to generate
            mid_price: Price the bids and asks scatter around
            spread: Maximum distance from the mid price

        Returns:
            Tuple of (buy_orders, sell_orders)
        """
        buy_orders = []
        sell_orders = []

        for i in range(count):
            price = self.random.randint(mid_price - spread, mid_price + spread)
            amount = self.random.randint(1, 10)
            if self.random.random() < 0.5:
                buy_orders.append(BuyOrder(f"buyer_{i}", price, amount))
            else:
                sell_orders.append(SellOrder(f"seller_{i}", price, amount))

        return buy_orders, sell_orders

    def _fill_market(self, order_count: int) -> Tuple[Market, float]:
        market = Market()
        buy_orders, sell_orders = self.generate_random_orders(order_count)

        start_time = time.perf_counter()
        for order in buy_orders:
            market.submit_buy_order(order)
        for order in sell_orders:
            market.submit_sell_order(order)
        return market, time.perf_counter() - start_time

    def benchmark_submission(self, order_count: int) -> Dict[str, Any]:
        """
        Benchmark order submission performance.

        Args:
            order_count: Number of orders to submit

        Returns:
            Performance metrics
        """
        print(f"Benchmarking submission of {order_count} orders...")

        _, total_time = self._fill_market(order_count)
        system_stats = self.performance_monitor.get_system_stats()

        results = {
            "benchmark": "submission",
            "order_count": order_count,
            "total_time_seconds": total_time,
            "orders_per_second": order_count / total_time if total_time else 0,
            "average_latency_ms": (total_time / order_count) * 1000 if order_count else 0,
            "memory_usage_mb": system_stats.get("memory_rss_mb", 0),
            "cpu_percent": system_stats.get("cpu_percent", 0),
        }

        self.results.append(results)
        return results

    def benchmark_drain(self, order_count: int) -> Dict[str, Any]:
        """
        Benchmark draining a crossed book with repeated resolves.

        Args:
            order_count: Number of orders placed before draining

        Returns:
            Performance metrics including resolve latency percentiles
        """
        print(f"Benchmarking drain of a {order_count} order book...")

        market, _ = self._fill_market(order_count)
        tracker = LatencyTracker()
        trades = 0

        start_time = time.perf_counter()
        while True:
            call_start = time.perf_counter()
            try:
                resolved = market.resolve_orders()
            except NoOrdersAvailable:
                break
            tracker.record((time.perf_counter() - call_start) * 1000)
            if not resolved:
                break
            trades += len(resolved)
        total_time = time.perf_counter() - start_time

        results = {
            "benchmark": "drain",
            "order_count": order_count,
            "trades_executed": trades,
            "total_time_seconds": total_time,
            "trades_per_second": trades / total_time if total_time else 0,
            "resolve_latency_ms": tracker.get_percentiles(),
            "resting_orders": len(market.order_book),
        }

        self.results.append(results)
        return results

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of all benchmark results."""
        if not self.results:
            return {"message": "No benchmark results available"}

        orders_per_second = [r["orders_per_second"] for r in self.results if "orders_per_second" in r]
        trades_per_second = [r["trades_per_second"] for r in self.results if "trades_per_second" in r]

        return {
            "total_benchmarks": len(self.results),
            "orders_per_second": {
                "min": min(orders_per_second) if orders_per_second else 0,
                "max": max(orders_per_second) if orders_per_second else 0,
                "avg": statistics.mean(orders_per_second) if orders_per_second else 0,
            },
            "trades_per_second": {
                "min": min(trades_per_second) if trades_per_second else 0,
                "max": max(trades_per_second) if trades_per_second else 0,
                "avg": statistics.mean(trades_per_second) if trades_per_second else 0,
            },
            "results": self.results
        }


def run_benchmarks():
    """Run the submission and drain benchmarks."""
    print("Starting double auction benchmarks...")

    tester = LoadTester()

    print("\n=== Submission Benchmarks ===")
    tester.benchmark_submission(1000)
    tester.benchmark_submission(10000)

    print("\n=== Drain Benchmarks ===")
    tester.benchmark_drain(1000)
    tester.benchmark_drain(5000)

    print("\n=== Benchmark Summary ===")
    summary = tester.get_summary()
    print(f"Total benchmarks: {summary['total_benchmarks']}")
    print(f"Orders per second - Min: {summary['orders_per_second']['min']:.2f}, "
          f"Max: {summary['orders_per_second']['max']:.2f}, "
          f"Avg: {summary['orders_per_second']['avg']:.2f}")
    print(f"Trades per second - Min: {summary['trades_per_second']['min']:.2f}, "
          f"Max: {summary['trades_per_second']['max']:.2f}, "
          f"Avg: {summary['trades_per_second']['avg']:.2f}")

    return summary


if __name__ == "__main__":
    run_benchmarks()
