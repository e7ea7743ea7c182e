"""
Utility modules for the double auction.

This module provides logging and performance monitoring helpers
used by the market and the entry points.
"""

from .logger import setup_logging, get_logger, MarketLogger
from .performance import PerformanceMonitor, LatencyTracker, measure_latency

__all__ = [
    "setup_logging",
    "get_logger",
    "MarketLogger",
    "PerformanceMonitor",
    "LatencyTracker",
    "measure_latency",
]
