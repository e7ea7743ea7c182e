"""
Configuration module for the double auction.

This module provides environment-driven settings for the market
and its entry points.
"""

from .settings import Settings, get_settings, reload_settings

__all__ = [
    "Settings",
    "get_settings",
    "reload_settings",
]
