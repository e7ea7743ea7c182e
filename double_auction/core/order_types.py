"""
Order side definitions for the double auction.

Only limit orders exist in this market, so the side is the one
classification every order carries.
"""

from enum import Enum


class OrderSide(Enum):
    """
    Order sides for buy and sell orders.

    - BUY: Orders to purchase the asset, priced by their bid
    - SELL: Orders to sell the asset, priced by their ask
    """
    BUY = "buy"
    SELL = "sell"


def validate_order_side(side: str) -> OrderSide:
    """
    Validate and convert string order side to OrderSide enum.

    Args:
        side: String representation of order side

    Returns:
        OrderSide enum value

    Raises:
        ValueError: If side is invalid
    """
    try:
        return OrderSide(side.lower())
    except ValueError:
        raise ValueError(f"Invalid order side: {side}. Must be one of: {[s.value for s in OrderSide]}")


def price_crosses(ask: int, bid: int) -> bool:
    """Check whether an ask and a bid cross (ask at or below bid)."""
    return ask <= bid
