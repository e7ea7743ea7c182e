"""
Opt-in validation for submitted orders.

The market accepts any order by default. When a Market is created with
validate_orders=True, these checks run on submission and a failing order
is rejected with InvalidOrder.
"""

import logging
from typing import Any, Optional, Tuple, Union

from .order import BuyOrder, SellOrder

logger = logging.getLogger(__name__)


def validate_account_id(account_id: Any) -> Tuple[bool, Optional[str]]:
    """
    Validate an account identifier.

    Args:
        account_id: Account identifier to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not isinstance(account_id, str):
        return False, "Account id must be a string"

    if not account_id.strip():
        return False, "Account id cannot be empty"

    return True, None


def validate_price(price: Any, max_price: Optional[int] = None) -> Tuple[bool, Optional[str]]:
    """
    Validate an order price.

    Args:
        price: Price to validate
        max_price: Optional inclusive upper bound

    Returns:
        Tuple of (is_valid, error_message)
    """
    if isinstance(price, bool) or not isinstance(price, int):
        return False, f"Invalid price format: {price!r}"

    if price <= 0:
        return False, "Price must be positive"

    if max_price is not None and price > max_price:
        return False, f"Price too large. Maximum: {max_price}"

    return True, None


def validate_amount(amount: Any, max_amount: Optional[int] = None) -> Tuple[bool, Optional[str]]:
    """
    Validate an order amount.

    Args:
        amount: Amount to validate
        max_amount: Optional inclusive upper bound

    Returns:
        Tuple of (is_valid, error_message)
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        return False, f"Invalid amount format: {amount!r}"

    if amount <= 0:
        return False, "Amount must be positive"

    if max_amount is not None and amount > max_amount:
        return False, f"Amount too large. Maximum: {max_amount}"

    return True, None


def validate_order(
    order: Union[BuyOrder, SellOrder],
    max_price: Optional[int] = None,
    max_amount: Optional[int] = None,
) -> Tuple[bool, Optional[str]]:
    """
    Validate a buy or sell order.

    Args:
        order: Order to validate
        max_price: Optional inclusive upper bound on the limit price
        max_amount: Optional inclusive upper bound on the amount

    Returns:
        Tuple of (is_valid, error_message)
    """
    for is_valid, error in (
        validate_account_id(order.account_id),
        validate_price(order.price, max_price),
        validate_amount(order.amount, max_amount),
    ):
        if not is_valid:
            logger.debug(f"Rejected {order.side.value} order: {error}")
            return False, error

    return True, None
