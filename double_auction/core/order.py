"""
Order and Trade data structures for the double auction.

This module defines buy and sell limit orders, the debit/credit ledger
entries a trade produces, and the Trade record returned by resolution.
Prices and amounts are plain signed integers; no validation happens here.
"""

import json
from dataclasses import dataclass
from typing import Dict, Any

from .order_types import OrderSide, validate_order_side


@dataclass
class BuyOrder:
    """
    A limit order to buy.

    The amount is reduced in place when the order is partially filled
    while resting in the book.
    """

    account_id: str
    bid: int
    amount: int

    @property
    def side(self) -> OrderSide:
        return OrderSide.BUY

    @property
    def price(self) -> int:
        """Limit price, the bid."""
        return self.bid

    def to_dict(self) -> Dict[str, Any]:
        """Convert order to dictionary for serialization."""
        return {
            "side": self.side.value,
            "account_id": self.account_id,
            "bid": self.bid,
            "amount": self.amount,
        }

    def to_json(self) -> str:
        """Convert order to JSON string."""
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BuyOrder':
        """Create order from dictionary."""
        return cls(
            account_id=data["account_id"],
            bid=int(data["bid"]),
            amount=int(data["amount"]),
        )


@dataclass
class SellOrder:
    """A limit order to sell. Mirror of BuyOrder with an ask price."""

    account_id: str
    ask: int
    amount: int

    @property
    def side(self) -> OrderSide:
        return OrderSide.SELL

    @property
    def price(self) -> int:
        """Limit price, the ask."""
        return self.ask

    def to_dict(self) -> Dict[str, Any]:
        """Convert order to dictionary for serialization."""
        return {
            "side": self.side.value,
            "account_id": self.account_id,
            "ask": self.ask,
            "amount": self.amount,
        }

    def to_json(self) -> str:
        """Convert order to JSON string."""
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SellOrder':
        """Create order from dictionary."""
        return cls(
            account_id=data["account_id"],
            ask=int(data["ask"]),
            amount=int(data["amount"]),
        )


def order_from_dict(data: Dict[str, Any]):
    """
    Create a BuyOrder or SellOrder from a dictionary carrying a "side" key.

    Raises:
        ValueError: If the side is missing or invalid
    """
    side = validate_order_side(data.get("side", ""))
    if side == OrderSide.BUY:
        return BuyOrder.from_dict(data)
    return SellOrder.from_dict(data)


@dataclass(frozen=True)
class Debit:
    """Value leaving an account."""

    account_id: str
    amount: int

    def to_dict(self) -> Dict[str, Any]:
        return {"account_id": self.account_id, "amount": self.amount}


@dataclass(frozen=True)
class Credit:
    """Value entering an account."""

    account_id: str
    amount: int

    def to_dict(self) -> Dict[str, Any]:
        return {"account_id": self.account_id, "amount": self.amount}


@dataclass(frozen=True)
class Transaction:
    """
    The two-sided effect of a trade on one party.

    Both entries belong to the same account.
    """

    debit: Debit
    credit: Credit

    @property
    def account_id(self) -> str:
        return self.debit.account_id

    def to_dict(self) -> Dict[str, Any]:
        return {"debit": self.debit.to_dict(), "credit": self.credit.to_dict()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Transaction':
        return cls(
            debit=Debit(data["debit"]["account_id"], int(data["debit"]["amount"])),
            credit=Credit(data["credit"]["account_id"], int(data["credit"]["amount"])),
        )


@dataclass(frozen=True)
class Trade:
    """
    A single match between the best buy and the best sell order.

    For the buyer, the debit holds the buy order's amount before the match
    and the credit holds the bid. For the seller, the debit holds the ask
    and the credit holds the sell order's amount before the match. Quantity
    and price share the amount field; consumers rely on this layout.
    """

    buyer: Transaction
    seller: Transaction

    @classmethod
    def between(cls, buy_order: BuyOrder, sell_order: SellOrder) -> 'Trade':
        """Build the trade for a crossing buy/sell pair, before any fill is applied."""
        return cls(
            buyer=Transaction(
                debit=Debit(buy_order.account_id, buy_order.amount),
                credit=Credit(buy_order.account_id, buy_order.bid),
            ),
            seller=Transaction(
                debit=Debit(sell_order.account_id, sell_order.ask),
                credit=Credit(sell_order.account_id, sell_order.amount),
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert trade to dictionary for serialization."""
        return {
            "buyer": self.buyer.to_dict(),
            "seller": self.seller.to_dict(),
        }

    def to_json(self) -> str:
        """Convert trade to JSON string."""
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Trade':
        """Create trade from dictionary."""
        return cls(
            buyer=Transaction.from_dict(data["buyer"]),
            seller=Transaction.from_dict(data["seller"]),
        )
