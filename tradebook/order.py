"""
Order: a request to buy or sell shares of one symbol.

Immutable. The sign of quantity carries the direction; order_type plus
limit_price form the Market | Limit(price) variant.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Side(Enum):
    BUY = "buy"
    SELL = "sell"


class OrderType(Enum):
    MARKET = "market"
    LIMIT = "limit"


@dataclass(frozen=True)
class Order:
    """
    An order as seen by the account. Positive quantity buys, negative sells.
    A zero quantity is accepted and never executes.
    """

    symbol: str
    quantity: int
    order_type: OrderType = OrderType.MARKET
    limit_price: float | None = None

    def __post_init__(self) -> None:
        if not self.symbol:
            raise ValueError("Order symbol must be non-empty")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValueError(f"Order quantity must be an integer, got {self.quantity!r}")
        if self.order_type is OrderType.MARKET:
            if self.limit_price is not None:
                raise ValueError("Market orders do not take a limit price")
        elif self.limit_price is None or not self.limit_price > 0:
            raise ValueError(f"Limit orders need a positive limit price, got {self.limit_price!r}")

    @classmethod
    def market(cls, symbol: str, quantity: int) -> Order:
        return cls(symbol=symbol, quantity=quantity)

    @classmethod
    def limit(cls, symbol: str, quantity: int, price: float) -> Order:
        return cls(symbol=symbol, quantity=quantity, order_type=OrderType.LIMIT, limit_price=float(price))

    @property
    def side(self) -> Side | None:
        """BUY or SELL from the sign of quantity; None for a zero quantity."""
        if self.quantity > 0:
            return Side.BUY
        if self.quantity < 0:
            return Side.SELL
        return None

    @property
    def is_buy(self) -> bool:
        return self.quantity > 0

    @property
    def is_sell(self) -> bool:
        return self.quantity < 0

    @property
    def abs_quantity(self) -> int:
        return abs(self.quantity)

    def __str__(self) -> str:
        kind = "Market" if self.order_type is OrderType.MARKET else f"Limit({self.limit_price:g})"
        return f"{self.symbol} {self.quantity:+d} {kind}"
