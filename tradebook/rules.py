"""
Execution decision: whether an order executes against the current market
price, and at what price. Pure; no account state involved.
"""

from __future__ import annotations

from tradebook.order import Order, OrderType


def is_marketable(order: Order, market_price: float) -> bool:
    """
    True when the order may execute at market_price.

    Market orders always may. A buy limit needs market_price <= limit; a sell
    limit needs market_price >= limit. Zero-quantity limits never execute.
    """
    if order.order_type is OrderType.MARKET:
        return True
    limit = order.limit_price
    if order.quantity > 0:
        return market_price <= limit
    if order.quantity < 0:
        return market_price >= limit
    return False


def decide_execution(order: Order, market_price: float) -> float | None:
    """
    Return the execution price, or None when the limit is not met.

    Market orders fill at market_price; limit orders fill at their limit price.
    """
    if not is_marketable(order, market_price):
        return None
    if order.order_type is OrderType.MARKET:
        return market_price
    return order.limit_price
