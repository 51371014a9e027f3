"""
Execution-layer types: per-order outcome, report, rejected-order entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from tradebook.account import Settlement, SettlementKind
from tradebook.order import Order


class OrderOutcome(Enum):
    """What happened to one order, including symbols missing from the snapshot."""

    BUY_FILLED = "buy_filled"
    SELL_FILLED = "sell_filled"
    INSUFFICIENT_CASH = "insufficient_cash"
    INSUFFICIENT_HOLDINGS = "insufficient_holdings"
    LIMIT_NOT_MET = "limit_not_met"
    NO_OP = "no_op"
    UNRESOLVED_SYMBOL = "unresolved_symbol"

    @classmethod
    def from_settlement(cls, kind: SettlementKind) -> OrderOutcome:
        return cls(kind.value)

    @property
    def executed(self) -> bool:
        return self in (OrderOutcome.BUY_FILLED, OrderOutcome.SELL_FILLED)

    @property
    def rejected(self) -> bool:
        return self in (
            OrderOutcome.INSUFFICIENT_CASH,
            OrderOutcome.INSUFFICIENT_HOLDINGS,
            OrderOutcome.UNRESOLVED_SYMBOL,
        )


@dataclass(frozen=True)
class OrderReport:
    """
    State after processing one order: holdings (a copy), cash and profit/loss
    against the snapshot used for execution. settlement is None when the
    symbol could not be priced.
    """

    order: Order
    outcome: OrderOutcome
    holdings: dict[str, int]
    cash: float
    profit_loss: float
    settlement: Settlement | None = None

    def format(self, precision: int = 2) -> str:
        return (
            f"Processing order: {self.order}\n"
            f"Outcome: {self.outcome.value}\n"
            f"Current Holdings: {self.holdings}\n"
            f"Current Cash Balance: ${self.cash:.{precision}f}\n"
            f"Current profit or loss: ${self.profit_loss:.{precision}f}"
        )


@dataclass
class RejectedOrderLog:
    """One entry for an order that was rejected (unpriced symbol, cash or shares short)."""

    reason: str
    order: Order
