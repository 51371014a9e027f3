"""
Account: cash and holdings for a single trader.

Mutable; updated only through settle/execute. Each settlement is
all-or-nothing: cash and holdings change together or not at all.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from tradebook.market import MarketSnapshot
from tradebook.order import Order
from tradebook.rules import decide_execution

logger = logging.getLogger(__name__)


class SettlementKind(Enum):
    """Outcome of applying one order to the account."""

    BUY_FILLED = "buy_filled"
    SELL_FILLED = "sell_filled"
    INSUFFICIENT_CASH = "insufficient_cash"
    INSUFFICIENT_HOLDINGS = "insufficient_holdings"
    LIMIT_NOT_MET = "limit_not_met"
    NO_OP = "no_op"


@dataclass(frozen=True)
class Settlement:
    """Result of one settlement attempt. price is None when nothing was priced."""

    kind: SettlementKind
    symbol: str
    quantity: int
    price: float | None = None
    value: float = 0.0

    @property
    def executed(self) -> bool:
        return self.kind in (SettlementKind.BUY_FILLED, SettlementKind.SELL_FILLED)

    @property
    def rejected(self) -> bool:
        return self.kind in (SettlementKind.INSUFFICIENT_CASH, SettlementKind.INSUFFICIENT_HOLDINGS)


@dataclass
class Account:
    """
    Cash balance and symbol -> share count. initial_cash is the endowment
    profit/loss is measured against.

    Holdings entries are created on first buy and kept at zero after a full
    sell; absent symbols count as zero.
    """

    cash: float = 0.0
    holdings: dict[str, int] = field(default_factory=dict)
    initial_cash: float | None = None

    def __post_init__(self) -> None:
        if self.initial_cash is None:
            self.initial_cash = self.cash

    @classmethod
    def open(cls, initial_cash: float) -> Account:
        """New account with initial_cash and no holdings."""
        return cls(cash=float(initial_cash), initial_cash=float(initial_cash))

    def holding(self, symbol: str) -> int:
        """Shares held in symbol. 0 if not present."""
        return self.holdings.get(symbol, 0)

    def settle(self, symbol: str, quantity: int, execution_price: float) -> Settlement:
        """
        Apply one execution of quantity shares at execution_price.

        Buys need cash >= price * quantity; sells need enough shares to cover
        the sale. A rejected settlement leaves cash and holdings untouched.
        """
        total_value = execution_price * abs(quantity)

        if quantity > 0:
            if self.cash < total_value:
                logger.info(
                    "Not enough cash to execute buy order: %s x%d needs %.2f, cash %.2f",
                    symbol, quantity, total_value, self.cash,
                )
                return Settlement(SettlementKind.INSUFFICIENT_CASH, symbol, quantity, execution_price, total_value)
            self.holdings[symbol] = self.holding(symbol) + quantity
            self.cash -= total_value
            return Settlement(SettlementKind.BUY_FILLED, symbol, quantity, execution_price, total_value)

        if quantity < 0:
            current = self.holding(symbol)
            if current < -quantity:
                logger.info(
                    "Not enough shares to execute sell order: %s x%d, holding %d",
                    symbol, -quantity, current,
                )
                return Settlement(SettlementKind.INSUFFICIENT_HOLDINGS, symbol, quantity, execution_price, total_value)
            self.holdings[symbol] = current + quantity
            self.cash += total_value
            return Settlement(SettlementKind.SELL_FILLED, symbol, quantity, execution_price, total_value)

        return Settlement(SettlementKind.NO_OP, symbol, quantity)

    def execute(self, order: Order, market_price: float) -> Settlement:
        """Route order through the execution rules, then settle it."""
        if order.quantity == 0:
            return Settlement(SettlementKind.NO_OP, order.symbol, 0)
        price = decide_execution(order, market_price)
        if price is None:
            logger.debug("Limit not met for %s at market %.2f", order, market_price)
            return Settlement(SettlementKind.LIMIT_NOT_MET, order.symbol, order.quantity)
        return self.settle(order.symbol, order.quantity, price)

    def market_value(self, snapshot: MarketSnapshot) -> float:
        """Holdings valued at snapshot prices. Unquoted holdings add nothing."""
        total = 0.0
        for symbol, quantity in self.holdings.items():
            price = snapshot.price(symbol)
            if price is not None:
                total += price * quantity
        return total

    def valuate(self, snapshot: MarketSnapshot) -> float:
        """Profit or loss against the initial endowment: market value + cash - initial cash."""
        return self.market_value(snapshot) + self.cash - self.initial_cash

    def copy(self) -> Account:
        return Account(cash=self.cash, holdings=dict(self.holdings), initial_cash=self.initial_cash)
