"""
Execution engine: apply orders to one account against a market snapshot.

Flow per order: resolve price from snapshot → execution rules → settlement
→ valuation → report sinks. Orders are processed strictly in input order;
per-order rejections are logged and never stop the batch.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Protocol

from tradebook.account import Account
from tradebook.market import MarketSnapshot
from tradebook.order import Order
from tradebook.execution.types import OrderOutcome, OrderReport, RejectedOrderLog

logger = logging.getLogger(__name__)


class ReportSink(Protocol):
    """Called with the report of every processed order (print, journal, metrics)."""

    def __call__(self, report: OrderReport) -> None:
        ...


class ExecutionEngine:
    """
    Single writer for one Account. Not thread-safe: a front-end accepting
    orders from several clients must serialize calls to process().
    """

    def __init__(
        self,
        account: Account,
        *,
        sinks: Sequence[ReportSink] = (),
    ) -> None:
        self.account = account
        self.sinks: list[ReportSink] = list(sinks)
        self._rejected_log: list[RejectedOrderLog] = []

    def subscribe(self, sink: ReportSink) -> None:
        """Register a sink to receive every subsequent report."""
        self.sinks.append(sink)

    def get_rejected_log(self) -> list[RejectedOrderLog]:
        """Return log of rejected orders for debugging and reporting."""
        return list(self._rejected_log)

    def process(self, order: Order, snapshot: MarketSnapshot) -> OrderReport:
        """Execute one order and report the resulting account state."""
        market_price = snapshot.price(order.symbol)
        if market_price is None:
            logger.warning("Market data not found for %s", order.symbol)
            self._rejected_log.append(RejectedOrderLog(reason="unresolved_symbol", order=order))
            settlement = None
            outcome = OrderOutcome.UNRESOLVED_SYMBOL
        else:
            settlement = self.account.execute(order, market_price)
            outcome = OrderOutcome.from_settlement(settlement.kind)
            if settlement.rejected:
                self._rejected_log.append(RejectedOrderLog(reason=outcome.value, order=order))

        report = OrderReport(
            order=order,
            outcome=outcome,
            holdings=dict(self.account.holdings),
            cash=self.account.cash,
            profit_loss=self.account.valuate(snapshot),
            settlement=settlement,
        )
        for sink in self.sinks:
            sink(report)
        return report

    def run(self, orders: Iterable[Order], snapshot: MarketSnapshot) -> list[OrderReport]:
        """Process orders one at a time, in order, against snapshot."""
        reports = [self.process(order, snapshot) for order in orders]
        logger.info(
            "Processed %d orders: %d executed, %d rejected",
            len(reports),
            sum(1 for r in reports if r.outcome.executed),
            sum(1 for r in reports if r.outcome.rejected),
        )
        return reports
