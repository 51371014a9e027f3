"""
Run metrics: profit/loss path and order outcome counts for one session.

The P/L curve has one point per processed order, valued against the
snapshot used for that order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from tradebook.execution.types import OrderOutcome, OrderReport


@dataclass
class RunMetrics:
    """Summary of a replay session."""

    initial_cash: float
    final_cash: float
    final_pnl: float
    peak_pnl: float
    max_drawdown: float
    executed: int
    rejected: int
    skipped: int
    unresolved: int

    @property
    def total_orders(self) -> int:
        return self.executed + self.rejected + self.skipped + self.unresolved


def compute_metrics(initial_cash: float, reports: Sequence[OrderReport]) -> RunMetrics:
    """
    Compute session metrics from the per-order reports.

    Parameters
    ----------
    initial_cash : float
        Starting cash of the account.
    reports : sequence of OrderReport
        Reports in processing order.

    Returns
    -------
    RunMetrics
        final_pnl and final_cash come from the last report; peak_pnl and
        max_drawdown from the P/L curve (a starting point of 0 is included).
    """
    outcomes = [r.outcome for r in reports]
    unresolved = outcomes.count(OrderOutcome.UNRESOLVED_SYMBOL)
    executed = sum(1 for o in outcomes if o.executed)
    rejected = sum(1 for o in outcomes if o.rejected) - unresolved
    skipped = len(outcomes) - executed - rejected - unresolved

    if not reports:
        return RunMetrics(
            initial_cash=initial_cash,
            final_cash=initial_cash,
            final_pnl=0.0,
            peak_pnl=0.0,
            max_drawdown=0.0,
            executed=0,
            rejected=0,
            skipped=0,
            unresolved=0,
        )

    curve = np.array([0.0] + [r.profit_loss for r in reports], dtype=float)
    peak = np.maximum.accumulate(curve)
    drawdowns = peak - curve

    return RunMetrics(
        initial_cash=initial_cash,
        final_cash=float(reports[-1].cash),
        final_pnl=float(curve[-1]),
        peak_pnl=float(np.max(curve)),
        max_drawdown=float(np.max(drawdowns)),
        executed=executed,
        rejected=rejected,
        skipped=skipped,
        unresolved=unresolved,
    )
