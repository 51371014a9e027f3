"""
Console reporting: one block per processed order, plus a session summary.
"""

from __future__ import annotations

from functools import partial

from tradebook.execution import ReportSink
from tradebook.execution.types import OrderReport

from replay.metrics import RunMetrics


def format_report(report: OrderReport, precision: int = 2) -> str:
    """Order, resulting holdings, cash and profit/loss as printable text."""
    return report.format(precision)


def print_report(report: OrderReport, precision: int = 2) -> None:
    """ReportSink that prints each processed order to stdout."""
    print(format_report(report, precision))
    print()


def report_printer(precision: int = 2) -> ReportSink:
    """print_report bound to a number of decimals for cash and profit/loss."""
    return partial(print_report, precision=precision)


def print_summary(metrics: RunMetrics) -> None:
    print("--- Session Summary ---")
    print(f"Initial cash:    {metrics.initial_cash:,.2f}")
    print(f"Final cash:      {metrics.final_cash:,.2f}")
    print(f"Profit/loss:     {metrics.final_pnl:,.2f}")
    print(f"Peak P/L:        {metrics.peak_pnl:,.2f}")
    print(f"Max drawdown:    {metrics.max_drawdown:,.2f}")
    print(f"Orders:          {metrics.total_orders} "
          f"(executed {metrics.executed}, rejected {metrics.rejected}, "
          f"skipped {metrics.skipped}, unresolved {metrics.unresolved})")
    print("-----------------------")
