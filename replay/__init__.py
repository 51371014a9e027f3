"""
Replay driver on top of tradebook.

Loads market data and orders, runs them through ExecutionEngine, reports
each order and summarizes the session.
"""

from replay.data_loader import (
    MarketDataError,
    load_market_data,
    load_orders,
    orders_from_records,
    snapshot_from_dataframe,
)
from replay.metrics import RunMetrics, compute_metrics
from replay.report import format_report, print_report, print_summary, report_printer
from replay.session import SessionResult, run_session

__all__ = [
    "MarketDataError",
    "load_market_data",
    "load_orders",
    "orders_from_records",
    "snapshot_from_dataframe",
    "RunMetrics",
    "compute_metrics",
    "format_report",
    "print_report",
    "print_summary",
    "report_printer",
    "SessionResult",
    "run_session",
]
