"""
Replay session: load market data, open an account, run orders, summarize.

A market data source that cannot be read aborts the session with
MarketDataError; everything per-order is recorded in the reports.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from tradebook.account import Account
from tradebook.config import EngineConfig
from tradebook.execution import ExecutionEngine, OrderReport, RejectedOrderLog, ReportSink
from tradebook.market import MarketSnapshot
from tradebook.order import Order

from replay.data_loader import load_market_data, load_orders
from replay.metrics import RunMetrics, compute_metrics
from replay.report import report_printer

logger = logging.getLogger(__name__)


@dataclass
class SessionResult:
    """Final account, per-order reports, rejected orders and metrics."""

    account: Account
    reports: list[OrderReport] = field(default_factory=list)
    rejected: list[RejectedOrderLog] = field(default_factory=list)
    metrics: RunMetrics | None = None


def run_session(
    orders: Iterable[Order] | None = None,
    *,
    snapshot: MarketSnapshot | None = None,
    config: EngineConfig | None = None,
    sinks: Sequence[ReportSink] = (),
    print_reports: bool = False,
) -> SessionResult:
    """
    Run orders against a fresh account.

    Parameters
    ----------
    orders : iterable of Order, optional
        Orders to process. If None, loaded from config.orders_path.
    snapshot : MarketSnapshot, optional
        Prices to execute against. If None, loaded from config.market_data_path.
    config : EngineConfig, optional
        Starting cash and paths. Defaults to EngineConfig().
    sinks : sequence of ReportSink
        Called with each OrderReport (e.g. replay.report.print_report).
    print_reports : bool
        Also print every report with config.report_precision decimals.
    """
    cfg = config or EngineConfig()
    if snapshot is None:
        snapshot = load_market_data(cfg.market_data_path)
    if orders is None:
        if cfg.orders_path is None:
            raise ValueError("No orders given and config.orders_path is not set")
        orders = load_orders(cfg.orders_path)

    account = Account.open(cfg.initial_cash)
    engine = ExecutionEngine(account, sinks=sinks)
    if print_reports:
        engine.subscribe(report_printer(cfg.report_precision))
    logger.info("Starting session: cash %.2f, %d quotes", cfg.initial_cash, len(snapshot))
    reports = engine.run(orders, snapshot)

    return SessionResult(
        account=account,
        reports=reports,
        rejected=engine.get_rejected_log(),
        metrics=compute_metrics(cfg.initial_cash, reports),
    )
