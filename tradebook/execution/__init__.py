"""
Execution layer: per-order engine, report types, rejected-order log.
"""

from tradebook.execution.engine import ExecutionEngine, ReportSink
from tradebook.execution.types import OrderOutcome, OrderReport, RejectedOrderLog

__all__ = [
    "ExecutionEngine",
    "OrderOutcome",
    "OrderReport",
    "RejectedOrderLog",
    "ReportSink",
]
