"""
tradebook: single-account order execution and mark-to-market valuation.

Deterministic and single-threaded. No I/O in the core; loaders and reports
live in the replay package.
"""

__version__ = "0.1.0"

from tradebook.order import Order, OrderType, Side
from tradebook.market import MarketQuote, MarketSnapshot
from tradebook.rules import decide_execution, is_marketable
from tradebook.account import Account, Settlement, SettlementKind
from tradebook.config import EngineConfig

__all__ = [
    "Order",
    "OrderType",
    "Side",
    "MarketQuote",
    "MarketSnapshot",
    "decide_execution",
    "is_marketable",
    "Account",
    "Settlement",
    "SettlementKind",
    "EngineConfig",
]
