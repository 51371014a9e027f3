"""
Reference session: three orders against AAPL/MSFT quotes.

Shows: loading market data and orders from CSV, ExecutionEngine with a
printing report sink, rejected log and session summary.
"""

from __future__ import annotations

import logging
from pathlib import Path

from tradebook import EngineConfig
from replay import print_summary, run_session

DATA_DIR = Path(__file__).resolve().parent / "data"


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    config = EngineConfig(
        initial_cash=10_000.0,
        market_data_path=str(DATA_DIR / "market_data.csv"),
        orders_path=str(DATA_DIR / "orders.csv"),
    )
    result = run_session(config=config, print_reports=True)

    for entry in result.rejected:
        print(f"  Rejected: reason={entry.reason}, order={entry.order}")
    print_summary(result.metrics)


if __name__ == "__main__":
    main()
