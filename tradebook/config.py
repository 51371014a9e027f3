"""
Engine configuration: starting cash and data locations.

Values come from constructor arguments or from TRADEBOOK_* environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

# Environment variables read by EngineConfig.from_env.
INITIAL_CASH_ENV = "TRADEBOOK_INITIAL_CASH"
MARKET_DATA_ENV = "TRADEBOOK_MARKET_DATA"
ORDERS_ENV = "TRADEBOOK_ORDERS"

DEFAULT_INITIAL_CASH = 10_000.0
DEFAULT_MARKET_DATA_PATH = "market_data.csv"


@dataclass(frozen=True)
class EngineConfig:
    """Settings for one replay session."""

    initial_cash: float = DEFAULT_INITIAL_CASH
    market_data_path: str = DEFAULT_MARKET_DATA_PATH
    orders_path: str | None = None
    report_precision: int = 2

    def __post_init__(self) -> None:
        if self.initial_cash < 0:
            raise ValueError(f"initial_cash must be >= 0, got {self.initial_cash}")
        if self.report_precision < 0:
            raise ValueError(f"report_precision must be >= 0, got {self.report_precision}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> EngineConfig:
        """Build config from environment variables; unset variables keep defaults."""
        env = os.environ if environ is None else environ
        raw_cash = env.get(INITIAL_CASH_ENV)
        try:
            initial_cash = float(raw_cash) if raw_cash else DEFAULT_INITIAL_CASH
        except ValueError:
            raise ValueError(f"{INITIAL_CASH_ENV} must be a number, got {raw_cash!r}") from None
        return cls(
            initial_cash=initial_cash,
            market_data_path=env.get(MARKET_DATA_ENV) or DEFAULT_MARKET_DATA_PATH,
            orders_path=env.get(ORDERS_ENV) or None,
        )
