"""
Load market quotes and orders from CSV or DataFrame.

Market data: one `symbol,price` record per line, no header. Malformed records
are skipped with a warning. Orders: CSV with a `symbol,quantity,type,limit_price`
header.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd

from tradebook.market import MarketQuote, MarketSnapshot
from tradebook.order import Order, OrderType

logger = logging.getLogger(__name__)

# Column aliases accepted by snapshot_from_dataframe; lowercase
SYMBOL_ALIASES = ("symbol", "ticker")
PRICE_ALIASES = ("price", "close", "last")


class MarketDataError(RuntimeError):
    """Market data could not be read at all. Fatal for a session."""


def _normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Lowercase column names; map ticker/close/last to symbol/price."""
    out = df.copy()
    out.columns = [str(c).lower().strip() for c in out.columns]
    renames: dict[str, str] = {}
    for target, aliases in (("symbol", SYMBOL_ALIASES), ("price", PRICE_ALIASES)):
        if target in out.columns:
            continue
        for alias in aliases:
            if alias in out.columns:
                renames[alias] = target
                break
    return out.rename(columns=renames)


def _quotes_from_frame(df: pd.DataFrame) -> list[MarketQuote]:
    """Validate symbol/price rows, skipping malformed ones with a warning."""
    symbols = df["symbol"].fillna("").astype(str).str.strip()
    raw_prices = df["price"]
    if raw_prices.dtype == object:
        raw_prices = raw_prices.str.strip()
    prices = pd.to_numeric(raw_prices, errors="coerce")
    quotes: list[MarketQuote] = []
    for label, symbol, raw, price in zip(df.index, symbols, df["price"], prices):
        if not symbol or pd.isna(price) or not np.isfinite(price) or price < 0:
            logger.warning("Skipping malformed market data record %s: %r", label, (symbol, raw))
            continue
        quotes.append(MarketQuote(symbol=symbol, price=float(price)))
    return quotes


def snapshot_from_dataframe(df: pd.DataFrame) -> MarketSnapshot:
    """
    Build a MarketSnapshot from a DataFrame with symbol and price columns.

    Column names are case-insensitive; ticker, close and last are accepted
    as aliases. Row order is kept, so the first quote for a symbol wins.
    """
    out = _normalize_columns(df)
    missing = [c for c in ("symbol", "price") if c not in out.columns]
    if missing:
        raise ValueError(f"Market data frame is missing columns: {missing}")
    return MarketSnapshot(tuple(_quotes_from_frame(out)))


def _split_records(text: str) -> pd.DataFrame:
    """
    Split raw `symbol,price` lines into a frame indexed by 1-based line number.

    Lines without exactly two comma-separated fields are dropped with a warning.
    """
    lines = pd.Series(text.splitlines(), dtype=object)
    lines.index = lines.index + 1
    lines = lines[lines.str.strip() != ""]
    fields = lines.str.split(",")
    counts = fields.str.len()
    for line_no, raw in lines[counts != 2].items():
        logger.warning("Skipping market data line %d with %d fields: %r", line_no, counts[line_no], raw)
    good = fields[counts == 2]
    return pd.DataFrame({"symbol": good.str[0], "price": good.str[1]}, index=good.index, dtype=object)


def load_market_data(path: str | Path) -> MarketSnapshot:
    """
    Load a `symbol,price` CSV file into a MarketSnapshot.

    Records with the wrong field count, an empty symbol, or a price that is
    unparsable, negative or non-finite are skipped with a warning. An empty
    file gives an empty snapshot.

    Raises
    ------
    MarketDataError
        If the file cannot be read.
    """
    try:
        text = Path(path).read_text()
    except (OSError, UnicodeDecodeError) as exc:
        raise MarketDataError(f"Failed to load market data from {path}: {exc}") from exc

    if not text.strip():
        logger.warning("Market data file %s is empty", path)
        return MarketSnapshot()

    df = _split_records(text)
    snapshot = MarketSnapshot(tuple(_quotes_from_frame(df)))
    logger.info("Loaded %d quotes from %s", len(snapshot), path)
    return snapshot


def _parse_order(record: Mapping[str, Any], row: int) -> Order:
    def field(name: str) -> str:
        value = record.get(name)
        if value is None or (isinstance(value, float) and np.isnan(value)):
            return ""
        return str(value).strip()

    symbol = field("symbol")
    raw_quantity = field("quantity")
    raw_type = field("type").lower() or OrderType.MARKET.value
    raw_limit = field("limit_price")
    try:
        quantity = int(raw_quantity)
    except ValueError:
        raise ValueError(f"Order row {row}: quantity must be an integer, got {raw_quantity!r}") from None
    try:
        order_type = OrderType(raw_type)
    except ValueError:
        raise ValueError(f"Order row {row}: unknown order type {raw_type!r}") from None
    try:
        limit_price = float(raw_limit) if raw_limit else None
    except ValueError:
        raise ValueError(f"Order row {row}: limit_price must be a number, got {raw_limit!r}") from None
    if order_type is OrderType.MARKET:
        limit_price = None
    try:
        return Order(symbol=symbol, quantity=quantity, order_type=order_type, limit_price=limit_price)
    except ValueError as exc:
        raise ValueError(f"Order row {row}: {exc}") from None


def orders_from_records(records: Iterable[Mapping[str, Any]]) -> list[Order]:
    """
    Parse order dicts with keys symbol, quantity, type (market/limit) and
    limit_price. Malformed rows raise ValueError naming the row.
    """
    return [_parse_order(record, row) for row, record in enumerate(records, start=1)]


def load_orders(path: str | Path) -> list[Order]:
    """
    Load orders from a CSV with a symbol,quantity,type,limit_price header.

    An empty file gives no orders; a file without symbol and quantity
    columns raises ValueError.
    """
    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError:
        logger.warning("Orders file %s is empty", path)
        return []
    df.columns = [str(c).lower().strip() for c in df.columns]
    if "symbol" not in df.columns or "quantity" not in df.columns:
        raise ValueError(f"Orders file {path} needs symbol and quantity columns")
    return orders_from_records(df.to_dict(orient="records"))
