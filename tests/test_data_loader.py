"""
Tests for replay data_loader: load_market_data, snapshot_from_dataframe, load_orders.
"""

import logging
from pathlib import Path

import pandas as pd
import pytest

from tradebook import Order, OrderType
from replay.data_loader import (
    MarketDataError,
    load_market_data,
    load_orders,
    orders_from_records,
    snapshot_from_dataframe,
)

DATA_DIR = Path(__file__).resolve().parent.parent / "examples" / "data"


# --- load_market_data ---


def test_load_market_data(tmp_path):
    path = tmp_path / "market_data.csv"
    path.write_text("AAPL,150.0\nMSFT,280\n")
    snap = load_market_data(path)
    assert snap.as_dict() == {"AAPL": 150.0, "MSFT": 280.0}


def test_load_market_data_skips_malformed(tmp_path, caplog):
    path = tmp_path / "market_data.csv"
    path.write_text("AAPL,150.0\nMSFT,abc\nBAD\nGOOG,1,2\nTSLA,-5\nNVDA, 900.5\n")
    with caplog.at_level(logging.WARNING):
        snap = load_market_data(path)
    assert snap.as_dict() == {"AAPL": 150.0, "NVDA": 900.5}
    assert "MSFT" not in snap
    assert "Skipping" in caplog.text


@pytest.mark.parametrize(
    "text",
    [
        "GOOG,1,2\nAAPL,150\nMSFT,280\n",
        "AAPL,999,\nAAPL,150\nMSFT,280\n",
    ],
)
def test_load_market_data_malformed_first_line_keeps_rest(tmp_path, caplog, text):
    path = tmp_path / "market_data.csv"
    path.write_text(text)
    with caplog.at_level(logging.WARNING):
        snap = load_market_data(path)
    assert snap.as_dict() == {"AAPL": 150.0, "MSFT": 280.0}
    assert len(snap) == 2
    assert "line 1" in caplog.text


def test_load_market_data_all_lines_malformed(tmp_path):
    path = tmp_path / "market_data.csv"
    path.write_text("AAPL\nMSFT,1,2\n")
    assert len(load_market_data(path)) == 0


def test_load_market_data_keeps_duplicates_first_wins(tmp_path):
    path = tmp_path / "market_data.csv"
    path.write_text("AAPL,150\nAAPL,151\n")
    snap = load_market_data(path)
    assert len(snap) == 2
    assert snap.price("AAPL") == 150.0


def test_load_market_data_missing_file_is_fatal(tmp_path):
    with pytest.raises(MarketDataError):
        load_market_data(tmp_path / "nope.csv")


def test_load_market_data_empty_file(tmp_path):
    path = tmp_path / "market_data.csv"
    path.write_text("")
    assert len(load_market_data(path)) == 0


# --- snapshot_from_dataframe ---


def test_snapshot_from_dataframe_aliases():
    df = pd.DataFrame({"Ticker": ["AAPL", "MSFT"], "Close": [150.0, 280.0]})
    snap = snapshot_from_dataframe(df)
    assert snap.price("AAPL") == 150.0
    assert snap.price("MSFT") == 280.0


def test_snapshot_from_dataframe_missing_columns():
    with pytest.raises(ValueError):
        snapshot_from_dataframe(pd.DataFrame({"symbol": ["AAPL"]}))


# --- orders ---


def test_orders_from_records():
    orders = orders_from_records(
        [
            {"symbol": "AAPL", "quantity": "1", "type": "market", "limit_price": ""},
            {"symbol": "MSFT", "quantity": 2, "type": "LIMIT", "limit_price": "280"},
            {"symbol": "AAPL", "quantity": "-1"},
        ]
    )
    assert orders == [
        Order.market("AAPL", 1),
        Order.limit("MSFT", 2, 280.0),
        Order.market("AAPL", -1),
    ]


@pytest.mark.parametrize(
    "record",
    [
        {"symbol": "AAPL", "quantity": "x"},
        {"symbol": "AAPL", "quantity": "1", "type": "stop"},
        {"symbol": "AAPL", "quantity": "1", "type": "limit", "limit_price": ""},
        {"symbol": "", "quantity": "1"},
    ],
)
def test_orders_from_records_rejects_malformed(record):
    with pytest.raises(ValueError, match="row 1"):
        orders_from_records([record])


def test_load_orders(tmp_path):
    path = tmp_path / "orders.csv"
    path.write_text("symbol,quantity,type,limit_price\nAAPL,1,market,\nAAPL,-1,limit,280\n")
    orders = load_orders(path)
    assert orders[0] == Order.market("AAPL", 1)
    assert orders[1].order_type == OrderType.LIMIT
    assert orders[1].limit_price == 280.0


def test_load_orders_empty_file(tmp_path, caplog):
    path = tmp_path / "orders.csv"
    path.write_text("")
    with caplog.at_level(logging.WARNING):
        assert load_orders(path) == []
    assert "empty" in caplog.text


def test_load_orders_header_only(tmp_path):
    path = tmp_path / "orders.csv"
    path.write_text("symbol,quantity,type,limit_price\n")
    assert load_orders(path) == []


def test_example_data_files_load():
    assert load_market_data(DATA_DIR / "market_data.csv").as_dict() == {"AAPL": 150.0, "MSFT": 280.0}
    assert len(load_orders(DATA_DIR / "orders.csv")) == 3
