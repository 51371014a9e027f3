"""
Market snapshot: read-only symbol -> last price lookup for one evaluation cycle.

Quotes keep their input order. Duplicate symbols are allowed; lookups return
the first matching quote.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class MarketQuote:
    """Last-known trade price for one symbol."""

    symbol: str
    price: float

    def __post_init__(self) -> None:
        if not self.symbol:
            raise ValueError("Quote symbol must be non-empty")
        price = float(self.price)
        if not math.isfinite(price) or price < 0:
            raise ValueError(f"Quote price must be a finite non-negative number, got {self.price!r}")
        object.__setattr__(self, "price", price)


@dataclass(frozen=True)
class MarketSnapshot:
    """
    Immutable ordered sequence of quotes. Refreshing market data means
    building a new snapshot and substituting it between order batches.
    """

    quotes: tuple[MarketQuote, ...] = ()
    _index: dict[str, float] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        quotes = tuple(self.quotes)
        object.__setattr__(self, "quotes", quotes)
        index: dict[str, float] = {}
        for quote in quotes:
            index.setdefault(quote.symbol, quote.price)
        object.__setattr__(self, "_index", index)

    @classmethod
    def from_prices(cls, prices: Mapping[str, float]) -> MarketSnapshot:
        """Build a snapshot from a symbol -> price mapping."""
        return cls(tuple(MarketQuote(symbol, price) for symbol, price in prices.items()))

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, float]]) -> MarketSnapshot:
        return cls(tuple(MarketQuote(symbol, price) for symbol, price in pairs))

    def price(self, symbol: str) -> float | None:
        """Price of the first quote for symbol, or None when unquoted."""
        return self._index.get(symbol)

    def symbols(self) -> list[str]:
        """Distinct symbols in first-seen order."""
        return list(self._index)

    def as_dict(self) -> dict[str, float]:
        return dict(self._index)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._index

    def __iter__(self) -> Iterator[MarketQuote]:
        return iter(self.quotes)

    def __len__(self) -> int:
        return len(self.quotes)
