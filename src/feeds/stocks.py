"""Stock ticker data for the site header."""

import logging
import time
from dataclasses import replace
from typing import Callable, Optional, Sequence

from feeds.cache import DEFAULT_TTL_SECONDS, CacheOrFallback, Source
from feeds.models import StockQuote
from feeds.stock_providers import fetch_market_data_quote, fetch_yahoo_quote

logger = logging.getLogger(__name__)

STOCK_SYMBOLS = ("SPY", "QQQ", "QCOM", "GLD", "AAPL", "MSFT", "TSLA", "GOOGL", "AMZN", "NVDA")


def placeholder_quote(symbol: str) -> StockQuote:
    return StockQuote(symbol=symbol, price=0, change=0, change_percent=0, is_fallback=True)


FALLBACK_STOCK_DATA: tuple[StockQuote, ...] = tuple(placeholder_quote(s) for s in STOCK_SYMBOLS)


def fallback_quotes(symbols: Sequence[str]) -> tuple[StockQuote, ...]:
    if tuple(symbols) == STOCK_SYMBOLS:
        return FALLBACK_STOCK_DATA
    return tuple(placeholder_quote(s) for s in symbols)


class AllSymbolsFailedError(Exception):
    """Every symbol lookup against one provider failed."""


def fetch_all_quotes(
    provider_name: str,
    fetch_quote: Callable[[str], StockQuote],
    symbols: Sequence[str] = STOCK_SYMBOLS,
) -> list[StockQuote]:
    """Fetch symbols one at a time; a failed symbol gets a zero placeholder."""
    quotes = []
    failures = 0
    for symbol in symbols:
        try:
            quotes.append(fetch_quote(symbol))
        except Exception as e:
            logger.warning("%s: failed to fetch %s: %s", provider_name, symbol, e)
            quotes.append(placeholder_quote(symbol))
            failures += 1
    if failures == len(symbols):
        raise AllSymbolsFailedError(f"{provider_name}: no symbol could be fetched")
    return quotes


class StockService:
    """Cached quotes, Yahoo first and Alpha Vantage second."""

    def __init__(
        self,
        symbols: Sequence[str] = STOCK_SYMBOLS,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        api_key: Optional[str] = None,
        timeout: float = 10,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.symbols = tuple(symbols)
        self.api_key = api_key
        self.timeout = timeout
        self.api_call_count = 0
        self.cache = CacheOrFallback(
            "stocks",
            [
                Source("yahoo", self._from_yahoo),
                Source("market-data", self._from_market_data),
            ],
            fallback=fallback_quotes(self.symbols),
            ttl_seconds=ttl_seconds,
            clock=clock,
        )

    def _from_yahoo(self) -> list[StockQuote]:
        return fetch_all_quotes(
            "yahoo", lambda s: fetch_yahoo_quote(s, timeout=self.timeout), self.symbols
        )

    def _from_market_data(self) -> list[StockQuote]:
        return fetch_all_quotes(
            "market-data",
            lambda s: fetch_market_data_quote(s, api_key=self.api_key, timeout=self.timeout),
            self.symbols,
        )

    def get_stock_data(self) -> list[StockQuote]:
        """Cached quotes; when no provider has ever answered, a fresh copy of the placeholders."""
        if not self.cache.is_fresh():
            self.api_call_count += 1
        data = self.cache.get()
        if data is self.cache.fallback:
            return [replace(quote) for quote in data]
        return data

    def reset_api_call_count(self) -> None:
        self.api_call_count = 0

    def clear_cache(self) -> None:
        self.cache.clear()
