"""Quote lookups against the public market-data APIs."""

import logging
import os
from typing import Optional

import requests

from feeds.models import StockQuote

logger = logging.getLogger(__name__)

YAHOO_CHART_URL = "https://query1.finance.yahoo.com/v8/finance/chart/{symbol}"
ALPHA_VANTAGE_URL = "https://www.alphavantage.co/query"
BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)
REQUEST_TIMEOUT = 10


class QuoteNotFoundError(Exception):
    """The provider answered but had no quote for the symbol."""

    def __init__(self, symbol: str):
        super().__init__(f"No data found for symbol {symbol}")
        self.symbol = symbol


def _last(values: Optional[list]):
    return values[-1] if values else None


def fetch_yahoo_quote(symbol: str, timeout: float = REQUEST_TIMEOUT) -> StockQuote:
    """Latest daily bar from the Yahoo chart API.

    Change is measured against the chart's previous close.
    """
    response = requests.get(
        YAHOO_CHART_URL.format(symbol=symbol),
        params={"interval": "1d", "range": "1d"},
        headers={"User-Agent": BROWSER_USER_AGENT},
        timeout=timeout,
    )
    response.raise_for_status()
    results = (response.json().get("chart") or {}).get("result") or []
    if not results:
        raise QuoteNotFoundError(symbol)

    result = results[0]
    meta = result.get("meta") or {}
    quote = ((result.get("indicators") or {}).get("quote") or [{}])[0]

    close = _last(quote.get("close"))
    previous_close = meta.get("chartPreviousClose")
    if close is None or not previous_close:
        raise QuoteNotFoundError(symbol)

    change = close - previous_close
    return StockQuote(
        symbol=meta.get("symbol", symbol),
        price=close,
        change=change,
        change_percent=change / previous_close * 100,
        volume=_last(quote.get("volume")),
        open=_last(quote.get("open")),
        high=_last(quote.get("high")),
        low=_last(quote.get("low")),
        previous_close=previous_close,
    )


def fetch_market_data_quote(
    symbol: str, api_key: Optional[str] = None, timeout: float = REQUEST_TIMEOUT
) -> StockQuote:
    """Global quote from Alpha Vantage.

    The free endpoint has no intraday range, so open/high/low are
    approximated from price and change.
    """
    response = requests.get(
        ALPHA_VANTAGE_URL,
        params={
            "function": "GLOBAL_QUOTE",
            "symbol": symbol,
            "apikey": api_key or os.environ.get("ALPHA_VANTAGE_API_KEY", "demo"),
        },
        timeout=timeout,
    )
    response.raise_for_status()
    quote = response.json().get("Global Quote") or {}
    if not quote.get("05. price"):
        raise QuoteNotFoundError(symbol)

    price = float(quote["05. price"])
    change = float(quote.get("09. change", 0))
    return StockQuote(
        symbol=quote.get("01. symbol", symbol),
        price=price,
        change=change,
        change_percent=float(str(quote.get("10. change percent", "0")).replace("%", "")),
        volume=int(quote.get("06. volume", 0)),
        open=price - change,
        high=price + abs(change),
        low=price - abs(change),
        previous_close=float(quote.get("08. previous close", 0)),
    )
