"""Proxies for the third-party widgets: stocks, weather and sports scores.

Each handler answers with a ``success`` flag. Bad parameters get 400 and
unknown symbols 404; 500 is reserved for failures inside the handler.
"""

import logging
from dataclasses import is_dataclass
from typing import Annotated, Any, Callable, Optional

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from common.datetime import utcnow
from common.serialization import serialize_dataclass
from feeds.espn import LEAGUES, convert_game_to_banner, sport_of
from feeds.models import StockQuote
from feeds.stock_providers import QuoteNotFoundError, fetch_market_data_quote, fetch_yahoo_quote
from media_api.dependencies import ServicesDep
from media_api.models.feeds import FeedResponse, RawQuoteResponse, StocksResponse, WeatherTestResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["feeds"])


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def _plain(value: Any) -> Any:
    if is_dataclass(value):
        return serialize_dataclass(value)
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_plain(v) for v in value]
    return value


def _raw_quote(quote: StockQuote) -> RawQuoteResponse:
    return RawQuoteResponse(
        symbol=quote.symbol,
        regularMarketPrice=quote.price,
        regularMarketChange=quote.change,
        regularMarketChangePercent=quote.change_percent,
        regularMarketVolume=quote.volume,
        regularMarketOpen=quote.open,
        regularMarketDayHigh=quote.high,
        regularMarketDayLow=quote.low,
        regularMarketPreviousClose=quote.previous_close,
    )


def _single_quote(symbol: Optional[str], fetch: Callable[[str], StockQuote], provider: str):
    if not symbol:
        return _error(400, "Symbol parameter is required")
    try:
        return _raw_quote(fetch(symbol))
    except QuoteNotFoundError:
        return _error(404, "No data found for symbol")
    except Exception as e:
        logger.error("Error fetching %s data for %s: %s", provider, symbol, e)
        return _error(500, "Failed to fetch stock data")


@router.get("/stocks", response_model=StocksResponse)
def stocks(services: ServicesDep):
    """The cached quote set; placeholder zeros when every provider failed."""
    quotes = services.stocks.get_stock_data()
    return StocksResponse(data=quotes, count=len(quotes))


@router.get("/stocks/yahoo", response_model=RawQuoteResponse)
def yahoo_quote(
    services: ServicesDep,
    symbol: Annotated[Optional[str], Query(description="Ticker symbol")] = None,
):
    timeout = services.stocks.timeout
    return _single_quote(symbol, lambda s: fetch_yahoo_quote(s, timeout=timeout), "Yahoo Finance")


@router.get("/stocks/market-data", response_model=RawQuoteResponse)
def market_data_quote(
    services: ServicesDep,
    symbol: Annotated[Optional[str], Query(description="Ticker symbol")] = None,
):
    api_key, timeout = services.stocks.api_key, services.stocks.timeout
    return _single_quote(
        symbol,
        lambda s: fetch_market_data_quote(s, api_key=api_key, timeout=timeout),
        "market data",
    )


@router.get("/weather/test", response_model=WeatherTestResponse)
def weather_test(services: ServicesDep):
    try:
        return WeatherTestResponse(data=services.weather.get_weather_data(), timestamp=utcnow())
    except Exception as e:
        logger.error("Weather test error: %s", e)
        return _error(500, str(e))


@router.get("/espn", response_model=FeedResponse)
def espn(
    services: ServicesDep,
    type: Annotated[Optional[str], Query(description="live, upcoming or news")] = None,
    sport: Annotated[Optional[str], Query(description="basketball, baseball or all")] = None,
):
    try:
        if type in ("live", "upcoming"):
            client = services.espn
            events = client.get_live_ucsd_games() if type == "live" else client.get_upcoming_ucsd_games()
            banners = [convert_game_to_banner(event, sport_of(event)) for event in events]
            data = [_plain(b) for b in banners if b is not None]
            return FeedResponse(data=data, count=len(data))

        if type == "news":
            if sport and sport != "all" and sport not in LEAGUES:
                return _error(400, f"Unsupported sport: {sport}")
            sports = LEAGUES if not sport or sport == "all" else (sport,)
            news = [article for s in sports for article in services.espn.get_ucsd_news(s)]
            return FeedResponse(data=news, count=len(news))

        return _error(400, "Invalid type parameter. Use: live, upcoming, or news")
    except Exception as e:
        logger.error("ESPN API error: %s", e)
        return _error(500, "Failed to fetch ESPN data")


@router.get("/sports", response_model=FeedResponse)
def sports(
    services: ServicesDep,
    type: Annotated[Optional[str], Query(description="live, upcoming, comprehensive, test or sport")] = None,
    sport: Annotated[Optional[str], Query(description="Sport for type=sport")] = None,
):
    unified = services.sports
    try:
        if type == "live":
            games = _plain(unified.get_live_games())
            return FeedResponse(data=games, count=len(games), source="unified")

        if type == "upcoming":
            games = _plain(unified.get_upcoming_games())
            return FeedResponse(data=games, count=len(games), source="unified")

        if type == "comprehensive":
            return FeedResponse(data=_plain(unified.get_comprehensive_data()), source="unified")

        if type == "test":
            return FeedResponse(
                data=unified.test_apis(),
                available_sports=unified.get_all_available_sports(),
                espn_sports=unified.get_espn_sports(),
                ncaa_sports=unified.get_ncaa_sports(),
                source="unified",
            )

        if type == "sport":
            if not sport:
                return _error(400, "Sport parameter required")
            games = _plain(unified.get_games_by_sport(sport))
            return FeedResponse(data=games, count=len(games), sport=sport, source="unified")

        return _error(400, "Invalid type parameter. Use: live, upcoming, comprehensive, test, or sport")
    except Exception as e:
        logger.error("Unified sports API error: %s", e)
        return _error(500, str(e))
