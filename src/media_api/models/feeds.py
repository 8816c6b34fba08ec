"""Third-party widget Pydantic models."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel

from media_api.models.base import RecordModel


class StockQuoteResponse(RecordModel):
    symbol: str
    price: float
    change: float
    change_percent: float
    volume: Optional[int] = None
    open: Optional[float] = None
    high: Optional[float] = None
    low: Optional[float] = None
    previous_close: Optional[float] = None
    is_fallback: bool = False


class StocksResponse(BaseModel):
    success: bool = True
    data: list[StockQuoteResponse]
    count: int


class RawQuoteResponse(BaseModel):
    """Single-symbol quote in the field names the ticker widget expects."""

    symbol: str
    regularMarketPrice: float
    regularMarketChange: float
    regularMarketChangePercent: float
    regularMarketVolume: Optional[int] = None
    regularMarketOpen: Optional[float] = None
    regularMarketDayHigh: Optional[float] = None
    regularMarketDayLow: Optional[float] = None
    regularMarketPreviousClose: Optional[float] = None


class WeatherResponse(RecordModel):
    temperature: int
    condition: str
    icon: str
    humidity: int = 0
    wind_speed: int = 0
    location: str = ""
    is_fallback: bool = False


class WeatherTestResponse(BaseModel):
    success: bool = True
    data: WeatherResponse
    timestamp: datetime


class FeedResponse(BaseModel):
    """Envelope for the sports proxies."""

    success: bool = True
    data: Any
    count: Optional[int] = None
    source: Optional[str] = None
    sport: Optional[str] = None
    available_sports: Optional[list[str]] = None
    espn_sports: Optional[list[str]] = None
    ncaa_sports: Optional[list[str]] = None
