"""Widget data shapes served by the feeds."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class StockQuote:
    symbol: str
    price: float
    change: float
    change_percent: float
    volume: Optional[int] = None
    open: Optional[float] = None
    high: Optional[float] = None
    low: Optional[float] = None
    previous_close: Optional[float] = None
    # True for zero placeholders that stand in for missing data.
    is_fallback: bool = False


@dataclass
class WeatherSnapshot:
    temperature: int  # Fahrenheit
    condition: str
    icon: str
    humidity: int  # percent
    wind_speed: int  # mph
    location: str
    is_fallback: bool = False


@dataclass
class GameBanner:
    """A game in the shape the sport banner displays."""

    sport: str
    home_team_id: str
    away_team_id: str
    home_score: int
    away_score: int
    game_status: str  # scheduled | live | halftime | final | postponed
    game_time: str
    venue: str
    date: datetime
    period: str = ""
    time_remaining: str = ""
    is_enabled: bool = True


@dataclass
class UnifiedGame(GameBanner):
    id: str = ""
    source: str = ""  # espn | ncaa
