"""Current conditions for the header weather widget (National Weather Service)."""

import logging
import re
import time
from typing import Callable

import requests

from feeds.cache import DEFAULT_TTL_SECONDS, CacheOrFallback, Source
from feeds.models import WeatherSnapshot

logger = logging.getLogger(__name__)

NWS_BASE_URL = "https://api.weather.gov"
NWS_HEADERS = {
    "User-Agent": "TritonTory/1.0 (weather-app)",
    "Accept": "application/geo+json",
}
LA_JOLLA = (32.8328, -117.2713)
DEFAULT_LOCATION = "La Jolla, CA"
MPS_TO_MPH = 2.237

FALLBACK_WEATHER_DATA = WeatherSnapshot(
    temperature=0,
    condition="No Data",
    icon="cloud",
    humidity=0,
    wind_speed=0,
    location=DEFAULT_LOCATION,
    is_fallback=True,
)

# First match wins.
ICON_RULES = (
    (("sunny", "clear"), "sun"),
    (("cloudy", "overcast"), "cloud"),
    (("rain", "drizzle", "showers"), "cloud-rain"),
    (("snow",), "snowflake"),
    (("thunder", "storm"), "cloud-lightning"),
    (("fog", "mist", "haze"), "cloud-fog"),
    (("partly", "mostly sunny"), "cloud-sun"),
)


class WeatherUnavailableError(Exception):
    """Neither the latest observation nor the forecast had a temperature."""


def map_weather_icon(condition: str) -> str:
    text = (condition or "").lower()
    for keywords, icon in ICON_RULES:
        if any(k in text for k in keywords):
            return icon
    return "cloud"


def parse_wind_speed(wind_speed: str) -> int:
    """First number in strings like "10 mph" or "5 to 10 mph"."""
    match = re.search(r"\d+", wind_speed or "")
    return int(match.group()) if match else 0


def _get_json(url: str, timeout: float) -> dict:
    response = requests.get(url, headers=NWS_HEADERS, timeout=timeout)
    response.raise_for_status()
    return response.json()


def _from_observation(properties: dict, location: str) -> WeatherSnapshot | None:
    temperature = (properties.get("temperature") or {}).get("value")
    if temperature is None:
        return None
    humidity = (properties.get("relativeHumidity") or {}).get("value")
    wind = (properties.get("windSpeed") or {}).get("value")
    description = properties.get("textDescription") or ""
    return WeatherSnapshot(
        temperature=round(temperature * 9 / 5 + 32),
        condition=description or "Unknown",
        icon=map_weather_icon(description),
        humidity=round(humidity) if humidity else 0,
        wind_speed=round(wind * MPS_TO_MPH) if wind else 0,
        location=location,
    )


def _from_forecast(forecast: dict, location: str) -> WeatherSnapshot | None:
    periods = (forecast.get("properties") or {}).get("periods") or []
    if not periods or periods[0].get("temperature") is None:
        return None
    period = periods[0]
    short_forecast = period.get("shortForecast") or ""
    return WeatherSnapshot(
        temperature=period["temperature"],
        condition=short_forecast or "Unknown",
        icon=map_weather_icon(short_forecast),
        humidity=0,  # not in the forecast
        wind_speed=parse_wind_speed(period.get("windSpeed")),
        location=location,
    )


def fetch_from_nws(
    latitude: float = LA_JOLLA[0],
    longitude: float = LA_JOLLA[1],
    location: str = DEFAULT_LOCATION,
    timeout: float = 10,
) -> WeatherSnapshot:
    """Latest observation at the nearest station, else the current forecast period."""
    points = _get_json(f"{NWS_BASE_URL}/points/{latitude},{longitude}", timeout)
    properties = points.get("properties") or {}
    if not properties.get("forecast"):
        raise WeatherUnavailableError("No forecast URL available")

    forecast = _get_json(properties["forecast"], timeout)
    stations = _get_json(properties["observationStations"], timeout)

    features = stations.get("features") or []
    if features:
        station = features[0]["properties"]["stationIdentifier"]
        try:
            observation = _get_json(f"{NWS_BASE_URL}/stations/{station}/observations/latest", timeout)
            snapshot = _from_observation(observation.get("properties") or {}, location)
            if snapshot is not None:
                return snapshot
        except requests.RequestException as e:
            logger.warning("Observation lookup for %s failed: %s", station, e)

    snapshot = _from_forecast(forecast, location)
    if snapshot is None:
        raise WeatherUnavailableError("No temperature in observation or forecast")
    return snapshot


class WeatherService:
    def __init__(
        self,
        latitude: float = LA_JOLLA[0],
        longitude: float = LA_JOLLA[1],
        location: str = DEFAULT_LOCATION,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        timeout: float = 10,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.latitude = latitude
        self.longitude = longitude
        self.location = location
        self.timeout = timeout
        self.cache = CacheOrFallback(
            "weather",
            [Source("nws", self._fetch)],
            fallback=FALLBACK_WEATHER_DATA,
            ttl_seconds=ttl_seconds,
            clock=clock,
        )

    def _fetch(self) -> WeatherSnapshot:
        return fetch_from_nws(self.latitude, self.longitude, self.location, self.timeout)

    def get_weather_data(self) -> WeatherSnapshot:
        return self.cache.get()

    def clear_cache(self) -> None:
        self.cache.clear()
