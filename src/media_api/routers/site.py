"""News ticker and sport banner endpoints for the site chrome."""

from typing import Optional

from fastapi import APIRouter

from media_api.dependencies import ServicesDep
from media_api.models.base import ItemList
from media_api.models.site import NewsTickerResponse, SportBannerResponse

router = APIRouter(prefix="/api", tags=["site"])


@router.get("/news-tickers", response_model=ItemList[NewsTickerResponse])
def active_tickers(services: ServicesDep):
    """Active, unexpired tickers, highest priority first."""
    tickers = services.tickers.get_active_tickers()
    return ItemList[NewsTickerResponse](items=tickers, count=len(tickers))


@router.get("/sport-banner", response_model=Optional[SportBannerResponse])
def active_banner(services: ServicesDep):
    """The enabled banner with the latest game date, or null."""
    return services.sport_banners.get_active_banner()
