"""Composition root: every service the API uses, built once from config."""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from auth.identity import FirebaseIdentityProvider, IdentityProvider, InMemoryIdentityProvider
from auth.service import AuthService
from content.analytics import AnalyticsService
from content.banner_sync import BannerSyncService
from content.base import ContentService
from content.comments import CommentService
from content.models import ContentType
from content.services import SERVICE_TYPES
from content.sport_banners import SportBannerService
from content.tickers import NewsTickerService
from content.users import UserService
from document_store.connection import get_store
from document_store.store import DocumentStore
from feeds.espn import EspnClient
from feeds.ncaa import NcaaClient
from feeds.sports import UnifiedSportsService
from feeds.stocks import StockService
from feeds.weather import WeatherService
from media_api.config import AppConfig
from search.debounce import DEFAULT_DELAY_SECONDS, SearchDebouncer
from search.search import SearchService

logger = logging.getLogger(__name__)


@dataclass
class Services:
    store: DocumentStore
    content: dict[ContentType, ContentService]
    comments: CommentService
    users: UserService
    tickers: NewsTickerService
    sport_banners: SportBannerService
    analytics: AnalyticsService
    search: SearchService
    auth: AuthService
    stocks: StockService
    weather: WeatherService
    espn: EspnClient
    sports: UnifiedSportsService
    banner_sync: BannerSyncService
    config: Optional[AppConfig] = field(default=None, repr=False)

    def search_debouncer(self, on_results: Callable[[str, list], None]) -> SearchDebouncer:
        """Search-as-you-type over every content type, using the configured delay."""
        delay = self.config.search.debounce_seconds if self.config else DEFAULT_DELAY_SECONDS
        return SearchDebouncer(self.search.search_all, on_results, delay=delay)


def build_identity_provider(config: AppConfig) -> IdentityProvider:
    if config.auth.backend == "memory":
        logger.info("Using in-memory identity provider")
        return InMemoryIdentityProvider()
    if config.auth.backend != "firebase":
        raise ValueError(f"Unknown auth backend: {config.auth.backend}")
    return FirebaseIdentityProvider(api_key=config.auth.api_key, timeout=config.feeds.request_timeout)


def build_services(
    config: AppConfig,
    store: Optional[DocumentStore] = None,
    identity_provider: Optional[IdentityProvider] = None,
) -> Services:
    """Wire every service against one store.

    ``store`` and ``identity_provider`` override the configured backends.
    """
    store = store or get_store(config.store.backend, config.store.database_url)
    content = {content_type: cls(store) for content_type, cls in SERVICE_TYPES.items()}
    users = UserService(store)
    provider = identity_provider or build_identity_provider(config)
    feeds = config.feeds
    espn = EspnClient(timeout=feeds.request_timeout)
    sport_banners = SportBannerService(store)

    return Services(
        store=store,
        content=content,
        comments=CommentService(store),
        users=users,
        tickers=NewsTickerService(store),
        sport_banners=sport_banners,
        analytics=AnalyticsService(store),
        search=SearchService(content, result_cap=config.search.result_cap),
        auth=AuthService(provider, users, session_ttl_seconds=config.auth.session_ttl_seconds),
        stocks=StockService(
            symbols=feeds.stock_symbols,
            ttl_seconds=feeds.ttl_seconds,
            api_key=feeds.alpha_vantage_api_key,
            timeout=feeds.request_timeout,
        ),
        weather=WeatherService(
            latitude=feeds.latitude,
            longitude=feeds.longitude,
            location=feeds.location,
            ttl_seconds=feeds.ttl_seconds,
            timeout=feeds.request_timeout,
        ),
        espn=espn,
        sports=UnifiedSportsService(espn_client=espn, ncaa_client=NcaaClient(timeout=feeds.request_timeout)),
        banner_sync=BannerSyncService(sport_banners, espn),
        config=config,
    )
