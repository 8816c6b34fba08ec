"""Write the sample records into a document store."""

import logging
from datetime import datetime, timedelta
from typing import Optional

from common.datetime import utcnow
from content.models import ContentType
from content.services import SERVICE_TYPES
from content.tickers import NewsTickerService
from document_store.store import DocumentStore
from seed_content.sample_data import ARTICLES, LEGAL_ARTICLES, NEWS_TICKERS, RESEARCH, VIDEOS

logger = logging.getLogger(__name__)

SAMPLE_CONTENT = {
    ContentType.ARTICLE: ARTICLES,
    ContentType.VIDEO: VIDEOS,
    ContentType.RESEARCH: RESEARCH,
    ContentType.LEGAL: LEGAL_ARTICLES,
}


def seed_content(store: DocumentStore) -> dict[ContentType, list[str]]:
    """Add the sample articles, videos, research and legal articles.

    Returns:
        The new document ids per content type
    """
    created: dict[ContentType, list[str]] = {}
    for content_type, items in SAMPLE_CONTENT.items():
        service = SERVICE_TYPES[content_type](store)
        created[content_type] = [service.create(dict(item)) for item in items]
        logger.info("Added %d %s records", len(items), content_type.value)
    return created


def seed_news_tickers(store: DocumentStore, now: Optional[datetime] = None) -> list[str]:
    """Add the sample tickers, each expiring a few days after ``now``."""
    now = now or utcnow()
    service = NewsTickerService(store, clock=lambda: now)
    ids = []
    for sample in NEWS_TICKERS:
        data = {k: v for k, v in sample.items() if k != "expires_in_days"}
        data["is_active"] = True
        data["expires_at"] = now + timedelta(days=sample["expires_in_days"])
        ids.append(service.create_ticker(data))
        logger.info("Added ticker: %s...", sample["text"][:50])
    return ids
