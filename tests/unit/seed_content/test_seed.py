"""Tests for seed_content.seed module."""

from datetime import datetime, timedelta, timezone

from content.models import ContentType, TickerPriority
from content.services import ArticleService, ResearchService
from content.tickers import NewsTickerService
from document_store.memory import InMemoryDocumentStore
from seed_content.seed import seed_content, seed_news_tickers

NOW = datetime(2025, 1, 10, 9, 0, tzinfo=timezone.utc)


class TestSeedContent:
    def test_counts_per_type(self) -> None:
        created = seed_content(InMemoryDocumentStore())
        assert {t: len(ids) for t, ids in created.items()} == {
            ContentType.ARTICLE: 3,
            ContentType.VIDEO: 2,
            ContentType.RESEARCH: 2,
            ContentType.LEGAL: 2,
        }

    def test_records_are_published_and_featured(self) -> None:
        store = InMemoryDocumentStore()
        seed_content(store)
        assert len(ArticleService(store).list_published(featured_only=True)) == 3
        research = ResearchService(store).list_published(category="Neuroscience")
        assert [r.contributors for r in research] == [["Dr. Robert Kim", "Dr. Lisa Wang"]]


class TestSeedNewsTickers:
    def test_expiry_and_priority(self) -> None:
        store = InMemoryDocumentStore()
        ids = seed_news_tickers(store, now=NOW)
        assert len(ids) == 5

        tickers = NewsTickerService(store).get_all_tickers()
        expiries = sorted(t.expires_at - NOW for t in tickers)
        assert expiries == [timedelta(days=d) for d in (2, 3, 5, 7, 14)]
        assert all(t.created_at == NOW for t in tickers)

    def test_active_order(self) -> None:
        store = InMemoryDocumentStore()
        seed_news_tickers(store, now=NOW)
        active = NewsTickerService(store, clock=lambda: NOW + timedelta(hours=1)).get_active_tickers()
        assert active[0].priority is TickerPriority.BREAKING
        assert active[-1].priority is TickerPriority.LOW

    def test_expired_tickers_drop_out(self) -> None:
        store = InMemoryDocumentStore()
        seed_news_tickers(store, now=NOW)
        later = NewsTickerService(store, clock=lambda: NOW + timedelta(days=4)).get_active_tickers()
        assert len(later) == 3
