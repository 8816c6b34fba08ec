"""Tests for content.tickers module."""

from datetime import datetime, timedelta, timezone

from content.models import TickerPriority
from content.tickers import NewsTickerService
from document_store.memory import InMemoryDocumentStore

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def _ticker(store: InMemoryDocumentStore, ticker_id: str, priority: str, minutes: int, **fields) -> None:
    body = {
        "text": ticker_id,
        "priority": priority,
        "is_active": True,
        "created_at": NOW - timedelta(minutes=minutes),
        "updated_at": NOW,
    }
    body.update(fields)
    store.set("newsTickers", ticker_id, body)


class TestGetActiveTickers:
    def test_priority_then_newest(self) -> None:
        store = InMemoryDocumentStore()
        _ticker(store, "low", "low", 1)
        _ticker(store, "high-old", "high", 30)
        _ticker(store, "breaking", "breaking", 60)
        _ticker(store, "high-new", "high", 5)
        _ticker(store, "medium", "medium", 2)
        result = NewsTickerService(store, clock=lambda: NOW).get_active_tickers()
        assert [t.id for t in result] == ["breaking", "high-new", "high-old", "medium", "low"]

    def test_inactive_and_expired_excluded(self) -> None:
        store = InMemoryDocumentStore()
        _ticker(store, "live", "medium", 1, expires_at=NOW + timedelta(days=1))
        _ticker(store, "off", "breaking", 1, is_active=False)
        _ticker(store, "expired", "breaking", 1, expires_at=NOW - timedelta(seconds=1))
        result = NewsTickerService(store, clock=lambda: NOW).get_active_tickers()
        assert [t.id for t in result] == ["live"]


class TestTickerWrites:
    def test_create_toggle_delete(self) -> None:
        store = InMemoryDocumentStore()
        service = NewsTickerService(store, clock=lambda: NOW)
        ticker_id = service.create_ticker({"text": "Campus closed", "priority": TickerPriority.BREAKING})
        ticker = service.get_ticker(ticker_id)
        assert ticker.priority is TickerPriority.BREAKING
        assert ticker.created_at == NOW

        service.toggle_ticker_status(ticker_id, False)
        assert service.get_active_tickers() == []
        assert len(service.get_all_tickers()) == 1

        service.update_ticker(ticker_id, {"text": "Campus open"})
        assert service.get_ticker(ticker_id).text == "Campus open"

        service.delete_ticker(ticker_id)
        assert service.get_all_tickers() == []
