"""Breaking-news tickers shown in the site header."""

import logging
from typing import Callable, Optional

from common.datetime import utcnow
from content.base import clean_fields
from content.mapping import document_to_record
from content.models import NewsTicker, TickerPriority
from document_store.store import DocumentStore, Filter, OrderBy

logger = logging.getLogger(__name__)

COLLECTION = "newsTickers"

PRIORITY_RANK = {
    TickerPriority.BREAKING: 4,
    TickerPriority.HIGH: 3,
    TickerPriority.MEDIUM: 2,
    TickerPriority.LOW: 1,
}


class NewsTickerService:
    def __init__(self, store: DocumentStore, clock: Callable = utcnow):
        self.store = store
        self.clock = clock

    def get_active_tickers(self) -> list[NewsTicker]:
        """Active, unexpired tickers: highest priority first, then newest."""
        docs = self.store.query(
            COLLECTION,
            filters=[Filter("is_active", "==", True)],
            order_by=[OrderBy("created_at", descending=True)],
        )
        now = self.clock()
        tickers = [document_to_record(NewsTicker, doc) for doc in docs]
        tickers = [t for t in tickers if t.expires_at is None or t.expires_at > now]
        # Stable sort keeps created_at order within a priority.
        tickers.sort(key=lambda t: PRIORITY_RANK[t.priority], reverse=True)
        return tickers

    def get_all_tickers(self) -> list[NewsTicker]:
        docs = self.store.query(COLLECTION, order_by=[OrderBy("created_at", descending=True)])
        return [document_to_record(NewsTicker, doc) for doc in docs]

    def get_ticker(self, ticker_id: str) -> Optional[NewsTicker]:
        doc = self.store.get(COLLECTION, ticker_id)
        return document_to_record(NewsTicker, doc) if doc else None

    def create_ticker(self, data: dict) -> str:
        now = self.clock()
        body = clean_fields(data)
        body.update(created_at=now, updated_at=now)
        ticker_id = self.store.add(COLLECTION, body)
        logger.info("Created news ticker %s", ticker_id)
        return ticker_id

    def update_ticker(self, ticker_id: str, data: dict) -> None:
        body = clean_fields(data)
        body["updated_at"] = self.clock()
        self.store.update(COLLECTION, ticker_id, body)

    def delete_ticker(self, ticker_id: str) -> None:
        self.store.delete(COLLECTION, ticker_id)
        logger.info("Deleted news ticker %s", ticker_id)

    def toggle_ticker_status(self, ticker_id: str, is_active: bool) -> None:
        self.store.update(COLLECTION, ticker_id, {"is_active": is_active, "updated_at": self.clock()})
