"""Query and write operations shared by every content collection."""

import logging
from datetime import datetime
from enum import Enum
from typing import Callable, Generic, Optional, TypeVar

from common.datetime import parse_datetime, utcnow
from content.mapping import document_to_record
from content.models import ContentStatus
from document_store.store import DocumentStore, Filter, OrderBy

logger = logging.getLogger(__name__)

R = TypeVar("R")


def _clean_value(value):
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return parse_datetime(value)
    return value


def clean_fields(data: dict) -> dict:
    """Drop unset values, store enums by value and datetimes as aware UTC."""
    return {
        key: _clean_value(value)
        for key, value in data.items()
        if value is not None and key != "id"
    }


class ContentService(Generic[R]):
    """CRUD over one content collection.

    Subclasses set ``collection``, ``record_type`` and, where the type is
    grouped by something other than ``category``, ``category_field``.
    Store failures propagate as DocumentStoreError.
    """

    collection: str = ""
    record_type: type = object
    category_field: str = "category"
    label: str = "Content"

    def __init__(self, store: DocumentStore, clock: Callable = utcnow):
        self.store = store
        self.clock = clock

    def _published_filters(self, category: Optional[str], featured_only: bool) -> list[Filter]:
        filters = [Filter("status", "==", ContentStatus.PUBLISHED.value)]
        if category:
            filters.append(Filter(self.category_field, "==", category))
        if featured_only:
            filters.append(Filter("featured", "==", True))
        return filters

    def _query_published(self, filters: list[Filter], limit: int) -> list[R]:
        docs = self.store.query(
            self.collection,
            filters=filters,
            order_by=[OrderBy("published_at", descending=True)],
            limit=limit,
        )
        logger.debug("Loaded %d published documents from %s", len(docs), self.collection)
        return [document_to_record(self.record_type, doc) for doc in docs]

    def list_published(
        self,
        category: Optional[str] = None,
        featured_only: bool = False,
        limit: int = 10,
    ) -> list[R]:
        """Published records, newest first, at most ``limit`` of them."""
        return self._query_published(self._published_filters(category, featured_only), limit)

    def list_all(self) -> list[R]:
        """Every record regardless of status, most recently updated first."""
        docs = self.store.query(self.collection, order_by=[OrderBy("updated_at", descending=True)])
        return [document_to_record(self.record_type, doc) for doc in docs]

    def get(self, doc_id: str) -> Optional[R]:
        doc = self.store.get(self.collection, doc_id)
        if doc is None:
            return None
        return document_to_record(self.record_type, doc)

    def create(self, data: dict) -> str:
        now = self.clock()
        body = clean_fields(data)
        body.setdefault("status", ContentStatus.DRAFT.value)
        body["published_at"] = now
        body["updated_at"] = now
        doc_id = self.store.add(self.collection, body)
        logger.info("Created %s %s", self.label.lower(), doc_id)
        return doc_id

    def update(self, doc_id: str, data: dict) -> None:
        body = clean_fields(data)
        body["updated_at"] = self.clock()
        self.store.update(self.collection, doc_id, body)
        logger.info("Updated %s %s", self.label.lower(), doc_id)

    def delete(self, doc_id: str) -> None:
        self.store.delete(self.collection, doc_id)
        logger.info("Deleted %s %s", self.label.lower(), doc_id)

    def toggle_like(self, doc_id: str, user_id: str) -> Optional[bool]:
        """Like or unlike a record. Returns the new liked state, None if missing."""
        doc = self.store.get(self.collection, doc_id)
        if doc is None:
            return None
        liked_by = list(doc.data.get("liked_by") or [])
        likes = doc.data.get("likes") or 0
        if user_id in liked_by:
            liked_by.remove(user_id)
            likes = max(likes - 1, 0)
            liked = False
        else:
            liked_by.append(user_id)
            likes += 1
            liked = True
        self.store.update(self.collection, doc_id, {"liked_by": liked_by, "likes": likes})
        return liked
