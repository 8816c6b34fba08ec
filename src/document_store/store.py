"""Document store interface and shared query evaluation."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Iterable, Sequence

logger = logging.getLogger(__name__)

OPERATORS = ("==", "!=", "<", "<=", ">", ">=", "in", "array-contains")


class DocumentStoreError(Exception):
    """Raised when the underlying document database fails."""


class DocumentNotFoundError(DocumentStoreError):
    """Raised when updating a document that does not exist."""

    def __init__(self, collection: str, doc_id: str):
        super().__init__(f"Document not found: {collection}/{doc_id}")
        self.collection = collection
        self.doc_id = doc_id


@dataclass(frozen=True)
class Filter:
    """A single field predicate, e.g. Filter("status", "==", "published")."""

    field: str
    op: str
    value: Any

    def __post_init__(self) -> None:
        if self.op not in OPERATORS:
            raise ValueError(f"Unsupported operator: {self.op}")

    def matches(self, data: dict) -> bool:
        if self.field not in data:
            return False
        actual = data[self.field]
        if self.op == "==":
            return actual == self.value
        if self.op == "!=":
            return actual != self.value
        if self.op == "in":
            return actual in self.value
        if self.op == "array-contains":
            return isinstance(actual, list) and self.value in actual
        if actual is None:
            return False
        actual, expected = _comparable(actual), _comparable(self.value)
        try:
            if self.op == "<":
                return actual < expected
            if self.op == "<=":
                return actual <= expected
            if self.op == ">":
                return actual > expected
            return actual >= expected
        except TypeError:
            return False


@dataclass(frozen=True)
class OrderBy:
    field: str
    descending: bool = True


@dataclass
class Document:
    """A stored document: its id plus the schema-less body."""

    id: str
    data: dict = field(default_factory=dict)


def _comparable(value: Any) -> Any:
    # Naive datetimes are stored as UTC; comparing them with aware ones raises.
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def apply_query(
    documents: Iterable[Document],
    filters: Sequence[Filter] = (),
    order_by: Sequence[OrderBy] = (),
    limit: int | None = None,
) -> list[Document]:
    """Filter, order and truncate documents in memory.

    Documents missing an order field sort after those that have it,
    regardless of direction.
    """
    results = [doc for doc in documents if all(f.matches(doc.data) for f in filters)]

    # Stable sorts applied from the least significant key backwards.
    for order in reversed(order_by):
        present = [doc for doc in results if doc.data.get(order.field) is not None]
        missing = [doc for doc in results if doc.data.get(order.field) is None]
        present.sort(key=lambda doc: _comparable(doc.data[order.field]), reverse=order.descending)
        results = present + missing

    if limit is not None:
        if limit < 0:
            raise ValueError("limit must be non-negative")
        results = results[:limit]
    return results


class DocumentStore(ABC):
    """Single-document reads and writes against named collections.

    There are no multi-document transactions and no concurrency checks;
    the last write to a document wins.
    """

    @abstractmethod
    def get(self, collection: str, doc_id: str) -> Document | None:
        """Return one document, or None when it does not exist."""

    @abstractmethod
    def query(
        self,
        collection: str,
        filters: Sequence[Filter] = (),
        order_by: Sequence[OrderBy] = (),
        limit: int | None = None,
    ) -> list[Document]:
        """Return documents matching every filter, ordered and truncated."""

    @abstractmethod
    def add(self, collection: str, data: dict) -> str:
        """Insert a document under a generated id and return the id."""

    @abstractmethod
    def set(self, collection: str, doc_id: str, data: dict) -> None:
        """Create or fully replace a document."""

    @abstractmethod
    def update(self, collection: str, doc_id: str, data: dict) -> None:
        """Merge fields into an existing document."""

    @abstractmethod
    def delete(self, collection: str, doc_id: str) -> None:
        """Delete a document; deleting a missing document is a no-op."""

    def increment(self, collection: str, doc_id: str, field_name: str, amount: int = 1) -> None:
        """Add ``amount`` to a numeric field of an existing document."""
        doc = self.get(collection, doc_id)
        if doc is None:
            raise DocumentNotFoundError(collection, doc_id)
        current = doc.data.get(field_name) or 0
        self.update(collection, doc_id, {field_name: current + amount})
