"""In-process document store for local runs and tests."""

from __future__ import annotations

import copy
import logging
from typing import Sequence
from uuid import uuid4

from document_store.store import (
    Document,
    DocumentNotFoundError,
    DocumentStore,
    Filter,
    OrderBy,
    apply_query,
)

logger = logging.getLogger(__name__)


class InMemoryDocumentStore(DocumentStore):
    """Dict-backed store. Values are deep-copied in and out."""

    def __init__(self) -> None:
        self._collections: dict[str, dict[str, dict]] = {}

    def _collection(self, collection: str) -> dict[str, dict]:
        return self._collections.setdefault(collection, {})

    def get(self, collection: str, doc_id: str) -> Document | None:
        data = self._collection(collection).get(doc_id)
        if data is None:
            return None
        return Document(id=doc_id, data=copy.deepcopy(data))

    def query(
        self,
        collection: str,
        filters: Sequence[Filter] = (),
        order_by: Sequence[OrderBy] = (),
        limit: int | None = None,
    ) -> list[Document]:
        documents = [
            Document(id=doc_id, data=copy.deepcopy(data))
            for doc_id, data in self._collection(collection).items()
        ]
        return apply_query(documents, filters, order_by, limit)

    def add(self, collection: str, data: dict) -> str:
        doc_id = uuid4().hex
        self._collection(collection)[doc_id] = copy.deepcopy(data)
        return doc_id

    def set(self, collection: str, doc_id: str, data: dict) -> None:
        self._collection(collection)[doc_id] = copy.deepcopy(data)

    def update(self, collection: str, doc_id: str, data: dict) -> None:
        docs = self._collection(collection)
        if doc_id not in docs:
            raise DocumentNotFoundError(collection, doc_id)
        docs[doc_id].update(copy.deepcopy(data))

    def delete(self, collection: str, doc_id: str) -> None:
        self._collection(collection).pop(doc_id, None)

    def count(self, collection: str) -> int:
        return len(self._collection(collection))
