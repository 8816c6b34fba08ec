"""SQL-backed document store (PostgreSQL in production, sqlite locally)."""

from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Iterator, Sequence
from uuid import uuid4

from sqlalchemy import JSON, Column, MetaData, String, Table, create_engine, delete, insert, select, update
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool

from document_store.store import (
    Document,
    DocumentNotFoundError,
    DocumentStore,
    DocumentStoreError,
    Filter,
    OrderBy,
    apply_query,
)

logger = logging.getLogger(__name__)

_DATE_KEY = "$date"

metadata = MetaData()

documents_table = Table(
    "documents",
    metadata,
    Column("collection", String(128), primary_key=True),
    Column("id", String(64), primary_key=True),
    Column("data", JSON, nullable=False),
)


def _encode(value: Any) -> Any:
    if isinstance(value, datetime):
        return {_DATE_KEY: value.isoformat()}
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _decode(obj: dict) -> Any:
    if len(obj) == 1 and _DATE_KEY in obj:
        return datetime.fromisoformat(obj[_DATE_KEY])
    return obj


def dumps_document(data: Any) -> str:
    """JSON-encode a document body, tagging datetimes so they round-trip."""
    return json.dumps(data, default=_encode, ensure_ascii=False)


def loads_document(raw: str) -> Any:
    return json.loads(raw, object_hook=_decode)


def create_store_engine(database_url: str) -> Engine:
    """Create an engine whose JSON columns preserve datetimes."""
    kwargs: dict[str, Any] = {
        "json_serializer": dumps_document,
        "json_deserializer": loads_document,
    }
    in_memory_sqlite = database_url == "sqlite://" or (
        database_url.startswith("sqlite") and ":memory:" in database_url
    )
    if in_memory_sqlite:
        # One shared connection so every thread sees the same in-memory database.
        kwargs["poolclass"] = StaticPool
        kwargs["connect_args"] = {"check_same_thread": False}
    return create_engine(database_url, **kwargs)


class SqlDocumentStore(DocumentStore):
    """Documents stored as JSON rows in a single ``documents`` table."""

    def __init__(self, engine: Engine, create_tables: bool = True):
        self.engine = engine
        if create_tables:
            self.ensure_table()

    @classmethod
    def from_url(cls, database_url: str) -> "SqlDocumentStore":
        return cls(create_store_engine(database_url))

    def ensure_table(self) -> None:
        """Create the documents table if it doesn't exist."""
        try:
            metadata.create_all(self.engine)
        except SQLAlchemyError as e:
            raise DocumentStoreError(str(e)) from e

    @contextmanager
    def _connection(self) -> Iterator[Connection]:
        """Transaction-scoped connection; backend errors become DocumentStoreError."""
        try:
            with self.engine.begin() as conn:
                yield conn
        except DocumentStoreError:
            raise
        except SQLAlchemyError as e:
            logger.error("Document store operation failed: %s", e)
            raise DocumentStoreError(str(e)) from e

    def _row_filter(self, collection: str, doc_id: str):
        return (documents_table.c.collection == collection) & (documents_table.c.id == doc_id)

    def get(self, collection: str, doc_id: str) -> Document | None:
        with self._connection() as conn:
            row = conn.execute(
                select(documents_table.c.data).where(self._row_filter(collection, doc_id))
            ).first()
        if row is None:
            return None
        return Document(id=doc_id, data=row.data)

    def query(
        self,
        collection: str,
        filters: Sequence[Filter] = (),
        order_by: Sequence[OrderBy] = (),
        limit: int | None = None,
    ) -> list[Document]:
        with self._connection() as conn:
            rows = conn.execute(
                select(documents_table.c.id, documents_table.c.data).where(
                    documents_table.c.collection == collection
                )
            ).all()
        documents = [Document(id=row.id, data=row.data) for row in rows]
        return apply_query(documents, filters, order_by, limit)

    def add(self, collection: str, data: dict) -> str:
        doc_id = uuid4().hex
        with self._connection() as conn:
            conn.execute(insert(documents_table).values(collection=collection, id=doc_id, data=data))
        return doc_id

    def set(self, collection: str, doc_id: str, data: dict) -> None:
        with self._connection() as conn:
            conn.execute(delete(documents_table).where(self._row_filter(collection, doc_id)))
            conn.execute(insert(documents_table).values(collection=collection, id=doc_id, data=data))

    def update(self, collection: str, doc_id: str, data: dict) -> None:
        with self._connection() as conn:
            row = conn.execute(
                select(documents_table.c.data).where(self._row_filter(collection, doc_id))
            ).first()
            if row is None:
                raise DocumentNotFoundError(collection, doc_id)
            merged = {**row.data, **data}
            conn.execute(
                update(documents_table)
                .where(self._row_filter(collection, doc_id))
                .values(data=merged)
            )

    def delete(self, collection: str, doc_id: str) -> None:
        with self._connection() as conn:
            conn.execute(delete(documents_table).where(self._row_filter(collection, doc_id)))
