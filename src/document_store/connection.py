"""Document store construction from configuration."""

import logging
import os

from dotenv import load_dotenv

from document_store.memory import InMemoryDocumentStore
from document_store.sql import SqlDocumentStore
from document_store.store import DocumentStore

load_dotenv()

logger = logging.getLogger(__name__)


def get_store(backend: str = "sql", database_url: str | None = None) -> DocumentStore:
    """Build the document store for a backend ("sql" or "memory").

    The SQL backend reads DATABASE_URL when no url is given.
    """
    if backend == "memory":
        logger.info("Using in-memory document store")
        return InMemoryDocumentStore()

    if backend != "sql":
        raise ValueError(f"Unknown document store backend: {backend}")

    url = database_url or os.environ.get("DATABASE_URL")
    if not url:
        raise ValueError("DATABASE_URL environment variable is required for the sql backend")

    logger.info("Using SQL document store")
    return SqlDocumentStore.from_url(url)
