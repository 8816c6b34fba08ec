"""Tests for document_store.connection module."""

from unittest.mock import patch

import pytest

from document_store.connection import get_store
from document_store.memory import InMemoryDocumentStore
from document_store.sql import SqlDocumentStore


class TestGetStore:
    def test_memory_backend(self) -> None:
        assert isinstance(get_store("memory"), InMemoryDocumentStore)

    def test_sql_backend_with_url(self) -> None:
        assert isinstance(get_store("sql", "sqlite://"), SqlDocumentStore)

    @patch.dict("os.environ", {"DATABASE_URL": "sqlite://"})
    def test_sql_backend_reads_env(self) -> None:
        assert isinstance(get_store("sql"), SqlDocumentStore)

    @patch.dict("os.environ", {}, clear=True)
    def test_sql_backend_requires_url(self) -> None:
        with pytest.raises(ValueError):
            get_store("sql")

    def test_unknown_backend(self) -> None:
        with pytest.raises(ValueError):
            get_store("firestore")
