"""Tests for document_store.memory module."""

import pytest

from document_store.memory import InMemoryDocumentStore
from document_store.store import DocumentNotFoundError, Filter, OrderBy


class TestInMemoryDocumentStore:
    def test_add_and_get(self) -> None:
        store = InMemoryDocumentStore()
        doc_id = store.add("articles", {"title": "Hello"})
        doc = store.get("articles", doc_id)
        assert doc.id == doc_id
        assert doc.data == {"title": "Hello"}

    def test_get_missing_returns_none(self) -> None:
        assert InMemoryDocumentStore().get("articles", "missing") is None

    def test_values_are_copied(self) -> None:
        store = InMemoryDocumentStore()
        body = {"tags": ["a"]}
        store.set("articles", "x", body)
        body["tags"].append("b")
        store.get("articles", "x").data["tags"].append("c")
        assert store.get("articles", "x").data["tags"] == ["a"]

    def test_update_merges(self) -> None:
        store = InMemoryDocumentStore()
        store.set("articles", "x", {"title": "Old", "likes": 1})
        store.update("articles", "x", {"title": "New"})
        assert store.get("articles", "x").data == {"title": "New", "likes": 1}

    def test_update_missing_raises(self) -> None:
        with pytest.raises(DocumentNotFoundError):
            InMemoryDocumentStore().update("articles", "x", {"title": "New"})

    def test_delete_is_idempotent(self) -> None:
        store = InMemoryDocumentStore()
        store.set("articles", "x", {})
        store.delete("articles", "x")
        store.delete("articles", "x")
        assert store.count("articles") == 0

    def test_query_scoped_to_collection(self) -> None:
        store = InMemoryDocumentStore()
        store.set("articles", "a", {"status": "published", "n": 1})
        store.set("articles", "b", {"status": "draft", "n": 2})
        store.set("videos", "c", {"status": "published", "n": 3})
        result = store.query(
            "articles",
            filters=[Filter("status", "==", "published")],
            order_by=[OrderBy("n")],
        )
        assert [d.id for d in result] == ["a"]
