"""Tests for document_store.store module."""

from datetime import datetime, timezone

import pytest

from document_store.memory import InMemoryDocumentStore
from document_store.store import Document, DocumentNotFoundError, Filter, OrderBy, apply_query


def _docs(*bodies: dict) -> list[Document]:
    return [Document(id=str(i), data=body) for i, body in enumerate(bodies)]


class TestFilter:
    def test_equality(self) -> None:
        assert Filter("status", "==", "published").matches({"status": "published"})
        assert not Filter("status", "==", "published").matches({"status": "draft"})

    def test_missing_field_never_matches(self) -> None:
        assert not Filter("status", "!=", "draft").matches({})

    def test_in_and_array_contains(self) -> None:
        assert Filter("type", "in", ["a", "b"]).matches({"type": "b"})
        assert Filter("tags", "array-contains", "ucsd").matches({"tags": ["news", "ucsd"]})
        assert not Filter("tags", "array-contains", "ucsd").matches({"tags": "ucsd"})

    def test_range_with_incomparable_values(self) -> None:
        assert Filter("n", ">=", 3).matches({"n": 3})
        assert not Filter("n", ">", 3).matches({"n": "x"})
        assert not Filter("n", "<", 3).matches({"n": None})

    def test_unknown_operator_rejected(self) -> None:
        with pytest.raises(ValueError):
            Filter("n", "~=", 1)


class TestApplyQuery:
    def test_orders_descending_with_missing_last(self) -> None:
        docs = _docs({"n": 1}, {}, {"n": 3}, {"n": 2})
        result = apply_query(docs, order_by=[OrderBy("n")])
        assert [d.data.get("n") for d in result] == [3, 2, 1, None]

    def test_multi_key_ordering(self) -> None:
        docs = _docs(
            {"group": 1, "n": 1},
            {"group": 2, "n": 5},
            {"group": 1, "n": 9},
        )
        result = apply_query(docs, order_by=[OrderBy("group", descending=False), OrderBy("n")])
        assert [d.id for d in result] == ["2", "0", "1"]

    def test_limit_truncates_after_ordering(self) -> None:
        docs = _docs({"n": 1}, {"n": 3}, {"n": 2})
        result = apply_query(docs, order_by=[OrderBy("n")], limit=2)
        assert [d.data["n"] for d in result] == [3, 2]

    def test_negative_limit_rejected(self) -> None:
        with pytest.raises(ValueError):
            apply_query(_docs({"n": 1}), limit=-1)

    def test_datetime_ordering(self) -> None:
        older = datetime(2024, 1, 1, tzinfo=timezone.utc)
        newer = datetime(2024, 6, 1, tzinfo=timezone.utc)
        result = apply_query(_docs({"at": older}, {"at": newer}), order_by=[OrderBy("at")])
        assert result[0].data["at"] == newer

    def test_naive_datetimes_order_as_utc(self) -> None:
        naive = datetime(2026, 10, 20, 19, 0)
        aware = datetime(2026, 10, 21, 19, 0, tzinfo=timezone.utc)
        result = apply_query(_docs({"at": naive}, {"at": aware}), order_by=[OrderBy("at")])
        assert [doc.id for doc in result] == ["1", "0"]

    def test_naive_datetimes_compare_in_range_filters(self) -> None:
        cutoff = datetime(2026, 10, 21, tzinfo=timezone.utc)
        assert Filter("at", ">", cutoff).matches({"at": datetime(2026, 10, 22)})
        assert not Filter("at", ">", datetime(2026, 10, 22)).matches({"at": cutoff})


class TestIncrement:
    def test_increment_existing_field(self) -> None:
        store = InMemoryDocumentStore()
        store.set("c", "a", {"clicks": 2})
        store.increment("c", "a", "clicks", 3)
        assert store.get("c", "a").data["clicks"] == 5

    def test_increment_missing_field_starts_at_zero(self) -> None:
        store = InMemoryDocumentStore()
        store.set("c", "a", {})
        store.increment("c", "a", "likes", -1)
        assert store.get("c", "a").data["likes"] == -1

    def test_increment_missing_document(self) -> None:
        with pytest.raises(DocumentNotFoundError):
            InMemoryDocumentStore().increment("c", "nope", "clicks")
