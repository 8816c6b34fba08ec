"""Tests for search.search module."""

from datetime import datetime, timedelta, timezone
from unittest.mock import Mock

from content.models import ContentType
from content.services import SERVICE_TYPES
from document_store.memory import InMemoryDocumentStore
from document_store.store import DocumentStoreError
from search.search import SearchService

BASE = datetime(2024, 1, 1, tzinfo=timezone.utc)

COLLECTIONS = {
    ContentType.ARTICLE: "articles",
    ContentType.VIDEO: "videos",
    ContentType.RESEARCH: "research",
    ContentType.LEGAL: "legal-articles",
}


def _store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


def _add(store, content_type: ContentType, doc_id: str, days: int, **fields) -> None:
    body = {
        "title": f"Untitled {doc_id}",
        "author_name": "Staff",
        "status": "published",
        "published_at": BASE + timedelta(days=days),
        "updated_at": BASE,
    }
    body.update(fields)
    store.set(COLLECTIONS[content_type], doc_id, body)


def _service(store) -> SearchService:
    return SearchService({t: cls(store) for t, cls in SERVICE_TYPES.items()})


class TestSearchAll:
    def test_blank_query_returns_empty(self) -> None:
        assert _service(_store()).search_all("   ") == []

    def test_no_matches_returns_empty(self) -> None:
        store = _store()
        _add(store, ContentType.ARTICLE, "a", 1, title="Budget vote")
        assert _service(store).search_all("zebra") == []

    def test_title_matches_rank_first_then_newest(self) -> None:
        store = _store()
        _add(store, ContentType.ARTICLE, "tag-only", 9, tags=["Tritons"])
        _add(store, ContentType.VIDEO, "old-title", 1, title="Tritons highlights")
        _add(store, ContentType.LEGAL, "new-title", 5, title="Tritons legal clinic")
        _add(store, ContentType.RESEARCH, "dept", 7, department="Tritons Lab")
        results = _service(store).search_all("TRITONS")
        assert [r.id for r in results] == ["new-title", "old-title", "tag-only", "dept"]

    def test_ties_keep_fixed_type_order(self) -> None:
        store = _store()
        _add(store, ContentType.LEGAL, "legal", 3, title="Tritons weekly")
        _add(store, ContentType.VIDEO, "video", 3, title="Tritons weekly")
        _add(store, ContentType.ARTICLE, "article", 3, title="Tritons weekly")
        # Services registered in reverse so only the merge order decides
        services = {t: SERVICE_TYPES[t](store) for t in reversed(list(SERVICE_TYPES))}

        for _ in range(3):
            results = SearchService(services).search_all("tritons")
            assert [r.id for r in results] == ["article", "video", "legal"]

    def test_fields_searched(self) -> None:
        store = _store()
        _add(store, ContentType.ARTICLE, "excerpt", 1, excerpt="about the regents")
        _add(store, ContentType.VIDEO, "description", 2, description="regents meeting")
        _add(store, ContentType.RESEARCH, "abstract", 3, abstract="regents study")
        _add(store, ContentType.LEGAL, "author", 4, author_name="Regents Desk")
        _add(store, ContentType.ARTICLE, "draft", 5, excerpt="regents", status="draft")
        ids = {r.id for r in _service(store).search_all("regents")}
        assert ids == {"excerpt", "description", "abstract", "author"}

    def test_result_cap(self) -> None:
        store = _store()
        for i in range(15):
            _add(store, ContentType.ARTICLE, f"a{i}", i, title="Campus news")
            _add(store, ContentType.VIDEO, f"v{i}", i, title="Campus video")
        service = _service(store)
        assert len(service.search_all("campus")) == 20
        assert len(service.search_all("campus", limit=50)) == 20
        assert len(service.search_all("campus", limit=5)) == 5

    def test_failing_type_is_skipped(self) -> None:
        store = _store()
        _add(store, ContentType.ARTICLE, "a", 1, title="Campus news")
        broken = Mock()
        broken.list_published.side_effect = DocumentStoreError("offline")
        service = _service(store)
        service.services[ContentType.VIDEO] = broken
        assert [r.id for r in service.search_all("campus")] == ["a"]

    def test_result_fields_by_type(self) -> None:
        store = _store()
        _add(store, ContentType.RESEARCH, "r", 1, title="Coral reefs", department="SIO", abstract="Reefs")
        _add(store, ContentType.VIDEO, "v", 2, title="Coral dive", views=12, category="science")
        results = {r.id: r for r in _service(store).search_all("coral")}
        assert results["r"].category == "SIO"
        assert results["r"].department == "SIO"
        assert results["v"].views == 12
        assert results["v"].type is ContentType.VIDEO


class TestSearchByType:
    def test_only_requested_type(self) -> None:
        store = _store()
        _add(store, ContentType.ARTICLE, "a", 1, title="Campus news")
        _add(store, ContentType.VIDEO, "v", 2, title="Campus video")
        results = _service(store).search_by_type("video", "campus")
        assert [r.id for r in results] == ["v"]

    def test_failure_returns_empty(self) -> None:
        broken = Mock()
        broken.list_published.side_effect = DocumentStoreError("offline")
        service = SearchService({ContentType.ARTICLE: broken})
        assert service.search_by_type(ContentType.ARTICLE, "campus") == []


class TestSearchSuggestions:
    def test_featured_categories_and_departments(self) -> None:
        store = _store()
        _add(store, ContentType.ARTICLE, "a1", 3, category="campus", featured=True)
        _add(store, ContentType.ARTICLE, "a2", 2, category="campus", featured=True)
        _add(store, ContentType.ARTICLE, "a3", 1, category="sports", featured=True)
        _add(store, ContentType.ARTICLE, "a4", 4, category="national")
        _add(store, ContentType.RESEARCH, "r1", 1, department="Biology", featured=True)
        assert _service(store).get_search_suggestions() == ["campus", "sports", "Biology"]

    def test_limit(self) -> None:
        store = _store()
        for i, category in enumerate(["a", "b", "c"]):
            _add(store, ContentType.ARTICLE, category, i, category=category, featured=True)
        assert len(_service(store).get_search_suggestions(limit=2)) == 2
