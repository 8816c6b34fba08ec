"""Keyword search across all content collections."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Mapping

from content.base import ContentService
from content.models import ContentType
from search.models import SearchResult

logger = logging.getLogger(__name__)

DEFAULT_RESULT_CAP = 20

# Merge order for results from different collections.
TYPE_ORDER = (ContentType.ARTICLE, ContentType.VIDEO, ContentType.RESEARCH, ContentType.LEGAL)


def matches_search(record: Any, term: str) -> bool:
    """Case-insensitive substring match over the searchable text fields."""
    fields = [
        getattr(record, name, None)
        for name in ("title", "excerpt", "description", "abstract", "category", "department", "author_name")
    ]
    fields.extend(getattr(record, "tags", None) or [])
    return any(term in value.lower() for value in fields if value)


def to_search_result(record: Any, content_type: ContentType) -> SearchResult:
    result = SearchResult(
        id=record.id,
        type=content_type,
        title=record.title,
        category=record.department if content_type is ContentType.RESEARCH else record.category,
        published_at=record.published_at,
        author_name=record.author_name,
    )
    if content_type is ContentType.ARTICLE:
        result.excerpt = record.excerpt
        result.cover_image = record.cover_image
    elif content_type is ContentType.VIDEO:
        result.description = record.description
        result.thumbnail_url = record.thumbnail_url
        result.views = record.views
    elif content_type is ContentType.RESEARCH:
        result.abstract = record.abstract
        result.cover_image = record.cover_image
        result.department = record.department
    else:
        result.abstract = record.abstract
        result.cover_image = record.cover_image
    return result


def sort_by_relevance(results: list[SearchResult], term: str) -> list[SearchResult]:
    """Title matches first, then newest first; ties keep their input order."""
    return sorted(
        results,
        key=lambda r: (term not in r.title.lower(), -r.published_at.timestamp()),
    )


class SearchService:
    def __init__(self, services: Mapping[ContentType, ContentService], result_cap: int = DEFAULT_RESULT_CAP):
        self.services = dict(services)
        self.result_cap = result_cap

    def _search_type(self, content_type: ContentType, term: str, fetch_limit: int) -> list[SearchResult]:
        records = self.services[content_type].list_published(limit=fetch_limit)
        return [to_search_result(r, content_type) for r in records if matches_search(r, term)]

    def search_all(self, query: str, limit: int = DEFAULT_RESULT_CAP) -> list[SearchResult]:
        """Search every collection in parallel and merge the matches.

        A collection whose query fails contributes nothing; the others are
        still returned.
        """
        term = (query or "").strip().lower()
        if not term:
            return []
        limit = min(limit, self.result_cap)
        types = [t for t in TYPE_ORDER if t in self.services]

        results: list[SearchResult] = []
        with ThreadPoolExecutor(max_workers=len(types) or 1) as executor:
            futures = {t: executor.submit(self._search_type, t, term, limit) for t in types}
            for content_type in types:
                try:
                    results.extend(futures[content_type].result())
                except Exception as e:
                    logger.error("Search over %s failed: %s", content_type.value, e)

        return sort_by_relevance(results, term)[:limit]

    def search_by_type(self, content_type: ContentType, query: str, limit: int = 10) -> list[SearchResult]:
        term = (query or "").strip().lower()
        if not term:
            return []
        content_type = ContentType(content_type)
        try:
            # Over-fetch since matching happens after the query.
            results = self._search_type(content_type, term, limit * 2)
        except Exception as e:
            logger.error("Search over %s failed: %s", content_type.value, e)
            return []
        return sort_by_relevance(results, term)[:limit]

    def get_search_suggestions(self, limit: int = 5) -> list[str]:
        """Categories of featured articles, then departments of featured research."""
        suggestions: list[str] = []
        sources = (
            (ContentType.ARTICLE, "category"),
            (ContentType.RESEARCH, "department"),
        )
        for content_type, field_name in sources:
            service = self.services.get(content_type)
            if service is None:
                continue
            try:
                records = service.list_published(featured_only=True, limit=limit)
            except Exception as e:
                logger.error("Loading suggestions from %s failed: %s", content_type.value, e)
                continue
            for record in records:
                value = getattr(record, field_name, "")
                if value and value not in suggestions:
                    suggestions.append(value)
        return suggestions[:limit]
