"""Per-collection content services."""

from typing import Optional

from content.base import ContentService
from content.models import Article, ContentType, LegalArticle, Research, Video
from document_store.store import Filter


class ArticleService(ContentService[Article]):
    collection = "articles"
    record_type = Article
    label = "Article"

    def list_published(
        self,
        category: Optional[str] = None,
        featured_only: bool = False,
        limit: int = 10,
        section: Optional[str] = None,
    ) -> list[Article]:
        filters = self._published_filters(category, featured_only)
        if section:
            filters.append(Filter("section", "==", section))
        return self._query_published(filters, limit)


class VideoService(ContentService[Video]):
    collection = "videos"
    record_type = Video
    label = "Video"


class ResearchService(ContentService[Research]):
    """Science journal articles, grouped by department."""

    collection = "research"
    record_type = Research
    category_field = "department"
    label = "Research"


class LegalService(ContentService[LegalArticle]):
    collection = "legal-articles"
    record_type = LegalArticle
    label = "Legal article"


SERVICE_TYPES: dict[ContentType, type[ContentService]] = {
    ContentType.ARTICLE: ArticleService,
    ContentType.VIDEO: VideoService,
    ContentType.RESEARCH: ResearchService,
    ContentType.LEGAL: LegalService,
}
