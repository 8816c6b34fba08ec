"""Content Pydantic models."""

from datetime import datetime

from pydantic import BaseModel, Field

from content.models import ContentStatus, ContentType
from content.schemas import ArticleInput, LegalArticleInput, ResearchInput, VideoInput
from media_api.models.base import RecordModel


class ContentResponse(RecordModel):
    """Fields every content type returns."""

    id: str
    title: str
    author_name: str
    author_id: str = ""
    published_at: datetime
    updated_at: datetime
    status: ContentStatus
    featured: bool = False
    likes: int = 0
    tags: list[str] = Field(default_factory=list)


class ArticleResponse(ContentResponse):
    content: str = ""
    excerpt: str = ""
    cover_image: str = ""
    category: str = ""
    section: str = ""


class VideoResponse(ContentResponse):
    description: str = ""
    duration: int = 0
    video_url: str = ""
    thumbnail_url: str = ""
    views: int = 0
    category: str = ""


class ResearchResponse(ContentResponse):
    abstract: str = ""
    content: str = ""
    cover_image: str = ""
    department: str = ""
    contributors: list[str] = Field(default_factory=list)
    references: list[str] = Field(default_factory=list)


class LegalArticleResponse(ContentResponse):
    abstract: str = ""
    content: str = ""
    cover_image: str = ""
    category: str = ""
    citations: list[str] = Field(default_factory=list)


class LikeResponse(BaseModel):
    liked: bool
    likes: int


class PageResponse(BaseModel):
    """Data for one public section page: featured stories plus the latest."""

    section: str
    featured: list[ArticleResponse]
    latest: list[ArticleResponse]


RESPONSE_MODELS: dict[ContentType, type[ContentResponse]] = {
    ContentType.ARTICLE: ArticleResponse,
    ContentType.VIDEO: VideoResponse,
    ContentType.RESEARCH: ResearchResponse,
    ContentType.LEGAL: LegalArticleResponse,
}

INPUT_MODELS = {
    ContentType.ARTICLE: ArticleInput,
    ContentType.VIDEO: VideoInput,
    ContentType.RESEARCH: ResearchInput,
    ContentType.LEGAL: LegalArticleInput,
}
