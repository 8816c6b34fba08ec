"""Search Pydantic models."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from content.models import ContentType
from media_api.models.base import RecordModel


class SearchResultResponse(RecordModel):
    id: str
    type: ContentType
    title: str
    category: str = ""
    published_at: Optional[datetime] = None
    author_name: str = ""
    excerpt: Optional[str] = None
    description: Optional[str] = None
    abstract: Optional[str] = None
    cover_image: Optional[str] = None
    thumbnail_url: Optional[str] = None
    views: Optional[int] = None
    department: Optional[str] = None


class SearchResponse(BaseModel):
    query: str
    results: list[SearchResultResponse]
    count: int


class SuggestionsResponse(BaseModel):
    suggestions: list[str]
