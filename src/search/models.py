"""Search result shape shared by every content type."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from content.models import ContentType


@dataclass
class SearchResult:
    id: str
    type: ContentType
    title: str
    category: str
    published_at: datetime
    author_name: str
    excerpt: Optional[str] = None
    description: Optional[str] = None
    abstract: Optional[str] = None
    cover_image: Optional[str] = None
    thumbnail_url: Optional[str] = None
    views: Optional[int] = None
    department: Optional[str] = None
