"""Data models for the content collections."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class ContentStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class CommentStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class ContentType(str, Enum):
    ARTICLE = "article"
    VIDEO = "video"
    RESEARCH = "research"
    LEGAL = "legal"


class Role(str, Enum):
    ADMIN = "admin"
    EDITOR = "editor"
    AUTHOR = "author"
    VIEWER = "viewer"


class TickerPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    BREAKING = "breaking"


ARTICLE_SECTIONS = ("campus", "sports", "student-government", "san-diego", "california", "national")


@dataclass
class BaseContent:
    """Fields shared by every content record."""
    id: str
    title: str
    author_name: str
    published_at: datetime
    updated_at: datetime
    status: ContentStatus = ContentStatus.DRAFT
    featured: bool = False
    author_id: str = ""
    likes: int = 0
    liked_by: list[str] = field(default_factory=list)


@dataclass
class Article(BaseContent):
    """News article (rich-text HTML body)."""
    content: str = ""
    excerpt: str = ""
    cover_image: str = ""
    category: str = ""
    section: str = ""
    tags: list[str] = field(default_factory=list)


@dataclass
class Video(BaseContent):
    description: str = ""
    duration: int = 0  # seconds
    video_url: str = ""
    thumbnail_url: str = ""
    views: int = 0
    category: str = ""
    tags: list[str] = field(default_factory=list)


@dataclass
class Research(BaseContent):
    """Science journal article; grouped by department instead of category."""
    abstract: str = ""
    content: str = ""
    cover_image: str = ""
    department: str = ""
    contributors: list[str] = field(default_factory=list)
    references: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)


@dataclass
class LegalArticle(BaseContent):
    abstract: str = ""
    content: str = ""
    cover_image: str = ""
    category: str = ""
    citations: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)


@dataclass
class CommentEdit:
    content: str
    edited_at: datetime


@dataclass
class Comment:
    """Viewer comment on a piece of content, moderated before display."""
    id: str
    content_id: str
    content_type: ContentType
    author_id: str
    author_name: str
    content: str
    created_at: datetime
    updated_at: datetime
    status: CommentStatus = CommentStatus.PENDING
    parent_id: Optional[str] = None
    replies: list[str] = field(default_factory=list)
    depth: int = 0
    likes: int = 0
    liked_by: list[str] = field(default_factory=list)
    is_edited: bool = False
    edit_history: list[CommentEdit] = field(default_factory=list)


@dataclass
class UserRole:
    """Role record used for admin gating."""
    role: Role = Role.VIEWER
    department: Optional[str] = None
    is_admin: bool = False


@dataclass
class UserProfile:
    id: str
    name: str
    email: str
    joined_at: datetime
    role: Role = Role.VIEWER
    bio: str = ""
    profile_image: str = ""
    department: str = ""
    major: str = ""
    graduation_year: str = ""


@dataclass
class NewsTicker:
    """Breaking-news line shown in the site header."""
    id: str
    text: str
    created_at: datetime
    updated_at: datetime
    priority: TickerPriority = TickerPriority.MEDIUM
    is_active: bool = True
    expires_at: Optional[datetime] = None
    link: Optional[str] = None


@dataclass
class SportBanner:
    id: str
    sport: str
    home_team_id: str
    away_team_id: str
    date: datetime
    last_updated: datetime
    is_enabled: bool = True
    home_score: int = 0
    away_score: int = 0
    game_status: str = "scheduled"
    game_time: str = ""
    venue: str = ""
    period: Optional[str] = None
    time_remaining: Optional[str] = None
    created_by: str = "admin"
    updated_by: str = "admin"


@dataclass
class ContentAnalytics:
    content_id: str
    content_type: ContentType
    clicks: int = 0
    unique_clicks: int = 0
    shares: int = 0
    likes: int = 0
    comments: int = 0
