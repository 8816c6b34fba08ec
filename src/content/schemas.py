"""Pydantic input models for content forms."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

from content.models import ContentStatus, ContentType, TickerPriority

Section = Literal["campus", "sports", "student-government", "san-diego", "california", "national"]
GameStatus = Literal["scheduled", "live", "halftime", "final", "postponed"]
Sport = Literal["basketball", "soccer", "baseball", "fencing", "tennis"]


class ContentInput(BaseModel):
    """Fields every content form shares."""

    title: str = Field(min_length=1, max_length=200)
    author_name: str = Field(min_length=1)
    author_id: str = ""
    featured: bool = False
    status: ContentStatus = ContentStatus.DRAFT
    tags: list[str] = Field(default_factory=list)


class ArticleInput(ContentInput):
    content: str = Field(min_length=10)
    excerpt: str = Field(min_length=1, max_length=500)
    category: Section
    section: Section
    cover_image: str = ""


class VideoInput(ContentInput):
    description: str = Field(min_length=1)
    video_url: str = Field(min_length=1)
    thumbnail_url: str = ""
    duration: int = Field(default=0, ge=0)
    category: str = ""


class ResearchInput(ContentInput):
    abstract: str = Field(min_length=1)
    content: str = Field(min_length=10)
    department: str = Field(min_length=1)
    cover_image: str = ""
    contributors: list[str] = Field(default_factory=list)
    references: list[str] = Field(default_factory=list)


class LegalArticleInput(ContentInput):
    abstract: str = Field(min_length=1)
    content: str = Field(min_length=10)
    category: str = Field(min_length=1)
    cover_image: str = ""
    citations: list[str] = Field(default_factory=list)


class CommentInput(BaseModel):
    content: str = Field(min_length=1, max_length=1000)
    content_type: ContentType
    content_id: str = Field(min_length=1)
    parent_id: Optional[str] = None
    author_id: str = Field(min_length=1)
    author_name: str = Field(min_length=1)


class UserProfileInput(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    bio: Optional[str] = Field(default=None, max_length=500)
    department: Optional[str] = Field(default=None, max_length=100)
    major: Optional[str] = None
    graduation_year: Optional[str] = None
    profile_image: Optional[str] = None


class NewsTickerInput(BaseModel):
    text: str = Field(min_length=1, max_length=300)
    priority: TickerPriority = TickerPriority.MEDIUM
    is_active: bool = True
    expires_at: Optional[datetime] = None
    link: Optional[str] = None


class SportBannerInput(BaseModel):
    sport: Sport
    home_team_id: str = Field(min_length=1)
    away_team_id: str = Field(min_length=1)
    date: datetime
    is_enabled: bool = True
    home_score: int = Field(default=0, ge=0)
    away_score: int = Field(default=0, ge=0)
    game_status: GameStatus = "scheduled"
    game_time: str = ""
    venue: str = ""
    period: Optional[str] = None
    time_remaining: Optional[str] = None


class ScoreUpdate(BaseModel):
    home_score: int = Field(ge=0)
    away_score: int = Field(ge=0)

