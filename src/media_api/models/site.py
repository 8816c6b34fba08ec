"""News ticker, sport banner and analytics Pydantic models."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

from content.models import ContentType, TickerPriority
from media_api.models.base import RecordModel


class NewsTickerResponse(RecordModel):
    id: str
    text: str
    created_at: datetime
    updated_at: datetime
    priority: TickerPriority
    is_active: bool = True
    expires_at: Optional[datetime] = None
    link: Optional[str] = None


class TickerStatusUpdate(BaseModel):
    is_active: bool


class SportBannerResponse(RecordModel):
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


class BannerToggle(BaseModel):
    is_enabled: bool


class BannerSyncResult(BaseModel):
    """Banner ids written or deleted by an ESPN sync run."""

    success: bool = True
    banner_ids: list[str] = Field(default_factory=list)
    count: int = 0


class ClickEvent(BaseModel):
    content_id: str = Field(min_length=1)
    content_type: ContentType
    session_id: str = Field(min_length=1)
    user_agent: str = ""
    referrer: str = ""
    duration: Optional[float] = Field(default=None, ge=0)
    completion_rate: Optional[float] = Field(default=None, ge=0, le=100)


class ShareEvent(BaseModel):
    content_id: str = Field(min_length=1)
    content_type: ContentType
    platform: str = Field(min_length=1)


class LikeEvent(BaseModel):
    content_id: str = Field(min_length=1)
    content_type: ContentType
    user_id: str = Field(min_length=1)
    action: Literal["like", "unlike"]


class ContentAnalyticsResponse(RecordModel):
    content_id: str
    content_type: ContentType
    clicks: int = 0
    unique_clicks: int = 0
    shares: int = 0
    likes: int = 0
    comments: int = 0


class ActivityItem(BaseModel):
    type: str
    content_id: Optional[str] = None
    content_type: Optional[str] = None
    timestamp: Optional[datetime] = None
    platform: Optional[str] = None


class AnalyticsSummary(BaseModel):
    total_clicks: int
    total_shares: int
    total_likes: int
    total_comments: int
    top_content: list[ContentAnalyticsResponse]
    recent_activity: list[ActivityItem]
