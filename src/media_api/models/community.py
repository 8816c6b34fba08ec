"""Comment and user Pydantic models."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from content.models import CommentStatus, ContentType, Role
from media_api.models.base import RecordModel


class CommentEditResponse(RecordModel):
    content: str
    edited_at: datetime


class CommentResponse(RecordModel):
    id: str
    content_id: str
    content_type: ContentType
    author_id: str
    author_name: str
    content: str
    created_at: datetime
    updated_at: datetime
    status: CommentStatus
    parent_id: Optional[str] = None
    replies: list[str] = Field(default_factory=list)
    depth: int = 0
    likes: int = 0
    is_edited: bool = False
    edit_history: list[CommentEditResponse] = Field(default_factory=list)


class CommentStatusUpdate(BaseModel):
    status: CommentStatus


class CommentEditRequest(BaseModel):
    content: str = Field(min_length=1, max_length=1000)


class UserProfileResponse(RecordModel):
    id: str
    name: str
    email: str
    joined_at: datetime
    role: Role
    bio: str = ""
    profile_image: str = ""
    department: str = ""
    major: str = ""
    graduation_year: str = ""


class UserRoleResponse(RecordModel):
    role: Role
    department: Optional[str] = None
    is_admin: bool = False


class RoleUpdate(BaseModel):
    role: Role
    is_admin: bool = False
    department: Optional[str] = None
