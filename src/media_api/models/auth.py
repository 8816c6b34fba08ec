"""Auth Pydantic models."""

from typing import Optional

from pydantic import BaseModel, Field

from media_api.models.community import UserRoleResponse


class Credentials(BaseModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class GoogleSignIn(BaseModel):
    id_token: str = ""


class UserResponse(BaseModel):
    uid: str
    email: str
    display_name: Optional[str] = None


class SessionResponse(BaseModel):
    user: UserResponse
    role: UserRoleResponse
    id_token: str
    is_admin: bool
