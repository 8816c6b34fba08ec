"""Authenticated user and session records."""

from dataclasses import dataclass
from typing import Optional

from content.models import UserRole


@dataclass
class AuthUser:
    uid: str
    email: str
    display_name: Optional[str] = None


@dataclass
class AuthSession:
    """A signed-in user with their role record and bearer token."""
    user: AuthUser
    role: UserRole
    id_token: str
