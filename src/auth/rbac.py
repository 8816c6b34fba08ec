"""Role checks for the admin gate."""

from typing import Optional

from content.models import Role, UserRole

ROLE_HIERARCHY = {
    Role.ADMIN: 4,
    Role.EDITOR: 3,
    Role.AUTHOR: 2,
    Role.VIEWER: 1,
}

PERMISSIONS = {
    Role.ADMIN: ("all",),
    Role.EDITOR: ("read", "write", "publish", "edit"),
    Role.AUTHOR: ("read", "write"),
    Role.VIEWER: ("read",),
}


def is_admin(role: Optional[UserRole]) -> bool:
    """Only the explicit admin flag grants admin access, not the role name."""
    if role is None:
        return False
    return role.is_admin is True


def has_role(role: Optional[UserRole], required: Role) -> bool:
    if role is None:
        return False
    if role.is_admin is True:
        return True
    return ROLE_HIERARCHY.get(Role(role.role), 0) >= ROLE_HIERARCHY[Role(required)]


def has_permission(role: Optional[UserRole], permission: str) -> bool:
    if role is None:
        return False
    if role.is_admin is True:
        return True
    granted = PERMISSIONS.get(Role(role.role), ())
    return "all" in granted or permission in granted
