"""Tests for auth.rbac module."""

from auth.rbac import has_permission, has_role, is_admin
from content.models import Role, UserRole


class TestIsAdmin:
    def test_requires_flag(self) -> None:
        assert is_admin(UserRole(role=Role.ADMIN, is_admin=True)) is True
        assert is_admin(UserRole(role=Role.ADMIN, is_admin=False)) is False
        assert is_admin(UserRole(role=Role.VIEWER)) is False
        assert is_admin(None) is False


class TestHasRole:
    def test_hierarchy(self) -> None:
        editor = UserRole(role=Role.EDITOR)
        assert has_role(editor, Role.AUTHOR) is True
        assert has_role(editor, Role.EDITOR) is True
        assert has_role(editor, Role.ADMIN) is False

    def test_admin_flag_grants_everything(self) -> None:
        assert has_role(UserRole(role=Role.VIEWER, is_admin=True), Role.ADMIN) is True

    def test_no_role(self) -> None:
        assert has_role(None, Role.VIEWER) is False


class TestHasPermission:
    def test_role_permissions(self) -> None:
        assert has_permission(UserRole(role=Role.EDITOR), "publish") is True
        assert has_permission(UserRole(role=Role.AUTHOR), "publish") is False
        assert has_permission(UserRole(role=Role.VIEWER), "read") is True
        assert has_permission(UserRole(role=Role.VIEWER), "write") is False

    def test_admin_role_has_all(self) -> None:
        assert has_permission(UserRole(role=Role.ADMIN), "delete") is True
        assert has_permission(UserRole(role=Role.VIEWER, is_admin=True), "delete") is True
