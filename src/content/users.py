"""User profiles and role records."""

import logging
from typing import Callable, Optional

from common.datetime import utcnow
from common.serialization import to_document
from content.base import clean_fields
from content.mapping import document_to_record
from content.models import Role, UserProfile, UserRole
from document_store.store import DocumentStore, DocumentStoreError, OrderBy

logger = logging.getLogger(__name__)

PROFILES = "user-profiles"
ROLES = "users"


class UserService:
    def __init__(self, store: DocumentStore, clock: Callable = utcnow):
        self.store = store
        self.clock = clock

    def list_users(self) -> list[UserProfile]:
        docs = self.store.query(PROFILES, order_by=[OrderBy("joined_at", descending=True)])
        return [document_to_record(UserProfile, doc) for doc in docs]

    def get_user(self, user_id: str) -> Optional[UserProfile]:
        doc = self.store.get(PROFILES, user_id)
        return document_to_record(UserProfile, doc) if doc else None

    def create_user(self, data: dict, user_id: Optional[str] = None) -> str:
        body = clean_fields(data)
        body["joined_at"] = self.clock()
        body.setdefault("role", Role.VIEWER.value)
        if user_id:
            self.store.set(PROFILES, user_id, body)
            return user_id
        return self.store.add(PROFILES, body)

    def update_user(self, user_id: str, data: dict) -> None:
        self.store.update(PROFILES, user_id, clean_fields(data))

    def delete_user(self, user_id: str) -> None:
        self.store.delete(PROFILES, user_id)

    def get_role(self, uid: str) -> UserRole:
        """Role record for a user.

        A user without a record gets a viewer record written on first lookup.
        If the store is unavailable the user is treated as a viewer.
        """
        try:
            doc = self.store.get(ROLES, uid)
            if doc is not None:
                return document_to_record(UserRole, doc)
            role = UserRole()
            self.store.set(ROLES, uid, to_document(role))
            logger.info("Created default viewer role for %s", uid)
            return role
        except DocumentStoreError as e:
            logger.error("Failed to load role for %s: %s", uid, e)
            return UserRole()

    def set_role(self, uid: str, role: Role, is_admin: bool = False, department: Optional[str] = None) -> UserRole:
        record = UserRole(role=Role(role), department=department, is_admin=is_admin)
        self.store.set(ROLES, uid, to_document(record))
        logger.info("Set role for %s to %s (admin=%s)", uid, record.role.value, is_admin)
        return record
