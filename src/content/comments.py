"""Comment threads and moderation."""

import logging
from typing import Callable, Optional

from common.datetime import utcnow
from content.mapping import document_to_record
from content.models import Comment, CommentStatus, ContentType
from document_store.store import DocumentStore, Filter, OrderBy

logger = logging.getLogger(__name__)

COLLECTION = "comments"

# Moderation only moves comments out of the queue.
ALLOWED_TRANSITIONS = {
    (CommentStatus.PENDING, CommentStatus.APPROVED),
    (CommentStatus.PENDING, CommentStatus.REJECTED),
}


class CommentNotFoundError(Exception):
    def __init__(self, comment_id: str):
        super().__init__(f"Comment not found: {comment_id}")
        self.comment_id = comment_id


class InvalidStatusTransitionError(Exception):
    def __init__(self, current: CommentStatus, requested: CommentStatus):
        super().__init__(f"Cannot move comment from {current.value} to {requested.value}")
        self.current = current
        self.requested = requested


class CommentService:
    def __init__(self, store: DocumentStore, clock: Callable = utcnow):
        self.store = store
        self.clock = clock

    def list_for_content(
        self, content_id: str, content_type: ContentType, limit: int = 50
    ) -> list[Comment]:
        """Approved comments for one piece of content, threaded.

        Returns top-level comments newest first; each one's ``replies`` lists
        the ids of its approved children.
        """
        docs = self.store.query(
            COLLECTION,
            filters=[
                Filter("content_id", "==", content_id),
                Filter("content_type", "==", ContentType(content_type).value),
                Filter("status", "==", CommentStatus.APPROVED.value),
            ],
            order_by=[OrderBy("created_at", descending=True)],
            limit=limit,
        )
        comments = [document_to_record(Comment, doc) for doc in docs]

        children: dict[str, list[str]] = {}
        for comment in comments:
            if comment.parent_id:
                children.setdefault(comment.parent_id, []).append(comment.id)

        top_level = [c for c in comments if not c.parent_id]
        for comment in top_level:
            comment.replies = children.get(comment.id, [])
        return top_level

    def add_comment(
        self,
        content_id: str,
        content_type: ContentType,
        author_id: str,
        author_name: str,
        content: str,
        parent_id: Optional[str] = None,
    ) -> str:
        """Store a new comment awaiting moderation and return its id."""
        depth = 0
        parent = None
        if parent_id:
            parent = self.get(parent_id)
            if parent is None:
                raise CommentNotFoundError(parent_id)
            depth = parent.depth + 1

        now = self.clock()
        comment_id = self.store.add(
            COLLECTION,
            {
                "content_id": content_id,
                "content_type": ContentType(content_type).value,
                "author_id": author_id,
                "author_name": author_name,
                "content": content,
                "status": CommentStatus.PENDING.value,
                "parent_id": parent_id,
                "replies": [],
                "depth": depth,
                "likes": 0,
                "liked_by": [],
                "is_edited": False,
                "edit_history": [],
                "created_at": now,
                "updated_at": now,
            },
        )
        if parent is not None:
            self.store.update(COLLECTION, parent.id, {"replies": [*parent.replies, comment_id]})
        logger.info("Added comment %s on %s %s", comment_id, content_type, content_id)
        return comment_id

    def get(self, comment_id: str) -> Optional[Comment]:
        doc = self.store.get(COLLECTION, comment_id)
        return document_to_record(Comment, doc) if doc else None

    def toggle_like(self, comment_id: str, user_id: str) -> bool:
        comment = self._require(comment_id)
        if user_id in comment.liked_by:
            liked_by = [uid for uid in comment.liked_by if uid != user_id]
            liked = False
        else:
            liked_by = [*comment.liked_by, user_id]
            liked = True
        self.store.update(COLLECTION, comment_id, {"liked_by": liked_by, "likes": len(liked_by)})
        return liked

    def edit_comment(self, comment_id: str, new_content: str) -> None:
        comment = self._require(comment_id)
        now = self.clock()
        history = [{"content": e.content, "edited_at": e.edited_at} for e in comment.edit_history]
        history.append({"content": comment.content, "edited_at": now})
        self.store.update(
            COLLECTION,
            comment_id,
            {"content": new_content, "is_edited": True, "edit_history": history, "updated_at": now},
        )

    def delete(self, comment_id: str) -> None:
        self.store.delete(COLLECTION, comment_id)
        logger.info("Deleted comment %s", comment_id)

    def list_all(self, status: Optional[CommentStatus] = None) -> list[Comment]:
        """Moderation listing, newest first, optionally for one status."""
        filters = []
        if status is not None:
            filters.append(Filter("status", "==", CommentStatus(status).value))
        docs = self.store.query(
            COLLECTION, filters=filters, order_by=[OrderBy("created_at", descending=True)]
        )
        return [document_to_record(Comment, doc) for doc in docs]

    def update_status(self, comment_id: str, status: CommentStatus) -> Comment:
        comment = self._require(comment_id)
        requested = CommentStatus(status)
        if (comment.status, requested) not in ALLOWED_TRANSITIONS:
            raise InvalidStatusTransitionError(comment.status, requested)
        now = self.clock()
        self.store.update(COLLECTION, comment_id, {"status": requested.value, "updated_at": now})
        logger.info("Comment %s moved to %s", comment_id, requested.value)
        comment.status = requested
        comment.updated_at = now
        return comment

    def _require(self, comment_id: str) -> Comment:
        comment = self.get(comment_id)
        if comment is None:
            raise CommentNotFoundError(comment_id)
        return comment
