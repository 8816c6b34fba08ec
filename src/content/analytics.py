"""Engagement events and per-content counters."""

import logging
from datetime import timedelta
from typing import Callable, Optional

from common.datetime import utcnow
from common.serialization import to_document
from content.mapping import document_to_record
from content.models import ContentAnalytics, ContentType
from document_store.store import DocumentStore, Filter, OrderBy

logger = logging.getLogger(__name__)

ANALYTICS = "content-analytics"
CLICK_EVENTS = "click-events"
SHARE_EVENTS = "share-events"
LIKE_EVENTS = "like-events"

METRICS = ("clicks", "shares", "likes", "comments")
SHARE_PLATFORMS = ("twitter", "facebook", "linkedin", "email", "copy")

TOP_CONTENT_COUNT = 5
RECENT_ACTIVITY_DAYS = 7
RECENT_ACTIVITY_LIMIT = 20


class AnalyticsService:
    def __init__(self, store: DocumentStore, clock: Callable = utcnow):
        self.store = store
        self.clock = clock

    def track_click(
        self,
        content_id: str,
        content_type: ContentType,
        session_id: str,
        user_agent: str = "",
        referrer: str = "",
        duration: Optional[float] = None,
        completion_rate: Optional[float] = None,
    ) -> None:
        event = {
            "content_id": content_id,
            "content_type": ContentType(content_type).value,
            "session_id": session_id,
            "user_agent": user_agent,
            "referrer": referrer,
            "timestamp": self.clock(),
        }
        if duration is not None:
            event["duration"] = duration
        if completion_rate is not None:
            event["completion_rate"] = completion_rate
        self.store.add(CLICK_EVENTS, event)
        self._bump(content_id, content_type, "clicks", 1)

    # Older clients report views; they count as clicks.
    track_view = track_click

    def track_share(self, content_id: str, content_type: ContentType, platform: str) -> None:
        if platform not in SHARE_PLATFORMS:
            raise ValueError(f"Unknown share platform: {platform}")
        self.store.add(
            SHARE_EVENTS,
            {
                "content_id": content_id,
                "content_type": ContentType(content_type).value,
                "platform": platform,
                "timestamp": self.clock(),
            },
        )
        self._bump(content_id, content_type, "shares", 1)

    def track_like(self, content_id: str, content_type: ContentType, user_id: str, action: str) -> None:
        if action not in ("like", "unlike"):
            raise ValueError(f"Unknown like action: {action}")
        self.store.add(
            LIKE_EVENTS,
            {
                "content_id": content_id,
                "content_type": ContentType(content_type).value,
                "user_id": user_id,
                "action": action,
                "timestamp": self.clock(),
            },
        )
        self._bump(content_id, content_type, "likes", 1 if action == "like" else -1)

    def _bump(self, content_id: str, content_type: ContentType, metric: str, amount: int) -> None:
        now = self.clock()
        if self.store.get(ANALYTICS, content_id) is None:
            record = ContentAnalytics(content_id=content_id, content_type=ContentType(content_type))
            setattr(record, metric, amount)
            if metric == "clicks":
                record.unique_clicks = amount
            body = to_document(record, exclude=())
            body.update(created_at=now, updated_at=now)
            self.store.set(ANALYTICS, content_id, body)
            return
        self.store.increment(ANALYTICS, content_id, metric, amount)
        self.store.update(ANALYTICS, content_id, {"updated_at": now})

    def get_content_analytics(self, content_id: str) -> Optional[ContentAnalytics]:
        doc = self.store.get(ANALYTICS, content_id)
        if doc is None:
            return None
        record = document_to_record(ContentAnalytics, doc)
        record.content_id = doc.id
        return record

    def get_top_content(self, content_type: ContentType, metric: str = "clicks", limit: int = 10) -> list[ContentAnalytics]:
        if metric not in METRICS:
            raise ValueError(f"Unknown metric: {metric}")
        docs = self.store.query(
            ANALYTICS,
            filters=[Filter("content_type", "==", ContentType(content_type).value)],
            order_by=[OrderBy(metric, descending=True)],
            limit=limit,
        )
        return [document_to_record(ContentAnalytics, doc) for doc in docs]

    def get_summary(self) -> dict:
        """Totals, the top content by clicks and the last week's activity."""
        records = [document_to_record(ContentAnalytics, doc) for doc in self.store.query(ANALYTICS)]
        top = sorted(records, key=lambda r: r.clicks, reverse=True)[:TOP_CONTENT_COUNT]
        since = self.clock() - timedelta(days=RECENT_ACTIVITY_DAYS)
        return {
            "total_clicks": sum(r.clicks for r in records),
            "total_shares": sum(r.shares for r in records),
            "total_likes": sum(r.likes for r in records),
            "total_comments": sum(r.comments for r in records),
            "top_content": top,
            "recent_activity": self._recent_activity(since),
        }

    def _recent_activity(self, since) -> list[dict]:
        activity = []
        for event_type, collection in (("click", CLICK_EVENTS), ("share", SHARE_EVENTS)):
            docs = self.store.query(
                collection,
                filters=[Filter("timestamp", ">=", since)],
                order_by=[OrderBy("timestamp", descending=True)],
                limit=RECENT_ACTIVITY_LIMIT,
            )
            for doc in docs:
                item = {
                    "type": event_type,
                    "content_id": doc.data.get("content_id"),
                    "content_type": doc.data.get("content_type"),
                    "timestamp": doc.data.get("timestamp"),
                }
                if "platform" in doc.data:
                    item["platform"] = doc.data["platform"]
                activity.append(item)
        activity.sort(key=lambda item: item["timestamp"], reverse=True)
        return activity[:RECENT_ACTIVITY_LIMIT]
