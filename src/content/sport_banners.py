"""Game banners maintained by sports editors."""

import logging
from typing import Callable, Optional

from common.datetime import utcnow
from content.base import clean_fields
from content.mapping import document_to_record
from content.models import SportBanner
from document_store.store import DocumentStore, Filter, OrderBy

logger = logging.getLogger(__name__)

COLLECTION = "sport-banners"
DEFAULT_EDITOR = "admin"


class SportBannerService:
    def __init__(self, store: DocumentStore, clock: Callable = utcnow):
        self.store = store
        self.clock = clock

    def get_active_banner(self) -> Optional[SportBanner]:
        """The enabled banner with the latest game date, if any."""
        docs = self.store.query(
            COLLECTION,
            filters=[Filter("is_enabled", "==", True)],
            order_by=[OrderBy("date", descending=True)],
            limit=1,
        )
        return document_to_record(SportBanner, docs[0]) if docs else None

    def get_all_banners(self) -> list[SportBanner]:
        docs = self.store.query(COLLECTION, order_by=[OrderBy("date", descending=True)])
        return [document_to_record(SportBanner, doc) for doc in docs]

    def get_banner(self, banner_id: str) -> Optional[SportBanner]:
        doc = self.store.get(COLLECTION, banner_id)
        return document_to_record(SportBanner, doc) if doc else None

    def create_banner(self, data: dict, editor_id: Optional[str] = None) -> str:
        body = clean_fields(data)
        body.update(
            last_updated=self.clock(),
            created_by=editor_id or DEFAULT_EDITOR,
            updated_by=editor_id or DEFAULT_EDITOR,
        )
        banner_id = self.store.add(COLLECTION, body)
        logger.info("Created sport banner %s", banner_id)
        return banner_id

    def update_banner(self, banner_id: str, data: dict, editor_id: Optional[str] = None) -> None:
        body = clean_fields(data)
        self._touch(banner_id, body, editor_id)

    def delete_banner(self, banner_id: str) -> None:
        self.store.delete(COLLECTION, banner_id)

    def toggle_banner(self, banner_id: str, is_enabled: bool, editor_id: Optional[str] = None) -> None:
        self._touch(banner_id, {"is_enabled": is_enabled}, editor_id)

    def update_score(
        self, banner_id: str, home_score: int, away_score: int, editor_id: Optional[str] = None
    ) -> None:
        self._touch(banner_id, {"home_score": home_score, "away_score": away_score}, editor_id)
        logger.info("Banner %s score now %d-%d", banner_id, home_score, away_score)

    def _touch(self, banner_id: str, body: dict, editor_id: Optional[str]) -> None:
        body.update(last_updated=self.clock(), updated_by=editor_id or DEFAULT_EDITOR)
        self.store.update(COLLECTION, banner_id, body)
