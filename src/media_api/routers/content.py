"""Public content API endpoints."""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from auth.models import AuthSession
from content.models import ContentType
from media_api.dependencies import ServicesDep, require_session
from media_api.models.base import ItemList
from media_api.models.content import RESPONSE_MODELS, LikeResponse

CONTENT_PATHS = {
    ContentType.ARTICLE: "articles",
    ContentType.VIDEO: "videos",
    ContentType.RESEARCH: "research",
    ContentType.LEGAL: "legal",
}


def build_router(content_type: ContentType) -> APIRouter:
    """Public list/detail/like routes for one content type."""
    path = CONTENT_PATHS[content_type]
    response_model = RESPONSE_MODELS[content_type]
    router = APIRouter(prefix=f"/api/{path}", tags=[path])

    @router.get("", response_model=ItemList[response_model])
    def list_published(
        services: ServicesDep,
        category: Annotated[Optional[str], Query(description="Category (department for research)")] = None,
        section: Annotated[Optional[str], Query(description="Article section")] = None,
        featured: Annotated[bool, Query(description="Only featured items")] = False,
        limit: Annotated[int, Query(ge=1, le=100, description="Max results")] = 10,
    ):
        """Published items, newest first."""
        service = services.content[content_type]
        kwargs = {"category": category, "featured_only": featured, "limit": limit}
        if content_type is ContentType.ARTICLE:
            kwargs["section"] = section
        items = service.list_published(**kwargs)
        return ItemList[response_model](items=items, count=len(items))

    @router.get("/{item_id}", response_model=response_model)
    def get_item(item_id: str, services: ServicesDep):
        service = services.content[content_type]
        record = service.get(item_id)
        if record is None:
            raise HTTPException(status_code=404, detail=f"{service.label} not found")
        return record

    @router.post("/{item_id}/like", response_model=LikeResponse)
    def toggle_like(
        item_id: str,
        services: ServicesDep,
        session: Annotated[AuthSession, Depends(require_session)],
    ):
        service = services.content[content_type]
        liked = service.toggle_like(item_id, session.user.uid)
        if liked is None:
            raise HTTPException(status_code=404, detail=f"{service.label} not found")
        return LikeResponse(liked=liked, likes=service.get(item_id).likes)

    return router


routers = [build_router(content_type) for content_type in CONTENT_PATHS]
