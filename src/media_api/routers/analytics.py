"""Analytics event endpoints."""

from fastapi import APIRouter, HTTPException

from media_api.dependencies import ServicesDep
from media_api.models.base import SuccessResponse
from media_api.models.site import ClickEvent, LikeEvent, ShareEvent

router = APIRouter(prefix="/api/analytics", tags=["analytics"])


@router.post("/click", response_model=SuccessResponse)
def track_click(event: ClickEvent, services: ServicesDep):
    services.analytics.track_click(**event.model_dump())
    return SuccessResponse()


@router.post("/share", response_model=SuccessResponse)
def track_share(event: ShareEvent, services: ServicesDep):
    try:
        services.analytics.track_share(event.content_id, event.content_type, event.platform)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return SuccessResponse()


@router.post("/like", response_model=SuccessResponse)
def track_like(event: LikeEvent, services: ServicesDep):
    services.analytics.track_like(event.content_id, event.content_type, event.user_id, event.action)
    return SuccessResponse()
