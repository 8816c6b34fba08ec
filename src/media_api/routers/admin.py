"""Admin endpoints. Every route requires an admin session."""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from content.analytics import METRICS
from content.banner_sync import GameNotFoundError
from content.comments import CommentNotFoundError, InvalidStatusTransitionError
from content.models import CommentStatus, ContentType
from content.schemas import NewsTickerInput, ScoreUpdate, SportBannerInput, UserProfileInput
from feeds.espn import LEAGUES
from media_api.dependencies import AdminDep, ServicesDep, require_admin
from media_api.models.base import ItemList, SuccessResponse
from media_api.models.community import (
    CommentResponse,
    CommentStatusUpdate,
    RoleUpdate,
    UserProfileResponse,
    UserRoleResponse,
)
from media_api.models.content import INPUT_MODELS, RESPONSE_MODELS
from media_api.models.site import (
    AnalyticsSummary,
    BannerSyncResult,
    BannerToggle,
    ContentAnalyticsResponse,
    NewsTickerResponse,
    SportBannerResponse,
    TickerStatusUpdate,
)
from media_api.routers.content import CONTENT_PATHS

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(require_admin)])


def _content_routes(content_type: ContentType) -> APIRouter:
    """CRUD for one content type, any status."""
    path = CONTENT_PATHS[content_type]
    response_model = RESPONSE_MODELS[content_type]
    input_model = INPUT_MODELS[content_type]
    content_router = APIRouter(prefix=f"/{path}")

    @content_router.get("", response_model=ItemList[response_model])
    def list_items(services: ServicesDep):
        items = services.content[content_type].list_all()
        return ItemList[response_model](items=items, count=len(items))

    @content_router.get("/{item_id}", response_model=response_model)
    def get_item(item_id: str, services: ServicesDep):
        service = services.content[content_type]
        record = service.get(item_id)
        if record is None:
            raise HTTPException(status_code=404, detail=f"{service.label} not found")
        return record

    @content_router.post("", response_model=SuccessResponse, status_code=201)
    def create_item(body: input_model, services: ServicesDep, session: AdminDep):
        data = body.model_dump()
        data["author_id"] = data.get("author_id") or session.user.uid
        return SuccessResponse(id=services.content[content_type].create(data))

    @content_router.put("/{item_id}", response_model=SuccessResponse)
    def update_item(item_id: str, body: input_model, services: ServicesDep):
        services.content[content_type].update(item_id, body.model_dump(exclude_unset=True))
        return SuccessResponse(id=item_id)

    @content_router.delete("/{item_id}", response_model=SuccessResponse)
    def delete_item(item_id: str, services: ServicesDep):
        services.content[content_type].delete(item_id)
        return SuccessResponse(id=item_id)

    return content_router


for _content_type in CONTENT_PATHS:
    router.include_router(_content_routes(_content_type))


# Comment moderation


@router.get("/comments", response_model=ItemList[CommentResponse])
def list_comments(
    services: ServicesDep,
    status: Annotated[Optional[CommentStatus], Query(description="Only comments with this status")] = None,
):
    comments = services.comments.list_all(status)
    return ItemList[CommentResponse](items=comments, count=len(comments))


@router.patch("/comments/{comment_id}", response_model=CommentResponse)
def moderate_comment(comment_id: str, body: CommentStatusUpdate, services: ServicesDep):
    """Approve or reject a pending comment."""
    try:
        return services.comments.update_status(comment_id, body.status)
    except CommentNotFoundError:
        raise HTTPException(status_code=404, detail="Comment not found")
    except InvalidStatusTransitionError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.delete("/comments/{comment_id}", response_model=SuccessResponse)
def delete_comment(comment_id: str, services: ServicesDep):
    services.comments.delete(comment_id)
    return SuccessResponse(id=comment_id)


# Users


@router.get("/users", response_model=ItemList[UserProfileResponse])
def list_users(services: ServicesDep):
    users = services.users.list_users()
    return ItemList[UserProfileResponse](items=users, count=len(users))


@router.get("/users/{user_id}", response_model=UserProfileResponse)
def get_user(user_id: str, services: ServicesDep):
    user = services.users.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.post("/users", response_model=SuccessResponse, status_code=201)
def create_user(body: UserProfileInput, services: ServicesDep):
    return SuccessResponse(id=services.users.create_user(body.model_dump()))


@router.put("/users/{user_id}", response_model=SuccessResponse)
def update_user(user_id: str, body: UserProfileInput, services: ServicesDep):
    services.users.update_user(user_id, body.model_dump(exclude_unset=True))
    return SuccessResponse(id=user_id)


@router.delete("/users/{user_id}", response_model=SuccessResponse)
def delete_user(user_id: str, services: ServicesDep):
    services.users.delete_user(user_id)
    return SuccessResponse(id=user_id)


@router.get("/users/{user_id}/role", response_model=UserRoleResponse)
def get_role(user_id: str, services: ServicesDep):
    return services.users.get_role(user_id)


@router.put("/users/{user_id}/role", response_model=UserRoleResponse)
def set_role(user_id: str, body: RoleUpdate, services: ServicesDep, session: AdminDep):
    logger.info("%s changing role of %s", session.user.uid, user_id)
    return services.users.set_role(user_id, body.role, is_admin=body.is_admin, department=body.department)


# News tickers


@router.get("/news-tickers", response_model=ItemList[NewsTickerResponse])
def list_tickers(services: ServicesDep):
    tickers = services.tickers.get_all_tickers()
    return ItemList[NewsTickerResponse](items=tickers, count=len(tickers))


@router.post("/news-tickers", response_model=SuccessResponse, status_code=201)
def create_ticker(body: NewsTickerInput, services: ServicesDep):
    return SuccessResponse(id=services.tickers.create_ticker(body.model_dump()))


@router.put("/news-tickers/{ticker_id}", response_model=SuccessResponse)
def update_ticker(ticker_id: str, body: NewsTickerInput, services: ServicesDep):
    services.tickers.update_ticker(ticker_id, body.model_dump(exclude_unset=True))
    return SuccessResponse(id=ticker_id)


@router.patch("/news-tickers/{ticker_id}", response_model=SuccessResponse)
def set_ticker_status(ticker_id: str, body: TickerStatusUpdate, services: ServicesDep):
    services.tickers.toggle_ticker_status(ticker_id, body.is_active)
    return SuccessResponse(id=ticker_id)


@router.delete("/news-tickers/{ticker_id}", response_model=SuccessResponse)
def delete_ticker(ticker_id: str, services: ServicesDep):
    services.tickers.delete_ticker(ticker_id)
    return SuccessResponse(id=ticker_id)


# Sport banners


@router.get("/sport-banners", response_model=ItemList[SportBannerResponse])
def list_banners(services: ServicesDep):
    banners = services.sport_banners.get_all_banners()
    return ItemList[SportBannerResponse](items=banners, count=len(banners))


@router.post("/sport-banners", response_model=SuccessResponse, status_code=201)
def create_banner(body: SportBannerInput, services: ServicesDep, session: AdminDep):
    return SuccessResponse(id=services.sport_banners.create_banner(body.model_dump(), editor_id=session.user.uid))


@router.put("/sport-banners/{banner_id}", response_model=SuccessResponse)
def update_banner(banner_id: str, body: SportBannerInput, services: ServicesDep, session: AdminDep):
    services.sport_banners.update_banner(banner_id, body.model_dump(exclude_unset=True), editor_id=session.user.uid)
    return SuccessResponse(id=banner_id)


@router.patch("/sport-banners/{banner_id}/enabled", response_model=SuccessResponse)
def toggle_banner(banner_id: str, body: BannerToggle, services: ServicesDep, session: AdminDep):
    services.sport_banners.toggle_banner(banner_id, body.is_enabled, editor_id=session.user.uid)
    return SuccessResponse(id=banner_id)


@router.patch("/sport-banners/{banner_id}/score", response_model=SuccessResponse)
def update_score(banner_id: str, body: ScoreUpdate, services: ServicesDep, session: AdminDep):
    services.sport_banners.update_score(
        banner_id, body.home_score, body.away_score, editor_id=session.user.uid
    )
    return SuccessResponse(id=banner_id)


@router.delete("/sport-banners/{banner_id}", response_model=SuccessResponse)
def delete_banner(banner_id: str, services: ServicesDep):
    services.sport_banners.delete_banner(banner_id)
    return SuccessResponse(id=banner_id)


def _sync_result(banner_ids: list[str]) -> BannerSyncResult:
    return BannerSyncResult(banner_ids=banner_ids, count=len(banner_ids))


@router.post("/sport-banners/sync", response_model=BannerSyncResult)
def sync_live_games(services: ServicesDep):
    """Write live UCSD games from ESPN into the banners."""
    return _sync_result(services.banner_sync.perform_sync())


@router.post("/sport-banners/sync/upcoming", response_model=BannerSyncResult)
def sync_upcoming_games(services: ServicesDep):
    return _sync_result(services.banner_sync.sync_upcoming_games())


@router.post("/sport-banners/sync/{game_id}", response_model=BannerSyncResult)
def sync_game(
    game_id: str,
    services: ServicesDep,
    sport: Annotated[str, Query(description=f"One of: {', '.join(LEAGUES)}")],
):
    if sport not in LEAGUES:
        raise HTTPException(status_code=400, detail=f"Unsupported sport: {sport}")
    try:
        banner_id = services.banner_sync.sync_game(game_id, sport)
    except GameNotFoundError:
        raise HTTPException(status_code=404, detail="Game not found")
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _sync_result([banner_id])


@router.post("/sport-banners/cleanup", response_model=BannerSyncResult)
def cleanup_banners(services: ServicesDep):
    """Delete banners for games that ended more than a day ago."""
    return _sync_result(services.banner_sync.cleanup_old_banners())


# Analytics


@router.get("/analytics/summary", response_model=AnalyticsSummary)
def analytics_summary(services: ServicesDep):
    return services.analytics.get_summary()


@router.get("/analytics/top", response_model=list[ContentAnalyticsResponse])
def top_content(
    services: ServicesDep,
    content_type: Annotated[ContentType, Query(description="Content type to rank")],
    metric: Annotated[str, Query(description=f"One of: {', '.join(METRICS)}")] = "clicks",
    limit: Annotated[int, Query(ge=1, le=100, description="Max results")] = 10,
):
    try:
        return services.analytics.get_top_content(content_type, metric=metric, limit=limit)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
