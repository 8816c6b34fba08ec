"""Comment API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from auth.models import AuthSession
from content.comments import CommentNotFoundError
from content.models import ContentType
from content.schemas import CommentInput
from media_api.dependencies import ServicesDep, require_session
from media_api.models.base import ItemList, SuccessResponse
from media_api.models.community import CommentEditRequest, CommentResponse
from media_api.models.content import LikeResponse

router = APIRouter(prefix="/api/comments", tags=["comments"])


@router.get("", response_model=ItemList[CommentResponse])
def list_comments(
    services: ServicesDep,
    content_id: Annotated[str, Query(min_length=1, description="Content the comments belong to")],
    content_type: Annotated[ContentType, Query(description="Type of that content")],
    limit: Annotated[int, Query(ge=1, le=200, description="Max results")] = 50,
):
    """Approved top-level comments, newest first, with their reply ids."""
    comments = services.comments.list_for_content(content_id, content_type, limit=limit)
    return ItemList[CommentResponse](items=comments, count=len(comments))


@router.post("", response_model=SuccessResponse, status_code=201)
def add_comment(body: CommentInput, services: ServicesDep):
    """Submit a comment; it stays pending until a moderator approves it."""
    try:
        comment_id = services.comments.add_comment(
            content_id=body.content_id,
            content_type=body.content_type,
            author_id=body.author_id,
            author_name=body.author_name,
            content=body.content,
            parent_id=body.parent_id,
        )
    except CommentNotFoundError:
        raise HTTPException(status_code=404, detail="Parent comment not found")
    return SuccessResponse(id=comment_id)


@router.post("/{comment_id}/like", response_model=LikeResponse)
def like_comment(
    comment_id: str,
    services: ServicesDep,
    session: Annotated[AuthSession, Depends(require_session)],
):
    try:
        liked = services.comments.toggle_like(comment_id, session.user.uid)
    except CommentNotFoundError:
        raise HTTPException(status_code=404, detail="Comment not found")
    return LikeResponse(liked=liked, likes=services.comments.get(comment_id).likes)


@router.patch("/{comment_id}", response_model=CommentResponse)
def edit_comment(
    comment_id: str,
    body: CommentEditRequest,
    services: ServicesDep,
    session: Annotated[AuthSession, Depends(require_session)],
):
    """Authors may edit their own comments; the previous text goes to the edit history."""
    comment = services.comments.get(comment_id)
    if comment is None:
        raise HTTPException(status_code=404, detail="Comment not found")
    if comment.author_id != session.user.uid:
        raise HTTPException(status_code=403, detail="Only the author can edit this comment")
    services.comments.edit_comment(comment_id, body.content)
    return services.comments.get(comment_id)
