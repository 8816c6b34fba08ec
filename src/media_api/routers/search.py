"""Search API endpoints."""

from typing import Annotated, Optional

from fastapi import APIRouter, Query

from content.models import ContentType
from media_api.dependencies import ServicesDep
from media_api.models.search import SearchResponse, SuggestionsResponse

router = APIRouter(prefix="/api/search", tags=["search"])


@router.get("", response_model=SearchResponse)
def search(
    services: ServicesDep,
    q: Annotated[str, Query(min_length=1, max_length=100, description="Search text")],
    content_type: Annotated[Optional[ContentType], Query(alias="type", description="Limit to one content type")] = None,
    limit: Annotated[int, Query(ge=1, le=100, description="Max results")] = 20,
):
    """Case-insensitive search over published content, title matches first."""
    if content_type is None:
        results = services.search.search_all(q, limit=limit)
    else:
        results = services.search.search_by_type(content_type, q, limit=limit)
    return SearchResponse(query=q, results=results, count=len(results))


@router.get("/suggestions", response_model=SuggestionsResponse)
def suggestions(
    services: ServicesDep,
    limit: Annotated[int, Query(ge=1, le=20, description="Max suggestions")] = 5,
):
    return SuggestionsResponse(suggestions=services.search.get_search_suggestions(limit=limit))
