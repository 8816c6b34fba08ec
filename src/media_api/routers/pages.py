"""Page data: what each public section page renders."""

from concurrent.futures import ThreadPoolExecutor
from typing import Annotated, Literal

from fastapi import APIRouter, Query

from content.models import ContentType
from media_api.dependencies import ServicesDep
from media_api.models.content import PageResponse

router = APIRouter(prefix="/api/pages", tags=["pages"])

PageSection = Literal["home", "campus", "sports", "student-government", "san-diego", "california", "national"]

FEATURED_COUNT = 3


@router.get("/{section}", response_model=PageResponse)
def get_page(
    section: PageSection,
    services: ServicesDep,
    limit: Annotated[int, Query(ge=1, le=50, description="Latest articles to include")] = 10,
):
    """Featured and latest articles for a section, fetched in parallel.

    The home page spans every section.
    """
    articles = services.content[ContentType.ARTICLE]
    filter_section = None if section == "home" else section

    with ThreadPoolExecutor(max_workers=2) as executor:
        featured = executor.submit(
            articles.list_published, featured_only=True, limit=FEATURED_COUNT, section=filter_section
        )
        latest = executor.submit(articles.list_published, limit=limit, section=filter_section)
        return PageResponse(section=section, featured=featured.result(), latest=latest.result())
