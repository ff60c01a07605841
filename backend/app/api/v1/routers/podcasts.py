# backend/app/api/v1/routers/podcasts.py
"""
Podcast endpoints.

Endpoints:
    GET /podcasts - Paginated podcast list (21 per page by default)
    GET /podcasts/similar/{slug} - Podcast list without the given podcast
    GET /podcasts/{slug} - Podcast detail
"""

from typing import List, Optional

from fastapi import APIRouter, Depends

from ....config import settings
from ....database.models import ContentType, Taxonomy
from ....dependencies import pagination_params, slug_list
from ....models.content_models import Page, PodcastDetail, PodcastSummary
from ....services import projection_service as projection
from ....services.content_service import content_service
from ....services.database_service import database_service
from ....utils.pagination import Pagination
from ..loaders import get_or_404, item_terms

router = APIRouter(prefix="/podcasts", tags=["Podcasts"])

NOT_FOUND = ("no_podcast", "No podcast found with the provided slug")

podcast_pagination = pagination_params(settings.podcasts_per_page)


async def _podcast_page(
    session,
    pagination: Pagination,
    exclude_id: Optional[int] = None,
    podcast_types: Optional[List[str]] = None,
) -> Page[PodcastSummary]:
    items, total = await content_service.list_items(
        session,
        ContentType.PODCAST,
        pagination,
        exclude_id=exclude_id,
        terms={Taxonomy.PODCAST_TYPE: podcast_types or []},
    )
    return Page[PodcastSummary](
        data=[projection.podcast_summary(item) for item in items],
        meta=pagination.meta(total),
    )


@router.get("", response_model=Page[PodcastSummary])
async def list_podcasts(
    pagination: Pagination = Depends(podcast_pagination),
    podcast_type: List[str] = Depends(slug_list("podcast_type", "Comma-separated podcast_type slugs")),
):
    async with database_service.get_session() as session:
        return await _podcast_page(session, pagination, podcast_types=podcast_type)


@router.get("/similar/{slug}", response_model=Page[PodcastSummary])
async def list_similar_podcasts(slug: str, pagination: Pagination = Depends(podcast_pagination)):
    async with database_service.get_session() as session:
        podcast = await get_or_404(session, ContentType.PODCAST, slug, *NOT_FOUND)
        return await _podcast_page(session, pagination, exclude_id=podcast.id)


@router.get("/{slug}", response_model=PodcastDetail)
async def get_podcast(slug: str):
    async with database_service.get_session() as session:
        podcast = await get_or_404(session, ContentType.PODCAST, slug, *NOT_FOUND)
        podcast_types = await item_terms(session, podcast, Taxonomy.PODCAST_TYPE)
        return projection.podcast_detail(podcast, podcast_types)
