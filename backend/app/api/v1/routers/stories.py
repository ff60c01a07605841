# backend/app/api/v1/routers/stories.py
"""
Story endpoints.

Endpoints:
    GET /stories - Paginated story list, optionally filtered by category/story_type slugs
    GET /stories/similar/{slug} - Story list without the given story
    GET /stories/collection/{slug} - Stories belonging to a collection
    GET /stories/{slug} - Story detail with its episodes in order
"""

from typing import Dict, List, Optional

from fastapi import APIRouter, Depends

from ....core.errors import NotFoundError
from ....database.models import ContentType, Taxonomy
from ....dependencies import pagination_params, slug_list
from ....models.content_models import Page, StoryDetail, StorySummary
from ....services import projection_service as projection
from ....services.content_service import content_service
from ....services.database_service import database_service
from ....utils.pagination import Pagination
from ..loaders import authors_and_terms, get_or_404, item_terms, related_item

router = APIRouter(prefix="/stories", tags=["Stories"])

NOT_FOUND = ("no_story", "No story found with the provided slug")


async def _story_page(
    session,
    pagination: Pagination,
    exclude_id: Optional[int] = None,
    terms: Optional[Dict[Taxonomy, List[str]]] = None,
) -> Page[StorySummary]:
    items, total = await content_service.list_items(
        session, ContentType.STORIES, pagination, exclude_id=exclude_id, terms=terms
    )
    authors, categories = await authors_and_terms(session, items)
    return Page[StorySummary](
        data=[projection.story_summary(i, authors.get(i.id), categories.get(i.id)) for i in items],
        meta=pagination.meta(total),
    )


@router.get("", response_model=Page[StorySummary])
async def list_stories(
    pagination: Pagination = Depends(pagination_params()),
    category: List[str] = Depends(slug_list("category", "Comma-separated category slugs")),
    story_type: List[str] = Depends(slug_list("story_type", "Comma-separated story_type slugs")),
):
    async with database_service.get_session() as session:
        return await _story_page(
            session,
            pagination,
            terms={Taxonomy.CATEGORIES: category, Taxonomy.STORY_TYPE: story_type},
        )


@router.get("/similar/{slug}", response_model=Page[StorySummary])
async def list_similar_stories(slug: str, pagination: Pagination = Depends(pagination_params())):
    async with database_service.get_session() as session:
        story = await get_or_404(session, ContentType.STORIES, slug, *NOT_FOUND)
        return await _story_page(session, pagination, exclude_id=story.id)


@router.get("/collection/{slug}", response_model=Page[StorySummary])
async def list_collection_stories(slug: str, pagination: Pagination = Depends(pagination_params())):
    """Stories tagged with the ``collection`` term ``slug``."""
    async with database_service.get_session() as session:
        term = await content_service.get_term(session, Taxonomy.COLLECTION, slug)
        if term is None:
            raise NotFoundError("no_collection", "No collection found with the provided slug")
        return await _story_page(session, pagination, terms={Taxonomy.COLLECTION: [term.slug]})


@router.get("/{slug}", response_model=StoryDetail)
async def get_story(slug: str):
    async with database_service.get_session() as session:
        story = await get_or_404(session, ContentType.STORIES, slug, *NOT_FOUND)
        author = await related_item(session, story, "author")
        categories = await item_terms(session, story, Taxonomy.CATEGORIES)
        story_types = await item_terms(session, story, Taxonomy.STORY_TYPE)
        collection = await item_terms(session, story, Taxonomy.COLLECTION)
        episodes = await content_service.episodes_of(session, story.id)
        return projection.story_detail(story, author, categories, story_types, collection, episodes)
