# backend/app/api/v1/routers/poems.py
"""
Poem endpoints.

Endpoints:
    GET /poems - Paginated poem list with a three-line excerpt,
        optionally filtered by poem_type/category slugs
    GET /poems/similar/{slug} - Poem list without the given poem
    GET /poems/{slug} - Poem detail with the author's profile
"""

from typing import Dict, List, Optional

from fastapi import APIRouter, Depends

from ....database.models import ContentType, Taxonomy
from ....dependencies import pagination_params, slug_list
from ....models.content_models import Page, PoemDetail, PoemSummary
from ....services import projection_service as projection
from ....services.content_service import content_service
from ....services.database_service import database_service
from ....utils.pagination import Pagination
from ..loaders import authors_and_terms, get_or_404, item_terms, related_item

router = APIRouter(prefix="/poems", tags=["Poems"])

NOT_FOUND = ("no_poem", "No poem found with the provided slug")


async def _poem_page(
    session,
    pagination: Pagination,
    exclude_id: Optional[int] = None,
    terms: Optional[Dict[Taxonomy, List[str]]] = None,
) -> Page[PoemSummary]:
    items, total = await content_service.list_items(
        session, ContentType.POEM, pagination, exclude_id=exclude_id, terms=terms
    )
    authors, poem_types = await authors_and_terms(session, items, Taxonomy.POEM_TYPE)
    return Page[PoemSummary](
        data=[projection.poem_summary(i, authors.get(i.id), poem_types.get(i.id)) for i in items],
        meta=pagination.meta(total),
    )


@router.get("", response_model=Page[PoemSummary])
async def list_poems(
    pagination: Pagination = Depends(pagination_params()),
    poem_type: List[str] = Depends(slug_list("poem_type", "Comma-separated poem_type slugs")),
    category: List[str] = Depends(slug_list("category", "Comma-separated category slugs")),
):
    async with database_service.get_session() as session:
        return await _poem_page(
            session,
            pagination,
            terms={Taxonomy.POEM_TYPE: poem_type, Taxonomy.CATEGORIES: category},
        )


@router.get("/similar/{slug}", response_model=Page[PoemSummary])
async def list_similar_poems(slug: str, pagination: Pagination = Depends(pagination_params())):
    async with database_service.get_session() as session:
        poem = await get_or_404(session, ContentType.POEM, slug, *NOT_FOUND)
        return await _poem_page(session, pagination, exclude_id=poem.id)


@router.get("/{slug}", response_model=PoemDetail)
async def get_poem(slug: str):
    async with database_service.get_session() as session:
        poem = await get_or_404(session, ContentType.POEM, slug, *NOT_FOUND)
        author = await related_item(session, poem, "author")
        poem_types = await item_terms(session, poem, Taxonomy.POEM_TYPE)
        categories = await item_terms(session, poem, Taxonomy.CATEGORIES)
        return projection.poem_detail(poem, author, poem_types, categories)
