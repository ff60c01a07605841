# backend/app/api/v1/routers/author_reviews.py
"""
Author review endpoints.

Reviews share the article projections.

Endpoints:
    GET /author-reviews - Paginated review list
    GET /author-reviews/similar/{slug} - Review list without the given review
    GET /author-reviews/{slug} - Review detail with the author's profile
"""

from typing import Optional

from fastapi import APIRouter, Depends

from ....database.models import ContentType, Taxonomy
from ....dependencies import pagination_params
from ....models.content_models import ArticleDetail, ArticleSummary, Page
from ....services import projection_service as projection
from ....services.content_service import content_service
from ....services.database_service import database_service
from ....utils.pagination import Pagination
from ..loaders import authors_and_terms, get_or_404, item_terms, related_item

router = APIRouter(prefix="/author-reviews", tags=["Author Reviews"])

NOT_FOUND = ("no_review", "No review found with the provided slug")


async def _review_page(session, pagination: Pagination, exclude_id: Optional[int] = None) -> Page[ArticleSummary]:
    items, total = await content_service.list_items(
        session, ContentType.REVIEW, pagination, exclude_id=exclude_id
    )
    authors, categories = await authors_and_terms(session, items)
    return Page[ArticleSummary](
        data=[projection.article_summary(i, authors.get(i.id), categories.get(i.id)) for i in items],
        meta=pagination.meta(total),
    )


@router.get("", response_model=Page[ArticleSummary])
async def list_author_reviews(pagination: Pagination = Depends(pagination_params())):
    async with database_service.get_session() as session:
        return await _review_page(session, pagination)


@router.get("/similar/{slug}", response_model=Page[ArticleSummary])
async def list_similar_author_reviews(slug: str, pagination: Pagination = Depends(pagination_params())):
    async with database_service.get_session() as session:
        review = await get_or_404(session, ContentType.REVIEW, slug, *NOT_FOUND)
        return await _review_page(session, pagination, exclude_id=review.id)


@router.get("/{slug}", response_model=ArticleDetail)
async def get_author_review(slug: str):
    async with database_service.get_session() as session:
        review = await get_or_404(session, ContentType.REVIEW, slug, *NOT_FOUND)
        author = await related_item(session, review, "author")
        categories = await item_terms(session, review, Taxonomy.CATEGORIES)
        return projection.article_detail(review, author, categories)
