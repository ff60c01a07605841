# backend/app/api/v1/routers/articles.py
"""
Article endpoints.

Endpoints:
    GET /articles - Paginated article list
    GET /articles/similar/{slug} - Article list without the given article
    GET /articles/{slug} - Article detail with the author's profile
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

router = APIRouter(prefix="/articles", tags=["Articles"])

NOT_FOUND = ("no_article", "No article found with the provided slug")


async def _article_page(session, pagination: Pagination, exclude_id: Optional[int] = None) -> Page[ArticleSummary]:
    items, total = await content_service.list_items(
        session, ContentType.ARTICLES, pagination, exclude_id=exclude_id
    )
    authors, categories = await authors_and_terms(session, items)
    return Page[ArticleSummary](
        data=[projection.article_summary(i, authors.get(i.id), categories.get(i.id)) for i in items],
        meta=pagination.meta(total),
    )


@router.get("", response_model=Page[ArticleSummary])
async def list_articles(pagination: Pagination = Depends(pagination_params())):
    """List articles, newest first."""
    async with database_service.get_session() as session:
        return await _article_page(session, pagination)


@router.get("/similar/{slug}", response_model=Page[ArticleSummary])
async def list_similar_articles(slug: str, pagination: Pagination = Depends(pagination_params())):
    """List articles other than the one identified by ``slug``."""
    async with database_service.get_session() as session:
        article = await get_or_404(session, ContentType.ARTICLES, slug, *NOT_FOUND)
        return await _article_page(session, pagination, exclude_id=article.id)


@router.get("/{slug}", response_model=ArticleDetail)
async def get_article(slug: str):
    """Get a single article."""
    async with database_service.get_session() as session:
        article = await get_or_404(session, ContentType.ARTICLES, slug, *NOT_FOUND)
        author = await related_item(session, article, "author")
        categories = await item_terms(session, article, Taxonomy.CATEGORIES)
        return projection.article_detail(article, author, categories)
