# backend/app/api/v1/routers/authors.py
"""
Author and author-archive endpoints.

Endpoints:
    GET /authors - Paginated author list
    GET /authors/{slug} - Author profile
    GET /authors-archive - Paginated archive list
    GET /authors-archive/{slug} - Archived author profile
"""

from fastapi import APIRouter, Depends

from ....database.models import ContentType
from ....dependencies import pagination_params
from ....models.content_models import (
    AuthorArchiveDetail,
    AuthorArchiveSummary,
    AuthorDetail,
    AuthorSummary,
    Page,
)
from ....services import projection_service as projection
from ....services.content_service import content_service
from ....services.database_service import database_service
from ....utils.pagination import Pagination
from ..loaders import get_or_404

router = APIRouter(tags=["Authors"])


@router.get("/authors", response_model=Page[AuthorSummary])
async def list_authors(pagination: Pagination = Depends(pagination_params())):
    async with database_service.get_session() as session:
        items, total = await content_service.list_items(session, ContentType.AUTHORS, pagination)
        return Page[AuthorSummary](
            data=[projection.author_summary(item) for item in items],
            meta=pagination.meta(total),
        )


@router.get("/authors/{slug}", response_model=AuthorDetail)
async def get_author(slug: str):
    async with database_service.get_session() as session:
        author = await get_or_404(
            session, ContentType.AUTHORS, slug, "no_author", "No author found with the provided slug"
        )
        return projection.author_detail(author)


@router.get("/authors-archive", response_model=Page[AuthorArchiveSummary])
async def list_authors_archive(pagination: Pagination = Depends(pagination_params())):
    async with database_service.get_session() as session:
        items, total = await content_service.list_items(session, ContentType.AUTHORS_ARCHIVE, pagination)
        return Page[AuthorArchiveSummary](
            data=[projection.author_archive_summary(item) for item in items],
            meta=pagination.meta(total),
        )


@router.get("/authors-archive/{slug}", response_model=AuthorArchiveDetail)
async def get_author_archive(slug: str):
    async with database_service.get_session() as session:
        item = await get_or_404(
            session,
            ContentType.AUTHORS_ARCHIVE,
            slug,
            "no_author",
            "No author archive found with the provided slug",
        )
        return projection.author_archive_detail(item)
