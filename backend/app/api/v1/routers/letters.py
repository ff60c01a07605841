# backend/app/api/v1/routers/letters.py
"""
Letter endpoints.

Endpoints:
    GET /letters - Paginated letter list
        type: ``all`` (default), ``archive`` or ``non-archive``
        letter_type: comma-separated letter_type slugs (any of)
    GET /letters/{slug} - Letter detail with its scanned pages
"""

import enum
from typing import List, Tuple

from fastapi import APIRouter, Depends, Query

from ....database.models import ContentType, Taxonomy
from ....dependencies import pagination_params, slug_list
from ....models.content_models import LetterDetail, LetterSummary, Page
from ....services import projection_service as projection
from ....services.content_service import content_service
from ....services.database_service import database_service
from ....utils.pagination import Pagination
from ..loaders import get_or_404

router = APIRouter(prefix="/letters", tags=["Letters"])

ARCHIVE_SLUG = "archive"


class LetterFilter(str, enum.Enum):
    ALL = "all"
    ARCHIVE = "archive"
    NON_ARCHIVE = "non-archive"


def letter_term_filters(letter_filter: str, letter_types: List[str]) -> Tuple[list, list]:
    """
    Translate the ``type`` and ``letter_type`` parameters into term filters.

    Unknown ``type`` values behave like ``all``.

    Returns:
        Tuple of (required term filters, excluded term filters)
    """
    terms, exclude = [], []
    if letter_filter == LetterFilter.ARCHIVE.value:
        terms.append((Taxonomy.LETTER_TYPE, [ARCHIVE_SLUG]))
    elif letter_filter == LetterFilter.NON_ARCHIVE.value:
        exclude.append((Taxonomy.LETTER_TYPE, [ARCHIVE_SLUG]))
    if letter_types:
        terms.append((Taxonomy.LETTER_TYPE, letter_types))
    return terms, exclude


@router.get("", response_model=Page[LetterSummary])
async def list_letters(
    pagination: Pagination = Depends(pagination_params()),
    type: str = Query(LetterFilter.ALL.value, description="all, archive or non-archive"),
    letter_type: List[str] = Depends(slug_list("letter_type", "Comma-separated letter_type slugs")),
):
    terms, exclude = letter_term_filters(type, letter_type)
    async with database_service.get_session() as session:
        items, total = await content_service.list_items(
            session, ContentType.LETTERS, pagination, terms=terms, exclude_terms=exclude
        )
        return Page[LetterSummary](
            data=[projection.letter_summary(item) for item in items],
            meta=pagination.meta(total),
        )


@router.get("/{slug}", response_model=LetterDetail)
async def get_letter(slug: str):
    async with database_service.get_session() as session:
        letter = await get_or_404(
            session, ContentType.LETTERS, slug, "no_letter", "No letter found with the provided slug"
        )
        return projection.letter_detail(letter)
