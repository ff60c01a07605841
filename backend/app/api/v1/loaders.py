"""
Helpers shared by the v1 routers.

Routers fetch everything a projection needs up front (related authors, term
lists) in a fixed number of queries per page, then hand it to the pure
projection functions.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from ...core.errors import NotFoundError
from ...database.models import ContentItem, ContentType, Taxonomy, Term
from ...services.content_service import content_service

logger = logging.getLogger("zaryab.api.loaders")


def found(item: Optional[ContentItem], code: str, message: str) -> ContentItem:
    """Return ``item`` or raise the endpoint's not-found error."""
    if item is None:
        logger.info(f"{code}: {message}")
        raise NotFoundError(code, message)
    return item


async def get_or_404(
    session: AsyncSession,
    content_type: ContentType,
    slug: str,
    code: str,
    message: Optional[str] = None,
) -> ContentItem:
    item = await content_service.get_by_slug(session, content_type, slug)
    return found(item, code, message or f"No {content_type.value} found with the provided slug")


async def authors_and_terms(
    session: AsyncSession,
    items: Sequence[ContentItem],
    taxonomy: Taxonomy = Taxonomy.CATEGORIES,
) -> Tuple[Dict[int, ContentItem], Dict[int, List[Term]]]:
    """Related ``author`` items and one taxonomy's terms for a page of items."""
    authors = await content_service.related(session, items, "author")
    terms = await content_service.terms_for(session, [item.id for item in items], taxonomy)
    return authors, terms


async def item_terms(session: AsyncSession, item: Optional[ContentItem], taxonomy: Taxonomy) -> List[Term]:
    """Terms of one taxonomy for a single item (empty for a missing item)."""
    if item is None:
        return []
    terms = await content_service.terms_for(session, [item.id], taxonomy)
    return terms.get(item.id, [])


async def related_item(session: AsyncSession, item: Optional[ContentItem], field: str) -> Optional[ContentItem]:
    """The item referenced by a relation field of ``item``, if it exists."""
    if item is None:
        return None
    return await content_service.get_by_id(session, item.relation(field))
