"""
Global search across the configured content types.

Usage:
    from app.services.search_service import search_service

    results = await search_service.search(session, keyword="rain", categories=["poetry"])
    results["poem"].count
"""

import logging
from typing import List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from ..config import settings
from ..models.content_models import SearchGroup, SearchResults
from . import projection_service as projection
from .content_service import content_service

logger = logging.getLogger("zaryab.search_service")


def split_slugs(raw: Optional[str]) -> List[str]:
    """Split a comma-separated slug list, dropping blanks."""
    if not raw:
        return []
    return [slug.strip() for slug in raw.split(",") if slug.strip()]


class SearchService:
    async def search(
        self,
        session: AsyncSession,
        keyword: Optional[str] = None,
        categories: Optional[Sequence[str]] = None,
        content_types: Optional[Sequence[str]] = None,
    ) -> SearchResults:
        """
        Search every content type and group the hits by type.

        Every type is present in the result, with ``count == 0`` when nothing
        matched. With neither keyword nor categories each count is the type's
        total number of items.
        """
        keyword = (keyword or "").strip()
        categories = list(categories or [])
        content_types = list(content_types or settings.search_content_types)

        results: SearchResults = {}
        for content_type in content_types:
            items, total = await content_service.search(session, content_type, keyword, categories)
            results[content_type] = SearchGroup(
                count=total,
                posts=[projection.search_hit(item) for item in items],
            )

        logger.debug(
            f"Global search keyword={keyword!r} categories={categories} "
            f"hits={sum(group.count for group in results.values())}"
        )
        return results


# Global search service instance
search_service = SearchService()
