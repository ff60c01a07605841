# backend/app/api/v1/routers/search.py
"""
Global search endpoint.

Endpoints:
    GET /global-search - Items of every searchable type matching ``keyword``
        (whole phrase) and/or ``categories`` (comma-separated slugs), grouped
        by type with a count per type
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ....dependencies import slug_list
from ....models.content_models import SearchResults
from ....services.database_service import database_service
from ....services.search_service import search_service

router = APIRouter(tags=["Search"])


@router.get("/global-search", response_model=SearchResults)
async def global_search(
    keyword: Optional[str] = Query(None, description="Phrase to search for"),
    categories: List[str] = Depends(slug_list("categories", "Comma-separated category slugs")),
):
    async with database_service.get_session() as session:
        return await search_service.search(session, keyword=keyword, categories=categories)
