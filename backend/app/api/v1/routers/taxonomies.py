# backend/app/api/v1/routers/taxonomies.py
"""
Taxonomy term listings.

Endpoints:
    GET /categories - All category terms
    GET /{taxonomy} - All terms of each taxonomy in ``settings.taxonomy_endpoints``

Terms without any content are included; a taxonomy with no terms at all is a 404.
"""

import logging
from typing import List

from fastapi import APIRouter

from ....config import settings
from ....core.errors import NotFoundError
from ....database.models import Taxonomy
from ....models.content_models import TermSummary
from ....services import projection_service as projection
from ....services.content_service import content_service
from ....services.database_service import database_service

router = APIRouter(tags=["Taxonomies"])

logger = logging.getLogger("zaryab.api.taxonomies")


async def _term_list(taxonomy: str, code: str, message: str) -> List[TermSummary]:
    async with database_service.get_session() as session:
        terms = await content_service.list_terms(session, taxonomy)
    if not terms:
        logger.info(f"{code}: {message}")
        raise NotFoundError(code, message)
    return [projection.term_summary(term, count) for term, count in terms]


@router.get("/categories", response_model=List[TermSummary])
async def list_categories():
    return await _term_list(Taxonomy.CATEGORIES.value, "no_categories", "No categories found")


def _register_taxonomy_route(taxonomy: str) -> None:
    async def list_taxonomy_terms():
        return await _term_list(taxonomy, "no_terms", f"No terms found in {taxonomy}")

    list_taxonomy_terms.__name__ = f"list_{taxonomy}_terms"
    router.add_api_route(
        f"/{taxonomy}",
        list_taxonomy_terms,
        methods=["GET"],
        response_model=List[TermSummary],
        summary=f"List {taxonomy} terms",
    )


for _taxonomy in settings.taxonomy_endpoints:
    _register_taxonomy_route(_taxonomy)
