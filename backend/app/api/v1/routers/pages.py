# backend/app/api/v1/routers/pages.py
"""
Static page endpoints.

Endpoints:
    GET /about-us - About Us page with its questions & answers
"""

from fastapi import APIRouter

from ....config import settings
from ....database.models import ContentType
from ....models.content_models import AboutPage
from ....services import projection_service as projection
from ....services.database_service import database_service
from ..loaders import get_or_404

router = APIRouter(tags=["Pages"])


@router.get("/about-us", response_model=AboutPage)
async def get_about_us():
    async with database_service.get_session() as session:
        page = await get_or_404(
            session, ContentType.PAGE, settings.about_page_slug, "no_page", "No About Us page found"
        )
        return projection.about_page(page)
