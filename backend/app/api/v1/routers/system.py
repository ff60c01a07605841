# backend/app/api/v1/routers/system.py
from datetime import datetime

from fastapi import APIRouter

from ....config import settings
from ....models.content_models import HealthStatus
from ....services.database_service import database_service

router = APIRouter()


@router.get("/health", response_model=HealthStatus, tags=["System"])
async def health_check():
    """Health check endpoint."""
    database = await database_service.health_check()

    return HealthStatus(
        status="healthy" if database["status"] == "healthy" else "degraded",
        timestamp=datetime.now(),
        version=settings.api_version,
        database=database,
    )
