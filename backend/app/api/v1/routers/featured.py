# backend/app/api/v1/routers/featured.py
"""
Curated single-item endpoints.

Endpoints:
    GET /featured-story - The story linked from the latest featured-story entry
    GET /story-champion/latest - The latest story champion with its author and story
"""

from fastapi import APIRouter

from ....database.models import ContentType, Taxonomy
from ....models.content_models import StoryChampion, StorySummary
from ....services import projection_service as projection
from ....services.content_service import content_service
from ....services.database_service import database_service
from ..loaders import found, item_terms, related_item

router = APIRouter(tags=["Featured"])


@router.get("/featured-story", response_model=StorySummary)
async def get_featured_story():
    async with database_service.get_session() as session:
        featured = found(
            await content_service.latest(session, ContentType.FEATURED_STORY),
            "no_featured_story",
            "No featured story found",
        )
        story = found(
            await related_item(session, featured, "story"),
            "no_story",
            "No story linked to the featured story",
        )
        author = await related_item(session, story, "author")
        categories = await item_terms(session, story, Taxonomy.CATEGORIES)
        return projection.story_summary(story, author, categories)


@router.get("/story-champion/latest", response_model=StoryChampion)
async def get_latest_story_champion():
    async with database_service.get_session() as session:
        champion = found(
            await content_service.latest(session, ContentType.STORY_CHAMPION),
            "no_story_champion",
            "No story champion found",
        )
        author = await related_item(session, champion, "author")
        story = await related_item(session, champion, "story")
        return projection.story_champion(champion, author, story)
