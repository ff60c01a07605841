# backend/app/api/v1/routers/episodes.py
"""
Episode endpoint.

Endpoints:
    GET /episodes/{slug} - Episode detail with its story's author and collection,
        plus the slugs of the previous and next episodes of the same story
"""

from fastapi import APIRouter

from ....database.models import ContentType, Taxonomy
from ....models.content_models import EpisodeDetail
from ....services import projection_service as projection
from ....services.content_service import Direction, content_service
from ....services.database_service import database_service
from ..loaders import get_or_404, item_terms, related_item

router = APIRouter(prefix="/episodes", tags=["Episodes"])


@router.get("/{slug}", response_model=EpisodeDetail)
async def get_episode(slug: str):
    async with database_service.get_session() as session:
        episode = await get_or_404(
            session, ContentType.EPISODES, slug, "no_episode", "No episode found with the provided slug"
        )
        story = await related_item(session, episode, content_service.STORY_FIELD)
        author = await related_item(session, story, "author")
        categories = await item_terms(session, episode, Taxonomy.CATEGORIES)
        collection = await item_terms(session, story, Taxonomy.COLLECTION)

        previous_episode = next_episode = None
        number = projection.episode_number(episode)
        if story is not None and number is not None:
            previous_episode = await content_service.find_adjacent(session, story.id, number, Direction.PREVIOUS)
            next_episode = await content_service.find_adjacent(session, story.id, number, Direction.NEXT)

        return projection.episode_detail(
            episode,
            story=story,
            author=author,
            categories=categories,
            collection=collection,
            previous_episode=previous_episode,
            next_episode=next_episode,
        )
