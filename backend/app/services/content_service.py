"""
Content Service for read access to the content repository.

Provides every query the endpoints need: lookup by slug, paginated and
term-filtered listings, taxonomy terms, relation resolution, episode ordering
and keyword search. Callers receive ORM objects; shaping them into responses
is the job of ``projection_service``.

Usage:
    from app.services.content_service import content_service, Direction

    # Single item by slug
    article = await content_service.get_by_slug(session, ContentType.ARTICLES, "my-slug")

    # Paginated listing, newest first, restricted to two categories
    items, total = await content_service.list_items(
        session,
        ContentType.STORIES,
        pagination,
        terms={"categories": ["drama", "history"]},
    )

    # Previous episode of the same story
    slug = await content_service.find_adjacent(session, story.id, 3, Direction.PREVIOUS)
"""

import enum
import logging
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..database.models import ContentItem, ContentType, Taxonomy, Term, content_item_terms
from ..utils.pagination import Pagination

logger = logging.getLogger("zaryab.content_service")

TypeName = Union[ContentType, str]
TaxonomyName = Union[Taxonomy, str]
TermFilter = Union[
    Mapping[TaxonomyName, Sequence[str]],
    Sequence[Tuple[TaxonomyName, Sequence[str]]],
]


class Direction(str, enum.Enum):
    """Direction of an adjacency lookup."""

    PREVIOUS = "previous"
    NEXT = "next"


def _name(value: Union[enum.Enum, str]) -> str:
    return value.value if isinstance(value, enum.Enum) else value


class ContentService:
    """
    Service for querying content items and taxonomy terms.

    Default ordering for listings is newest first (``published_at`` desc,
    then ``id`` desc so equal timestamps stay stable across pages).
    """

    # Custom field holding an episode's parent story and its position in it
    STORY_FIELD = "story"
    SEQUENCE_FIELD = "episode_number"

    # =========================================================================
    # SINGLE ITEMS
    # =========================================================================

    async def get_by_slug(
        self,
        session: AsyncSession,
        content_type: TypeName,
        slug: str,
    ) -> Optional[ContentItem]:
        """
        Get an item of the given type by slug.

        Returns:
            ContentItem instance or None
        """
        result = await session.execute(
            select(ContentItem)
            .where(ContentItem.type == _name(content_type))
            .where(ContentItem.slug == slug)
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def get_by_id(self, session: AsyncSession, item_id: Optional[int]) -> Optional[ContentItem]:
        if item_id is None:
            return None
        result = await session.execute(select(ContentItem).where(ContentItem.id == item_id))
        return result.scalar_one_or_none()

    async def get_many(self, session: AsyncSession, item_ids: Iterable[int]) -> Dict[int, ContentItem]:
        """Fetch several items at once, keyed by id. Unknown ids are skipped."""
        ids = {i for i in item_ids if i is not None}
        if not ids:
            return {}
        result = await session.execute(select(ContentItem).where(ContentItem.id.in_(ids)))
        return {item.id: item for item in result.scalars().all()}

    async def latest(self, session: AsyncSession, content_type: TypeName) -> Optional[ContentItem]:
        """Most recently published item of a type."""
        result = await session.execute(
            select(ContentItem)
            .where(ContentItem.type == _name(content_type))
            .order_by(ContentItem.published_at.desc(), ContentItem.id.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    # =========================================================================
    # LISTINGS
    # =========================================================================

    async def list_items(
        self,
        session: AsyncSession,
        content_type: TypeName,
        pagination: Pagination,
        exclude_id: Optional[int] = None,
        terms: Optional[TermFilter] = None,
        exclude_terms: Optional[TermFilter] = None,
    ) -> Tuple[List[ContentItem], int]:
        """
        List one page of items of a type.

        Args:
            session: Database session
            content_type: Content type to list
            pagination: Page and page size
            exclude_id: Item to leave out ("similar" listings)
            terms: Per taxonomy, slugs of which the item must carry at least one;
                a sequence of pairs may name the same taxonomy more than once
            exclude_terms: Per taxonomy, slugs the item must not carry

        Returns:
            Tuple of (items on the requested page, total matches ignoring pagination)
        """
        conditions = [ContentItem.type == _name(content_type)]
        if exclude_id is not None:
            conditions.append(ContentItem.id != exclude_id)
        for taxonomy, slugs in _term_pairs(terms):
            if slugs:
                conditions.append(ContentItem.id.in_(self._items_with_terms(taxonomy, slugs)))
        for taxonomy, slugs in _term_pairs(exclude_terms):
            if slugs:
                conditions.append(ContentItem.id.not_in(self._items_with_terms(taxonomy, slugs)))

        count_result = await session.execute(select(func.count(ContentItem.id)).where(*conditions))
        total = count_result.scalar_one()

        result = await session.execute(
            select(ContentItem)
            .where(*conditions)
            .order_by(ContentItem.published_at.desc(), ContentItem.id.desc())
            .limit(pagination.per_page)
            .offset(pagination.offset)
        )
        items = list(result.scalars().all())
        logger.debug(
            f"Listed {len(items)}/{total} {_name(content_type)} "
            f"(page={pagination.page}, per_page={pagination.per_page})"
        )
        return items, total

    def _items_with_terms(self, taxonomy: TaxonomyName, slugs: Sequence[str]):
        """Subquery of item ids carrying any of ``slugs`` in ``taxonomy``."""
        return (
            select(content_item_terms.c.item_id)
            .join(Term, Term.id == content_item_terms.c.term_id)
            .where(Term.taxonomy == _name(taxonomy))
            .where(Term.slug.in_(list(slugs)))
        )

    async def search(
        self,
        session: AsyncSession,
        content_type: TypeName,
        keyword: Optional[str] = None,
        category_slugs: Optional[Sequence[str]] = None,
    ) -> Tuple[List[ContentItem], int]:
        """
        Find every item of a type matching a phrase and/or categories.

        The keyword is matched as a whole phrase, case-insensitively, against
        title, excerpt and content. An empty keyword or category list disables
        that filter. Results are not paginated.
        """
        conditions = [ContentItem.type == _name(content_type)]
        if keyword:
            pattern = f"%{_escape_like(keyword)}%"
            conditions.append(
                or_(
                    ContentItem.title.ilike(pattern, escape="\\"),
                    ContentItem.excerpt.ilike(pattern, escape="\\"),
                    ContentItem.content.ilike(pattern, escape="\\"),
                )
            )
        if category_slugs:
            conditions.append(
                ContentItem.id.in_(self._items_with_terms(Taxonomy.CATEGORIES, category_slugs))
            )

        result = await session.execute(
            select(ContentItem)
            .where(*conditions)
            .order_by(ContentItem.published_at.desc(), ContentItem.id.desc())
        )
        items = list(result.scalars().all())
        return items, len(items)

    # =========================================================================
    # TAXONOMIES
    # =========================================================================

    async def terms_for(
        self,
        session: AsyncSession,
        item_ids: Iterable[int],
        taxonomy: TaxonomyName,
    ) -> Dict[int, List[Term]]:
        """
        Terms of one taxonomy attached to each of the given items.

        Every requested id is present in the result (with an empty list when it
        has no terms). Terms are ordered by name.
        """
        ids = [i for i in item_ids if i is not None]
        grouped: Dict[int, List[Term]] = {i: [] for i in ids}
        if not ids:
            return grouped

        result = await session.execute(
            select(content_item_terms.c.item_id, Term)
            .join(Term, Term.id == content_item_terms.c.term_id)
            .where(content_item_terms.c.item_id.in_(ids))
            .where(Term.taxonomy == _name(taxonomy))
            .order_by(Term.name, Term.id)
        )
        for item_id, term in result.all():
            grouped[item_id].append(term)
        return grouped

    async def list_terms(self, session: AsyncSession, taxonomy: TaxonomyName) -> List[Tuple[Term, int]]:
        """All terms of a taxonomy with the number of items carrying each, empty terms included."""
        result = await session.execute(
            select(Term, func.count(content_item_terms.c.item_id))
            .outerjoin(content_item_terms, content_item_terms.c.term_id == Term.id)
            .where(Term.taxonomy == _name(taxonomy))
            .group_by(Term.id)
            .order_by(Term.name, Term.id)
        )
        return [(term, count) for term, count in result.all()]

    async def get_term(self, session: AsyncSession, taxonomy: TaxonomyName, slug: str) -> Optional[Term]:
        result = await session.execute(
            select(Term).where(Term.taxonomy == _name(taxonomy)).where(Term.slug == slug).limit(1)
        )
        return result.scalar_one_or_none()

    # =========================================================================
    # RELATIONS
    # =========================================================================

    async def related(
        self,
        session: AsyncSession,
        items: Sequence[ContentItem],
        field: str,
    ) -> Dict[int, ContentItem]:
        """
        Resolve a relation field for many items with a single query.

        Returns:
            Mapping of source item id to the related item; items whose relation
            is unset or dangling are absent.
        """
        targets = {item.id: item.relation(field) for item in items}
        found = await self.get_many(session, targets.values())
        return {source: found[target] for source, target in targets.items() if target in found}

    # =========================================================================
    # EPISODES
    # =========================================================================

    def _sequence(self):
        return ContentItem.fields[self.SEQUENCE_FIELD].as_integer()

    def _episodes_of_condition(self, story_id: int):
        return (
            ContentItem.type == ContentType.EPISODES.value,
            ContentItem.fields[self.STORY_FIELD].as_integer() == story_id,
        )

    async def episodes_of(self, session: AsyncSession, story_id: int) -> List[ContentItem]:
        """Episodes of a story in sequence order."""
        result = await session.execute(
            select(ContentItem)
            .where(*self._episodes_of_condition(story_id))
            .order_by(self._sequence().asc(), ContentItem.id.asc())
        )
        return list(result.scalars().all())

    async def find_adjacent(
        self,
        session: AsyncSession,
        parent_id: Optional[int],
        current_seq: int,
        direction: Direction,
    ) -> Optional[str]:
        """
        Slug of the episode right before or after ``current_seq`` in a story.

        Episodes of the story are filtered to a lower (previous) or higher
        (next) sequence number and ordered so the nearest one comes first.
        Equal sequence numbers are broken by ascending id.

        Returns:
            The adjacent episode's slug, or None at either end of the story
        """
        if parent_id is None:
            return None

        sequence = self._sequence()
        query = select(ContentItem.slug).where(*self._episodes_of_condition(parent_id))
        if Direction(direction) is Direction.PREVIOUS:
            query = query.where(sequence < current_seq).order_by(sequence.desc(), ContentItem.id.asc())
        else:
            query = query.where(sequence > current_seq).order_by(sequence.asc(), ContentItem.id.asc())

        result = await session.execute(query.limit(1))
        return result.scalar_one_or_none()


def _term_pairs(filters: Optional[TermFilter]) -> List[Tuple[TaxonomyName, Sequence[str]]]:
    if not filters:
        return []
    if isinstance(filters, Mapping):
        return list(filters.items())
    return list(filters)


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


# Global content service instance
content_service = ContentService()
