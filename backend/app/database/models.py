# backend/app/database/models.py
"""
SQLAlchemy ORM models for the content repository.

Models:
    - ContentItem: Any piece of site content (article, story, episode, page, ...)
    - Term: A term of a named taxonomy (categories, collection, poem_type, ...)
    - Subscriber: A newsletter subscription (the only record this API writes)

Content items carry their custom fields in a single JSON column. Relation
fields (``author``, ``story``) hold the id of another content item and are
read through ``ContentItem.relation()`` so callers never branch on how the
value happens to be stored.
"""

from __future__ import annotations

import enum
from datetime import datetime
from typing import Any, Optional

from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Table,
    Text,
    UniqueConstraint,
)

from ..utils.fields import relation_id
from .base import Base


class ContentType(str, enum.Enum):
    """Content types stored in ``ContentItem.type``."""

    PAGE = "page"
    ARTICLES = "articles"
    AUTHORS = "authors"
    AUTHORS_ARCHIVE = "authors_archive"
    REVIEW = "review"
    BOOK = "book"
    EPISODES = "episodes"
    STORIES = "stories"
    FEATURED_STORY = "featured_story"
    STORY_CHAMPION = "story_champion"
    LETTERS = "letters"
    PODCAST = "podcast"
    POEM = "poem"


class Taxonomy(str, enum.Enum):
    """Taxonomies that terms belong to."""

    CATEGORIES = "categories"
    COLLECTION = "collection"
    STORY_TYPE = "story_type"
    POEM_TYPE = "poem_type"
    LETTER_TYPE = "letter_type"
    REVIEW_TYPE = "review_type"
    PODCAST_TYPE = "podcast_type"
    ARTICLE_TYPE = "article_type"


# Item <-> term links; queried through ContentService, never loaded as ORM collections
content_item_terms = Table(
    "content_item_terms",
    Base.metadata,
    Column("item_id", Integer, ForeignKey("content_items.id", ondelete="CASCADE"), primary_key=True),
    Column("term_id", Integer, ForeignKey("terms.id", ondelete="CASCADE"), primary_key=True),
)


class ContentItem(Base):
    """
    A single content item.

    Attributes:
        id: Primary key
        type: Content type (see ContentType)
        title: Display title
        slug: URL identifier, unique within a type
        excerpt: Manual excerpt (None means derive one from content)
        content: Rendered HTML body
        published_at: Publication timestamp, drives default ordering
        featured_image_url: URL of the featured image
        fields: Custom fields (scalars, relation ids, image/file maps, repeaters)
    """

    __tablename__ = "content_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    type = Column(String(50), nullable=False, index=True)
    title = Column(String(500), nullable=False, default="")
    slug = Column(String(200), nullable=False)
    excerpt = Column(Text, nullable=True)
    content = Column(Text, nullable=False, default="")
    published_at = Column(DateTime, nullable=False, default=datetime.utcnow, index=True)
    featured_image_url = Column(String(1000), nullable=True)
    fields = Column(JSON, nullable=False, default=dict)

    __table_args__ = (
        UniqueConstraint("type", "slug", name="uq_content_items_type_slug"),
        Index("ix_content_items_type_published", "type", "published_at"),
    )

    def field(self, name: str, default: Any = None) -> Any:
        """Return a custom field value, or ``default`` when unset."""
        value = (self.fields or {}).get(name)
        return default if value is None else value

    def relation(self, name: str) -> Optional[int]:
        """Return the id referenced by a relation field, if any."""
        return relation_id((self.fields or {}).get(name))

    def __repr__(self) -> str:
        return f"<ContentItem {self.type}:{self.slug} id={self.id}>"


class Term(Base):
    """
    Taxonomy term.

    Attributes:
        id: Primary key
        taxonomy: Taxonomy name (see Taxonomy)
        name: Display name
        slug: URL identifier, unique within a taxonomy
        description: Optional description
    """

    __tablename__ = "terms"

    id = Column(Integer, primary_key=True, autoincrement=True)
    taxonomy = Column(String(50), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    slug = Column(String(200), nullable=False)
    description = Column(Text, nullable=False, default="")

    __table_args__ = (
        UniqueConstraint("taxonomy", "slug", name="uq_terms_taxonomy_slug"),
    )

    def __repr__(self) -> str:
        return f"<Term {self.taxonomy}:{self.slug} id={self.id}>"


class Subscriber(Base):
    """Newsletter subscriber, one row per email address."""

    __tablename__ = "newsletter_subscribers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(320), nullable=False, unique=True, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
