# backend/app/database/__init__.py
"""
Database package for the content API.

Provides the SQLAlchemy models and their declarative base.
"""

from .base import Base
from .models import (
    ContentItem,
    ContentType,
    Subscriber,
    Term,
    Taxonomy,
    content_item_terms,
)

__all__ = [
    "Base",
    "ContentItem",
    "ContentType",
    "Subscriber",
    "Term",
    "Taxonomy",
    "content_item_terms",
]
