# backend/app/api/v1/routers/books.py
"""
Book endpoints.

Endpoints:
    GET /books/featured - Most recently added book
    GET /books/{slug} - Book detail with the author's profile
"""

from fastapi import APIRouter

from ....database.models import ContentType, Taxonomy
from ....models.content_models import BookDetail, FeaturedBook
from ....services import projection_service as projection
from ....services.content_service import content_service
from ....services.database_service import database_service
from ..loaders import found, get_or_404, item_terms, related_item

router = APIRouter(prefix="/books", tags=["Books"])


@router.get("/featured", response_model=FeaturedBook)
async def get_featured_book():
    """The latest book."""
    async with database_service.get_session() as session:
        book = found(await content_service.latest(session, ContentType.BOOK), "no_book", "No book found")
        return projection.featured_book(book)


@router.get("/{slug}", response_model=BookDetail)
async def get_book(slug: str):
    async with database_service.get_session() as session:
        book = await get_or_404(session, ContentType.BOOK, slug, "no_book", "No book found with the provided slug")
        author = await related_item(session, book, "author")
        categories = await item_terms(session, book, Taxonomy.CATEGORIES)
        return projection.book_detail(book, author, categories)
