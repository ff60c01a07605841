from fastapi import APIRouter

# Aggregate all v1 routers here
from .routers import (
    articles,
    author_reviews,
    authors,
    books,
    episodes,
    featured,
    letters,
    newsletter,
    pages,
    podcasts,
    poems,
    search,
    stories,
    system,
    taxonomies,
)

api_router = APIRouter()
api_router.include_router(system.router)
api_router.include_router(pages.router)
api_router.include_router(articles.router)
api_router.include_router(author_reviews.router)
api_router.include_router(authors.router)
api_router.include_router(books.router)
api_router.include_router(episodes.router)
api_router.include_router(stories.router)
api_router.include_router(featured.router)
api_router.include_router(letters.router)
api_router.include_router(podcasts.router)
api_router.include_router(poems.router)
api_router.include_router(search.router)
api_router.include_router(newsletter.router)
# Last: registers one /{taxonomy} route per configured taxonomy
api_router.include_router(taxonomies.router)

__all__ = ["api_router"]
