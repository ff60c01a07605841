# backend/app/dependencies.py
"""
FastAPI dependency injection functions shared by the content routers.

Key Dependencies:
    - pagination_params: Build a dependency resolving ``page``/``per_page``
    - slug_list: Build a dependency turning a comma-separated query parameter into a slug list

Usage:
    from fastapi import Depends
    from app.dependencies import pagination_params

    @router.get("/articles")
    async def list_articles(pagination: Pagination = Depends(pagination_params())):
        ...
"""

from typing import Callable, List, Optional

from fastapi import Query

from app.config import settings
from app.services.search_service import split_slugs
from app.utils.pagination import Pagination, paginate


def pagination_params(default_per_page: Optional[int] = None) -> Callable[..., Pagination]:
    """
    Create a dependency resolving the pagination of a list endpoint.

    The parameters are accepted as strings so that a malformed value falls
    back to the default instead of failing validation.

    Args:
        default_per_page: Page size when none is requested; ``settings.default_per_page`` if None
    """

    def dependency(
        page: Optional[str] = Query(None, description="Page number (default 1)"),
        per_page: Optional[str] = Query(None, description="Items per page"),
    ) -> Pagination:
        return paginate(
            page,
            per_page,
            default_per_page or settings.default_per_page,
            settings.max_per_page,
        )

    return dependency


def slug_list(name: str, description: str) -> Callable[..., List[str]]:
    """Create a dependency reading a comma-separated slug list from query parameter ``name``."""

    def dependency(raw: Optional[str] = Query(None, alias=name, description=description)) -> List[str]:
        return split_slugs(raw)

    return dependency
