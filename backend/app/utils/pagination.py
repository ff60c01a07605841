# backend/app/utils/pagination.py
"""
Pagination helpers shared by every list endpoint.

Query parameters arrive as raw strings and are coerced leniently: a missing,
non-numeric, zero or negative value falls back to the default instead of
failing the request.

Usage:
    from app.utils.pagination import paginate

    pagination = paginate(page, per_page, settings.default_per_page, settings.max_per_page)
    items, total = await content_service.list_items(session, "articles", pagination)
    meta = pagination.meta(total)
"""

import math
from dataclasses import dataclass
from typing import Optional, Union

from pydantic import BaseModel

RawInt = Union[int, str, None]

# Largest OFFSET a 64-bit database integer can hold
MAX_OFFSET = 2**63 - 1


class PaginationMeta(BaseModel):
    """Pagination block of a ``{data, meta}`` envelope."""

    total: int
    pages: int
    page: int
    per_page: int


@dataclass(frozen=True)
class Pagination:
    page: int
    per_page: int

    @property
    def offset(self) -> int:
        return min((self.page - 1) * self.per_page, MAX_OFFSET)

    def meta(self, total: int) -> PaginationMeta:
        return PaginationMeta(
            total=total,
            pages=page_count(total, self.per_page),
            page=self.page,
            per_page=self.per_page,
        )


def positive_int(value: RawInt) -> Optional[int]:
    """Coerce a raw parameter to a positive int, or None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    try:
        number = int(str(value).strip())
    except ValueError:
        return None
    return number if number > 0 else None


def page_count(total: int, per_page: int) -> int:
    """Number of pages needed for ``total`` items, ``ceil(total / per_page)``."""
    if total <= 0:
        return 0
    return math.ceil(total / per_page)


def paginate(
    requested_page: RawInt,
    requested_per_page: RawInt,
    default_per_page: int,
    max_per_page: Optional[int] = None,
) -> Pagination:
    """
    Resolve the page and page size of a list request.

    Args:
        requested_page: Raw ``page`` parameter
        requested_per_page: Raw ``per_page`` parameter
        default_per_page: Page size used when none (or an invalid one) is given
        max_per_page: Optional upper bound for the page size

    Returns:
        Pagination with ``page >= 1`` and ``per_page >= 1``
    """
    page = positive_int(requested_page) or 1
    per_page = positive_int(requested_per_page) or default_per_page
    if max_per_page is not None and per_page > max_per_page:
        per_page = max_per_page
    return Pagination(page=page, per_page=per_page)
