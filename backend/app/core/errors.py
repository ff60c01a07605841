# backend/app/core/errors.py
"""
API error types.

Every expected failure of an endpoint is raised as an ``ApiError``; the
application-level handler in ``app.main`` renders it as

    {"code": "no_article", "message": "...", "data": {"status": 404}}

Usage:
    from app.core.errors import NotFoundError

    if item is None:
        raise NotFoundError("no_article", "No article found with the provided slug")
"""

from typing import Any, Dict, Optional

from fastapi import HTTPException, status


class ApiError(HTTPException):
    """HTTP error carrying a stable, machine-readable code."""

    status_code_default = status.HTTP_400_BAD_REQUEST

    def __init__(self, code: str, message: str, status_code: Optional[int] = None):
        super().__init__(status_code=status_code or self.status_code_default, detail=message)
        self.code = code
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return error_body(self.code, self.message, self.status_code)


class NotFoundError(ApiError):
    """The requested slug/id does not resolve to an item of the expected type."""

    status_code_default = status.HTTP_404_NOT_FOUND


class ConflictError(ApiError):
    """The resource being created already exists."""

    status_code_default = status.HTTP_409_CONFLICT


class StorageError(ApiError):
    """The content repository failed to complete a write."""

    status_code_default = status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(code: str, message: str, status_code: int) -> Dict[str, Any]:
    """Structured error object shared by every error response."""
    return {"code": code, "message": message, "data": {"status": status_code}}
