# backend/app/utils/fields.py
"""
Normalisers for custom field values.

Custom fields are loosely shaped: a relation may be stored as an id, a numeric
string, a mapping carrying the related item's ``id``/``ID``, or a one-element
list; an image or file field may be a bare URL or a mapping with ``url``.
These helpers reduce each shape to one type so projections never have to look.

Usage:
    from app.utils.fields import relation_id, field_url

    author_id = relation_id(item.fields.get("author"))   # Optional[int]
    pdf = field_url(item.fields.get("pdf"))               # str, "" when unset
"""

from typing import Any, Optional


def relation_id(value: Any) -> Optional[int]:
    """
    Resolve a stored relation value to the related item's id.

    Examples:
        >>> relation_id(12)
        12
        >>> relation_id({"ID": 12, "post_title": "x"})
        12
        >>> relation_id([12])
        12
        >>> relation_id(None) is None
        True
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str):
        value = value.strip()
        return int(value) if value.isdigit() and int(value) > 0 else None
    if isinstance(value, dict):
        for key in ("id", "ID"):
            if key in value:
                return relation_id(value[key])
        return None
    if isinstance(value, (list, tuple)):
        return relation_id(value[0]) if value else None
    return None


def field_url(value: Any) -> str:
    """Return the URL of an image/file field, or an empty string."""
    if isinstance(value, dict):
        url = value.get("url")
        return url if isinstance(url, str) else ""
    if isinstance(value, str):
        return value
    return ""
