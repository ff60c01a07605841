# backend/app/__init__.py
"""Zaryab Content API - read-mostly JSON endpoints over the site's content."""

__version__ = "1.0.0"
__title__ = "Zaryab Content API"
__description__ = "Expose stories, poems, letters, podcasts and friends as JSON"
