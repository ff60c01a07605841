# ============================================================================
# Zaryab Content API - Application Configuration
# ============================================================================
"""
Application configuration module using Pydantic Settings.

This module defines all configuration parameters for the content API,
including:
- API/CORS settings
- Database connection settings
- Pagination defaults and limits
- Projection settings (excerpts, well-known page slugs)
- Content types exposed through global search and taxonomy endpoints

Usage:
    from app.config import settings
    per_page = settings.default_per_page
"""

from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # =========================================================================
    # API SETTINGS
    # =========================================================================
    api_title: str = "Zaryab Content API"
    api_version: str = "1.0.0"
    api_prefix: str = Field(default="/wp-json/v1", description="Common prefix of all content endpoints")
    debug: bool = Field(default=False, description="Enable verbose logging & error details")
    log_level: str = Field(default="INFO", description="Logging level")

    # =========================================================================
    # CORS SETTINGS
    # =========================================================================
    cors_origins: List[str] = Field(
        default=["*"],
        description="Allowed origins for CORS",
    )

    # =========================================================================
    # DATABASE (CONTENT REPOSITORY)
    # =========================================================================
    database_url: str = Field(
        default="sqlite+aiosqlite:///./data/zaryab.db",
        description="SQLAlchemy async database URL",
    )
    db_pool_size: int = Field(default=20, description="Pool size (non-SQLite only)")
    db_max_overflow: int = Field(default=40, description="Pool overflow (non-SQLite only)")
    db_pool_recycle: int = Field(default=3600, description="Pool recycle seconds (non-SQLite only)")

    # =========================================================================
    # PAGINATION
    # =========================================================================
    default_per_page: int = Field(default=10, ge=1, description="Default page size for list endpoints")
    podcasts_per_page: int = Field(default=21, ge=1, description="Default page size for the podcast listing")
    max_per_page: Optional[int] = Field(
        default=100,
        description="Upper bound for per_page; None disables the cap",
    )

    # =========================================================================
    # PROJECTION
    # =========================================================================
    excerpt_words: int = Field(default=55, ge=1, description="Words in an automatic excerpt")
    poem_excerpt_lines: int = Field(default=3, ge=1, description="Lines in a poem excerpt")
    about_page_slug: str = Field(default="about-us", description="Slug of the About Us page")

    # =========================================================================
    # SEARCH & TAXONOMIES
    # =========================================================================
    search_content_types: List[str] = Field(
        default=["stories", "poem", "articles", "review", "podcast", "letters"],
        description="Content types covered by global search (response keys)",
    )
    taxonomy_endpoints: List[str] = Field(
        default=[
            "story_type",
            "poem_type",
            "letter_type",
            "review_type",
            "podcast_type",
            "article_type",
        ],
        description="Taxonomies exposed as /{taxonomy} term listings",
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


# Global settings instance (imported elsewhere)
settings = Settings()
