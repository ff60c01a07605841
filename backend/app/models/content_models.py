# backend/app/models/content_models.py
"""
Response models for the content endpoints.

Each model is the flat, client-facing projection of one content type. Custom
field values are passed through as stored (``Any``), so a field the editors
left empty comes back as ``null`` rather than being omitted.
"""

from datetime import datetime
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, EmailStr, Field

from ..utils.pagination import PaginationMeta

T = TypeVar("T")


# =========================================================================
# SHARED
# =========================================================================


class Page(BaseModel, Generic[T]):
    """``{data, meta}`` envelope of every list endpoint."""

    data: List[T]
    meta: PaginationMeta


class TermRef(BaseModel):
    id: int
    name: str
    slug: str


class TermSummary(TermRef):
    count: int


class AuthorProfile(BaseModel):
    """Author fields embedded in detail responses."""

    featured_image: Optional[str] = None
    name: str
    location: Any = None
    job: Any = None
    total_letters: Any = None
    age: Any = None
    facebook: Any = None
    instagram: Any = None
    telegram: Any = None
    youtube: Any = None


# =========================================================================
# PAGES
# =========================================================================


class Question(BaseModel):
    question: Any = None
    answer: Any = None


class AboutPage(BaseModel):
    title: str
    content: str
    slug: str
    questions: List[Question] = Field(default_factory=list)


# =========================================================================
# ARTICLES & AUTHOR REVIEWS
# =========================================================================


class ArticleSummary(BaseModel):
    image: Optional[str] = None
    title: str
    excerpt: str
    slug: str
    author: str
    date_shamsi: Any = None
    time: Any = None
    categories: List[TermRef]


class ArticleDetail(BaseModel):
    big_image: str
    title: str
    date_shamsi: Any = None
    time: Any = None
    categories: List[TermRef]
    author: Optional[AuthorProfile] = None
    content: str


# =========================================================================
# AUTHORS
# =========================================================================


class AuthorSummary(BaseModel):
    name: str
    slug: str
    image: Optional[str] = None
    job: Any = None
    location: Any = None
    total_letters: Any = None


class AuthorDetail(AuthorProfile):
    content: str


class AuthorArchiveSummary(BaseModel):
    title: str
    slug: str
    excerpt: str
    featured_image: Optional[str] = None


class AuthorArchiveDetail(BaseModel):
    featured_image: Optional[str] = None
    title: str
    location: Any = None
    age: Any = None
    job: Any = None
    total_letters: Any = None
    content: str


# =========================================================================
# BOOKS
# =========================================================================


class FeaturedBook(BaseModel):
    title: str
    featured_image: Optional[str] = None
    excerpt: str
    slug: str
    pdf: str


class BookDetail(BaseModel):
    title: str
    featured_image: Optional[str] = None
    collection: Any = None
    date_shamsi: Any = None
    time: Any = None
    categories: List[TermRef]
    content: str
    author: Optional[AuthorProfile] = None
    pdf: str


# =========================================================================
# STORIES & EPISODES
# =========================================================================


class StorySummary(BaseModel):
    featured_image: Optional[str] = None
    title: str
    excerpt: str
    slug: str
    author: str
    date: Any = None
    duration: Any = None
    categories: List[TermRef]


class EpisodeRef(BaseModel):
    title: str
    slug: str
    episode_number: Optional[int] = None
    episode_title: Any = None


class StoryDetail(BaseModel):
    featured_image: Optional[str] = None
    title: str
    excerpt: str
    slug: str
    author: Optional[AuthorProfile] = None
    date: Any = None
    duration: Any = None
    categories: List[TermRef]
    story_type: List[TermRef]
    collection: List[TermRef]
    content: str
    episodes: List[EpisodeRef]


class EpisodeDetail(BaseModel):
    title: str
    author: Optional[AuthorProfile] = None
    collection: List[TermRef]
    categories: List[TermRef]
    date: Any = None
    time: Any = None
    story_slug: str
    content: str
    episode_title: Any = None
    episode_number: Optional[int] = None
    previous_episode: Optional[str] = None
    next_episode: Optional[str] = None


class ChampionAuthor(BaseModel):
    name: str
    slug: str


class ChampionStory(BaseModel):
    title: str
    excerpt: str
    slug: str


class StoryChampion(BaseModel):
    featured_image: Optional[str] = None
    author: Optional[ChampionAuthor] = None
    story: Optional[ChampionStory] = None


# =========================================================================
# LETTERS
# =========================================================================


class LetterSummary(BaseModel):
    featured_image: Optional[str] = None
    title: str
    number: Any = None
    release_date: Any = None
    slug: str
    pdf: str


class LetterImage(BaseModel):
    number: Any = None
    image: str


class LetterDetail(BaseModel):
    number: Any = None
    title: str
    images: List[LetterImage]


# =========================================================================
# PODCASTS
# =========================================================================


class PodcastSummary(BaseModel):
    image: Optional[str] = None
    slug: str
    name: str
    host: Any = None
    guest: Any = None
    duration: Any = None
    date: str


class PodcastDetail(PodcastSummary):
    audio: str
    content: str
    podcast_type: List[TermRef]


# =========================================================================
# POEMS
# =========================================================================


class PoemSummary(BaseModel):
    title: str
    featured_image: Optional[str] = None
    excerpt: str
    author: str
    slug: str
    date: Any = None
    time: Any = None
    poem_type: List[TermRef]


class PoemDetail(BaseModel):
    title: str
    featured_image: Optional[str] = None
    content: str
    author: Optional[AuthorProfile] = None
    date: Any = None
    time: Any = None
    poem_type: List[TermRef]
    categories: List[TermRef]


# =========================================================================
# SEARCH
# =========================================================================


class SearchHit(BaseModel):
    title: str
    featured_image: Optional[str] = None
    slug: str


class SearchGroup(BaseModel):
    count: int
    posts: List[SearchHit]


SearchResults = Dict[str, SearchGroup]


# =========================================================================
# NEWSLETTER & SYSTEM
# =========================================================================


class SubscriptionRequest(BaseModel):
    email: EmailStr = Field(..., description="Subscriber's email address")


class MessageResponse(BaseModel):
    message: str


class HealthStatus(BaseModel):
    status: str
    timestamp: datetime
    version: str
    database: Dict[str, Any]
