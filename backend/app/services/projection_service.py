"""
Projection of content items into response models.

Every function here is a pure mapping: it receives the item being projected
plus any related items and term lists the endpoint already fetched, and
returns the response model. Nothing is looked up from the database here, so a
missing relation simply arrives as ``None`` and turns into an empty string or
``null`` in the output.

Usage:
    from app.services import projection_service as projection

    summary = projection.article_summary(article, author=author, categories=terms)
"""

from typing import Any, Dict, List, Optional, Sequence

from ..config import settings
from ..database.models import ContentItem, Term
from ..models.content_models import (
    AboutPage,
    ArticleDetail,
    ArticleSummary,
    AuthorArchiveDetail,
    AuthorArchiveSummary,
    AuthorDetail,
    AuthorProfile,
    AuthorSummary,
    BookDetail,
    ChampionAuthor,
    ChampionStory,
    EpisodeDetail,
    EpisodeRef,
    FeaturedBook,
    LetterDetail,
    LetterImage,
    LetterSummary,
    PodcastDetail,
    PodcastSummary,
    PoemDetail,
    PoemSummary,
    Question,
    SearchHit,
    StoryChampion,
    StoryDetail,
    StorySummary,
    TermRef,
    TermSummary,
)
from ..utils.fields import field_url
from ..utils.text_utils import auto_excerpt, excerpt_by_line_breaks

# Author fields shown wherever an author is embedded in a detail response
PROFILE_FIELDS = (
    "location",
    "job",
    "total_letters",
    "age",
    "facebook",
    "instagram",
    "telegram",
    "youtube",
)


# =========================================================================
# BUILDING BLOCKS
# =========================================================================


def format_terms(terms: Optional[Sequence[Term]]) -> List[TermRef]:
    """Map terms to ``{id, name, slug}``, keeping the given order. ``None`` gives ``[]``."""
    if not terms:
        return []
    return [TermRef(id=term.id, name=term.name, slug=term.slug) for term in terms]


def term_summary(term: Term, count: int) -> TermSummary:
    return TermSummary(id=term.id, name=term.name, slug=term.slug, count=count)


def excerpt_of(item: ContentItem, words: Optional[int] = None) -> str:
    """Manual excerpt if the item has one, otherwise the opening words of its content."""
    if item.excerpt:
        return item.excerpt
    return auto_excerpt(item.content or "", words or settings.excerpt_words)


def title_of(item: Optional[ContentItem]) -> str:
    return item.title if item is not None else ""


def author_profile(author: Optional[ContentItem]) -> Optional[AuthorProfile]:
    if author is None:
        return None
    return AuthorProfile(
        featured_image=author.featured_image_url,
        name=author.title,
        **{name: author.field(name) for name in PROFILE_FIELDS},
    )


def _fields(item: ContentItem, *names: str) -> Dict[str, Any]:
    return {name: item.field(name) for name in names}


def _repeater(item: ContentItem, name: str) -> List[Dict[str, Any]]:
    rows = item.field(name, [])
    return [row for row in rows if isinstance(row, dict)] if isinstance(rows, list) else []


# =========================================================================
# PAGES
# =========================================================================


def about_page(page: ContentItem) -> AboutPage:
    return AboutPage(
        title=page.title,
        content=page.content or "",
        slug=page.slug,
        questions=[
            Question(question=row.get("question"), answer=row.get("answer"))
            for row in _repeater(page, "questions")
        ],
    )


# =========================================================================
# ARTICLES & REVIEWS
# =========================================================================


def article_summary(
    item: ContentItem,
    author: Optional[ContentItem],
    categories: Optional[Sequence[Term]],
) -> ArticleSummary:
    return ArticleSummary(
        image=item.featured_image_url,
        title=item.title,
        excerpt=excerpt_of(item),
        slug=item.slug,
        author=title_of(author),
        categories=format_terms(categories),
        **_fields(item, "date_shamsi", "time"),
    )


def article_detail(
    item: ContentItem,
    author: Optional[ContentItem],
    categories: Optional[Sequence[Term]],
) -> ArticleDetail:
    return ArticleDetail(
        big_image=field_url(item.field("big_image")),
        title=item.title,
        categories=format_terms(categories),
        author=author_profile(author),
        content=item.content or "",
        **_fields(item, "date_shamsi", "time"),
    )


# =========================================================================
# AUTHORS
# =========================================================================


def author_summary(author: ContentItem) -> AuthorSummary:
    return AuthorSummary(
        name=author.title,
        slug=author.slug,
        image=author.featured_image_url,
        **_fields(author, "job", "location", "total_letters"),
    )


def author_detail(author: ContentItem) -> AuthorDetail:
    profile = author_profile(author)
    return AuthorDetail(content=author.content or "", **profile.model_dump())


def author_archive_summary(item: ContentItem) -> AuthorArchiveSummary:
    return AuthorArchiveSummary(
        title=item.title,
        slug=item.slug,
        excerpt=excerpt_of(item),
        featured_image=item.featured_image_url,
    )


def author_archive_detail(item: ContentItem) -> AuthorArchiveDetail:
    return AuthorArchiveDetail(
        featured_image=item.featured_image_url,
        title=item.title,
        content=item.content or "",
        **_fields(item, "location", "age", "job", "total_letters"),
    )


# =========================================================================
# BOOKS
# =========================================================================


def featured_book(book: ContentItem) -> FeaturedBook:
    return FeaturedBook(
        title=book.title,
        featured_image=book.featured_image_url,
        excerpt=excerpt_of(book),
        slug=book.slug,
        pdf=field_url(book.field("pdf")),
    )


def book_detail(
    book: ContentItem,
    author: Optional[ContentItem],
    categories: Optional[Sequence[Term]],
) -> BookDetail:
    return BookDetail(
        title=book.title,
        featured_image=book.featured_image_url,
        categories=format_terms(categories),
        content=book.content or "",
        author=author_profile(author),
        pdf=field_url(book.field("pdf")),
        **_fields(book, "collection", "date_shamsi", "time"),
    )


# =========================================================================
# STORIES & EPISODES
# =========================================================================


def story_summary(
    story: ContentItem,
    author: Optional[ContentItem],
    categories: Optional[Sequence[Term]],
) -> StorySummary:
    return StorySummary(
        featured_image=story.featured_image_url,
        title=story.title,
        excerpt=excerpt_of(story),
        slug=story.slug,
        author=title_of(author),
        categories=format_terms(categories),
        **_fields(story, "date", "duration"),
    )


def episode_number(episode: ContentItem) -> Optional[int]:
    value = episode.field("episode_number")
    try:
        return int(value) if value is not None else None
    except (TypeError, ValueError):
        return None


def episode_ref(episode: ContentItem) -> EpisodeRef:
    return EpisodeRef(
        title=episode.title,
        slug=episode.slug,
        episode_number=episode_number(episode),
        episode_title=episode.field("episode_title"),
    )


def story_detail(
    story: ContentItem,
    author: Optional[ContentItem],
    categories: Optional[Sequence[Term]],
    story_types: Optional[Sequence[Term]],
    collection: Optional[Sequence[Term]],
    episodes: Sequence[ContentItem],
) -> StoryDetail:
    return StoryDetail(
        featured_image=story.featured_image_url,
        title=story.title,
        excerpt=excerpt_of(story),
        slug=story.slug,
        author=author_profile(author),
        categories=format_terms(categories),
        story_type=format_terms(story_types),
        collection=format_terms(collection),
        content=story.content or "",
        episodes=[episode_ref(e) for e in episodes],
        **_fields(story, "date", "duration"),
    )


def episode_detail(
    episode: ContentItem,
    story: Optional[ContentItem],
    author: Optional[ContentItem],
    categories: Optional[Sequence[Term]],
    collection: Optional[Sequence[Term]],
    previous_episode: Optional[str],
    next_episode: Optional[str],
) -> EpisodeDetail:
    return EpisodeDetail(
        title=episode.title,
        author=author_profile(author),
        collection=format_terms(collection),
        categories=format_terms(categories),
        story_slug=story.slug if story is not None else "",
        content=episode.content or "",
        episode_number=episode_number(episode),
        previous_episode=previous_episode,
        next_episode=next_episode,
        **_fields(episode, "date", "time", "episode_title"),
    )


def story_champion(
    champion: ContentItem,
    author: Optional[ContentItem],
    story: Optional[ContentItem],
) -> StoryChampion:
    return StoryChampion(
        featured_image=champion.featured_image_url,
        author=ChampionAuthor(name=author.title, slug=author.slug) if author is not None else None,
        story=(
            ChampionStory(title=story.title, excerpt=excerpt_of(story), slug=story.slug)
            if story is not None
            else None
        ),
    )


# =========================================================================
# LETTERS
# =========================================================================


def letter_summary(letter: ContentItem) -> LetterSummary:
    return LetterSummary(
        featured_image=letter.featured_image_url,
        title=letter.title,
        slug=letter.slug,
        pdf=field_url(letter.field("pdf")),
        **_fields(letter, "number", "release_date"),
    )


def letter_detail(letter: ContentItem) -> LetterDetail:
    return LetterDetail(
        number=letter.field("number"),
        title=letter.title,
        images=[
            LetterImage(number=row.get("number"), image=field_url(row.get("image")))
            for row in _repeater(letter, "images")
        ],
    )


# =========================================================================
# PODCASTS
# =========================================================================


def _podcast_fields(podcast: ContentItem) -> Dict[str, Any]:
    return dict(
        image=podcast.featured_image_url,
        slug=podcast.slug,
        name=podcast.title,
        date=podcast.published_at.strftime("%Y-%m-%d") if podcast.published_at else "",
        **_fields(podcast, "host", "guest", "duration"),
    )


def podcast_summary(podcast: ContentItem) -> PodcastSummary:
    return PodcastSummary(**_podcast_fields(podcast))


def podcast_detail(podcast: ContentItem, podcast_types: Optional[Sequence[Term]]) -> PodcastDetail:
    return PodcastDetail(
        audio=field_url(podcast.field("audio")),
        content=podcast.content or "",
        podcast_type=format_terms(podcast_types),
        **_podcast_fields(podcast),
    )


# =========================================================================
# POEMS
# =========================================================================


def poem_summary(
    poem: ContentItem,
    author: Optional[ContentItem],
    poem_types: Optional[Sequence[Term]],
) -> PoemSummary:
    return PoemSummary(
        title=poem.title,
        featured_image=poem.featured_image_url,
        excerpt=excerpt_by_line_breaks(poem.content or "", settings.poem_excerpt_lines),
        author=title_of(author),
        slug=poem.slug,
        poem_type=format_terms(poem_types),
        **_fields(poem, "date", "time"),
    )


def poem_detail(
    poem: ContentItem,
    author: Optional[ContentItem],
    poem_types: Optional[Sequence[Term]],
    categories: Optional[Sequence[Term]],
) -> PoemDetail:
    return PoemDetail(
        title=poem.title,
        featured_image=poem.featured_image_url,
        content=poem.content or "",
        author=author_profile(author),
        poem_type=format_terms(poem_types),
        categories=format_terms(categories),
        **_fields(poem, "date", "time"),
    )


# =========================================================================
# SEARCH
# =========================================================================


def search_hit(item: ContentItem) -> SearchHit:
    return SearchHit(title=item.title, featured_image=item.featured_image_url, slug=item.slug)
