#!/usr/bin/env python3
# backend/app/commands/seed_content.py
"""
Content fixture loader.

Loads taxonomy terms and content items from a YAML document into the content
repository. Used to bootstrap a development database and by the test suite.

Usage:
    python -m app.commands.seed_content fixtures/content.yml
    python -m app.commands.seed_content fixtures/content.yml --reset

Document format:
    terms:
      - {taxonomy: categories, name: Fiction, slug: fiction}
    items:
      - type: stories
        title: The Long Road
        slug: the-long-road
        published_at: 2024-03-01T10:00:00
        fields:
          author: {type: authors, slug: jane-doe}   # resolved to the author's id
          duration: "12 min"
        terms:
          categories: [fiction]

Relation fields may reference another item of the document as
``{type, slug}``; every such reference is replaced by that item's id.
``episode_number`` is stored as an integer.
"""

import argparse
import asyncio
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

import yaml
from sqlalchemy import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.models import ContentItem, Term, content_item_terms
from app.services.database_service import database_service

logger = logging.getLogger("zaryab.seed")

ITEM_COLUMNS = ("title", "excerpt", "content", "featured_image_url")


class SeedError(Exception):
    """The fixture document is malformed or references unknown content."""


def _is_reference(value: Any) -> bool:
    return isinstance(value, Mapping) and set(value) == {"type", "slug"}


def _published_at(value: Any) -> datetime:
    if value is None:
        return datetime.utcnow()
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


def _resolve_fields(
    fields: Mapping[str, Any],
    ids: Mapping[Tuple[str, str], int],
    owner: str,
) -> Dict[str, Any]:
    resolved: Dict[str, Any] = {}
    for name, value in fields.items():
        if _is_reference(value):
            key = (str(value["type"]), str(value["slug"]))
            if key not in ids:
                raise SeedError(f"{owner}: field '{name}' references unknown item {key[0]}:{key[1]}")
            value = ids[key]
        elif name == "episode_number" and value is not None:
            value = int(value)
        resolved[name] = value
    return resolved


async def load_content(session: AsyncSession, document: Mapping[str, Any]) -> Dict[str, int]:
    """
    Insert the terms and items of a fixture document.

    Args:
        session: Open session; the caller commits
        document: Parsed fixture (``terms`` and ``items`` lists)

    Returns:
        Dict[str, int]: Number of terms and items created

    Raises:
        SeedError: On unknown term or item references
    """
    terms: Dict[Tuple[str, str], Term] = {}
    for entry in document.get("terms") or []:
        term = Term(
            taxonomy=entry["taxonomy"],
            name=entry.get("name", entry["slug"]),
            slug=entry["slug"],
            description=entry.get("description") or "",
        )
        session.add(term)
        terms[(term.taxonomy, term.slug)] = term

    entries: List[Mapping[str, Any]] = list(document.get("items") or [])
    items: List[ContentItem] = []
    item_terms: List[List[Term]] = []
    for entry in entries:
        item = ContentItem(
            type=entry["type"],
            slug=entry["slug"],
            published_at=_published_at(entry.get("published_at")),
            fields={},
            **{column: entry.get(column) for column in ITEM_COLUMNS if entry.get(column) is not None},
        )
        attached = []
        for taxonomy, slugs in (entry.get("terms") or {}).items():
            for slug in slugs:
                if (taxonomy, slug) not in terms:
                    raise SeedError(f"{item.type}:{item.slug}: unknown term {taxonomy}:{slug}")
                attached.append(terms[(taxonomy, slug)])
        session.add(item)
        items.append(item)
        item_terms.append(attached)

    # Ids are needed before relation references can be resolved
    await session.flush()

    links = [
        {"item_id": item.id, "term_id": term.id}
        for item, attached in zip(items, item_terms)
        for term in attached
    ]
    if links:
        await session.execute(insert(content_item_terms), links)

    ids = {(item.type, item.slug): item.id for item in items}
    for item, entry in zip(items, entries):
        item.fields = _resolve_fields(entry.get("fields") or {}, ids, f"{item.type}:{item.slug}")
    await session.flush()

    return {"terms": len(terms), "items": len(items)}


async def seed_file(path: Path, reset: bool = False) -> Dict[str, int]:
    with open(path, encoding="utf-8") as f:
        document = yaml.safe_load(f) or {}

    if reset:
        await database_service.drop_db()
    await database_service.init_db()

    async with database_service.get_session() as session:
        counts = await load_content(session, document)

    logger.info(f"Loaded {counts['terms']} terms and {counts['items']} items from {path}")
    return counts


async def _run(path: Path, reset: bool) -> None:
    try:
        await seed_file(path, reset=reset)
    finally:
        await database_service.close()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the seed command."""
    parser = argparse.ArgumentParser(description="Load content fixtures into the content repository")
    parser.add_argument("path", type=Path, help="YAML fixture file")
    parser.add_argument("--reset", action="store_true", help="Drop and recreate all tables first")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if not args.path.exists():
        logger.error(f"Fixture file not found: {args.path}")
        return 1

    try:
        asyncio.run(_run(args.path, args.reset))
    except (SeedError, SQLAlchemyError, yaml.YAMLError, KeyError, ValueError) as e:
        logger.error(f"Seeding failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
