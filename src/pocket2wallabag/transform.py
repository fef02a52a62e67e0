"""Mapping of parsed Pocket records onto wallabag import entries."""

from __future__ import annotations

from datetime import datetime

from dateutil import tz

from pocket2wallabag.config import Partition, RunContext
from pocket2wallabag.models import ParsedItem, WallabagEntry
from pocket2wallabag.urls import normalize_url


def split_tags(tags: str) -> list[str]:
    return [token.strip() for token in tags.split("|") if token.strip()]


def is_starred(tags: str, favorite_tag: str | None) -> bool:
    """True when favorite_tag appears as a whole tag token, ignoring case."""

    if not favorite_tag:
        return False
    wanted = favorite_tag.lower()
    return any(token.lower() == wanted for token in split_tags(tags))


def to_created_at(time_added: str) -> str:
    """Convert a Unix timestamp in seconds to an RFC3339 UTC string."""

    return datetime.fromtimestamp(int(time_added), tz=tz.UTC).isoformat()


def to_wallabag_entry(item: ParsedItem, context: RunContext) -> WallabagEntry:
    tags = sorted({*split_tags(item.tags), context.run_tag})

    return WallabagEntry(
        is_archived=1 if item.status == Partition.ARCHIVE.value else 0,
        is_starred=1 if is_starred(item.tags, context.favorite_tag) else 0,
        tags=tags,
        title=item.title,
        url=normalize_url(item.url),
        created_at=to_created_at(item.time_added),
    )
