"""Field extraction for reconstructed Pocket export records."""

from __future__ import annotations

import logging
import re

from pydantic import ValidationError

from pocket2wallabag.models import ParsedItem

logger = logging.getLogger(__name__)

FIELD_COUNT = 5

_FIELD_SPLIT_RE = re.compile(r',(?=(?:[^"]*"[^"]*")*[^"]*\Z)')
_TIMESTAMP_RE = re.compile(r"^\d{10}$")
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")
_WHITESPACE_RE = re.compile(r"\s+")
_LINE_TAIL_RE = re.compile(r",\d{10},.*,(?:unread|archive)\Z")


class RecordParseError(ValueError):
    """Raised when a logical record cannot be split into its fields."""


def _unquote(field: str) -> str:
    field = field.strip()
    if len(field) >= 2 and field.startswith('"') and field.endswith('"'):
        field = field[1:-1].replace('""', '"')
    return field.strip()


def split_fields(record: str) -> list[str]:
    """Split a record on commas that are not inside a double-quoted span."""

    return [_unquote(field) for field in _FIELD_SPLIT_RE.split(record)]


def _find_timestamp(fields: list[str]) -> int:
    # Title and url come before the timestamp, tags and status after it.
    for index in range(2, len(fields) - 2):
        if _TIMESTAMP_RE.match(fields[index]):
            return index
    raise RecordParseError("no 10-digit time_added field")


def _split_title_url(head: list[str]) -> tuple[str, str]:
    """Separate the title from the url in the raw fields before time_added.

    The url starts at the first field after the title whose final line begins
    with a URL scheme; fields after it belong to a url that contained commas,
    and text before a line break in that field is the tail of a wrapped title.
    """

    start = len(head) - 1
    for index in range(1, len(head)):
        last_line = _unquote(head[index].rsplit("\n", 1)[-1])
        if _SCHEME_RE.match(last_line):
            start = index
            break

    before, newline, url_head = head[start].rpartition("\n")
    url = ",".join([url_head, *head[start + 1 :]])
    title_parts = [*head[:start], before] if newline else head[:start]
    return _unquote(",".join(title_parts)), _unquote(url)


def normalize_tags(raw: str) -> str:
    """Collapse whitespace and turn a comma-flattened tag list into pipes."""

    tags = _WHITESPACE_RE.sub(" ", raw).strip()
    return tags.replace(",", "|")


def _extract(record: str) -> ParsedItem:
    lines = record.split("\n")
    if any(_LINE_TAIL_RE.search(line) for line in lines[:-1]):
        raise RecordParseError("record contains more than one complete entry")

    raw_fields = _FIELD_SPLIT_RE.split(record)
    fields = [_unquote(field) for field in raw_fields]
    if len(fields) < FIELD_COUNT:
        raise RecordParseError(f"expected {FIELD_COUNT} fields, found {len(fields)}")

    status = fields[-1].lower()
    if status not in {"unread", "archive"}:
        raise RecordParseError(f"unknown status {fields[-1]!r}")

    time_index = _find_timestamp(fields)
    title, url = _split_title_url(raw_fields[:time_index])
    if not url:
        raise RecordParseError("empty url")

    return ParsedItem(
        title=title,
        url=url,
        time_added=fields[time_index],
        tags=normalize_tags(",".join(fields[time_index + 1 : -1])),
        status=status,
    )


def parse_record(record: str) -> ParsedItem | None:
    """Parse one logical record, returning None when it is malformed."""

    try:
        return _extract(record)
    except (RecordParseError, ValidationError) as exc:
        logger.warning("Dropping malformed record %r: %s", record[:120], exc)
        return None
