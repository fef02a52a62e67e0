"""Pocket export file ingestion and logical record reconstruction."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from pathlib import Path

logger = logging.getLogger(__name__)

EXPORT_HEADER = "title,url,time_added,tags,status"

# Tail of a complete record: url end, timestamp, tags, status at end of buffer.
_RECORD_END_RE = re.compile(r',[^,]*"?,\d{10},.*,(?:unread|archive)\Z')


def list_export_files(directory: Path) -> list[Path]:
    """Return the CSV export files inside directory in a stable order."""

    if not directory.exists() or not directory.is_dir():
        raise ValueError(f"Input directory not found: {directory}")

    paths = sorted(path for path in directory.glob("*.csv") if path.is_file())
    if not paths:
        raise ValueError(f"No CSV export files found in {directory}")
    return paths


def _is_header(line: str) -> bool:
    return line.strip().lower() == EXPORT_HEADER


def read_physical_lines(paths: Iterable[Path]) -> Iterator[str]:
    """Yield the non-empty, non-header lines of every export file in order."""

    for path in paths:
        try:
            text = path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            raise ValueError(f"Could not read export file {path}: {exc}") from exc

        count = 0
        for raw_line in text.split("\n"):
            line = raw_line.rstrip("\r")
            if not line.strip() or _is_header(line):
                continue
            count += 1
            yield line
        logger.debug("Read %d lines from %s", count, path)


def is_record_complete(buffer: str) -> bool:
    return _RECORD_END_RE.search(buffer) is not None


def reconstruct_records(lines: Iterable[str]) -> Iterator[str]:
    """Merge physical lines into logical records.

    A record may wrap over several lines when its title or URL contains raw
    line breaks, so lines are accumulated until the buffer ends with the
    timestamp/tags/status tail of a complete record. Whatever is left at the
    end of input is emitted as-is and rejected later by the parser.
    """

    buffer = ""
    for line in lines:
        buffer = f"{buffer}\n{line}" if buffer else line
        if is_record_complete(buffer):
            yield buffer
            buffer = ""

    if buffer:
        logger.debug("Emitting incomplete trailing record: %r", buffer[:80])
        yield buffer
