"""Partitioning of wallabag entries and chunked JSON output."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path

from pocket2wallabag.config import Partition, RunContext
from pocket2wallabag.models import WallabagEntry

logger = logging.getLogger(__name__)


def partition_entries(entries: Sequence[WallabagEntry]) -> dict[Partition, list[WallabagEntry]]:
    """Split entries into archived and unread groups, keeping input order."""

    partitions: dict[Partition, list[WallabagEntry]] = {Partition.ARCHIVE: [], Partition.UNREAD: []}
    for entry in entries:
        key = Partition.ARCHIVE if entry.is_archived else Partition.UNREAD
        partitions[key].append(entry)
    return partitions


def chunk_file_name(run_tag: str, partition: Partition, index: int) -> str:
    return f"{run_tag}_{partition.value}_{index:02d}.json"


def write_chunks(
    entries: Sequence[WallabagEntry],
    partition: Partition,
    context: RunContext,
    output_dir: Path,
) -> list[Path]:
    """Write entries as JSON arrays of at most context.chunk_size items each."""

    paths: list[Path] = []
    for index, start in enumerate(range(0, len(entries), context.chunk_size)):
        chunk = entries[start : start + context.chunk_size]
        path = output_dir / chunk_file_name(context.run_tag, partition, index)
        payload = [entry.model_dump(mode="json") for entry in chunk]
        path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        logger.info("Wrote %d %s entries to %s", len(chunk), partition.value, path)
        paths.append(path)
    return paths


def write_partitions(
    entries: Sequence[WallabagEntry],
    context: RunContext,
    output_dir: Path,
) -> dict[Partition, list[Path]]:
    output_dir.mkdir(parents=True, exist_ok=True)
    return {
        partition: write_chunks(group, partition, context, output_dir)
        for partition, group in partition_entries(entries).items()
    }
