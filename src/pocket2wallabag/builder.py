"""Main conversion orchestration for pocket2wallabag."""

from __future__ import annotations

import logging
from pathlib import Path

from pocket2wallabag.config import Partition, RunContext
from pocket2wallabag.input import list_export_files, read_physical_lines, reconstruct_records
from pocket2wallabag.models import ConversionReport, ParsedItem, WallabagEntry
from pocket2wallabag.parser import parse_record
from pocket2wallabag.transform import to_wallabag_entry
from pocket2wallabag.writer import write_partitions

logger = logging.getLogger(__name__)


def _parse_exports(paths: list[Path]) -> tuple[list[ParsedItem], int]:
    items: list[ParsedItem] = []
    records = 0
    for record in reconstruct_records(read_physical_lines(paths)):
        records += 1
        item = parse_record(record)
        if item is not None:
            items.append(item)
    return items, records


def convert_export(input_dir: Path, context: RunContext) -> ConversionReport:
    """Convert every Pocket CSV export in input_dir into wallabag JSON chunks."""

    paths = list_export_files(input_dir)
    logger.info("Found %d export file(s) in %s", len(paths), input_dir)

    items, records = _parse_exports(paths)
    entries: list[WallabagEntry] = [to_wallabag_entry(item, context) for item in items]

    output_dir = input_dir / context.run_tag
    written = write_partitions(entries, context, output_dir)

    archived = sum(entry.is_archived for entry in entries)
    report = ConversionReport(
        run_tag=context.run_tag,
        output_dir=output_dir,
        files_read=len(paths),
        records=records,
        parsed=len(items),
        dropped=records - len(items),
        total=len(entries),
        archived=archived,
        unread=len(entries) - archived,
        starred=sum(entry.is_starred for entry in entries) if context.favorite_tag else None,
        outputs=[*written[Partition.UNREAD], *written[Partition.ARCHIVE]],
    )

    logger.info(
        "Converted %d of %d record(s): %d archived, %d unread",
        report.total,
        report.records,
        report.archived,
        report.unread,
    )
    if report.dropped:
        logger.warning("Dropped %d malformed record(s)", report.dropped)
    return report
