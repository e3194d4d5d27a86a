"""
Session schedule parser — pipeline and CLI entry point.

Usage:
    python parser.py <excel_file> [--output <output.json>] [--sheet <sheet_name>]

Loads an Excel workbook, detects the layout of every sheet (matrix
"date × group" grid or flat one-entry-per-row table), extracts schedule
records, aggregates summary statistics and writes the canonical schedule
document (version 1.0) as a single JSON file.

If --sheet is provided, only that worksheet is processed.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from aggregation import summarize
from config import resolve_config
from detection import LayoutDetector
from dto.document import DocumentMeta, ScheduleDocument, SheetStats
from dto.schedule import ScheduleRecord
from dto.sheet import SheetGrid
from errors import ProcessingError, ScheduleParserError
from extractors.sheet_reader import read_workbook

logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    """Current UTC time as ``2024-01-31T12:00:00.000Z``."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


# -------------------------------------------------------------------
# Main pipeline
# -------------------------------------------------------------------


def parse_sheets(
    grids: Iterable[SheetGrid],
    detector: Optional[LayoutDetector] = None,
) -> Tuple[List[ScheduleRecord], List[SheetStats]]:
    """Run layout detection and the matching parser over every sheet."""
    detector = detector or LayoutDetector()
    records: List[ScheduleRecord] = []
    stats: List[SheetStats] = []

    for grid in grids:
        layout = detector.detect(grid)
        logger.info("Processing sheet: %s (%s layout)", grid.name, layout.value)

        items = detector.parser_for(layout).parse(grid)
        records.extend(items)
        stats.append(SheetStats(sheet=grid.name, layout=layout.value, items=len(items)))
        logger.info("  -> %d record(s)", len(items))

    return records, stats


def build_document(
    records: List[ScheduleRecord],
    source_file_name: str,
    parsed_at: Optional[str] = None,
) -> ScheduleDocument:
    return ScheduleDocument(
        meta=DocumentMeta(
            source_file_name=source_file_name,
            parsed_at=parsed_at or utc_timestamp(),
        ),
        summary=summarize(records),
        items=records,
        issues=[],
    )


def parse_workbook(
    file_path: str | Path,
    source_file_name: Optional[str] = None,
    sheet_name_filter: Optional[str] = None,
) -> ScheduleDocument:
    """
    Parse an Excel workbook and return the canonical ``ScheduleDocument``.

    *source_file_name* is recorded in the document meta; it defaults to the
    file's own name (uploads are stored under a job id, not their original
    name).  Any failure is raised as ``ProcessingError``.
    """
    source = source_file_name or Path(file_path).name
    try:
        grids = read_workbook(file_path, sheet_name_filter=sheet_name_filter)
        records, stats = parse_sheets(grids)
        document = build_document(records, source)
    except ScheduleParserError:
        raise
    except Exception as exc:
        raise ProcessingError(f"Failed to parse '{source}': {exc}") from exc

    logger.info(
        "Parsed %s: %d item(s) from %d sheet(s), %d group(s)",
        source,
        document.summary.items,
        len(stats),
        len(document.summary.groups),
    )
    return document


# -------------------------------------------------------------------
# CLI
# -------------------------------------------------------------------


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Parse an exam session schedule workbook into a JSON document.",
    )
    parser.add_argument(
        "excel_file",
        help="Path to the .xlsx file to parse",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output JSON file path (default: <input_name>_schedule.json)",
    )
    parser.add_argument(
        "-s",
        "--sheet",
        default=None,
        help="Name of a single worksheet to process (default: all sheets)",
    )
    args = parser.parse_args()

    config = resolve_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )

    excel_path = args.excel_file
    if not os.path.isfile(excel_path):
        logger.error("File not found: %s", excel_path)
        sys.exit(1)

    if args.output:
        output_path = args.output
    else:
        stem = Path(excel_path).stem
        output_path = f"{stem}_schedule.json"

    try:
        document = parse_workbook(excel_path, sheet_name_filter=args.sheet)
    except ProcessingError as exc:
        logger.error("%s", exc)
        sys.exit(1)

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(document.to_json())

    logger.info("Output written to %s", output_path)


if __name__ == "__main__":
    main()
