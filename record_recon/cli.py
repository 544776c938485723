#!/usr/bin/env python3
"""
Record Reconciliation CLI
Compares a source record set against a destination record set and writes
one CSV file per outcome bucket.
"""

import argparse
import logging
import sys
import uuid
from datetime import datetime
from typing import Dict, List, Optional

from .config.settings import settings, split_fields
from .core.exceptions import ReconError
from .core.reconciliation import (
    UNMATCHED,
    build_index,
    find_destination_only,
    reconcile,
    summarize,
)
from .integrations.csv_writer import write_buckets, write_summary
from .processors.loader import load_records

logger = logging.getLogger(__name__)

DESTINATION_ONLY = "destination_only"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="record-recon",
        description="Reconcile a source record set against a destination record set.",
    )
    parser.add_argument("source", help="Path to the source CSV or DBF file")
    parser.add_argument("destination", help="Path to the destination CSV or DBF file")
    parser.add_argument(
        "--output-dir",
        default=settings.OUTPUT_DIR,
        help="Directory for bucket files (default: $RECON_OUTPUT_DIR or recon_output)",
    )
    parser.add_argument(
        "--key-field",
        default=settings.KEY_FIELD,
        help="Field used to match source and destination records",
    )
    parser.add_argument(
        "--compare",
        default=",".join(settings.COMPARED_FIELDS),
        help="Comma separated fields to compare on matched records",
    )
    parser.add_argument("--delimiter", default=settings.CSV_DELIMITER, help="CSV field delimiter")
    parser.add_argument("--encoding", default=settings.CSV_ENCODING, help="CSV file encoding")
    parser.add_argument(
        "--report-destination-only",
        action="store_true",
        default=False,
        help="Also write destination records with no source counterpart",
    )
    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging level",
    )
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> Dict:
    compared_fields = split_fields(args.compare)

    source_records, source_fields = load_records(
        args.source, delimiter=args.delimiter, encoding=args.encoding
    )
    destination_records, destination_fields = load_records(
        args.destination, delimiter=args.delimiter, encoding=args.encoding
    )

    index = build_index(destination_records, args.key_field)
    buckets = reconcile(source_records, index, compared_fields, key_field=args.key_field)
    if args.report_destination_only:
        buckets[DESTINATION_ONLY] = find_destination_only(
            source_records, index, key_field=args.key_field
        )

    # Unmatched rows come from the source file, everything else from the destination
    default_fieldnames = {name: destination_fields for name in buckets}
    default_fieldnames[UNMATCHED] = source_fields

    paths = write_buckets(
        buckets,
        args.output_dir,
        default_fieldnames=default_fieldnames,
        delimiter=args.delimiter,
        encoding=args.encoding,
    )

    summary = {
        "run_id": str(uuid.uuid4()),
        "created_at": datetime.now().isoformat(timespec="seconds"),
        "source": str(args.source),
        "destination": str(args.destination),
        "key_field": args.key_field,
        "compared_fields": compared_fields,
        "source_records": len(source_records),
        "destination_records": len(destination_records),
        "indexed_keys": len(index),
        "counts": summarize(buckets),
        "files": {name: str(path) for name, path in paths.items()},
    }
    write_summary(summary, args.output_dir, filename=settings.SUMMARY_FILE)
    _log_summary(summary, args.output_dir)
    return summary


def _log_summary(summary: Dict, output_dir) -> None:
    logger.info("=" * 70)
    logger.info("RECONCILIATION SUMMARY")
    logger.info("=" * 70)
    logger.info(f"Run ID:                {summary['run_id']}")
    logger.info(f"Source Records:        {summary['source_records']}")
    logger.info(f"Destination Records:   {summary['destination_records']}")
    for name, count in summary["counts"].items():
        logger.info(f"  - {name + ':':<20} {count}")
    logger.info(f"Output Directory:      {output_dir}")
    logger.info("=" * 70)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        run(args)
    except ReconError as e:
        logger.error(f"Reconciliation failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
