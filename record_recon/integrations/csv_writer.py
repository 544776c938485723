import csv
import json
import logging
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence

logger = logging.getLogger(__name__)


def _union_fieldnames(records: Sequence[Mapping[str, str]]) -> List[str]:
    fieldnames: Dict[str, None] = {}
    for record in records:
        for name in record:
            fieldnames.setdefault(name, None)
    return list(fieldnames)


def write_bucket(
    path: Path,
    records: Sequence[Mapping[str, str]],
    default_fieldnames: Optional[Sequence[str]] = None,
    delimiter: str = ",",
    encoding: str = "utf-8",
) -> Path:
    fieldnames = _union_fieldnames(records) or list(default_fieldnames or [])

    with open(path, "w", encoding=encoding, newline="") as handle:
        if not fieldnames:
            return path
        writer = csv.DictWriter(handle, fieldnames=fieldnames, delimiter=delimiter, restval="")
        writer.writeheader()
        for record in records:
            writer.writerow(record)

    logger.debug(f"Wrote {len(records)} records to {path}")
    return path


def write_buckets(
    buckets: Mapping[str, Sequence[Mapping[str, str]]],
    output_dir,
    default_fieldnames: Optional[Mapping[str, Sequence[str]]] = None,
    delimiter: str = ",",
    encoding: str = "utf-8",
) -> Dict[str, Path]:
    """
        Write each bucket to "<output_dir>/<bucket>.csv".

        default_fieldnames maps a bucket name to the header used when the
        bucket is empty.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    defaults = default_fieldnames or {}

    paths: Dict[str, Path] = {}
    for name, records in buckets.items():
        paths[name] = write_bucket(
            output_dir / f"{name}.csv",
            records,
            default_fieldnames=defaults.get(name),
            delimiter=delimiter,
            encoding=encoding,
        )

    logger.info(f"Wrote {len(paths)} bucket files to {output_dir}")
    return paths


def write_summary(summary: Mapping, output_dir, filename: str = "summary.json") -> Path:
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / filename
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(summary, handle, indent=2, default=str)
    return path
