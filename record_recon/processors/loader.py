"""Loads record sets from tabular files."""

import logging
from pathlib import Path
from typing import List, Mapping, Tuple

from .csv_processor import CSVProcessor
from .dbf_processor import DBFProcessor

logger = logging.getLogger(__name__)


def get_processor(path, delimiter: str = ",", encoding: str = "utf-8"):
    if Path(path).suffix.lower() == ".dbf":
        return DBFProcessor(path)
    return CSVProcessor(path, delimiter=delimiter, encoding=encoding)


def load_records(path, delimiter: str = ",", encoding: str = "utf-8") -> Tuple[List[Mapping[str, str]], List[str]]:
    """
        Read a whole record set into memory.

        Returns the records in file order together with the header field names.
    """
    processor = get_processor(path, delimiter=delimiter, encoding=encoding)
    records = list(processor.read_records())
    logger.info(f"Loaded {len(records)} records from {path}")
    return records, list(processor.fieldnames)
