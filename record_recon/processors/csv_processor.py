import csv
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional

from ..core.exceptions import EmptyInput, InputNotFound, MalformedRow, UnreadableInput

logger = logging.getLogger(__name__)

BOM = "\ufeff"


class CSVProcessor:
    """Reads a delimited file with a header row into read-only records."""

    def __init__(self, path, delimiter: str = ",", encoding: str = "utf-8"):
        self.path = Path(path)
        self.delimiter = delimiter
        self.encoding = encoding
        self.fieldnames: Optional[List[str]] = None
        self.skipped_rows = 0

    def read_records(self) -> Iterator[Mapping[str, str]]:
        if not self.path.is_file():
            raise InputNotFound(self.path)

        try:
            handle = open(self.path, "r", encoding=self.encoding, newline="")
        except OSError as exc:
            raise InputNotFound(self.path, exc.strerror) from exc

        with handle:
            reader = csv.reader(handle, delimiter=self.delimiter)
            try:
                # Blank lines before the header are ignored
                header = next((row for row in reader if row), None)
                if not header:
                    raise EmptyInput(self.path)

                # Excel writes a BOM that plain utf-8 keeps in the first name
                if header[0].startswith(BOM):
                    header[0] = header[0][len(BOM):]

                self.fieldnames = header
                self.skipped_rows = 0

                for row in reader:
                    if not row:
                        continue
                    try:
                        yield self._to_record(row, reader.line_num)
                    except MalformedRow as exc:
                        self.skipped_rows += 1
                        logger.warning(f"Skipping malformed row: {exc}")
            except (UnicodeDecodeError, csv.Error) as exc:
                raise UnreadableInput(self.path, str(exc)) from exc

        if self.skipped_rows:
            logger.warning(f"Skipped {self.skipped_rows} malformed rows in {self.path}")

    def _to_record(self, row: List[str], line_no: int) -> Mapping[str, str]:
        if len(row) != len(self.fieldnames):
            raise MalformedRow(self.path, line_no, len(self.fieldnames), len(row))
        return MappingProxyType(dict(zip(self.fieldnames, row)))
