import logging
import struct
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional

from dbfread import DBF  # type: ignore
from dbfread.exceptions import DBFNotFound  # type: ignore

from ..core.exceptions import EmptyInput, InputNotFound, UnreadableInput

logger = logging.getLogger(__name__)


class DBFProcessor:
    def __init__(self, path):
        self.path = Path(path)
        self.fieldnames: Optional[List[str]] = None

    def read_records(self) -> Iterator[Mapping[str, str]]:
        if not self.path.is_file():
            raise InputNotFound(self.path)

        try:
            table = DBF(str(self.path), load=False)
        except (DBFNotFound, OSError) as exc:
            raise InputNotFound(self.path, str(exc)) from exc
        except (struct.error, ValueError) as exc:
            # dbfread cannot unpack a zero-byte or truncated header
            if self.path.stat().st_size == 0:
                raise EmptyInput(self.path) from exc
            raise UnreadableInput(self.path, str(exc)) from exc

        self.fieldnames = list(table.field_names)
        if not self.fieldnames:
            raise EmptyInput(self.path)

        try:
            for record in table:
                yield MappingProxyType({
                    name: self._as_text(record.get(name))
                    for name in self.fieldnames
                })
        except (struct.error, ValueError) as exc:
            raise UnreadableInput(self.path, str(exc)) from exc

    @staticmethod
    def _as_text(value) -> str:
        # dbfread yields typed values (dates, numbers); compare as text
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return str(value)
