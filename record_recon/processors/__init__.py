from .csv_processor import CSVProcessor
from .dbf_processor import DBFProcessor
from .loader import get_processor, load_records

__all__ = ["CSVProcessor", "DBFProcessor", "get_processor", "load_records"]
