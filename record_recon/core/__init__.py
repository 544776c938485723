from .exceptions import EmptyInput, InputNotFound, MalformedRow, ReconError, UnreadableInput
from .reconciliation import (
    bucket_name_for,
    build_index,
    find_destination_only,
    reconcile,
    summarize,
)

__all__ = [
    "EmptyInput",
    "InputNotFound",
    "MalformedRow",
    "ReconError",
    "UnreadableInput",
    "bucket_name_for",
    "build_index",
    "find_destination_only",
    "reconcile",
    "summarize",
]
