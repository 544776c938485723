"""Reconciliation logic for matching source records against a destination index."""

import logging
from typing import Dict, Iterable, List, Mapping, Sequence

logger = logging.getLogger(__name__)

UNMATCHED = "unmatched"
FULLY_MATCHED = "fully_matched"

# Fields whose bucket name differs from "<field>_mismatch"
BUCKET_ALIASES = {
    "encrypted_password": "password_mismatch",
}

_MISSING = object()

Record = Mapping[str, str]


def bucket_name_for(field: str) -> str:
    return BUCKET_ALIASES.get(field, f"{field}_mismatch")


def _key_of(record: Record, key_field: str):
    value = record.get(key_field)
    if value is None or value == "":
        return None
    return value


def build_index(destination_set: Iterable[Record], key_field: str) -> Dict[str, Record]:
    """
        Index destination records by key field.

        Duplicate keys resolve to the record seen last (last-write-wins).
        Records with a missing or empty key are not indexed.
    """
    index: Dict[str, Record] = {}
    skipped = 0

    for record in destination_set:
        key = _key_of(record, key_field)
        if key is None:
            skipped += 1
            continue
        if key in index:
            logger.debug(f"Duplicate destination key {key!r}, keeping later record")
        index[key] = record

    if skipped:
        logger.warning(f"Skipped {skipped} destination records without a '{key_field}' value")

    return index


def reconcile(
    source_set: Iterable[Record],
    index: Mapping[str, Record],
    compared_fields: Sequence[str],
    key_field: str = "email",
) -> Dict[str, List[Record]]:
    """
        Classify every source record against its destination match.

        Unmatched source records go to "unmatched". For matched records the
        destination record is appended to each mismatch bucket whose field
        differs, or to "fully_matched" when every compared field agrees.
        A field missing on either side counts as a mismatch.
    """
    compared_fields = list(dict.fromkeys(compared_fields))

    buckets: Dict[str, List[Record]] = {UNMATCHED: []}
    for field in compared_fields:
        buckets[bucket_name_for(field)] = []
    buckets[FULLY_MATCHED] = []

    for record in source_set:
        key = _key_of(record, key_field)
        destination = index.get(key) if key is not None else None

        if destination is None:
            buckets[UNMATCHED].append(record)
            continue

        all_equal = True
        for field in compared_fields:
            source_value = record.get(field, _MISSING)
            destination_value = destination.get(field, _MISSING)

            if source_value is _MISSING or destination_value is _MISSING or source_value != destination_value:
                buckets[bucket_name_for(field)].append(destination)
                all_equal = False

        if all_equal:
            buckets[FULLY_MATCHED].append(destination)

    return buckets


def find_destination_only(
    source_set: Iterable[Record],
    index: Mapping[str, Record],
    key_field: str = "email",
) -> List[Record]:
    """Destination records whose key never appears in the source set."""
    processed = set()
    for record in source_set:
        key = _key_of(record, key_field)
        if key is not None:
            processed.add(key)

    return [record for key, record in index.items() if key not in processed]


def summarize(buckets: Mapping[str, List[Record]]) -> Dict[str, int]:
    return {name: len(records) for name, records in buckets.items()}
