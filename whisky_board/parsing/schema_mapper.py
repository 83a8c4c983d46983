from __future__ import annotations

from collections.abc import Sequence

from ..models.whisky_record import RawRecord, RawRow

"""Header-row mapping: tokenized rows -> field-keyed raw records."""

__all__ = [
    "map_rows",
]


def map_rows(rows: Sequence[RawRow]) -> list[RawRecord]:
    """Zip the header row with each data row.

    Row 0 is the header (cells trimmed, a leading byte-order mark dropped). Short rows are padded with ``""``;
    with duplicate header names the later column wins. Fewer than two rows
    (no header or no data) yields an empty list.
    """
    if len(rows) < 2:
        return []
    header = [h.strip().lstrip("\ufeff").strip() for h in rows[0]]
    records: list[RawRecord] = []
    for row in rows[1:]:
        record: RawRecord = {}
        for j, key in enumerate(header):
            record[key] = row[j] if j < len(row) else ""
        records.append(record)
    return records
