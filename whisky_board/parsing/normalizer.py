from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable, Mapping

from ..models.whisky_record import RawRecord, WhiskyRecord

"""Normalization of raw records into WhiskyRecord.

Column lookup is driven by a logical-field -> header-text mapping (see
``DEFAULT_COLUMNS``). A missing column never fails normalization; the field
simply stays empty (text) or absent (numbers).
"""

__all__ = [
    "DEFAULT_COLUMNS",
    "parse_locale_number",
    "normalize",
    "normalize_record",
    "missing_columns",
]

logger = logging.getLogger(__name__)

# Logical field -> header text in the published sheet. Order is the order
# used when reporting missing columns.
DEFAULT_COLUMNS: dict[str, str] = {
    "producer": "Producent",
    "whisky": "Whisky",
    "name": "Producent & Whisky",
    "country": "Land",
    "avg": "Betyg Genomsnitt",
    "johan": "Betyg Johan",
    "erik": "Betyg Erik",
    "age": "Ålder",
    "abv": "Alk%",
}

_WHITESPACE = re.compile(r"\s+")
_PLAIN_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_locale_number(value: str | None) -> float | None:
    """Parse a number that may use a comma decimal separator.

    ``"12,5"`` -> 12.5, ``"1 234,5"`` -> 1234.5. Empty, unparseable or
    non-finite input yields ``None``.
    """
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    # only the first comma is treated as the decimal separator
    text = _WHITESPACE.sub("", text).replace(",", ".", 1)
    if not _PLAIN_NUMBER.fullmatch(text):
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def _text(record: RawRecord, columns: Mapping[str, str], field: str) -> str:
    return (record.get(columns[field]) or "").strip()


def _number(record: RawRecord, columns: Mapping[str, str], field: str) -> float | None:
    return parse_locale_number(record.get(columns[field]))


def normalize_record(record: RawRecord, columns: Mapping[str, str] | None = None) -> WhiskyRecord:
    cols = {**DEFAULT_COLUMNS, **(columns or {})}
    producer = _text(record, cols, "producer")
    whisky = _text(record, cols, "whisky")
    name = _text(record, cols, "name") or f"{producer} {whisky}".strip()
    return WhiskyRecord(
        producer=producer,
        whisky=whisky,
        name=name,
        country=_text(record, cols, "country"),
        avg=_number(record, cols, "avg"),
        johan=_number(record, cols, "johan"),
        erik=_number(record, cols, "erik"),
        age=_number(record, cols, "age"),
        abv=_number(record, cols, "abv"),
    )


def normalize(
    records: Iterable[RawRecord], columns: Mapping[str, str] | None = None
) -> list[WhiskyRecord]:
    """Map raw records to WhiskyRecord, dropping rows whose name is empty.

    Output keeps input order.
    """
    out: list[WhiskyRecord] = []
    dropped = 0
    for raw in records:
        rec = normalize_record(raw, columns)
        if not rec.name:
            dropped += 1
            continue
        out.append(rec)
    if dropped:
        logger.debug(f"normalize: dropped {dropped} row(s) without a name")
    return out


def missing_columns(
    first_record: Mapping[str, str] | None, columns: Mapping[str, str] | None = None
) -> list[str]:
    """Expected header names absent from the first record's keys.

    With no records at all every expected column is reported, since nothing
    can confirm the header.
    """
    cols = {**DEFAULT_COLUMNS, **(columns or {})}
    present = set(first_record or {})
    return [header for header in cols.values() if header not in present]
