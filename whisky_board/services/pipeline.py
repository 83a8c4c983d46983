from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from ..config.loader import BoardConfig
from ..models.load_result import LoadResult
from ..models.query_state import QueryState
from ..parsing.normalizer import missing_columns, normalize
from ..parsing.schema_mapper import map_rows
from ..parsing.tokenizer import tokenize
from .fetch import FetchError, fetch_csv_text, read_csv_file
from .session import Session

"""Load orchestration: source text -> LoadResult -> Session.

Only the fetch stage can fail the session; parsing always produces a
best-effort dataset plus diagnostics.
"""

__all__ = [
    "LOADING_MESSAGE",
    "build_dataset",
    "format_missing_columns",
    "format_fetch_error",
    "load_session",
]

logger = logging.getLogger(__name__)

LOADING_MESSAGE = "Loading data…"


def build_dataset(text: str, columns: Mapping[str, str] | None = None) -> LoadResult:
    """Tokenize, map and normalize a CSV document.

    The missing-column check looks at the key set of the first raw record.
    """
    rows = tokenize(text)
    raw_records = map_rows(rows)
    missing = missing_columns(raw_records[0] if raw_records else None, columns)
    records = normalize(raw_records, columns)
    logger.debug(
        f"build_dataset: rows={len(rows)} raw_records={len(raw_records)} records={len(records)}"
    )
    return LoadResult(
        records=tuple(records),
        missing_columns=tuple(missing),
        raw_count=len(raw_records),
    )


def format_missing_columns(missing: tuple[str, ...] | list[str]) -> str:
    return f"Missing columns in CSV: {', '.join(missing)}. Check header names in the sheet."


def format_fetch_error(cause: str) -> str:
    return f"Could not load data. Check your published CSV URL. ({cause})"


def load_session(
    config: BoardConfig,
    query_state: QueryState | None = None,
    csv_file: Path | None = None,
) -> Session:
    """Fetch the source once and return the resulting Session.

    Returns a FAILED session (never raises) when the source cannot be
    retrieved; the error is logged.
    """
    session = Session.loading(
        query_state or QueryState(sort=config.default_sort, metric=config.default_metric),
        rank_from_full_dataset=config.rank_from_full_dataset,
        top_n=config.top_n,
    )
    logger.info(LOADING_MESSAGE)
    try:
        if csv_file is not None:
            text = read_csv_file(csv_file)
        else:
            text = fetch_csv_text(config.source_url, timeout=config.request_timeout)
    except FetchError as e:
        message = format_fetch_error(str(e))
        logger.error(message)
        return session.failed(message)

    result = build_dataset(text, config.columns)
    if result.missing_columns:
        logger.warning(format_missing_columns(result.missing_columns))
    return session.loaded(result.records, result.missing_columns)
