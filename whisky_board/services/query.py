from __future__ import annotations

import unicodedata
from collections.abc import Iterable, Sequence

from ..models.query_state import Metric, QueryState, SortMode
from ..models.whisky_record import WhiskyRecord

"""Query engine: filter -> sort -> top-N over the canonical dataset.

All functions are pure and return new lists; the dataset passed in is never
mutated. Sorting relies on ``sorted`` being stable so records with equal keys
keep their filter-stage order.
"""

__all__ = [
    "DEFAULT_TOP_N",
    "collation_key",
    "filter_records",
    "sort_records",
    "query",
    "rank_top",
    "ranking_pairs",
    "country_options",
]

DEFAULT_TOP_N = 10


def collation_key(text: str) -> tuple[str, str]:
    """Locale-style sort key: accent- and case-insensitive first, raw text as tie-break."""
    decomposed = unicodedata.normalize("NFKD", text)
    folded = "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()
    return (folded, text)


def _matches(record: WhiskyRecord, needle: str) -> bool:
    return any(
        needle in value.casefold()
        for value in (record.name, record.producer, record.whisky, record.country)
    )


def filter_records(dataset: Iterable[WhiskyRecord], state: QueryState) -> list[WhiskyRecord]:
    """Keep records matching the country filter and the free-text query.

    Country is an exact match unless the state selects any country. The text
    query (trimmed, case-folded) must be a substring of name, producer,
    whisky or country.
    """
    needle = state.text.strip().casefold()
    out: list[WhiskyRecord] = []
    for record in dataset:
        if not state.any_country and record.country != state.country:
            continue
        if needle and not _matches(record, needle):
            continue
        out.append(record)
    return out


def sort_records(
    records: Iterable[WhiskyRecord], sort: SortMode, metric: Metric = Metric.AVG
) -> list[WhiskyRecord]:
    """Stable sort by name or by the selected metric.

    Records without a value for ``metric`` always go last, whatever the
    direction.
    """
    if sort is SortMode.NAME_ASC:
        return sorted(records, key=lambda r: collation_key(r.name))
    if sort is SortMode.NAME_DESC:
        return sorted(records, key=lambda r: collation_key(r.name), reverse=True)

    key = metric.value
    descending = sort is SortMode.METRIC_DESC

    def metric_key(record: WhiskyRecord) -> tuple[bool, float]:
        value = record.score(key)
        if value is None:
            return (True, 0.0)
        return (False, -value if descending else value)

    return sorted(records, key=metric_key)


def query(dataset: Sequence[WhiskyRecord] | None, state: QueryState) -> list[WhiskyRecord]:
    """Filtered and sorted view for table/card rendering.

    A dataset of ``None`` (not loaded yet) is treated as empty.
    """
    if not dataset:
        return []
    return sort_records(filter_records(dataset, state), state.sort, state.metric)


def rank_top(
    dataset: Iterable[WhiskyRecord] | None, metric: Metric, n: int = DEFAULT_TOP_N
) -> list[WhiskyRecord]:
    """Top ``n`` records by ``metric``, highest first; ties keep input order.

    Records without a value for the metric are never selected.
    """
    if not dataset or n <= 0:
        return []
    key = metric.value
    present = [r for r in dataset if r.score(key) is not None]
    return sorted(present, key=lambda r: r.score(key), reverse=True)[:n]


def ranking_pairs(records: Iterable[WhiskyRecord], metric: Metric) -> list[tuple[str, float]]:
    """(label, value) pairs for the bar chart."""
    key = metric.value
    return [(r.name, r.score(key)) for r in records if r.score(key) is not None]


def country_options(dataset: Iterable[WhiskyRecord] | None) -> list[str]:
    """Sorted, deduplicated, non-empty countries of the dataset."""
    if not dataset:
        return []
    return sorted({r.country for r in dataset if r.country}, key=collation_key)
