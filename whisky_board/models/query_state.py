from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

"""QueryState model and the enums it is built from.

QueryState is the ephemeral UI state handed to the query engine on every
recompute. It is immutable; controls produce a new state via ``with_*``.
"""

__all__ = [
    "Metric",
    "SortMode",
    "QueryState",
]


class Metric(Enum):
    """Score column used for metric sorting and ranking."""
    AVG = "avg"
    JOHAN = "johan"
    ERIK = "erik"


class SortMode(Enum):
    """Sort order of the filtered view.

    Metric modes sort by the currently selected ``Metric``.
    """
    NAME_ASC = "name_asc"
    NAME_DESC = "name_desc"
    METRIC_DESC = "metric_desc"
    METRIC_ASC = "metric_asc"


@dataclass(frozen=True)
class QueryState:
    text: str = ""
    country: str | None = None  # None = any country
    sort: SortMode = SortMode.NAME_ASC
    metric: Metric = Metric.AVG

    @property
    def any_country(self) -> bool:
        return not self.country

    def with_text(self, text: str) -> QueryState:
        return replace(self, text=text)

    def with_country(self, country: str | None) -> QueryState:
        return replace(self, country=country or None)

    def with_sort(self, sort: SortMode | str) -> QueryState:
        return replace(self, sort=SortMode(sort))

    def with_metric(self, metric: Metric | str) -> QueryState:
        return replace(self, metric=Metric(metric))
