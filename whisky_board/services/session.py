from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from enum import Enum

from ..models.query_state import Metric, QueryState
from ..models.whisky_record import WhiskyRecord
from .query import DEFAULT_TOP_N, country_options, query, rank_top, ranking_pairs

"""Session state: canonical dataset + current query state.

Transitions return a new Session; nothing is mutated in place. Lifecycle:
LOADING -> (LOADED | FAILED). FAILED is terminal for the session.
"""

__all__ = [
    "LoadState",
    "Session",
    "SessionView",
]


class LoadState(Enum):
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass(frozen=True)
class SessionView:
    """Derived view handed to the presentation adapter."""
    rows: list[WhiskyRecord]  # filtered + sorted, for table and cards
    ranking: list[WhiskyRecord]  # top-N by the active metric, for the chart
    countries: list[str]  # country selector options
    status: str
    metric: Metric = Metric.AVG

    @property
    def chart_pairs(self) -> list[tuple[str, float]]:
        return ranking_pairs(self.ranking, self.metric)


@dataclass(frozen=True)
class Session:
    state: LoadState = LoadState.LOADING
    dataset: tuple[WhiskyRecord, ...] = ()
    query_state: QueryState = field(default_factory=QueryState)
    missing_columns: tuple[str, ...] = ()
    error: str | None = None
    # Chart ranks the full dataset (True) or the filtered view (False).
    rank_from_full_dataset: bool = True
    top_n: int = DEFAULT_TOP_N

    @classmethod
    def loading(
        cls,
        query_state: QueryState | None = None,
        *,
        rank_from_full_dataset: bool = True,
        top_n: int = DEFAULT_TOP_N,
    ) -> Session:
        return cls(
            query_state=query_state or QueryState(),
            rank_from_full_dataset=rank_from_full_dataset,
            top_n=top_n,
        )

    def loaded(
        self, dataset: Iterable[WhiskyRecord], missing_columns: Iterable[str] = ()
    ) -> Session:
        """Replace the dataset wholesale."""
        if self.state is LoadState.FAILED:
            return self
        return replace(
            self,
            state=LoadState.LOADED,
            dataset=tuple(dataset),
            missing_columns=tuple(missing_columns),
            error=None,
        )

    def failed(self, message: str) -> Session:
        return replace(self, state=LoadState.FAILED, dataset=(), error=message)

    def query_changed(self, query_state: QueryState) -> Session:
        return replace(self, query_state=query_state)

    def ranking_changed(
        self, *, top_n: int | None = None, rank_from_full_dataset: bool | None = None
    ) -> Session:
        return replace(
            self,
            top_n=self.top_n if top_n is None else top_n,
            rank_from_full_dataset=(
                self.rank_from_full_dataset
                if rank_from_full_dataset is None
                else rank_from_full_dataset
            ),
        )

    @property
    def is_loaded(self) -> bool:
        return self.state is LoadState.LOADED

    def view(self) -> SessionView:
        """Recompute the filtered/sorted rows and the ranking from current state.

        Before load (or after a failed load) everything is empty.
        """
        if not self.is_loaded:
            status = "Loading data…" if self.state is LoadState.LOADING else (self.error or "")
            return SessionView(
                rows=[], ranking=[], countries=[], status=status, metric=self.query_state.metric
            )

        rows = query(self.dataset, self.query_state)
        source = self.dataset if self.rank_from_full_dataset else rows
        metric = self.query_state.metric
        ranking = rank_top(source, metric, self.top_n)
        return SessionView(
            rows=rows,
            ranking=ranking,
            countries=country_options(self.dataset),
            status=f"{len(rows)} whiskies shown",
            metric=metric,
        )
