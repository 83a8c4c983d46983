"""Domain models for the whisky tasting board.

Records, query state and load results used across parsing, services and the
terminal presentation.
"""

from .load_result import LoadResult
from .query_state import Metric, QueryState, SortMode
from .whisky_record import RawRecord, RawRow, WhiskyRecord

__all__ = [
    # Records
    "RawRow",
    "RawRecord",
    "WhiskyRecord",
    "LoadResult",
    # Query state
    "Metric",
    "SortMode",
    "QueryState",
]
