from __future__ import annotations

from dataclasses import dataclass, field

from .whisky_record import WhiskyRecord

"""LoadResult model: outcome of one parse cycle over a CSV document."""

__all__ = [
    "LoadResult",
]


@dataclass(frozen=True)
class LoadResult:
    """Normalized dataset plus the diagnostics gathered while building it.

    Attributes:
        records: Canonical dataset in first-seen source order
        missing_columns: Expected header names not found in the first data row
        raw_count: Number of data rows mapped before blank-name rows were dropped
    """
    records: tuple[WhiskyRecord, ...]
    missing_columns: tuple[str, ...] = field(default_factory=tuple)
    raw_count: int = 0

    @property
    def has_warnings(self) -> bool:
        return bool(self.missing_columns)
