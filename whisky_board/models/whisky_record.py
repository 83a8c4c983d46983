from __future__ import annotations

from dataclasses import dataclass

"""WhiskyRecord domain model.

A WhiskyRecord is one tasting row after normalization: trimmed text fields,
a derived display name and locale-parsed numeric scores. Absent numbers are
represented as ``None`` (never 0).
"""

__all__ = [
    "RawRow",
    "RawRecord",
    "WhiskyRecord",
]

# One line of tokenized CSV input, one string per column.
RawRow = list[str]
# Header name -> raw cell text for one data row.
RawRecord = dict[str, str]


@dataclass(frozen=True)
class WhiskyRecord:
    """Canonical typed tasting record.

    Only records with a non-empty ``name`` are kept in the canonical dataset.
    """
    producer: str
    whisky: str
    name: str
    country: str
    avg: float | None = None  # average score
    johan: float | None = None  # judge A score
    erik: float | None = None  # judge B score
    age: float | None = None
    abv: float | None = None

    def score(self, metric: str) -> float | None:
        """Return the value of a score field by metric key (avg/johan/erik)."""
        return getattr(self, metric)
