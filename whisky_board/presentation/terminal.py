from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from ..models.whisky_record import WhiskyRecord
from ..services.formatting import PLACEHOLDER, format_int, format_score

"""Terminal rendering of the session view (table, cards, chart, countries).

Thin adapter: consumes already filtered/sorted/ranked records and only
formats them.
"""

__all__ = [
    "TABLE_COLUMNS",
    "records_to_frame",
    "render_table",
    "render_cards",
    "render_chart",
    "render_countries",
]

TABLE_COLUMNS = ["Producer", "Whisky", "Country", "Avg", "Johan", "Erik", "Age", "ABV"]
CHART_WIDTH = 40


def records_to_frame(records: Sequence[WhiskyRecord]) -> pd.DataFrame:
    """Display-ready DataFrame, one row per record, all cells formatted strings."""
    data = [
        [
            r.producer,
            r.whisky,
            r.country,
            format_score(r.avg),
            format_score(r.johan),
            format_score(r.erik),
            format_int(r.age),
            format_int(r.abv),
        ]
        for r in records
    ]
    return pd.DataFrame(data, columns=TABLE_COLUMNS)


def render_table(records: Sequence[WhiskyRecord]) -> str:
    if not records:
        return "(no whiskies)"
    return records_to_frame(records).to_string(index=False)


def _card(r: WhiskyRecord) -> str:
    pills = [
        r.country or PLACEHOLDER,
        f"Avg: {format_score(r.avg)}",
        f"Johan: {format_score(r.johan)}",
        f"Erik: {format_score(r.erik)}",
    ]
    if r.age is not None:
        pills.append(f"Age: {format_int(r.age)}")
    if r.abv is not None:
        pills.append(f"ABV: {format_int(r.abv)}%")
    return f"{r.name}\n  " + " | ".join(pills)


def render_cards(records: Sequence[WhiskyRecord]) -> str:
    return "\n\n".join(_card(r) for r in records)


def render_chart(pairs: Sequence[tuple[str, float]], label: str, width: int = CHART_WIDTH) -> str:
    """Horizontal bar chart; bars scale to the largest value."""
    if not pairs:
        return f"{label}: (no scores)"
    label_width = max(len(name) for name, _ in pairs)
    top = max(value for _, value in pairs)
    lines = [label]
    for name, value in pairs:
        length = round(width * value / top) if top > 0 else 0
        lines.append(f"{name.ljust(label_width)} | {'█' * length} {format_score(value)}")
    return "\n".join(lines)


def render_countries(countries: Sequence[str]) -> str:
    return "\n".join(["All", *countries])
