from __future__ import annotations

import re

from whisky_board.models.query_state import Metric, QueryState
from whisky_board.models.whisky_record import WhiskyRecord
from whisky_board.services.session import Session
from whisky_board.services.summary import render_summary_line

SUMMARY_PATTERN = re.compile(
    r"^SUMMARY\s+shown=([0-9]+)\s+total=([0-9]+)\s+countries=([0-9]+)\s+"
    r"metric=(avg|johan|erik)\s+ranked=([0-9]+)\s+missing_columns=([0-9]+)$"
)


def _rec(name: str, country: str, johan: float | None) -> WhiskyRecord:
    return WhiskyRecord(producer=name, whisky="", name=name, country=country, johan=johan)


def test_render_summary_line_loaded_with_filter_and_warning():
    dataset = [_rec("A", "Japan", 8.0), _rec("B", "Scotland", None), _rec("C", "Scotland", 7.0)]
    session = Session.loading(QueryState(country="Scotland", metric=Metric.JOHAN)).loaded(
        dataset, missing_columns=["Ålder"]
    )
    line = render_summary_line(session, session.view())

    match = SUMMARY_PATTERN.match(line)
    assert match, f"SUMMARY line should match regex: {line}"
    assert match.groups() == ("2", "3", "2", "johan", "2", "1")


def test_render_summary_line_before_load():
    session = Session.loading()
    line = render_summary_line(session, session.view())
    assert line == "SUMMARY shown=0 total=0 countries=0 metric=avg ranked=0 missing_columns=0"
