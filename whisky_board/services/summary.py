from __future__ import annotations

from .session import Session, SessionView

"""SUMMARY line rendering for one CLI run."""


def render_summary_line(session: Session, view: SessionView) -> str:
    """Render the SUMMARY line.

    Format:
    SUMMARY shown={rows} total={dataset} countries={n} metric={key}
    ranked={ranking} missing_columns={n}

    Examples:
        >>> from whisky_board.services.session import Session
        >>> s = Session.loading().loaded([])
        >>> render_summary_line(s, s.view())
        'SUMMARY shown=0 total=0 countries=0 metric=avg ranked=0 missing_columns=0'
    """
    return (
        f"SUMMARY shown={len(view.rows)} "
        f"total={len(session.dataset)} "
        f"countries={len(view.countries)} "
        f"metric={session.query_state.metric.value} "
        f"ranked={len(view.ranking)} "
        f"missing_columns={len(session.missing_columns)}"
    )
