from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from whisky_board.config.loader import DEFAULT_CONFIG_PATH, ConfigError, load_config
from whisky_board.logging.init import log_summary, set_debug, setup_logging
from whisky_board.models.query_state import Metric, QueryState, SortMode
from whisky_board.presentation.terminal import (
    render_cards,
    render_chart,
    render_countries,
    render_table,
)
from whisky_board.services.pipeline import load_session
from whisky_board.services.session import LoadState
from whisky_board.services.summary import render_summary_line

"""CLI entrypoint.

Flow:
- Load .env, then the YAML config
- Fetch the published CSV once (or read --csv-file)
- Build the session, apply the query controls from the command line
- Print the requested views and a SUMMARY line
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1
EXIT_WARNINGS = 2

VIEWS = ("all", "table", "cards", "chart", "countries")


def _load_env_file(path: Path, override: bool = True) -> None:
    """Load .env so WHISKY_BOARD_CSV_URL can point at another sheet."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="whisky-board", description="Whisky tasting board")
    p.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="YAML config path")
    p.add_argument("--csv-file", type=Path, default=None, help="Read a local CSV instead of the URL")
    p.add_argument("-q", "--query", default="", help="Free-text filter (name/producer/whisky/country)")
    p.add_argument("--country", default="", help="Exact country filter (empty = all)")
    p.add_argument("--sort", choices=[m.value for m in SortMode], default=None, help="Sort mode")
    p.add_argument("--metric", choices=[m.value for m in Metric], default=None, help="Ranking metric")
    p.add_argument("--top", type=int, default=None, help="Number of ranked whiskies in the chart")
    p.add_argument("--view", choices=VIEWS, default="all", help="What to print")
    p.add_argument(
        "--rank-filtered",
        action="store_true",
        help="Rank the filtered view instead of the full dataset",
    )
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # None only: an explicit [] must not pick up the test runner's argv
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"), override=True)

    if args.debug:
        set_debug(logger)
        logger.debug("debug mode enabled")

    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    state = QueryState(
        text=args.query,
        country=args.country or None,
        sort=SortMode(args.sort) if args.sort else cfg.default_sort,
        metric=Metric(args.metric) if args.metric else cfg.default_metric,
    )
    session = load_session(cfg, state, csv_file=args.csv_file)
    if session.state is LoadState.FAILED:
        return EXIT_FATAL

    if args.top is not None or args.rank_filtered:
        session = session.ranking_changed(
            top_n=args.top,
            rank_from_full_dataset=False if args.rank_filtered else None,
        )

    view = session.view()
    logger.info(view.status)

    label = cfg.metric_label(state.metric)
    sections: list[str] = []
    if args.view in ("all", "chart"):
        sections.append(render_chart(view.chart_pairs, label))
    if args.view in ("all", "table"):
        sections.append(render_table(view.rows))
    if args.view in ("all", "cards"):
        sections.append(render_cards(view.rows))
    if args.view == "countries":
        sections.append(render_countries(view.countries))
    for section in sections:
        if section:
            print(section)
            print()

    logger.debug(f"rank_from_full_dataset={session.rank_from_full_dataset} top_n={session.top_n}")
    log_summary(render_summary_line(session, view)[len("SUMMARY "):])

    if session.missing_columns:
        return EXIT_WARNINGS
    return EXIT_SUCCESS


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
