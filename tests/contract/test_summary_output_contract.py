from __future__ import annotations

import re
from pathlib import Path

from whisky_board.cli import main as cli_main

SUMMARY_PATTERN = re.compile(
    r"^SUMMARY shown=([0-9]+) total=([0-9]+) countries=([0-9]+) "
    r"metric=(avg|johan|erik) ranked=([0-9]+) missing_columns=([0-9]+)$"
)


def test_summary_line_is_last_and_matches_contract(write_config: Path, write_csv: Path, capsys):
    code = cli_main(["--csv-file", str(write_csv), "--query", "year"])
    lines = capsys.readouterr().out.strip().splitlines()
    assert code == 0
    match = SUMMARY_PATTERN.match(lines[-1])
    assert match, lines[-1]
    # 2 shown (query), 4 total, 3 countries, default metric, top_n=3 of 3 scored
    assert match.groups() == ("2", "4", "3", "avg", "3", "0")
