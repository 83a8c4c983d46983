# Shared pytest fixtures
from __future__ import annotations

import logging
import tempfile
from pathlib import Path

import pytest

from whisky_board.logging.init import LOGGER_NAME, reset_logging

HEADER = "Producent,Whisky,Producent & Whisky,Land,Betyg Genomsnitt,Betyg Johan,Betyg Erik,Ålder,Alk%"


@pytest.fixture(autouse=True)
def _clean_logging():
    reset_logging()
    yield
    reset_logging()
    # drop handlers bound to this test's captured stdout
    app_logger = logging.getLogger(LOGGER_NAME)
    for handler in app_logger.handlers[:]:
        app_logger.removeHandler(handler)


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        monkeypatch.delenv("WHISKY_BOARD_CSV_URL", raising=False)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """source_url: https://example.test/sheet.csv
columns:
  producer: Producent
  whisky: Whisky
  name: Producent & Whisky
  country: Land
  avg: Betyg Genomsnitt
  johan: Betyg Johan
  erik: Betyg Erik
  age: Ålder
  abv: Alk%
request_timeout: 5
top_n: 3
rank_from_full_dataset: true
defaults:
  sort: name_asc
  metric: avg
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "whisky_board.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def sample_csv_text() -> str:
    return (
        HEADER + "\r\n"
        'Macallan,12 Year,,Scotland,8,5,"8,5",12,43\r\n'
        'Lagavulin,16 Year,,Scotland,"9,2","9,0","9,4",16,43\r\n'
        'Yamazaki,Distiller\'s Reserve,,Japan,"7,5",8,7,,43\r\n'
        'Mackmyra,Svensk Ek,,Sverige,,"6,5",,,"46,1"\r\n'
        ',,,,,,,,\r\n'
        '\r\n'
    )


@pytest.fixture()
def write_csv(temp_workdir: Path, sample_csv_text: str) -> Path:
    p = temp_workdir / "data" / "sheet.csv"
    p.write_text(sample_csv_text, encoding="utf-8")
    return p
