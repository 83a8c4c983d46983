from __future__ import annotations

from pathlib import Path

import pytest

from whisky_board.config.loader import ConfigError, load_config
from whisky_board.models.query_state import Metric, SortMode
from whisky_board.parsing.normalizer import DEFAULT_COLUMNS


def test_load_config_success(write_config: Path):
    cfg = load_config(write_config)
    assert cfg.source_url == "https://example.test/sheet.csv"
    assert cfg.columns == DEFAULT_COLUMNS
    assert cfg.request_timeout == 5.0
    assert cfg.top_n == 3
    assert cfg.rank_from_full_dataset is True
    assert cfg.default_sort is SortMode.NAME_ASC
    assert cfg.default_metric is Metric.AVG


def test_load_config_minimal_applies_defaults(temp_workdir: Path):
    path = temp_workdir / "config" / "whisky_board.yml"
    path.write_text("source_url: https://example.test/x.csv\n", encoding="utf-8")
    cfg = load_config(path)
    assert cfg.columns == DEFAULT_COLUMNS
    assert cfg.metric_labels == {"avg": "Avg", "johan": "Johan", "erik": "Erik"}
    assert cfg.request_timeout == 10.0
    assert cfg.top_n == 10
    assert cfg.metric_label(Metric.JOHAN) == "Johan"


def test_partial_column_override_keeps_other_defaults(temp_workdir: Path):
    path = temp_workdir / "config" / "whisky_board.yml"
    path.write_text(
        "source_url: https://example.test/x.csv\ncolumns:\n  age: Age\n", encoding="utf-8"
    )
    cfg = load_config(path)
    assert cfg.columns["age"] == "Age"
    assert cfg.columns["producer"] == "Producent"


def test_env_var_overrides_source_url(write_config: Path, monkeypatch):
    monkeypatch.setenv("WHISKY_BOARD_CSV_URL", "https://other.test/sheet.csv")
    assert load_config(write_config).source_url == "https://other.test/sheet.csv"


def test_load_config_missing_file(temp_workdir: Path):
    missing = temp_workdir / "config" / "not_exists.yml"
    with pytest.raises(ConfigError, match="config file not found"):
        load_config(missing)


def test_load_config_invalid_yaml(write_config: Path):
    write_config.write_text("source_url: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="invalid yaml"):
        load_config(write_config)


def test_load_config_missing_required(write_config: Path):
    text = write_config.read_text(encoding="utf-8").replace(
        "source_url: https://example.test/sheet.csv\n", ""
    )
    write_config.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError) as e:
        load_config(write_config)
    assert "config validation failed" in str(e.value) and "required property" in str(e.value)


def test_load_config_extra_field(write_config: Path):
    text = write_config.read_text(encoding="utf-8") + "\nextra_field: not_allowed\n"
    write_config.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError, match="config validation failed"):
        load_config(write_config)


def test_load_config_unknown_logical_column(write_config: Path):
    text = write_config.read_text(encoding="utf-8").replace("  abv: Alk%\n", "  abv: Alk%\n  price: Pris\n")
    write_config.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError, match="config validation failed"):
        load_config(write_config)


def test_load_config_invalid_sort_mode(write_config: Path):
    text = write_config.read_text(encoding="utf-8").replace("sort: name_asc", "sort: price")
    write_config.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError, match="config validation failed"):
        load_config(write_config)


def test_load_config_non_mapping_top_level(write_config: Path):
    write_config.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="config validation failed"):
        load_config(write_config)


def test_shipped_config_is_valid():
    repo_root = Path(__file__).resolve().parents[2]
    cfg = load_config(repo_root / "config" / "whisky_board.yml")
    assert cfg.columns == DEFAULT_COLUMNS
    assert cfg.source_url.startswith("https://")
