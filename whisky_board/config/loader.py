from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.query_state import Metric, SortMode
from ..parsing.normalizer import DEFAULT_COLUMNS

"""Config loader.

Responsibilities:
- Load YAML config (default ``config/whisky_board.yml``)
- Validate against the packaged JSON schema
- Apply defaults (column headers, labels, timeout, top-N, sort/metric)
- Let ``WHISKY_BOARD_CSV_URL`` override ``source_url``
"""

SCHEMA_PATH = Path(__file__).parent / "config_schema.json"
DEFAULT_CONFIG_PATH = Path("config/whisky_board.yml")
URL_ENV_VAR = "WHISKY_BOARD_CSV_URL"

DEFAULT_METRIC_LABELS: dict[str, str] = {
    "avg": "Avg",
    "johan": "Johan",
    "erik": "Erik",
}


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class BoardConfig:
    source_url: str
    columns: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_COLUMNS))
    metric_labels: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_METRIC_LABELS))
    request_timeout: float = 10.0
    top_n: int = 10
    rank_from_full_dataset: bool = True
    default_sort: SortMode = SortMode.NAME_ASC
    default_metric: Metric = Metric.AVG

    def metric_label(self, metric: Metric) -> str:
        return self.metric_labels.get(metric.value, metric.value)


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: If the schema file is missing or invalid, or the data
            fails validation (missing ``source_url``, unknown keys, wrong types).
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> BoardConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config validation failed: top level must be a mapping, got {type(data).__name__}")

    _validate_config_schema(data)

    defaults = data.get("defaults", {})
    return BoardConfig(
        source_url=os.getenv(URL_ENV_VAR) or data["source_url"],
        columns={**DEFAULT_COLUMNS, **data.get("columns", {})},
        metric_labels={**DEFAULT_METRIC_LABELS, **data.get("metric_labels", {})},
        request_timeout=float(data.get("request_timeout", 10.0)),
        top_n=int(data.get("top_n", 10)),
        rank_from_full_dataset=bool(data.get("rank_from_full_dataset", True)),
        default_sort=SortMode(defaults.get("sort", SortMode.NAME_ASC.value)),
        default_metric=Metric(defaults.get("metric", Metric.AVG.value)),
    )
