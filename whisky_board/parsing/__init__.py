"""CSV text -> rows -> raw records -> WhiskyRecord."""

from .normalizer import DEFAULT_COLUMNS, missing_columns, normalize, parse_locale_number
from .schema_mapper import map_rows
from .tokenizer import tokenize

__all__ = [
    "tokenize",
    "map_rows",
    "normalize",
    "parse_locale_number",
    "missing_columns",
    "DEFAULT_COLUMNS",
]
