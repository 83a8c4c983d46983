from __future__ import annotations

from ..models.whisky_record import RawRow

"""CSV tokenizer for published spreadsheet exports.

Single left-to-right scan with a quote-state flag. Never raises on malformed
input: an unterminated quote is closed implicitly at end of input.

Rules:
- ``""`` inside a quoted field emits one literal quote
- a lone ``"`` toggles quoted state and is not emitted
- outside quotes ``,`` ends a field; ``\\n``, ``\\r`` or ``\\r\\n`` ends a row
- rows whose fields are all empty/whitespace are discarded
"""

__all__ = [
    "tokenize",
]

QUOTE = '"'
DELIMITER = ","


def _is_blank(row: RawRow) -> bool:
    return all(not cell.strip() for cell in row)


def tokenize(text: str) -> list[RawRow]:
    """Split CSV text into rows of raw string fields.

    >>> tokenize('a,"b,c","d""e"')
    [['a', 'b,c', 'd"e']]
    """
    rows: list[RawRow] = []
    row: RawRow = []
    field: list[str] = []
    in_quotes = False
    i = 0
    n = len(text)

    while i < n:
        c = text[i]
        nxt = text[i + 1] if i + 1 < n else ""

        if c == QUOTE and in_quotes and nxt == QUOTE:
            field.append(QUOTE)
            i += 2
            continue
        if c == QUOTE:
            in_quotes = not in_quotes
            i += 1
            continue
        if not in_quotes and c == DELIMITER:
            row.append("".join(field))
            field = []
            i += 1
            continue
        if not in_quotes and c in ("\n", "\r"):
            if c == "\r" and nxt == "\n":
                i += 1
            row.append("".join(field))
            if not _is_blank(row):
                rows.append(row)
            row = []
            field = []
            i += 1
            continue

        field.append(c)
        i += 1

    # flush pending row (no trailing newline / unterminated quote)
    row.append("".join(field))
    if not _is_blank(row):
        rows.append(row)
    return rows
