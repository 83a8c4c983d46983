from __future__ import annotations

from whisky_board.parsing.tokenizer import tokenize


def test_quoted_fields_and_escaped_quotes():
    assert tokenize('a,"b,c","d""e"') == [["a", "b,c", 'd"e']]


def test_empty_input_yields_no_rows():
    assert tokenize("") == []


def test_lf_and_crlf_line_endings():
    assert tokenize("a,b\nc,d\r\ne,f") == [["a", "b"], ["c", "d"], ["e", "f"]]


def test_lone_cr_ends_row():
    assert tokenize("a,b\rc,d") == [["a", "b"], ["c", "d"]]


def test_crlf_counts_as_single_terminator():
    """CRLF must not produce an empty row between lines."""
    rows = tokenize("h1,h2\r\n1,2\r\n")
    assert rows == [["h1", "h2"], ["1", "2"]]


def test_trailing_blank_lines_are_discarded():
    rows = tokenize("h\n1\n\n\n   \n")
    assert rows == [["h"], ["1"]]


def test_row_of_empty_or_whitespace_fields_is_discarded():
    rows = tokenize("a,b\n, \n ,\nc,d\n")
    assert rows == [["a", "b"], ["c", "d"]]


def test_newline_inside_quotes_is_literal():
    rows = tokenize('name,notes\n"Glen","line1\nline2"\n')
    assert rows == [["name", "notes"], ["Glen", "line1\nline2"]]


def test_unterminated_quote_is_closed_at_end_of_input():
    rows = tokenize('a,"unterminated, still going\nnext')
    assert rows == [["a", "unterminated, still going\nnext"]]


def test_quote_in_middle_of_field_toggles_without_emitting():
    assert tokenize('ab"c,d"e') == [["abc,de"]]


def test_whitespace_is_preserved_in_fields():
    assert tokenize(" a , b ") == [[" a ", " b "]]


def test_empty_quoted_field():
    assert tokenize('x,"",y') == [["x", "", "y"]]


def test_no_trailing_newline_flushes_last_row():
    assert tokenize("a,b\nc,") == [["a", "b"], ["c", ""]]
