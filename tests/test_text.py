import pytest

from htmlint.text import (
    DOCUMENT_SPAN,
    LineCol,
    LineIndex,
    Span,
    TextRange,
    resolve_position,
)


def test_offset_zero_is_line_one_column_one() -> None:
    assert resolve_position("<p>hi</p>", 0) == LineCol(1, 1)
    assert resolve_position("", 0) == LineCol(1, 1)


def test_offset_after_newline_is_first_column_of_next_line() -> None:
    text = "<div>\n<p>\n</p>"

    index = LineIndex(text)

    assert index.line_col(5) == LineCol(1, 6)  # the newline itself
    assert index.line_col(6) == LineCol(2, 1)
    assert index.line_col(10) == LineCol(3, 1)
    assert index.line_count == 3


def test_end_of_text_is_a_valid_offset() -> None:
    text = "ab\ncd"

    assert resolve_position(text, len(text)) == LineCol(2, 3)


def test_trailing_newline_opens_an_empty_last_line() -> None:
    text = "<br>\n"

    index = LineIndex(text)

    assert index.line_col(len(text)) == LineCol(2, 1)
    assert index.offset(LineCol(2, 1)) == len(text)


def test_carriage_return_counts_as_a_column() -> None:
    index = LineIndex("a\r\nb")

    assert index.line_col(1) == LineCol(1, 2)
    assert index.line_col(3) == LineCol(2, 1)


def test_line_col_round_trips_for_every_offset() -> None:
    text = "<html>\n  <body>\n\n    <p class=\"x\">text</p>\n  </body>\n</html>\n"
    index = LineIndex(text)

    for offset in range(len(text) + 1):
        assert index.offset(index.line_col(offset)) == offset


def test_out_of_range_positions_raise() -> None:
    index = LineIndex("ab\ncd")

    with pytest.raises(ValueError):
        index.line_col(-1)
    with pytest.raises(ValueError):
        index.line_col(6)
    with pytest.raises(ValueError, match="past the last line"):
        index.offset(LineCol(3, 1))
    with pytest.raises(ValueError, match="past the end of line"):
        index.offset(LineCol(1, 5))


def test_line_col_and_span_invariants() -> None:
    with pytest.raises(ValueError):
        LineCol(0, 1)
    with pytest.raises(ValueError):
        Span(LineCol(2, 1), LineCol(1, 9))

    assert DOCUMENT_SPAN == Span(LineCol(1, 1), LineCol(1, 1))
    assert LineCol(1, 9) < LineCol(2, 1)


def test_text_range_helpers() -> None:
    range = TextRange.at(3, 4)

    assert range.as_tuple() == (3, 7)
    assert TextRange.empty(2) == TextRange(2, 2)

    with pytest.raises(ValueError):
        TextRange(4, 2)


def test_span_of_range_crosses_lines() -> None:
    index = LineIndex("<a\nhref='x'>")

    assert index.span(TextRange(0, 11)) == Span(LineCol(1, 1), LineCol(2, 9))
