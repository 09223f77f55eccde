import pytest

from htmlint.diagnostics import DiagnosticKind
from htmlint.lexer import TagFlags, TagScanner, dump_tags, scan_tags
from htmlint.syntax import is_void_element
from htmlint.text import LineCol
from tests._shared_cases import STRUCTURE_CASES, HtmlCase, case_id


def test_scan_classifies_open_close_and_void_tags() -> None:
    result = scan_tags('<div class="a"><br><img src="x.png"/></div>')

    assert [token.name for token in result.tokens] == ["div", "br", "img", "div"]
    div, br, img, closer = result.tokens

    assert div.opens_frame
    assert not div.is_self_closing
    assert br.flags == TagFlags.VOID
    assert br.is_self_closing
    assert img.flags == TagFlags.VOID | TagFlags.EXPLICIT_SELF_CLOSE
    assert closer.is_closing
    assert closer.raw == "</div>"
    assert closer.start == 37
    assert result.diagnostics == ()


def test_tag_names_are_lowercased_and_greedy() -> None:
    result = scan_tags("<H1>x</H1><Table2 id=t><my-widget>")

    assert [token.name for token in result.tokens] == ["h1", "h1", "table2", "my"]
    assert result.tokens[3].raw == "<my-widget>"


def test_uppercase_void_tags_open_no_frame() -> None:
    result = scan_tags("<P>a<BR>b<Wbr><HR/></P>")

    assert [token.name for token in result.tokens if token.flags & TagFlags.VOID] == ["br", "wbr", "hr"]
    assert [token.name for token in result.tokens if token.opens_frame] == ["p"]
    assert is_void_element("Input")
    assert not is_void_element("span")


def test_explicit_self_close_on_non_void_element() -> None:
    token = scan_tags("<span/>").tokens[0]

    assert token.flags == TagFlags.EXPLICIT_SELF_CLOSE
    assert token.is_self_closing
    assert not token.opens_frame
    assert token.attribute_text == ""


def test_text_that_is_not_a_tag_is_skipped() -> None:
    result = scan_tags("<!DOCTYPE html><p>1 < 2 and <3</p><!-- note -->")

    assert [(token.name, token.is_closing) for token in result.tokens] == [("p", False), ("p", True)]


def test_tag_runs_to_first_gt_after_its_name() -> None:
    result = scan_tags('<a title="x > y">link</a>')

    assert result.tokens[0].raw == '<a title="x >'
    assert result.tokens[1].name == "a"


def test_unterminated_tag_is_reported_and_scan_continues() -> None:
    source = '<div>ok</div>\n<a href="x"\n<em'

    result = scan_tags(source)

    assert [token.name for token in result.tokens] == ["div", "div"]
    assert [d.code for d in result.diagnostics] == ["SCANNER_MALFORMED_TAG", "SCANNER_MALFORMED_TAG"]
    first, second = result.diagnostics
    assert first.kind == DiagnosticKind.SYNTAX_ERROR
    assert first.severity == "error"
    assert first.message.startswith("malformed tag: missing closing '>'")
    assert "`<a`" in first.message
    assert first.span.start == LineCol(2, 1)
    assert first.range.as_tuple() == (14, 16)
    assert second.span.start == LineCol(3, 1)
    assert "`<em`" in second.message


def test_scanner_steps_through_tags_one_at_a_time() -> None:
    scanner = TagScanner("<p>a</p>")

    first = scanner.next_tag()
    assert first is not None and first.name == "p" and scanner.position == 3
    second = scanner.next_tag()
    assert second is not None and second.is_closing
    assert scanner.next_tag() is None
    assert scanner.next_tag() is None
    assert scanner.diagnostics == []


def test_opening_tags_filter() -> None:
    result = scan_tags("<h1>a</h1><img src=x><h2>b</h2>")

    assert [token.name for token in result.opening_tags()] == ["h1", "img", "h2"]
    assert [token.name for token in result.opening_tags("h2", "img")] == ["img", "h2"]


def test_dump_tags_smoke(capsys: pytest.CaptureFixture[str]) -> None:
    dump_tags(scan_tags("<p>\n<b"))

    out = capsys.readouterr().out
    assert "000 p" in out
    assert "SCANNER_MALFORMED_TAG" in out


@pytest.mark.parametrize("case", STRUCTURE_CASES, ids=case_id)
def test_token_ranges_slice_back_to_raw_text(case: HtmlCase) -> None:
    result = scan_tags(case.source)

    for token in result.tokens:
        assert case.source[token.start : token.end] == token.raw
        assert token.raw.startswith("<") and token.raw.endswith(">")
