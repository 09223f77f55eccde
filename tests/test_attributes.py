from htmlint.attributes import (
    attribute_names,
    attribute_span,
    check_attributes,
    has_valued_attribute,
    parse_attributes,
)
from htmlint.diagnostics import DiagnosticKind
from htmlint.lexer import scan_tags
from htmlint.text import LineCol, Span


def first_tag(source: str):
    result = scan_tags(source)
    return result.tokens[0], result.line_index


def test_parse_attributes_value_forms() -> None:
    token, _ = first_tag("<input TYPE=\"text\" name='q' value=plain disabled data-x = \"1\">")

    attributes = parse_attributes(token)

    assert [(a.name, a.value, a.quote) for a in attributes] == [
        ("type", "text", '"'),
        ("name", "q", "'"),
        ("value", "plain", None),
        ("disabled", None, None),
        ("data-x", "1", '"'),
    ]
    assert attributes[0].offset == 7
    assert token.raw[attributes[0].offset : attributes[0].offset + attributes[0].length] == 'TYPE="text"'
    assert attributes[2].is_unquoted
    assert not attributes[3].has_value
    assert attributes[3].is_empty


def test_attribute_helpers() -> None:
    token, _ = first_tag('<img alt src="a.png" aria-label="">')

    assert attribute_names(token) == frozenset({"alt", "src", "aria-label"})
    assert not has_valued_attribute(token, "alt")
    assert has_valued_attribute(token, "aria-label")
    assert has_valued_attribute(token, "src")


def test_duplicate_attribute_reported_once() -> None:
    token, index = first_tag('<div id="a" id="b">')

    diagnostics = check_attributes(token, index)

    assert len(diagnostics) == 1
    duplicate = diagnostics[0]
    assert duplicate.code == "ATTRIBUTE_DUPLICATE"
    assert duplicate.kind == DiagnosticKind.DUPLICATE_ATTRIBUTE
    assert duplicate.severity == "warning"
    assert "`id`" in duplicate.message
    assert duplicate.span == Span(LineCol(1, 13), LineCol(1, 19))


def test_every_extra_occurrence_is_a_duplicate() -> None:
    token, index = first_tag('<p class="a" CLASS="b" class="c">')

    codes = [d.code for d in check_attributes(token, index)]

    assert codes == ["ATTRIBUTE_DUPLICATE", "ATTRIBUTE_DUPLICATE"]


def test_empty_id_is_a_warning_with_or_without_value() -> None:
    for source in ('<section id="">', "<section id>"):
        token, index = first_tag(source)

        diagnostics = check_attributes(token, index)

        assert [d.code for d in diagnostics] == ["ATTRIBUTE_EMPTY_ID"]
        assert diagnostics[0].kind == DiagnosticKind.INVALID_ATTRIBUTE
        assert diagnostics[0].severity == "warning"


def test_empty_src_is_an_error_and_empty_href_a_warning() -> None:
    scan = scan_tags('<img src=""><a href="">x</a>')
    img, anchor = scan.tokens[0], scan.tokens[1]

    img_diagnostics = check_attributes(img, scan.line_index)
    anchor_diagnostics = check_attributes(anchor, scan.line_index)

    assert [(d.code, d.severity) for d in img_diagnostics] == [("ATTRIBUTE_EMPTY_SRC", "error")]
    assert [(d.code, d.severity) for d in anchor_diagnostics] == [("ATTRIBUTE_EMPTY_HREF", "warning")]


def test_empty_values_only_matter_on_specific_tags() -> None:
    scan = scan_tags('<link href=""><video src=""><script src=""></script><iframe src=\'\'></iframe>')

    codes = [d.code for token in scan.opening_tags() for d in check_attributes(token, scan.line_index)]

    assert codes == ["ATTRIBUTE_EMPTY_SRC", "ATTRIBUTE_EMPTY_SRC"]


def test_closing_tags_are_not_checked() -> None:
    scan = scan_tags('<p></p id="" id="">')

    assert check_attributes(scan.tokens[1], scan.line_index) == []


def test_multiline_tag_keeps_tag_line_by_default() -> None:
    token, index = first_tag('<img\n  src="">')

    compat = check_attributes(token, index)
    precise = check_attributes(token, index, precise=True)

    assert compat[0].span == Span(LineCol(1, 8), LineCol(1, 14))
    assert precise[0].span == Span(LineCol(2, 3), LineCol(2, 9))
    assert compat[0].range == precise[0].range


def test_attribute_span_is_offset_from_tag_column() -> None:
    scan = scan_tags('<p>\n  <a href="">x</a>')
    anchor = scan.tokens[1]
    attribute = parse_attributes(anchor)[0]

    span = attribute_span(anchor, attribute, scan.line_index, precise=False)

    assert span.start == LineCol(2, 6)
    assert span == attribute_span(anchor, attribute, scan.line_index, precise=True)


def test_unquoted_values_are_opt_in() -> None:
    token, index = first_tag("<a href=page.html class='x' target=_blank>")

    assert check_attributes(token, index) == []

    diagnostics = check_attributes(token, index, check_unquoted=True)
    assert [d.code for d in diagnostics] == ["ATTRIBUTE_UNQUOTED_VALUE", "ATTRIBUTE_UNQUOTED_VALUE"]
    assert diagnostics[0].severity == "info"
    assert "`href`" in diagnostics[0].message
    assert "`target`" in diagnostics[1].message
