"""Per-tag attribute checks."""

from __future__ import annotations

from htmlint.attributes.parse import Attribute, parse_attributes
from htmlint.diagnostics import (
    ATTRIBUTE_DUPLICATE,
    ATTRIBUTE_EMPTY_HREF,
    ATTRIBUTE_EMPTY_ID,
    ATTRIBUTE_EMPTY_SRC,
    ATTRIBUTE_UNQUOTED_VALUE,
    Diagnostic,
    DiagnosticSpec,
)
from htmlint.lexer import TagToken
from htmlint.syntax import SOURCE_REQUIRED_ELEMENTS
from htmlint.text import LineIndex, Span, TextRange


def check_attributes(
    token: TagToken,
    line_index: LineIndex,
    *,
    precise: bool = False,
    check_unquoted: bool = False,
) -> list[Diagnostic]:
    """Duplicate and empty-value checks for one opening tag."""
    if token.is_closing:
        return []

    diagnostics: list[Diagnostic] = []
    seen: set[str] = set()
    for attribute in parse_attributes(token):
        fields = {"name": token.name, "attribute": attribute.name}
        if attribute.name in seen:
            diagnostics.append(_report(ATTRIBUTE_DUPLICATE, token, attribute, line_index, precise, fields))
        seen.add(attribute.name)

        spec = _empty_value_spec(token.name, attribute)
        if spec is not None:
            diagnostics.append(_report(spec, token, attribute, line_index, precise, fields))

        if check_unquoted and attribute.is_unquoted:
            diagnostics.append(_report(ATTRIBUTE_UNQUOTED_VALUE, token, attribute, line_index, precise, fields))
    return diagnostics


def attribute_span(token: TagToken, attribute: Attribute, line_index: LineIndex, *, precise: bool) -> Span:
    """Locate an attribute.

    By default the column is the tag's column plus the attribute's offset in
    the raw tag, on the tag's line, even when the tag spans several lines.
    `precise=True` resolves the attribute's own offset instead.
    """
    range = _attribute_range(token, attribute)
    if precise:
        return line_index.span(range)
    tag_start = line_index.line_col(token.start)
    return Span(
        tag_start.shift_column(attribute.offset),
        tag_start.shift_column(attribute.offset + attribute.length),
    )


def _empty_value_spec(tag: str, attribute: Attribute) -> DiagnosticSpec | None:
    if not attribute.is_empty:
        return None
    if attribute.name == "id":
        return ATTRIBUTE_EMPTY_ID
    if attribute.name == "href" and tag == "a":
        return ATTRIBUTE_EMPTY_HREF
    if attribute.name == "src" and tag in SOURCE_REQUIRED_ELEMENTS:
        return ATTRIBUTE_EMPTY_SRC
    return None


def _attribute_range(token: TagToken, attribute: Attribute) -> TextRange:
    return TextRange.at(token.start + attribute.offset, attribute.length)


def _report(
    spec: DiagnosticSpec,
    token: TagToken,
    attribute: Attribute,
    line_index: LineIndex,
    precise: bool,
    fields: dict[str, str],
) -> Diagnostic:
    return spec.diagnostic(
        attribute_span(token, attribute, line_index, precise=precise),
        _attribute_range(token, attribute),
        **fields,
    )
