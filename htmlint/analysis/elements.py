"""Source positions of elements, for mapping rendered nodes back to the text."""

from __future__ import annotations

from dataclasses import dataclass

from htmlint.attributes import Attribute, parse_attributes
from htmlint.lexer import ScanResult, TagToken, scan_tags
from htmlint.text import LineCol


@dataclass(frozen=True, slots=True)
class ElementSpan:
    """One element from its opening tag through its closer (if any)."""

    name: str
    start: int
    end: int
    start_position: LineCol
    end_position: LineCol
    depth: int
    attributes: tuple[Attribute, ...] = ()
    closed: bool = True

    def attribute(self, name: str) -> Attribute | None:
        for attribute in self.attributes:
            if attribute.name == name:
                return attribute
        return None


@dataclass(slots=True)
class _OpenElement:
    token: TagToken
    depth: int
    attributes: tuple[Attribute, ...] = ()


def build_element_map(text: str, *, scan: ScanResult | None = None) -> tuple[ElementSpan, ...]:
    """List elements in completion order.

    Unlike the structural checker, a closer here matches the nearest open
    element with the same name anywhere on the stack; anything above it stays
    open. Elements never closed are appended last, ending at their opening tag.
    """
    resolved = scan if scan is not None else scan_tags(text)
    line_index = resolved.line_index
    elements: list[ElementSpan] = []
    stack: list[_OpenElement] = []

    def complete(opened: _OpenElement, end: int, *, closed: bool) -> ElementSpan:
        return ElementSpan(
            name=opened.token.name,
            start=opened.token.start,
            end=end,
            start_position=line_index.line_col(opened.token.start),
            end_position=line_index.line_col(end),
            depth=opened.depth,
            attributes=opened.attributes,
            closed=closed,
        )

    for token in resolved.tokens:
        if token.is_closing:
            for i in range(len(stack) - 1, -1, -1):
                if stack[i].token.name == token.name:
                    elements.append(complete(stack.pop(i), token.end, closed=True))
                    break
            continue

        opened = _OpenElement(token=token, depth=len(stack), attributes=parse_attributes(token))
        if token.is_self_closing:
            elements.append(complete(opened, token.end, closed=True))
        else:
            stack.append(opened)

    for opened in stack:
        elements.append(complete(opened, opened.token.end, closed=False))
    return tuple(elements)
