"""Text offsets, ranges and line/column positions."""

from htmlint.text.position import (
    DOCUMENT_SPAN,
    DOCUMENT_START,
    LineCol,
    LineIndex,
    Span,
    resolve_position,
)
from htmlint.text.text import DOCUMENT_RANGE, TextRange

__all__ = [
    "DOCUMENT_RANGE",
    "DOCUMENT_SPAN",
    "DOCUMENT_START",
    "LineCol",
    "LineIndex",
    "Span",
    "TextRange",
    "resolve_position",
]
