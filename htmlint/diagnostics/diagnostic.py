"""Diagnostics core types."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Literal

from htmlint.text import TextRange, Span

Severity = Literal["error", "warning", "info"]


class DiagnosticKind(StrEnum):
    """Reported issue category."""

    UNCLOSED_TAG = "UnclosedTag"
    INVALID_NESTING = "InvalidNesting"
    MISSING_ATTRIBUTE = "MissingAttribute"
    INVALID_ATTRIBUTE = "InvalidAttribute"
    DUPLICATE_ATTRIBUTE = "DuplicateAttribute"
    SYNTAX_ERROR = "SyntaxError"
    ACCESSIBILITY = "Accessibility"
    SEO = "SEO"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured finding emitted by the scanner and the lint rules."""

    code: str
    kind: DiagnosticKind
    message: str
    span: Span
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None
