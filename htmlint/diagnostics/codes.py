"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from htmlint.diagnostics.diagnostic import Diagnostic, DiagnosticKind, Severity
from htmlint.text import DOCUMENT_RANGE, DOCUMENT_SPAN, Span, TextRange


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    kind: DiagnosticKind
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None

    def diagnostic(self, span: Span, range: TextRange, **fields: str) -> Diagnostic:
        """Build a diagnostic, filling `{placeholders}` in message and hint."""
        return Diagnostic(
            code=self.code,
            kind=self.kind,
            message=self.message.format(**fields),
            span=span,
            range=range,
            severity=self.severity,
            hint=self.hint.format(**fields) if self.hint is not None else None,
            category=self.category,
        )

    def document_diagnostic(self) -> Diagnostic:
        return self.diagnostic(DOCUMENT_SPAN, DOCUMENT_RANGE)


SCANNER_MALFORMED_TAG: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCANNER_MALFORMED_TAG",
    kind=DiagnosticKind.SYNTAX_ERROR,
    message="malformed tag: missing closing '>' for `<{name}`",
    hint="Terminate the tag with `>`.",
    severity="error",
    category="scanner",
)

STRUCTURE_UNEXPECTED_CLOSING_TAG: Final[DiagnosticSpec] = DiagnosticSpec(
    code="STRUCTURE_UNEXPECTED_CLOSING_TAG",
    kind=DiagnosticKind.SYNTAX_ERROR,
    message="unexpected closing tag `</{name}>`",
    hint="Remove the closing tag or add the matching `<{name}>` before it.",
    severity="error",
    category="structure",
)

STRUCTURE_MISMATCHED_CLOSING_TAG: Final[DiagnosticSpec] = DiagnosticSpec(
    code="STRUCTURE_MISMATCHED_CLOSING_TAG",
    kind=DiagnosticKind.UNCLOSED_TAG,
    message="mismatched closing tag: expected `</{expected}>` but found `</{found}>`",
    hint="Close `<{expected}>` before closing `<{found}>`.",
    severity="error",
    category="structure",
)

STRUCTURE_UNCLOSED_TAG: Final[DiagnosticSpec] = DiagnosticSpec(
    code="STRUCTURE_UNCLOSED_TAG",
    kind=DiagnosticKind.UNCLOSED_TAG,
    message="unclosed tag `<{name}>`",
    hint="Add `</{name}>`.",
    severity="error",
    category="structure",
)

ATTRIBUTE_DUPLICATE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="ATTRIBUTE_DUPLICATE",
    kind=DiagnosticKind.DUPLICATE_ATTRIBUTE,
    message="duplicate attribute `{attribute}` on `<{name}>`",
    hint="Keep a single `{attribute}` attribute.",
    severity="warning",
    category="attribute",
)

ATTRIBUTE_EMPTY_ID: Final[DiagnosticSpec] = DiagnosticSpec(
    code="ATTRIBUTE_EMPTY_ID",
    kind=DiagnosticKind.INVALID_ATTRIBUTE,
    message="empty `id` attribute on `<{name}>`",
    hint="Give the element a non-empty id or remove the attribute.",
    severity="warning",
    category="attribute",
)

ATTRIBUTE_EMPTY_HREF: Final[DiagnosticSpec] = DiagnosticSpec(
    code="ATTRIBUTE_EMPTY_HREF",
    kind=DiagnosticKind.INVALID_ATTRIBUTE,
    message="empty `href` attribute on `<a>`",
    hint="Point the link at a URL or fragment.",
    severity="warning",
    category="attribute",
)

ATTRIBUTE_EMPTY_SRC: Final[DiagnosticSpec] = DiagnosticSpec(
    code="ATTRIBUTE_EMPTY_SRC",
    kind=DiagnosticKind.INVALID_ATTRIBUTE,
    message="empty `src` attribute on `<{name}>`",
    hint="Reference the resource the element should load.",
    severity="error",
    category="attribute",
)

ATTRIBUTE_UNQUOTED_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="ATTRIBUTE_UNQUOTED_VALUE",
    kind=DiagnosticKind.INVALID_ATTRIBUTE,
    message="unquoted value for attribute `{attribute}` on `<{name}>`",
    hint='Wrap the value in quotes: {attribute}="...".',
    severity="info",
    category="attribute",
)

DOCUMENT_MISSING_DOCTYPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DOCUMENT_MISSING_DOCTYPE",
    kind=DiagnosticKind.MISSING_ATTRIBUTE,
    message="missing `<!DOCTYPE html>` declaration",
    hint="Start the document with `<!DOCTYPE html>`.",
    severity="warning",
    category="document",
)

DOCUMENT_MISSING_HTML: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DOCUMENT_MISSING_HTML",
    kind=DiagnosticKind.MISSING_ATTRIBUTE,
    message="missing `<html>` element",
    severity="warning",
    category="document",
)

DOCUMENT_MISSING_HEAD: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DOCUMENT_MISSING_HEAD",
    kind=DiagnosticKind.MISSING_ATTRIBUTE,
    message="missing `<head>` element",
    severity="warning",
    category="document",
)

DOCUMENT_MISSING_BODY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DOCUMENT_MISSING_BODY",
    kind=DiagnosticKind.MISSING_ATTRIBUTE,
    message="missing `<body>` element",
    severity="warning",
    category="document",
)

A11Y_MISSING_ALT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="A11Y_MISSING_ALT",
    kind=DiagnosticKind.ACCESSIBILITY,
    message="image is missing an `alt` attribute",
    hint='Describe the image with alt="..." (use alt="" for decorative images).',
    severity="warning",
    category="accessibility",
)

A11Y_UNLABELLED_INPUT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="A11Y_UNLABELLED_INPUT",
    kind=DiagnosticKind.ACCESSIBILITY,
    message="input has neither `aria-label` nor `id` for a `<label for>`",
    hint="Add aria-label or an id referenced by a label.",
    severity="info",
    category="accessibility",
)

SEO_MISSING_TITLE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SEO_MISSING_TITLE",
    kind=DiagnosticKind.SEO,
    message="missing `<title>` element",
    severity="info",
    category="seo",
)

SEO_MISSING_DESCRIPTION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SEO_MISSING_DESCRIPTION",
    kind=DiagnosticKind.SEO,
    message='missing `<meta name="description">`',
    severity="info",
    category="seo",
)

SEO_HEADING_SKIP: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SEO_HEADING_SKIP",
    kind=DiagnosticKind.SEO,
    message="heading hierarchy skipped from h{previous} to h{current}",
    hint="Use consecutive heading levels.",
    severity="info",
    category="seo",
)
