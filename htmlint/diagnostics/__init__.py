"""Diagnostics."""

from htmlint.diagnostics.codes import (
    A11Y_MISSING_ALT,
    A11Y_UNLABELLED_INPUT,
    ATTRIBUTE_DUPLICATE,
    ATTRIBUTE_EMPTY_HREF,
    ATTRIBUTE_EMPTY_ID,
    ATTRIBUTE_EMPTY_SRC,
    ATTRIBUTE_UNQUOTED_VALUE,
    DOCUMENT_MISSING_BODY,
    DOCUMENT_MISSING_DOCTYPE,
    DOCUMENT_MISSING_HEAD,
    DOCUMENT_MISSING_HTML,
    SCANNER_MALFORMED_TAG,
    SEO_HEADING_SKIP,
    SEO_MISSING_DESCRIPTION,
    SEO_MISSING_TITLE,
    STRUCTURE_MISMATCHED_CLOSING_TAG,
    STRUCTURE_UNCLOSED_TAG,
    STRUCTURE_UNEXPECTED_CLOSING_TAG,
    DiagnosticSpec,
)
from htmlint.diagnostics.diagnostic import Diagnostic, DiagnosticKind, Severity
from htmlint.diagnostics.report import (
    filter_severity,
    has_errors,
    sort_diagnostics,
)

__all__ = [
    "A11Y_MISSING_ALT",
    "A11Y_UNLABELLED_INPUT",
    "ATTRIBUTE_DUPLICATE",
    "ATTRIBUTE_EMPTY_HREF",
    "ATTRIBUTE_EMPTY_ID",
    "ATTRIBUTE_EMPTY_SRC",
    "ATTRIBUTE_UNQUOTED_VALUE",
    "DOCUMENT_MISSING_BODY",
    "DOCUMENT_MISSING_DOCTYPE",
    "DOCUMENT_MISSING_HEAD",
    "DOCUMENT_MISSING_HTML",
    "SCANNER_MALFORMED_TAG",
    "SEO_HEADING_SKIP",
    "SEO_MISSING_DESCRIPTION",
    "SEO_MISSING_TITLE",
    "STRUCTURE_MISMATCHED_CLOSING_TAG",
    "STRUCTURE_UNCLOSED_TAG",
    "STRUCTURE_UNEXPECTED_CLOSING_TAG",
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticSpec",
    "Severity",
    "filter_severity",
    "has_errors",
    "sort_diagnostics",
]
