"""Streaming HTML linter: tag balance, attribute, accessibility and SEO diagnostics."""

from htmlint.analysis import ElementSpan, build_element_map
from htmlint.diagnostics import Diagnostic, DiagnosticKind, Severity, sort_diagnostics
from htmlint.lint import LintMode, LintOptions, run_check, validate
from htmlint.pipeline import CheckRunResult
from htmlint.text import LineCol, LineIndex, Span, TextRange, resolve_position

__all__ = [
    "CheckRunResult",
    "Diagnostic",
    "DiagnosticKind",
    "ElementSpan",
    "LineCol",
    "LineIndex",
    "LintMode",
    "LintOptions",
    "Severity",
    "Span",
    "TextRange",
    "build_element_map",
    "resolve_position",
    "run_check",
    "sort_diagnostics",
    "validate",
]
