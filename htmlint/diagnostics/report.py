"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from htmlint.diagnostics.diagnostic import Diagnostic, Severity

SEVERITY_RANK: dict[Severity, int] = {"info": 0, "warning": 1, "error": 2}


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def sort_diagnostics(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    """Position-ordered view; `validate` keeps category order instead."""
    return sorted(
        diagnostics,
        key=lambda diagnostic: (
            diagnostic.span.start,
            diagnostic.span.end,
            diagnostic.code,
            diagnostic.message,
        ),
    )


def filter_severity(diagnostics: Iterable[Diagnostic], minimum: Severity) -> list[Diagnostic]:
    threshold = SEVERITY_RANK[minimum]
    return [d for d in diagnostics if SEVERITY_RANK[d.severity] >= threshold]
