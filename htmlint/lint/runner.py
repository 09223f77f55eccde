"""Lint runner over a single tag scan."""

from __future__ import annotations

from collections.abc import Sequence
import logging

from htmlint.diagnostics import Diagnostic, has_errors
from htmlint.lexer import ScanResult, scan_tags
from htmlint.lint.options import LintMode, LintOptions
from htmlint.lint.rules import (
    LintRule,
    default_lint_rules,
    order_lint_rules,
    validate_lint_rules,
)
from htmlint.pipeline.results import CheckRunResult

logger = logging.getLogger(__name__)


def run_check(
    text: str,
    options: LintOptions | None = None,
    *,
    mode: LintMode | None = None,
    rules: Sequence[LintRule] | None = None,
) -> CheckRunResult:
    """Scan once and run every rule over the scan.

    A rule that raises does not abort the run: the failure is logged and the
    diagnostics gathered before it are returned.
    """
    resolved_options = _resolve_options(options=options, mode=mode)
    resolved_rules = default_lint_rules() if rules is None else tuple(rules)
    validate_lint_rules(resolved_rules)
    resolved_rules = order_lint_rules(resolved_rules)

    diagnostics: list[Diagnostic] = []
    scan: ScanResult | None = None
    completed = True
    try:
        scan = scan_tags(text)
        for rule in resolved_rules:
            found = rule.run(scan, resolved_options)
            logger.debug("Rule %s produced %d diagnostic(s)", rule.name, len(found))
            diagnostics.extend(found)
    except Exception:
        completed = False
        logger.exception(
            "Validation aborted after %d diagnostic(s); returning partial results",
            len(diagnostics),
        )

    return CheckRunResult(
        source_text=text,
        scan=scan,
        diagnostics=diagnostics,
        has_errors=has_errors(diagnostics),
        completed=completed,
    )


def validate(text: str, options: LintOptions | None = None) -> list[Diagnostic]:
    """Lint one HTML document; never raises on document content."""
    return run_check(text, options).diagnostics


def _resolve_options(*, options: LintOptions | None, mode: LintMode | None) -> LintOptions:
    if options is not None:
        if mode is not None:
            raise ValueError("Pass either options or mode, not both")
        return options
    if mode is not None:
        return LintOptions.for_mode(mode)
    return LintOptions()
