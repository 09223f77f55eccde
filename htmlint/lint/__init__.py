"""Lint rules, options and runner."""

from htmlint.lint.options import LintMode, LintOptions
from htmlint.lint.rules import (
    CATEGORY_ORDER,
    AccessibilityRule,
    AttributeValueRule,
    DocumentSkeletonRule,
    LintCategory,
    LintRule,
    MalformedTagRule,
    SeoRule,
    TagBalanceRule,
    default_lint_rules,
    order_lint_rules,
    validate_lint_rules,
)
from htmlint.lint.runner import run_check, validate

__all__ = [
    "CATEGORY_ORDER",
    "AccessibilityRule",
    "AttributeValueRule",
    "DocumentSkeletonRule",
    "LintCategory",
    "LintMode",
    "LintOptions",
    "LintRule",
    "MalformedTagRule",
    "SeoRule",
    "TagBalanceRule",
    "default_lint_rules",
    "order_lint_rules",
    "run_check",
    "validate",
    "validate_lint_rules",
]
