"""Lint rules and rule contracts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Literal, Protocol, TypeAlias

from htmlint.attributes import check_attributes, has_valued_attribute
from htmlint.diagnostics import (
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
    Diagnostic,
    DiagnosticSpec,
)
from htmlint.lexer import ScanResult, TagToken
from htmlint.lint.options import LintOptions
from htmlint.structure import check_structure
from htmlint.syntax import heading_level

LintCategory: TypeAlias = Literal["scanner", "structure", "attribute", "document", "accessibility", "seo"]

# Output order of the categories in a lint run.
CATEGORY_ORDER: Final[tuple[LintCategory, ...]] = (
    "scanner",
    "structure",
    "attribute",
    "document",
    "accessibility",
    "seo",
)

CODE_PREFIXES: Final[tuple[str, ...]] = ("SCANNER_", "STRUCTURE_", "ATTRIBUTE_", "DOCUMENT_", "A11Y_", "SEO_")

# Case-folded substrings whose absence is reported, in reporting order.
DOCUMENT_MARKERS: Final[tuple[tuple[str, DiagnosticSpec], ...]] = (
    ("<!doctype", DOCUMENT_MISSING_DOCTYPE),
    ("<html", DOCUMENT_MISSING_HTML),
    ("<head>", DOCUMENT_MISSING_HEAD),
    ("<body>", DOCUMENT_MISSING_BODY),
)

SEO_MARKERS: Final[tuple[tuple[str, DiagnosticSpec], ...]] = (
    ("<title>", SEO_MISSING_TITLE),
    ('name="description"', SEO_MISSING_DESCRIPTION),
)


class LintRule(Protocol):
    """Rule contract: one category, a fixed set of codes, a pure `run`."""

    @property
    def name(self) -> str: ...

    @property
    def category(self) -> LintCategory: ...

    @property
    def codes(self) -> tuple[str, ...]: ...

    def run(self, scan: ScanResult, options: LintOptions) -> list[Diagnostic]: ...


@dataclass(frozen=True, slots=True)
class MalformedTagRule:
    """Surfaces the scanner's own findings."""

    name: str = "malformedTag"
    category: LintCategory = "scanner"
    codes: tuple[str, ...] = (SCANNER_MALFORMED_TAG.code,)

    def run(self, scan: ScanResult, options: LintOptions) -> list[Diagnostic]:
        return list(scan.diagnostics)


@dataclass(frozen=True, slots=True)
class TagBalanceRule:
    name: str = "tagBalance"
    category: LintCategory = "structure"
    codes: tuple[str, ...] = (
        STRUCTURE_UNEXPECTED_CLOSING_TAG.code,
        STRUCTURE_MISMATCHED_CLOSING_TAG.code,
        STRUCTURE_UNCLOSED_TAG.code,
    )

    def run(self, scan: ScanResult, options: LintOptions) -> list[Diagnostic]:
        return check_structure(scan.tokens, scan.line_index)


@dataclass(frozen=True, slots=True)
class AttributeValueRule:
    """Duplicate attributes and empty id/href/src values, per opening tag."""

    name: str = "attributeValue"
    category: LintCategory = "attribute"
    codes: tuple[str, ...] = (
        ATTRIBUTE_DUPLICATE.code,
        ATTRIBUTE_EMPTY_ID.code,
        ATTRIBUTE_EMPTY_HREF.code,
        ATTRIBUTE_EMPTY_SRC.code,
        ATTRIBUTE_UNQUOTED_VALUE.code,
    )

    def run(self, scan: ScanResult, options: LintOptions) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for token in scan.opening_tags():
            diagnostics.extend(
                check_attributes(
                    token,
                    scan.line_index,
                    precise=options.precise_attribute_positions,
                    check_unquoted=options.check_unquoted_attributes,
                )
            )
        return diagnostics


@dataclass(frozen=True, slots=True)
class DocumentSkeletonRule:
    name: str = "documentSkeleton"
    category: LintCategory = "document"
    codes: tuple[str, ...] = tuple(spec.code for _, spec in DOCUMENT_MARKERS)

    def run(self, scan: ScanResult, options: LintOptions) -> list[Diagnostic]:
        return _missing_markers(scan.source_text, DOCUMENT_MARKERS)


@dataclass(frozen=True, slots=True)
class AccessibilityRule:
    """Images need `alt=`; inputs need `aria-label=` or an `id=` for a label."""

    name: str = "accessibility"
    category: LintCategory = "accessibility"
    codes: tuple[str, ...] = (A11Y_MISSING_ALT.code, A11Y_UNLABELLED_INPUT.code)

    def run(self, scan: ScanResult, options: LintOptions) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for token in scan.opening_tags("img", "input"):
            if token.name == "img" and not has_valued_attribute(token, "alt"):
                diagnostics.append(_at_tag(A11Y_MISSING_ALT, scan, token))
            elif token.name == "input" and not (
                has_valued_attribute(token, "aria-label") or has_valued_attribute(token, "id")
            ):
                diagnostics.append(_at_tag(A11Y_UNLABELLED_INPUT, scan, token))
        return diagnostics


@dataclass(frozen=True, slots=True)
class SeoRule:
    """Title and meta description presence, then heading level skips."""

    name: str = "seo"
    category: LintCategory = "seo"
    codes: tuple[str, ...] = (
        SEO_MISSING_TITLE.code,
        SEO_MISSING_DESCRIPTION.code,
        SEO_HEADING_SKIP.code,
    )

    def run(self, scan: ScanResult, options: LintOptions) -> list[Diagnostic]:
        diagnostics = _missing_markers(scan.source_text, SEO_MARKERS)

        previous: int | None = None
        for token in scan.opening_tags(*(f"h{level}" for level in range(1, 7))):
            level = heading_level(token.name)
            if level is None:
                continue
            # Only forward skips count; going back up to h1 is fine.
            if previous is not None and level > previous + 1:
                diagnostics.append(
                    _at_tag(SEO_HEADING_SKIP, scan, token, previous=str(previous), current=str(level))
                )
            previous = level
        return diagnostics


def default_lint_rules() -> tuple[LintRule, ...]:
    rules: list[LintRule] = [
        MalformedTagRule(),
        TagBalanceRule(),
        AttributeValueRule(),
        DocumentSkeletonRule(),
        AccessibilityRule(),
        SeoRule(),
    ]
    return order_lint_rules(rules)


def order_lint_rules(rules: list[LintRule] | tuple[LintRule, ...]) -> tuple[LintRule, ...]:
    """Stable sort into category output order."""
    return tuple(sorted(rules, key=lambda rule: CATEGORY_ORDER.index(rule.category)))


def validate_lint_rules(rules: tuple[LintRule, ...]) -> None:
    seen_names: set[str] = set()
    seen_codes: set[str] = set()
    for rule in rules:
        if rule.category not in CATEGORY_ORDER:
            raise ValueError(
                f"Lint rule `{rule.name}` has invalid category `{rule.category}`; "
                f"expected one of {', '.join(CATEGORY_ORDER)}."
            )
        if rule.name in seen_names:
            raise ValueError(f"Lint rule `{rule.name}` is registered more than once.")
        seen_names.add(rule.name)
        for code in rule.codes:
            if not code.startswith(CODE_PREFIXES):
                raise ValueError(
                    f"Lint rule `{rule.name}` has invalid code `{code}`; "
                    f"expected a prefix from {', '.join(CODE_PREFIXES)}."
                )
            if code in seen_codes:
                raise ValueError(f"Lint rule `{rule.name}` reuses code `{code}` owned by another rule.")
            seen_codes.add(code)


def _missing_markers(text: str, markers: tuple[tuple[str, DiagnosticSpec], ...]) -> list[Diagnostic]:
    folded = text.lower()
    return [spec.document_diagnostic() for marker, spec in markers if marker not in folded]


def _at_tag(spec: DiagnosticSpec, scan: ScanResult, token: TagToken, **fields: str) -> Diagnostic:
    return spec.diagnostic(scan.line_index.span(token.range), token.range, name=token.name, **fields)
