"""Run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from htmlint.diagnostics import Diagnostic

if TYPE_CHECKING:
    from htmlint.lexer import ScanResult


@dataclass(frozen=True, slots=True)
class CheckRunResult:
    """Result of scanning and linting one document.

    `scan` is None only when scanning itself failed; `completed` is False
    whenever a stage raised and `diagnostics` is partial.
    """

    source_text: str
    scan: ScanResult | None
    diagnostics: list[Diagnostic]
    has_errors: bool
    completed: bool = True
