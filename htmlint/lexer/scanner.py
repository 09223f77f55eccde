"""Tag scanner."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import re
from typing import Final

from htmlint.diagnostics import SCANNER_MALFORMED_TAG, Diagnostic
from htmlint.lexer.tokens import TagFlags, TagToken
from htmlint.syntax import is_void_element
from htmlint.text import LineIndex, TextRange

logger = logging.getLogger(__name__)

# `<`, optional `/`, then a greedy name: one ASCII letter, then letters/digits.
TAG_START_PATTERN: Final[re.Pattern[str]] = re.compile(r"<(/?)([a-zA-Z][a-zA-Z0-9]*)")


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Tag stream plus the scanner's own findings for one source text."""

    source_text: str
    tokens: tuple[TagToken, ...]
    diagnostics: tuple[Diagnostic, ...]
    line_index: LineIndex

    def opening_tags(self, *names: str) -> tuple[TagToken, ...]:
        """Opening tags (void and self-closing included), optionally filtered by name."""
        wanted = frozenset(names)
        return tuple(
            token
            for token in self.tokens
            if token.is_opening and (not wanted or token.name in wanted)
        )


class TagScanner:
    """Left-to-right scanner producing tag occurrences.

    A `<name` with no `>` after it is reported as malformed and scanning resumes
    right after the name, so one broken tag does not hide the rest of the file.
    """

    def __init__(self, source: str, *, line_index: LineIndex | None = None) -> None:
        self._source = source
        self._position = 0
        self._line_index = line_index if line_index is not None else LineIndex(source)
        self._diagnostics: list[Diagnostic] = []
        self._last_close = source.rfind(">")

    @property
    def source(self) -> str:
        return self._source

    @property
    def position(self) -> int:
        return self._position

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Diagnostics emitted while scanning so far."""
        return self._diagnostics

    @property
    def line_index(self) -> LineIndex:
        return self._line_index

    def next_tag(self) -> TagToken | None:
        """Advance to the next well-formed tag, or return None at end of input."""
        while True:
            match = TAG_START_PATTERN.search(self._source, self._position)
            if match is None:
                self._position = len(self._source)
                return None

            if match.end() > self._last_close:
                self._report_malformed(match)
                self._position = match.end()
                continue

            close = self._source.find(">", match.end())
            self._position = close + 1
            return self._make_token(match, close)

    def scan(self) -> list[TagToken]:
        tokens: list[TagToken] = []
        while (token := self.next_tag()) is not None:
            tokens.append(token)
        return tokens

    def _make_token(self, match: re.Match[str], close: int) -> TagToken:
        name = match.group(2).lower()
        raw = self._source[match.start() : close + 1]
        flags = TagFlags.NONE
        if match.group(1):
            flags |= TagFlags.CLOSING
        if raw.endswith("/>"):
            flags |= TagFlags.EXPLICIT_SELF_CLOSE
        if is_void_element(name):
            flags |= TagFlags.VOID
        return TagToken(name=name, raw=raw, start=match.start(), flags=flags)

    def _report_malformed(self, match: re.Match[str]) -> None:
        range = TextRange(match.start(), match.end())
        logger.debug("Unterminated tag `%s` at offset %d", match.group(0), match.start())
        self._diagnostics.append(
            SCANNER_MALFORMED_TAG.diagnostic(
                self._line_index.span(range),
                range,
                name=match.group(2).lower(),
            )
        )


def scan_tags(source: str, *, line_index: LineIndex | None = None) -> ScanResult:
    """Scan `source` into tag tokens and malformed-tag diagnostics."""
    scanner = TagScanner(source, line_index=line_index)
    tokens = scanner.scan()
    return ScanResult(
        source_text=source,
        tokens=tuple(tokens),
        diagnostics=tuple(scanner.diagnostics),
        line_index=scanner.line_index,
    )


def dump_tags(result: ScanResult) -> None:
    """Print the token list with flags, positions and text for debugging."""
    for i, token in enumerate(result.tokens):
        position = result.line_index.line_col(token.start)
        print(
            f"{i:03d} {token.name:<10} at={position} range={token.range.as_tuple()} "
            f"flags={token.flags!r} text={token.raw!r}"
        )

    if result.diagnostics:
        print("\nDiagnostics:")
        for d in result.diagnostics:
            print(f"- {d.severity.upper()} {d.code} at={d.span.start} message={d.message}")
