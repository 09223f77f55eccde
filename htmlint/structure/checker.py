"""Stack-based tag balance checking."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from htmlint.diagnostics import (
    STRUCTURE_MISMATCHED_CLOSING_TAG,
    STRUCTURE_UNCLOSED_TAG,
    STRUCTURE_UNEXPECTED_CLOSING_TAG,
    Diagnostic,
)
from htmlint.lexer import TagToken
from htmlint.text import LineIndex, TextRange


@dataclass(frozen=True, slots=True)
class Frame:
    """An open, non-void tag waiting for its closer."""

    name: str
    start: int
    raw: str

    @staticmethod
    def from_token(token: TagToken) -> "Frame":
        return Frame(name=token.name, start=token.start, raw=token.raw)

    @property
    def range(self) -> TextRange:
        return TextRange.at(self.start, len(self.raw))


def check_structure(tokens: Iterable[TagToken], line_index: LineIndex) -> list[Diagnostic]:
    """Report unexpected, mismatched and unclosed tags.

    A closer whose name does not match the innermost open tag is reported and
    then ignored: the popped frame goes back on the stack, so a later closer
    with the right name still resolves it.
    """
    diagnostics: list[Diagnostic] = []
    stack: list[Frame] = []

    for token in tokens:
        if token.is_closing:
            if not stack:
                diagnostics.append(
                    STRUCTURE_UNEXPECTED_CLOSING_TAG.diagnostic(
                        line_index.span(token.range),
                        token.range,
                        name=token.name,
                    )
                )
                continue
            frame = stack.pop()
            if frame.name != token.name:
                diagnostics.append(
                    STRUCTURE_MISMATCHED_CLOSING_TAG.diagnostic(
                        line_index.span(token.range),
                        token.range,
                        expected=frame.name,
                        found=token.name,
                    )
                )
                stack.append(frame)
            continue

        if token.opens_frame:
            stack.append(Frame.from_token(token))

    for frame in stack:
        diagnostics.append(
            STRUCTURE_UNCLOSED_TAG.diagnostic(line_index.span(frame.range), frame.range, name=frame.name)
        )
    return diagnostics

