"""Tag tokens."""

from dataclasses import dataclass
from enum import IntFlag

from htmlint.text import TextRange


class TagFlags(IntFlag):
    """Tag classification flags."""

    NONE = 0
    CLOSING = 1 << 0  # </name ...>
    EXPLICIT_SELF_CLOSE = 1 << 1  # raw text ends with />
    VOID = 1 << 2  # name is a void element


@dataclass(frozen=True, slots=True)
class TagToken:
    """One tag occurrence, from `<` through the first `>` after its name."""

    name: str
    raw: str
    start: int
    flags: TagFlags = TagFlags.NONE

    @property
    def end(self) -> int:
        return self.start + len(self.raw)

    @property
    def range(self) -> TextRange:
        return TextRange(self.start, self.end)

    @property
    def is_closing(self) -> bool:
        return bool(self.flags & TagFlags.CLOSING)

    @property
    def is_self_closing(self) -> bool:
        """Explicit `/>` or a void element name."""
        return bool(self.flags & (TagFlags.EXPLICIT_SELF_CLOSE | TagFlags.VOID))

    @property
    def is_opening(self) -> bool:
        return not self.is_closing

    @property
    def opens_frame(self) -> bool:
        """Whether the structural checker pushes this tag on its stack."""
        return not self.is_closing and not self.is_self_closing

    @property
    def attribute_text(self) -> str:
        """Raw text after the tag name, without the closing `>` or `/>`."""
        offset = self.attribute_offset
        body = self.raw[offset:-1]
        if body.endswith("/"):
            body = body[:-1]
        return body

    @property
    def attribute_offset(self) -> int:
        """Offset of `attribute_text` inside `raw`."""
        return (2 if self.is_closing else 1) + len(self.name)
