"""Attribute extraction from raw tag text."""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Final, Literal, TypeAlias

from htmlint.lexer import TagToken

QuoteStyle: TypeAlias = Literal['"', "'"]

ATTRIBUTE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"""([^\s"'<>/=]+)(?:\s*=\s*(?:"([^"]*)"|'([^']*)'|(\S+)))?"""
)


@dataclass(frozen=True, slots=True)
class Attribute:
    """One attribute occurrence inside a tag."""

    name: str
    value: str | None
    quote: QuoteStyle | None
    offset: int  # relative to the start of the tag's raw text
    length: int

    @property
    def has_value(self) -> bool:
        return self.value is not None

    @property
    def is_empty(self) -> bool:
        """`name=""` and bare `name` both count as empty."""
        return not self.value

    @property
    def is_unquoted(self) -> bool:
        return self.value is not None and self.quote is None


def parse_attributes(token: TagToken) -> tuple[Attribute, ...]:
    """Extract attributes in source order; names are lowercased."""
    text = token.attribute_text
    base = token.attribute_offset
    attributes: list[Attribute] = []
    for match in ATTRIBUTE_PATTERN.finditer(text):
        double, single, bare = match.group(2), match.group(3), match.group(4)
        value: str | None
        quote: QuoteStyle | None
        if double is not None:
            value, quote = double, '"'
        elif single is not None:
            value, quote = single, "'"
        else:
            value, quote = bare, None
        attributes.append(
            Attribute(
                name=match.group(1).lower(),
                value=value,
                quote=quote,
                offset=base + match.start(),
                length=match.end() - match.start(),
            )
        )
    return tuple(attributes)


def attribute_names(token: TagToken) -> frozenset[str]:
    return frozenset(attribute.name for attribute in parse_attributes(token))


def has_valued_attribute(token: TagToken, name: str) -> bool:
    """True when `name=` appears on the tag, whatever the value."""
    return any(attribute.name == name and attribute.has_value for attribute in parse_attributes(token))
