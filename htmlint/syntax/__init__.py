"""HTML element vocabulary."""

from htmlint.syntax.elements import (
    BLOCK_ELEMENTS,
    HEADING_LEVELS,
    INLINE_ELEMENTS,
    SOURCE_REQUIRED_ELEMENTS,
    VOID_ELEMENTS,
    heading_level,
    is_void_element,
)

__all__ = [
    "BLOCK_ELEMENTS",
    "HEADING_LEVELS",
    "INLINE_ELEMENTS",
    "SOURCE_REQUIRED_ELEMENTS",
    "VOID_ELEMENTS",
    "heading_level",
    "is_void_element",
]
