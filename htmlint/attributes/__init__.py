"""Attribute parsing and checks."""

from htmlint.attributes.checker import attribute_span, check_attributes
from htmlint.attributes.parse import (
    ATTRIBUTE_PATTERN,
    Attribute,
    QuoteStyle,
    attribute_names,
    has_valued_attribute,
    parse_attributes,
)

__all__ = [
    "ATTRIBUTE_PATTERN",
    "Attribute",
    "QuoteStyle",
    "attribute_names",
    "attribute_span",
    "check_attributes",
    "has_valued_attribute",
    "parse_attributes",
]
