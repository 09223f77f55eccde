"""Element category tables."""

from typing import Final

VOID_ELEMENTS: Final[frozenset[str]] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Block and inline sets are reference data only; nesting legality is not enforced.
BLOCK_ELEMENTS: Final[frozenset[str]] = frozenset(
    {
        "address",
        "article",
        "aside",
        "blockquote",
        "details",
        "dialog",
        "dd",
        "div",
        "dl",
        "dt",
        "fieldset",
        "figcaption",
        "figure",
        "footer",
        "form",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "header",
        "hgroup",
        "hr",
        "li",
        "main",
        "nav",
        "ol",
        "p",
        "pre",
        "section",
        "table",
        "ul",
    }
)

INLINE_ELEMENTS: Final[frozenset[str]] = frozenset(
    {
        "a",
        "abbr",
        "b",
        "bdo",
        "br",
        "button",
        "cite",
        "code",
        "dfn",
        "em",
        "i",
        "img",
        "input",
        "kbd",
        "label",
        "map",
        "object",
        "q",
        "samp",
        "script",
        "select",
        "small",
        "span",
        "strong",
        "sub",
        "sup",
        "textarea",
        "time",
        "tt",
        "var",
    }
)

HEADING_LEVELS: Final[dict[str, int]] = {f"h{level}": level for level in range(1, 7)}

# Elements whose `src` must point somewhere.
SOURCE_REQUIRED_ELEMENTS: Final[frozenset[str]] = frozenset({"img", "script", "iframe"})


def is_void_element(name: str) -> bool:
    return name.lower() in VOID_ELEMENTS


def heading_level(name: str) -> int | None:
    return HEADING_LEVELS.get(name.lower())
