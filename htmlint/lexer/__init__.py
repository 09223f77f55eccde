"""Tag scanner."""

from htmlint.lexer.scanner import (
    TAG_START_PATTERN,
    ScanResult,
    TagScanner,
    dump_tags,
    scan_tags,
)
from htmlint.lexer.tokens import TagFlags, TagToken

__all__ = [
    "TAG_START_PATTERN",
    "ScanResult",
    "TagFlags",
    "TagScanner",
    "TagToken",
    "dump_tags",
    "scan_tags",
]
