#!/usr/bin/env python
"""Print the tag stream and scanner diagnostics of one HTML file."""

import argparse
from pathlib import Path

from htmlint.lexer import dump_tags, scan_tags


def main() -> None:
    parser = argparse.ArgumentParser(description="Dump scanned tags for an HTML file")
    parser.add_argument("path", type=Path)
    args = parser.parse_args()

    text = args.path.read_text(encoding="utf-8")
    result = scan_tags(text)
    dump_tags(result)

    print(f"\nScanned {len(result.tokens)} tags from {args.path}")


if __name__ == "__main__":
    main()
