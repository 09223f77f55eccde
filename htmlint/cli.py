"""Command line entrypoint: lint HTML files and print their diagnostics."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
import json
import logging
from pathlib import Path
import sys
from typing import TextIO

from tqdm import tqdm

from htmlint.diagnostics import Diagnostic, filter_severity, has_errors, sort_diagnostics
from htmlint.lint import LintMode, LintOptions, run_check

logger = logging.getLogger(__name__)

HTML_SUFFIXES = (".html", ".htm")


def collect_html_files(paths: Iterable[Path]) -> list[Path]:
    files: list[Path] = []
    for path in paths:
        if path.is_dir():
            found = sorted(
                candidate
                for candidate in path.rglob("*")
                if candidate.is_file() and candidate.suffix.lower() in HTML_SUFFIXES
            )
            files.extend(found)
        else:
            files.append(path)
    return files


def format_diagnostic(path: Path, diagnostic: Diagnostic) -> str:
    start = diagnostic.span.start
    return f"{path}:{start.line}:{start.column}: {diagnostic.severity} [{diagnostic.code}] {diagnostic.message}"


def diagnostic_to_json(diagnostic: Diagnostic) -> dict[str, object]:
    return {
        "code": diagnostic.code,
        "kind": str(diagnostic.kind),
        "severity": diagnostic.severity,
        "message": diagnostic.message,
        "hint": diagnostic.hint,
        "category": diagnostic.category,
        "span": {
            "start": {"line": diagnostic.span.start.line, "column": diagnostic.span.start.column},
            "end": {"line": diagnostic.span.end.line, "column": diagnostic.span.end.column},
        },
        "range": list(diagnostic.range.as_tuple()),
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="htmlint", description="Lint HTML documents")
    parser.add_argument("paths", nargs="+", type=Path, help="HTML files or directories to lint")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in LintMode],
        default=LintMode.COMPAT.value,
        help="compat keeps tag-relative attribute columns; precise re-resolves them (default: compat)",
    )
    parser.add_argument(
        "--check-unquoted",
        action="store_true",
        help="Also report unquoted attribute values",
    )
    parser.add_argument(
        "--min-severity",
        choices=["info", "warning", "error"],
        default="info",
        help="Hide diagnostics below this severity (default: info)",
    )
    parser.add_argument("--format", choices=["text", "json"], default="text", help="Output format")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable the tqdm progress bar",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity")
    return parser


def resolve_options(args: argparse.Namespace) -> LintOptions:
    base = LintOptions.for_mode(LintMode(args.mode))
    if args.check_unquoted and not base.check_unquoted_attributes:
        return LintOptions(
            mode=base.mode,
            precise_attribute_positions=base.precise_attribute_positions,
            check_unquoted_attributes=True,
        )
    return base


def run(args: argparse.Namespace, out: TextIO | None = None) -> int:
    out = out if out is not None else sys.stdout
    options = resolve_options(args)
    files = collect_html_files(args.paths)
    show_progress = not args.no_progress and len(files) > 1
    iterator = tqdm(files, desc="lint", unit="file", file=sys.stderr) if show_progress else files

    failed = False
    report: dict[str, list[dict[str, object]]] = {}
    for path in iterator:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Cannot read %s: %s", path, exc)
            failed = True
            continue

        result = run_check(text, options)
        diagnostics = sort_diagnostics(filter_severity(result.diagnostics, args.min_severity))
        failed = failed or has_errors(result.diagnostics)
        if args.format == "json":
            report[str(path)] = [diagnostic_to_json(d) for d in diagnostics]
        else:
            for diagnostic in diagnostics:
                print(format_diagnostic(path, diagnostic), file=out)

    if args.format == "json":
        json.dump(report, out, indent=2)
        out.write("\n")
    return 1 if failed else 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.WARNING if args.verbose == 0 else logging.INFO if args.verbose == 1 else logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    return run(args)


if __name__ == "__main__":
    raise SystemExit(main())
