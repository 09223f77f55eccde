"""Run result carriers for tool entrypoints."""

from htmlint.pipeline.results import CheckRunResult

__all__ = [
    "CheckRunResult",
]
