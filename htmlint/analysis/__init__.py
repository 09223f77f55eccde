"""Element-level facts derived from one tag scan."""

from htmlint.analysis.elements import ElementSpan, build_element_map

__all__ = ["ElementSpan", "build_element_map"]
