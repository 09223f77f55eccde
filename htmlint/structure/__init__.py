"""Structural (tag balance) checking."""

from htmlint.structure.checker import Frame, check_structure

__all__ = ["Frame", "check_structure"]
