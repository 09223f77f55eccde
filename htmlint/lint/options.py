"""Lint modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class LintMode(StrEnum):
    """Top-level linter behavior profile."""

    COMPAT = "compat"
    PRECISE = "precise"


@dataclass(frozen=True, slots=True)
class LintOptions:
    """Feature flags for the optional checks and position handling."""

    mode: LintMode = LintMode.COMPAT
    precise_attribute_positions: bool = False
    check_unquoted_attributes: bool = False

    @staticmethod
    def for_mode(mode: LintMode) -> "LintOptions":
        if mode == LintMode.PRECISE:
            return LintOptions(
                mode=mode,
                precise_attribute_positions=True,
                check_unquoted_attributes=True,
            )

        return LintOptions(
            mode=mode,
            precise_attribute_positions=False,
            check_unquoted_attributes=False,
        )
