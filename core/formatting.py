"""Formatting helpers shared by the terminal UI and tests.

Keep this module terminal-free so the output can be asserted on directly.
"""

from __future__ import annotations

import math


def format_grade(grade: float | None) -> str:
    """Format a grade with two significant digits (e.g. 4.0 / 2.2 / '-')."""

    if grade is None:
        return "-"
    if isinstance(grade, float) and math.isnan(grade):
        return "-"
    return f"{grade:#.2g}"


def format_number(value: float | None) -> str:
    """Short general rendering used to echo user input (2.5 / 2 / '-')."""

    if value is None:
        return "-"
    if isinstance(value, float) and math.isnan(value):
        return "-"
    return f"{value:g}"
