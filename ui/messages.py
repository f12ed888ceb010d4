"""User-facing texts of the interactive converter."""

from __future__ import annotations

from core.formatting import format_grade, format_number
from ui.styles import em, muted


USAGE_TITLE = "IB grade conversion"

USAGE_LINES = (
    ("a", "to list the conversions for every possible score."),
    ("m", "to compute the minimum IB score for a desired average grade."),
    ("Enter", "to compute the average grade for a given score."),
    ("q", "to quit the application."),
)

SCORE_PROMPT = "Your IB score: "
GRADE_PROMPT = "Desired average grade: "
FAREWELL = "Exiting..."


def usage_banner() -> list[str]:
    lines = [em(USAGE_TITLE)]
    for key, action in USAGE_LINES:
        lines.append(muted(f" › Press {em(key)} {action}"))
    return lines


def score_result_line(score: int, grade: float) -> str:
    return muted(f"For {em(score)} points, {em(format_grade(grade))} is the corresponding average grade")


def min_score_line(grade: float, score: int) -> str:
    return muted(f"For an average grade of {em(format_number(grade))} you need at least {em(score)} IB points")


def prompt(text: str) -> str:
    return muted(text)
