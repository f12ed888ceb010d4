"""IB score <-> average grade conversion.

Scores 24..41 are mapped linearly onto grades 4.0..1.0; scores 42..45 sit on
the best-grade plateau. The reverse direction is an approximate inverse and
is rounded half away from zero.
"""

from __future__ import annotations

import math

from core.constants import (
    BEST_GRADE,
    MAX_REVERSE_SCORE,
    MAX_SCORE,
    MIN_SCORE,
    PLATEAU_SCORE,
    POINTS_PER_GRADE,
    WORST_GRADE,
)


class ConversionError(ValueError):
    """Base class for user-recoverable conversion failures."""

    def __init__(self, value, message: str):
        super().__init__(message)
        self.value = value


class InvalidScore(ConversionError):
    def __init__(self, value):
        super().__init__(value, f"Invalid score, must be between {MIN_SCORE} and {MAX_SCORE}.")


class InvalidGrade(ConversionError):
    def __init__(self, value):
        super().__init__(value, f"Invalid grade, must be between {BEST_GRADE:.1f} and {WORST_GRADE:.1f}.")


class MalformedInput(ConversionError):
    def __init__(self, value, expected: str = "a number"):
        super().__init__(value, f"Invalid input {value!r}, expected {expected}.")


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, ties away from zero (40.5 -> 41)."""

    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def score_to_grade(score: int) -> float:
    """Return the average grade for an IB score.

    Raises InvalidScore outside [24, 45].
    """

    if PLATEAU_SCORE <= score <= MAX_SCORE:
        return BEST_GRADE
    if MIN_SCORE <= score < PLATEAU_SCORE:
        return BEST_GRADE + (PLATEAU_SCORE - score) / POINTS_PER_GRADE
    raise InvalidScore(score)


def grade_to_min_score(grade: float) -> int:
    """Return the minimum IB score needed for an average grade.

    The best grade maps to the start of the plateau (42). Other grades invert
    the linear formula and are clamped to [24, 41]. Rounding is to the nearest
    score, so the result's grade is within half a step (1/12) of the request
    rather than always at or below it.
    """

    if grade == BEST_GRADE:
        return PLATEAU_SCORE
    if not math.isfinite(grade) or grade < BEST_GRADE or grade > WORST_GRADE:
        raise InvalidGrade(grade)

    score = round_half_away_from_zero(PLATEAU_SCORE - (grade - BEST_GRADE) * POINTS_PER_GRADE)
    return min(max(score, MIN_SCORE), MAX_REVERSE_SCORE)

