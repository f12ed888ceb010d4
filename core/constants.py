"""Shared scale bounds (no UI dependencies).

This module centralises the score/grade limits used by core/ and ui/.
Keep this module dependency-free (stdlib only).
"""

from __future__ import annotations


# IB score domain accepted for conversion.
MIN_SCORE: int = 24
MAX_SCORE: int = 45

# Scores from here up to MAX_SCORE all collapse to the best grade.
PLATEAU_SCORE: int = 42

# Largest score below the plateau; upper clamp for reverse lookups.
MAX_REVERSE_SCORE: int = PLATEAU_SCORE - 1

# Average grade domain (1.0 is best).
BEST_GRADE: float = 1.0
WORST_GRADE: float = 4.0

# Score points per full grade step: (42 - 24) / (4.0 - 1.0).
POINTS_PER_GRADE: float = (PLATEAU_SCORE - MIN_SCORE) / (WORST_GRADE - BEST_GRADE)
