"""Parsing of numeric input lines typed by the user.

Only the first token of a line is used; anything after it is discarded.
Only plain ASCII digits are accepted (no "3_6", no non-Latin digits).
"""

from __future__ import annotations

import re

from core.ib_grades import MalformedInput


SCORE_RE = re.compile(r"[+-]?[0-9]+")
GRADE_RE = re.compile(r"[+-]?(?:[0-9]+(?:[.,][0-9]*)?|[.,][0-9]+)")


def _first_token(text: str) -> str:
    if not isinstance(text, str):
        raise MalformedInput(text)
    parts = text.split()
    if not parts:
        raise MalformedInput(text.strip())
    return parts[0]


def parse_score(text: str) -> int:
    """
    Parse an IB score ("36", " 36 extra").
    """
    token = _first_token(text)
    if not SCORE_RE.fullmatch(token):
        raise MalformedInput(token, expected="a whole number")
    return int(token)


def parse_grade(text: str) -> float:
    """
    Parse an average grade ("2.5", "2,5").
    """
    token = _first_token(text)
    if not GRADE_RE.fullmatch(token):
        raise MalformedInput(token)
    return float(token.replace(",", "."))
