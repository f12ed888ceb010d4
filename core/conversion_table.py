"""Full score -> grade conversion table."""

from __future__ import annotations

from typing import Iterator, NamedTuple

import pandas as pd

from core.constants import MAX_SCORE, MIN_SCORE
from core.ib_grades import score_to_grade


TABLE_COLUMNS = ["score", "grade"]


class TableRow(NamedTuple):
    score: int
    grade: float


def generate_table(min_score: int = MIN_SCORE) -> Iterator[TableRow]:
    """Yield (score, grade) rows from min_score through 45, ascending.

    Each call returns a fresh generator.
    """

    for score in range(min_score, MAX_SCORE + 1):
        yield TableRow(score=score, grade=score_to_grade(score))


def conversion_table_df(min_score: int = MIN_SCORE) -> pd.DataFrame:
    """Rows of generate_table as a DataFrame (columns: score, grade).

    Raises InvalidScore when min_score is below 24.
    """

    rows = list(generate_table(min_score))
    if not rows:
        return pd.DataFrame(columns=TABLE_COLUMNS)
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)
