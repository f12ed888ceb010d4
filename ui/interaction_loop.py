"""Interactive key loop: usage banner, key dispatch, result rendering."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, TextIO

from rich.console import Console

from core.constants import MIN_SCORE
from core.conversion_table import conversion_table_df
from core.ib_grades import ConversionError, MalformedInput, grade_to_min_score, score_to_grade
from core.parsing import parse_grade, parse_score
from ui import messages
from ui.key_reader import KeyReader
from ui.styles import error


QUIT_KEYS = frozenset({"q", "Q"})
TABLE_KEYS = frozenset({"a", "A"})
MIN_SCORE_KEYS = frozenset({"m", "M"})
ENTER_KEYS = frozenset({"\n", "\r"})


class LoopState(Enum):
    AWAITING_KEY = "awaiting_key"
    AWAITING_SCORE_INPUT = "awaiting_score_input"
    AWAITING_GRADE_INPUT = "awaiting_grade_input"
    TERMINATED = "terminated"


class InteractionLoop:
    """Reads one key at a time and runs the matching conversion.

    Invalid or malformed input is reported on one line and the request is
    dropped; only the quit key (or end of input) ends the loop.
    """

    def __init__(
        self,
        console: Console,
        key_reader: KeyReader,
        stream: TextIO,
        logger: logging.Logger | None = None,
    ):
        self.console = console
        self.key_reader = key_reader
        self.stream = stream
        self.logger = logger or logging.getLogger("ibgrade")
        self.state = LoopState.AWAITING_KEY

        self._handlers: dict[str, Callable[[], None]] = {}
        for key in TABLE_KEYS:
            self._handlers[key] = self.print_table
        for key in MIN_SCORE_KEYS:
            self._handlers[key] = self.convert_grade
        for key in ENTER_KEYS:
            self._handlers[key] = self.convert_score

    def run(self) -> int:
        while self.step():
            pass
        return 0

    def step(self) -> bool:
        """Process one key. Returns False once the loop has terminated."""

        if self.state is LoopState.TERMINATED:
            return False

        self.print_usage()
        key = self.key_reader.read_key()
        self.logger.info("key=%r", key)

        if key == "" or key in QUIT_KEYS:
            self.quit()
            return False

        handler = self._handlers.get(key)
        if handler is None:
            return True

        self.console.print()
        handler()
        return True

    def print_usage(self) -> None:
        for line in messages.usage_banner():
            self.console.print(line)

    def print_table(self) -> None:
        table = conversion_table_df(MIN_SCORE)
        for score, grade in table.itertuples(index=False):
            self.console.print(messages.score_result_line(int(score), float(grade)))
        self.console.print()

    def convert_score(self) -> None:
        self.state = LoopState.AWAITING_SCORE_INPUT
        try:
            line = self._read_line(messages.SCORE_PROMPT, expected="a whole number")
            score = parse_score(line)
            grade = score_to_grade(score)
        except ConversionError as exc:
            self._report(exc)
        else:
            self.logger.debug("score_to_grade score=%s grade=%s", score, grade)
            self.console.print(messages.score_result_line(score, grade))
            self.console.print()
        finally:
            self.state = LoopState.AWAITING_KEY

    def convert_grade(self) -> None:
        self.state = LoopState.AWAITING_GRADE_INPUT
        try:
            line = self._read_line(messages.GRADE_PROMPT)
            grade = parse_grade(line)
            score = grade_to_min_score(grade)
        except ConversionError as exc:
            self._report(exc)
        else:
            self.logger.debug("grade_to_min_score grade=%s score=%s", grade, score)
            self.console.print(messages.min_score_line(grade, score))
            self.console.print()
        finally:
            self.state = LoopState.AWAITING_KEY

    def quit(self) -> None:
        self.state = LoopState.TERMINATED
        self.console.print()
        self.console.print(messages.FAREWELL)

    def _read_line(self, prompt_text: str, expected: str = "a number") -> str:
        try:
            return self.console.input(messages.prompt(prompt_text), stream=self.stream)
        except UnicodeDecodeError as exc:
            raise MalformedInput(exc.object[exc.start : exc.end].decode("utf-8", errors="replace"), expected) from None

    def _report(self, exc: ConversionError) -> None:
        self.logger.warning("invalid_input type=%s value=%r", type(exc).__name__, exc.value)
        self.console.print(error(str(exc)))
