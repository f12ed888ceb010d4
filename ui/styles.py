"""Rich markup helpers for the terminal UI.

The conversion logic never sees these; only ui/ renders with them.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape


MUTED = "grey62"
EMPHASIS = "bold bright_white"
ERROR = "red"


def em(value: object) -> str:
    """Highlight a value inside a muted sentence."""

    return f"[{EMPHASIS}]{escape(str(value))}[/]"


def muted(text: str) -> str:
    return f"[{MUTED}]{text}[/]"


def error(text: str) -> str:
    return f"[{ERROR}]{escape(text)}[/]"


def make_console(**kwargs) -> Console:
    """Console used by the app; tests pass a file and no color system."""

    kwargs.setdefault("highlight", False)
    kwargs.setdefault("emoji", False)
    return Console(**kwargs)
