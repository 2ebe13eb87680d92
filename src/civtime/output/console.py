"""Rich Console factory and theme for civtime output.

Consoles render into a StringIO buffer so formatters can return plain
strings.  Outside a terminal (tests, pipes) Rich drops color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

CIV_THEME = Theme(
    {
        "civ.ok": "bold green",
        "civ.error": "bold red",
        "civ.warning": "bold yellow",
        "civ.op": "bold cyan",
        "civ.key": "dim",
        "civ.date": "bold",
        "civ.offset": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=CIV_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
