"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich key/value output) or
machines (--json).  ``--quiet`` reduces success output to one line.
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.text import Text

from civtime.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from civtime.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


_DATE_KEYS = frozenset({"year", "month", "day", "weekday"})


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="civ.key")
    if isinstance(value, (dict, list)):
        v = Text(_json.dumps(value, separators=(",", ":")))
    elif key in _DATE_KEYS:
        v = Text(str(value), style="civ.date")
    elif key == "offset" or key == "default_offset":
        v = Text(str(value), style="civ.offset")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _render_human(result: ServiceResult) -> str:
    console = create_console()
    if result.ok:
        console.print(Text("OK", style="civ.ok"), Text(f"  {result.op}", style="civ.op"), sep="")
        if result.op == "breakdown":
            stamp = _stamp(result.data)
            if stamp:
                console.print(Text(f"  {stamp}", style="civ.date"))
        for key, value in result.data.items():
            _field(console, key, value)
    else:
        msg = result.error.message if result.error else "Unknown error"
        console.print(Text("ERROR", style="civ.error"), Text(f"  {result.op} — {msg}"), sep="")
    return get_output(console).rstrip("\n")


def _stamp(data: dict[str, Any]) -> str:
    """Compact local timestamp line for a breakdown payload."""
    try:
        return (
            f"{data['year']:04d}-{data['month_number']:02d}-{data['day']:02d} "
            f"{data['hour']:02d}:{data['minute']:02d}:{data['second']:02d}"
            f".{data['millisecond']:03d} ({data['weekday']}, offset {data['offset']:+d})"
        )
    except (KeyError, TypeError, ValueError):
        return ""


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display according to *settings*."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return _render_human(result)
