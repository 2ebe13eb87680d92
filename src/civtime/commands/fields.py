"""Command: calendar fields of an instant."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from civtime.commands._base import NUMERIC_ARGS, CivCommand

if TYPE_CHECKING:
    from civtime.commands._context import AppContext


@click.command(
    cls=CivCommand,
    context_settings=NUMERIC_ARGS,
    examples="""\
  civtime fields 0
  civtime fields -1
  civtime --utc fields 1234
  civtime --offset 60 fields 0
  civtime --json fields""",
)
@click.argument("millis", type=int, required=False)
@click.pass_obj
def fields(app: AppContext, millis: int | None) -> None:
    """Show year, month, day, weekday and time of day for MILLIS (default: now)."""
    from civtime.infrastructure.host import now

    instant = now() if millis is None else millis
    app.emit(app.converter().breakdown(instant))
