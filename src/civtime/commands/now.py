"""Command: the host's current instant."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from civtime.commands._base import CivCommand

if TYPE_CHECKING:
    from civtime.commands._context import AppContext


@click.command(
    cls=CivCommand,
    examples="""\
  civtime now
  civtime --json now
  civtime now --fields""",
)
@click.option("--fields", "with_fields", is_flag=True, help="Also break the instant down.")
@click.pass_obj
def now(app: AppContext, with_fields: bool) -> None:
    """Print the current time as milliseconds since the epoch."""
    from civtime.infrastructure.host import now as host_now

    instant = host_now()
    svc = app.converter()
    app.emit(svc.breakdown(instant) if with_fields else svc.stamp(instant))
