"""Command group: inspect the effective zone."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from civtime.commands._base import NUMERIC_ARGS, CivGroup

if TYPE_CHECKING:
    from civtime.commands._context import AppContext

_ZONE_EXAMPLES = """\
  civtime zone show
  civtime --offset -300 zone show
  civtime zone resolve 1500
  civtime --json zone resolve -- -60"""


@click.group(cls=CivGroup, examples=_ZONE_EXAMPLES)
@click.pass_obj
def zone(app: AppContext) -> None:
    """Inspect the zone used for conversions."""


@zone.command(
    examples="""\
  civtime zone show
  civtime --utc zone show
  civtime --json zone show"""
)
@click.pass_obj
def show(app: AppContext) -> None:
    """Show the default offset and era table."""
    app.emit(app.converter().describe())


@zone.command(
    context_settings=NUMERIC_ARGS,
    examples="""\
  civtime zone resolve 500
  civtime zone resolve 1500
  civtime zone resolve -60""",
)
@click.argument("minute", type=int)
@click.pass_obj
def resolve(app: AppContext, minute: int) -> None:
    """Show which offset applies at MINUTE since the epoch."""
    app.emit(app.converter().resolve(minute))
