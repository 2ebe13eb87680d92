"""Subcommand modules for civtime.

Provides register_commands() which uses deferred imports to keep
``civtime --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the zone group and the standalone commands on the root group."""
    from civtime.commands.fields import fields
    from civtime.commands.now import now
    from civtime.commands.zone import zone

    cli.add_command(zone)
    cli.add_command(fields)
    cli.add_command(now)
