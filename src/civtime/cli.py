"""Root CLI group for civtime with global flags and command registration."""

from __future__ import annotations

import click

from civtime import __version__
from civtime.commands import register_commands
from civtime.commands._context import AppContext
from civtime.config.settings import CivSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="civtime")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--utc", "use_utc", is_flag=True, help="Convert in UTC.")
@click.option(
    "--offset",
    type=int,
    default=None,
    help="Convert with a flat offset, in minutes east of UTC.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    use_utc: bool,
    offset: int | None,
) -> None:
    """civtime — civil calendar fields for millisecond instants."""
    ctx.ensure_object(dict)
    settings = CivSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        utc=use_utc,
        offset=offset,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
