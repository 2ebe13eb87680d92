"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``.  The zone is resolved lazily so ``--help`` and
``--version`` never read host locale state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from civtime.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from civtime.config.settings import CivSettings
    from civtime.domain.zone import Zone
    from civtime.services.convert import ConvertService
    from civtime.services.result import ServiceResult


class AppContext:
    """Settings plus the effective zone, shared across the command tree."""

    def __init__(self, settings: CivSettings) -> None:
        self.settings = settings
        self._zone: Zone | None = None

        from civtime.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def zone(self) -> Zone:
        """The effective zone (resolved on first access)."""
        if self._zone is None:
            self._zone = self.settings.resolve_zone()
        return self._zone

    def converter(self) -> ConvertService:
        from civtime.services.convert import ConvertService

        return ConvertService(self.zone)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout; warnings go to stderr unless in JSON mode,
          where they are already part of the payload.
        * Failure: stderr, exit code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
