"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Services are built on demand from the frozen
settings; result emission (stdout/stderr routing + exit codes) is
centralized in :meth:`AppContext.emit`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import click

from dateranger.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from dateranger.config.settings import DateRangerSettings
    from dateranger.services.base import BaseService
    from dateranger.services.result import ServiceResult

ServiceT = TypeVar("ServiceT", bound="BaseService")


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: DateRangerSettings) -> None:
        self.settings = settings

        from dateranger.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def service(self, service_cls: type[ServiceT]) -> ServiceT:
        """Instantiate *service_cls* against the current settings."""
        return service_cls(self.settings)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        output_cfg = self.settings.output
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            date_format=output_cfg.date_format,
            milliseconds=output_cfg.milliseconds,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
