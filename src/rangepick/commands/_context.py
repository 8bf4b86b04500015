"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``.  Owns logging setup, builds the picker service,
and routes results to stdout/stderr with the right exit code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rangepick.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from rangepick.config.settings import RangepickSettings
    from rangepick.services.picker import PickerService
    from rangepick.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: RangepickSettings) -> None:
        self.settings = settings
        self._service: PickerService | None = None

        from rangepick.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> PickerService:
        """The picker service (created lazily on first access)."""
        if self._service is None:
            from rangepick.services.picker import PickerService

            self._service = PickerService(self.settings)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout.  Constraint violations are part of
          the rendered payload, so warnings are not repeated on stderr.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
