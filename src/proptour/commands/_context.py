"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy service construction and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from proptour.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from proptour.config.settings import TourSettings
    from proptour.plugins.event_bus import EventBus
    from proptour.services.result import ServiceResult
    from proptour.services.tour import TourService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The tour service and its plugin event bus are built on first use, so
    ``--help`` and ``--version`` never trigger plugin discovery.
    """

    def __init__(self, settings: TourSettings) -> None:
        self.settings = settings
        self._event_bus: EventBus | None = None
        self._tour: TourService | None = None

        from proptour.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def event_bus(self) -> EventBus:
        """Event bus over entry-point plugins (created lazily on first access)."""
        if self._event_bus is None:
            from proptour.plugins.event_bus import EventBus
            from proptour.plugins.manager import PluginManager

            pm = PluginManager()
            pm.discover_and_load()
            self._event_bus = EventBus(pm)
        return self._event_bus

    @property
    def tour(self) -> TourService:
        """The tour service (created lazily on first access)."""
        if self._tour is None:
            from proptour.services.tour import TourService

            self._tour = TourService(self.settings, self.event_bus)
        return self._tour

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
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
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
