"""Command: run the tour, or selected sections of it."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from proptour.commands._base import TourCommand

if TYPE_CHECKING:
    from proptour.commands._context import AppContext


@click.command(
    cls=TourCommand,
    examples="""\
  proptour run
  proptour run property-observers lazy-properties
  proptour -q run
  proptour --json run value-vs-reference""",
)
@click.argument("section_names", metavar="[SECTION]...", nargs=-1)
@click.pass_obj
def run(app: AppContext, section_names: tuple[str, ...]) -> None:
    """Run every tour section in order, or only the named ones."""
    app.emit(app.tour.run(list(section_names)))
