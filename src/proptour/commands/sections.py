"""Command: list tour sections."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from proptour.commands._base import TourCommand

if TYPE_CHECKING:
    from proptour.commands._context import AppContext


@click.command(
    cls=TourCommand,
    examples="""\
  proptour sections
  proptour -q sections
  proptour --json sections""",
)
@click.pass_obj
def sections(app: AppContext) -> None:
    """List the tour sections in the order they run."""
    app.emit(app.tour.list_sections())
