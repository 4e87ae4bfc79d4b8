"""Command: drive the volume observers with custom levels."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from proptour.commands._base import TourCommand

if TYPE_CHECKING:
    from proptour.commands._context import AppContext


@click.command(
    cls=TourCommand,
    examples="""\
  proptour volume 5 10
  proptour volume 3 3 3
  proptour volume --initial 7 2""",
)
@click.argument("levels", type=int, nargs=-1, required=True)
@click.option("--initial", type=int, default=None, help="Starting volume (default from config).")
@click.pass_obj
def volume(app: AppContext, levels: tuple[int, ...], initial: int | None) -> None:
    """Set the volume to each LEVEL in turn, showing will/did-change notices."""
    app.emit(app.tour.set_volume(list(levels), initial=initial))
