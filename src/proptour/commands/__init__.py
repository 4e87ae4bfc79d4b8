"""Subcommand modules for proptour.

Provides register_commands() which uses deferred imports to keep
``proptour --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from proptour.commands.run import run
    from proptour.commands.sections import sections
    from proptour.commands.volume import volume

    cli.add_command(run)
    cli.add_command(sections)
    cli.add_command(volume)
