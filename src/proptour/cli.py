"""Root CLI group for proptour with global flags and command registration."""

from __future__ import annotations

import click

from proptour import __version__
from proptour.commands import register_commands
from proptour.commands._base import examples_option
from proptour.commands._context import AppContext
from proptour.config.settings import TourSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="proptour")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the tour's own lines.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logs.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@examples_option(
    """\
  proptour run
  proptour -q run lazy-properties
  proptour volume 3 3
  proptour --json sections"""
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """proptour — a guided tour of properties and methods."""
    ctx.ensure_object(dict)
    settings = TourSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
