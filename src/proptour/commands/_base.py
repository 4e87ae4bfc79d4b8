"""Click helpers for the ``--examples`` flag.

``--help`` stays short; ``--examples`` prints copy-pasteable invocations
and exits.  Commands opt in with ``cls=TourCommand, examples=...``; the
root group uses :func:`examples_option` directly.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import click

F = TypeVar("F", bound=Callable[..., Any])


def _examples_flag(examples: str) -> click.Option:
    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show_examples,
        help="Show usage examples.",
    )


def examples_option(examples: str) -> Callable[[F], F]:
    """Decorator form, for groups built with ``@click.group``."""

    def decorator(f: F) -> F:
        if isinstance(f, click.Command):
            f.params.append(_examples_flag(examples))
            return f
        params = getattr(f, "__click_params__", [])
        params.append(_examples_flag(examples))
        f.__click_params__ = params  # type: ignore[attr-defined]
        return f

    return decorator


class TourCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_flag(examples))
