"""Rich Console factory and theme for proptour output.

Consoles render into a StringIO buffer so renderers return plain strings.
In non-TTY environments (tests, pipes) Rich disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TOUR_THEME = Theme(
    {
        "tour.ok": "bold green",
        "tour.error": "bold red",
        "tour.op": "bold cyan",
        "tour.key": "dim",
        "tour.heading": "bold",
        "tour.number": "bold blue",
        "tour.line": "",
        "tour.id": "cyan",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps test output stable).
    """
    return Console(
        file=StringIO(),
        theme=TOUR_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
