"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from proptour.domain.types import Section
from proptour.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from proptour.services.result import ServiceResult

# Payload keys every section carries; everything else is section-specific.
_SECTION_KEYS = frozenset({"section", "number", "heading", "lines"})


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op)
        if renderer is None and result.op in _SECTION_OPS:
            renderer = _render_section_result
        (renderer or _render_generic)(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Tour and section results reduce to their bare lines, so a quiet run
    prints exactly the walkthrough text and nothing else.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "tour":
        lines: list[str] = []
        for payload in result.data.get("sections", []):
            lines.extend(payload.get("lines", []))
        return "\n".join(lines)

    if "lines" in result.data:
        return "\n".join(result.data["lines"])

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item["id"]) for item in items if "id" in item)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="tour.ok")
    op = Text(f"  {result.op}", style="tour.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="tour.key")
    console.print(k, Text(str(value)), end="")
    console.print()


def _render_lines(console: Console, lines: list[str]) -> None:
    # Text() keeps brackets in the output literal instead of Rich markup.
    for line in lines:
        console.print(Text(line, style="tour.line"))


def _render_section(console: Console, payload: dict[str, Any], *, verbose: bool) -> None:
    number = Text(f"{payload.get('number', '?')}. ", style="tour.number")
    heading = Text(str(payload.get("heading", payload.get("section", ""))), style="tour.heading")
    console.print(number, heading, sep="")
    _render_lines(console, payload.get("lines", []))

    if verbose:
        for key, value in payload.items():
            if key not in _SECTION_KEYS:
                _field(console, key, value)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="tour.error")
    op = Text(f"  {result.op}", style="tour.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Tour renderers ────────────────────────────────────────────────────


def _render_section_result(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    _render_section(console, result.data, verbose=verbose)


def _render_tour(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    sections = result.data.get("sections", [])
    for index, payload in enumerate(sections):
        if index:
            console.print()
        _render_section(console, payload, verbose=verbose)


def _render_sections_table(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", style="tour.number", justify="right")
    table.add_column("Section", style="tour.id", no_wrap=True)
    table.add_column("Heading", style="tour.heading")
    for item in result.data.get("items", []):
        table.add_row(
            str(item.get("number", "")),
            str(item.get("id", "")),
            str(item.get("heading", "")),
        )
    console.print(table)


def _render_volume(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _render_lines(console, result.data.get("lines", []))
    _field(console, "volume", result.data.get("volume"))
    if verbose:
        for event in result.data.get("events", []):
            _field(console, event.get("kind", "event"), event)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_SECTION_OPS = frozenset(s.op for s in Section)

_OP_RENDERERS: dict[str, Any] = {
    "tour": _render_tour,
    "list_sections": _render_sections_table,
    "set_volume": _render_volume,
}
