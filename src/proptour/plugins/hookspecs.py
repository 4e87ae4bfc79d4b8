"""Pluggy hook specifications for proptour.

The volume hooks mirror the controller's own observers: for each
assignment ``volume_will_change`` fires before the value is stored and
``volume_did_change`` after, both synchronously.
"""

from __future__ import annotations

import pluggy

hookspec = pluggy.HookspecMarker("proptour")
hookimpl = pluggy.HookimplMarker("proptour")


class ProptourHookSpec:
    """Hook specifications for the proptour plugin system."""

    @hookspec
    def volume_will_change(self, new_value: int) -> None:
        """Called before the volume is replaced with *new_value*."""

    @hookspec
    def volume_did_change(self, old_value: int, new_value: int) -> None:
        """Called after the volume changed from *old_value* to *new_value*."""

    @hookspec
    def post_section(self, section: str, lines: list[str]) -> None:
        """Called after a tour section has produced its lines."""
