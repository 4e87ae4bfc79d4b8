"""Synchronous hook dispatch with an in-memory event history.

Events are dispatched inline, in the order they are raised, so plugins see
observer notifications in exactly the order the domain emits them.  Each
dispatch is appended to ``history`` with its final status.

INVARIANT: Plugin failures are warnings, never errors.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from proptour.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


@dataclass
class DispatchedEvent:
    """One hook dispatch and how it ended."""

    hook_name: str
    payload: dict[str, Any]
    status: str = "pending"
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "hook_name": self.hook_name,
            "payload": self.payload,
            "status": self.status,
        }
        if self.error is not None:
            result["error"] = self.error
        return result


@dataclass
class EventBus:
    """Dispatch pluggy hooks inline and remember what happened.

    Parameters:
        plugin_manager: Loaded PluginManager for hook dispatch.
    """

    plugin_manager: PluginManager
    history: list[DispatchedEvent] = field(default_factory=list)

    def dispatch(self, hook_name: str, payload: dict[str, Any]) -> DispatchedEvent:
        """Call every implementation of *hook_name* with *payload*.

        Returns the recorded event. ``status`` is ``completed`` on success
        (or when nothing implements the hook) and ``failed`` when a plugin
        raised.
        """
        event = DispatchedEvent(hook_name=hook_name, payload=dict(payload))
        self.history.append(event)

        hook_fn = getattr(self.plugin_manager.hook, hook_name, None)
        if hook_fn is None:
            event.status = "completed"
            return event

        try:
            hook_fn(**payload)
        except Exception as exc:
            logger.debug("Hook %s failed: %s", hook_name, exc)
            event.status = "failed"
            event.error = str(exc)
        else:
            event.status = "completed"
        return event

    def failures(self) -> list[DispatchedEvent]:
        """Events whose hooks raised."""
        return [e for e in self.history if e.status == "failed"]

    def clear(self) -> None:
        self.history.clear()
