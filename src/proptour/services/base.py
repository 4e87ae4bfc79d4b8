"""BaseService — shared foundation for proptour services.

Every service receives the resolved :class:`TourSettings` and, optionally,
an :class:`EventBus` that forwards notifications to plugins.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from proptour.config.settings import TourSettings
    from proptour.plugins.event_bus import EventBus

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class TourService(BaseService):
            def stored_properties(self) -> ServiceResult:
                profile = UserProfile(**self._settings.profile.model_dump())
                ...
    """

    def __init__(self, settings: TourSettings, event_bus: EventBus | None = None) -> None:
        self._settings = settings
        self._event_bus = event_bus

    def _dispatch_event(
        self,
        hook_name: str,
        payload: dict[str, Any],
        warnings: list[str],
    ) -> None:
        """Dispatch a hook to plugins. No-op if no event bus is attached.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        bus = self._event_bus
        if bus is None:
            return
        event = bus.dispatch(hook_name, payload)
        if event.status == "failed":
            logger.debug("Event dispatch failed for %s", hook_name)
            warnings.append(f"Plugin hook {hook_name} failed: {event.error}")
