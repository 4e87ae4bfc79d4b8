"""TourService — runs the tour sections and reports what each one printed.

Each section builds its toy entity from settings, exercises it, and returns
a ServiceResult whose ``data["lines"]`` is the console text in order.
Sections share nothing; running one never changes the output of another.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any

from proptour.domain.app_config import AppConfig
from proptour.domain.cart import ShoppingCart
from proptour.domain.copying import Coordinate, UserSettings
from proptour.domain.lazy import DataFetcher
from proptour.domain.observed import VolumeController, did_change_message, will_change_message
from proptour.domain.player import MusicPlayer
from proptour.domain.profile import UserProfile
from proptour.domain.task import Task
from proptour.domain.types import Section
from proptour.services.base import BaseService
from proptour.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class TourService(BaseService):
    """One operation per tour section, plus ``run`` to chain them."""

    # ------------------------------------------------------------------
    # Tour-level operations
    # ------------------------------------------------------------------

    def run(self, sections: Sequence[str] | None = None) -> ServiceResult:
        """Run *sections* (all of them, in order, when None or empty).

        Unknown slugs fail the whole run before any section executes.
        """
        requested: list[Section]
        if not sections:
            requested = list(Section)
        else:
            valid = {s.value for s in Section}
            unknown = [s for s in sections if s not in valid]
            if unknown:
                return ServiceResult(
                    ok=False,
                    op="tour",
                    error=ServiceError(
                        code="UNKNOWN_SECTION",
                        message=f"Unknown section: {', '.join(unknown)}",
                        detail={"unknown": unknown, "valid": [s.value for s in Section]},
                    ),
                )
            requested = [Section(s) for s in sections]

        payloads: list[dict[str, Any]] = []
        warnings: list[str] = []
        for section in requested:
            result = self.run_section(section)
            payloads.append(result.data)
            warnings.extend(result.warnings)

        return ServiceResult(
            ok=True,
            op="tour",
            data={"count": len(payloads), "sections": payloads},
            warnings=warnings,
        )

    def run_section(self, section: Section) -> ServiceResult:
        """Run a single section by enum member."""
        operation = getattr(self, section.op)
        result: ServiceResult = operation()
        return result

    def list_sections(self) -> ServiceResult:
        items = [{"id": s.value, "number": s.number, "heading": s.heading} for s in Section]
        return ServiceResult(
            ok=True,
            op="list_sections",
            data={"count": len(items), "items": items},
        )

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def stored_properties(self) -> ServiceResult:
        cfg = self._settings.profile
        profile = UserProfile(username=cfg.username, age=cfg.age)
        return self._section_result(
            Section.STORED_PROPERTIES,
            [profile.describe()],
            [],
            username=profile.username,
            age=profile.age,
        )

    def computed_properties(self) -> ServiceResult:
        cart = ShoppingCart()
        for item in self._settings.cart.items:
            cart.add_item(item)
        return self._section_result(
            Section.COMPUTED_PROPERTIES,
            [f"Total items in the cart: {cart.item_count}"],
            [],
            items=list(cart.items),
            item_count=cart.item_count,
        )

    def lazy_properties(self) -> ServiceResult:
        lines: list[str] = []
        fetcher = DataFetcher(self._settings.fetcher.server_data, announce=lines.append)
        loaded_before_access = fetcher.is_loaded

        data = fetcher.data
        lines.append(json.dumps(data, ensure_ascii=False))
        logger.debug("Lazy data loaded after %d fetch(es)", fetcher.fetch_count)

        # A second read must come from the cache.
        cached = fetcher.data

        return self._section_result(
            Section.LAZY_PROPERTIES,
            lines,
            [],
            data=data,
            loaded_before_access=loaded_before_access,
            fetch_count=fetcher.fetch_count,
            cached_matches=cached == data,
        )

    def property_observers(self) -> ServiceResult:
        cfg = self._settings.volume
        warnings: list[str] = []
        lines, events, final = self._drive_volume(cfg.initial, cfg.levels, warnings)
        return self._section_result(
            Section.PROPERTY_OBSERVERS,
            lines,
            warnings,
            events=events,
            volume=final,
        )

    def instance_methods(self) -> ServiceResult:
        track = self._settings.player.track
        player = MusicPlayer()
        lines = [player.play(track), player.stop()]
        return self._section_result(
            Section.INSTANCE_METHODS,
            lines,
            [],
            track=track,
            current_track=player.current_track,
        )

    def type_methods(self) -> ServiceResult:
        update_to = self._settings.app.update_to
        try:
            lines = [
                AppConfig.update_version(update_to),
                f"Current app version: {AppConfig.app_version}",
            ]
            version = AppConfig.app_version
        finally:
            AppConfig.reset()
        return self._section_result(
            Section.TYPE_METHODS,
            lines,
            [],
            app_version=version,
        )

    def mutating_methods(self) -> ServiceResult:
        task = Task(title=self._settings.task.title)
        completed_before = task.is_completed
        task.complete()
        return self._section_result(
            Section.MUTATING_METHODS,
            [task.describe()],
            [],
            title=task.title,
            completed_before=completed_before,
            completed=task.is_completed,
        )

    def value_vs_reference(self) -> ServiceResult:
        loc = self._settings.location
        location_a = Coordinate(latitude=loc.latitude, longitude=loc.longitude)
        location_b = location_a.copy()
        location_b.latitude = loc.moved_latitude

        themes = self._settings.theme
        settings_a = UserSettings(theme=themes.initial)
        settings_b = settings_a
        settings_b.theme = themes.changed_to

        lines = [
            location_a.describe("A"),
            location_b.describe("B"),
            settings_a.describe("A"),
            settings_b.describe("B"),
        ]
        return self._section_result(
            Section.VALUE_VS_REFERENCE,
            lines,
            [],
            latitude_a=location_a.latitude,
            latitude_b=location_b.latitude,
            theme_a=settings_a.theme,
            theme_b=settings_b.theme,
            settings_shared=settings_a is settings_b,
        )

    # ------------------------------------------------------------------
    # Standalone operations
    # ------------------------------------------------------------------

    def set_volume(self, levels: Sequence[int], *, initial: int | None = None) -> ServiceResult:
        """Drive a fresh volume controller through *levels*."""
        start = self._settings.volume.initial if initial is None else initial
        warnings: list[str] = []
        lines, events, final = self._drive_volume(start, levels, warnings)
        return ServiceResult(
            ok=True,
            op="set_volume",
            data={"initial": start, "lines": lines, "events": events, "volume": final},
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _drive_volume(
        self,
        initial: int,
        levels: Sequence[int],
        warnings: list[str],
    ) -> tuple[list[str], list[dict[str, Any]], int]:
        """Assign each level in turn, recording both observer callbacks."""
        controller = VolumeController(initial)
        lines: list[str] = []
        events: list[dict[str, Any]] = []

        def on_will_change(new_value: int) -> None:
            lines.append(will_change_message(new_value))
            events.append(
                {"kind": "will_change", "new_value": new_value, "stored": controller.volume}
            )
            self._dispatch_event("volume_will_change", {"new_value": new_value}, warnings)

        def on_did_change(old_value: int, new_value: int) -> None:
            lines.append(did_change_message(old_value, new_value))
            events.append(
                {
                    "kind": "did_change",
                    "old_value": old_value,
                    "new_value": new_value,
                    "stored": controller.volume,
                }
            )
            self._dispatch_event(
                "volume_did_change",
                {"old_value": old_value, "new_value": new_value},
                warnings,
            )

        controller.observe(will_change=on_will_change, did_change=on_did_change)
        for level in levels:
            controller.volume = level
        return lines, events, controller.volume

    def _section_result(
        self,
        section: Section,
        lines: list[str],
        warnings: list[str],
        **fields: Any,
    ) -> ServiceResult:
        logger.debug("Section %s produced %d line(s)", section.value, len(lines))
        self._dispatch_event(
            "post_section",
            {"section": section.value, "lines": list(lines)},
            warnings,
        )
        data: dict[str, Any] = {
            "section": section.value,
            "number": section.number,
            "heading": section.heading,
            "lines": lines,
            **fields,
        }
        return ServiceResult(ok=True, op=section.op, data=data, warnings=warnings)
