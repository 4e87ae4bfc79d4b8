"""Tests for BaseService event dispatch."""

from __future__ import annotations

from proptour.config.settings import TourSettings
from proptour.plugins.event_bus import EventBus
from proptour.plugins.manager import PluginManager
from proptour.services.base import BaseService
from tests.conftest import FailingPlugin, RecordingPlugin


class TestDispatchEvent:
    def test_noop_without_bus(self, settings: TourSettings) -> None:
        warnings: list[str] = []
        BaseService(settings)._dispatch_event("volume_will_change", {"new_value": 1}, warnings)
        assert warnings == []

    def test_dispatches_to_plugins(self, settings: TourSettings) -> None:
        pm = PluginManager()
        plugin = RecordingPlugin()
        pm.register_plugin(plugin, name="rec")
        warnings: list[str] = []
        BaseService(settings, EventBus(pm))._dispatch_event(
            "volume_will_change", {"new_value": 3}, warnings
        )
        assert plugin.calls == [("volume_will_change", {"new_value": 3})]
        assert warnings == []

    def test_plugin_failure_becomes_warning(self, settings: TourSettings) -> None:
        pm = PluginManager()
        pm.register_plugin(FailingPlugin(), name="failer")
        warnings: list[str] = []
        BaseService(settings, EventBus(pm))._dispatch_event(
            "volume_did_change", {"old_value": 0, "new_value": 1}, warnings
        )
        assert len(warnings) == 1
        assert "volume_did_change" in warnings[0]
        assert "Plugin exploded!" in warnings[0]
