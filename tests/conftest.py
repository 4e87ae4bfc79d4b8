"""Shared pytest fixtures and test helpers for proptour tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path
from typing import Any

import pluggy
import pytest
from click.testing import CliRunner

from proptour.config.settings import TourSettings
from proptour.domain.app_config import AppConfig
from proptour.plugins.event_bus import EventBus
from proptour.plugins.manager import PluginManager
from proptour.services.tour import TourService

hookimpl = pluggy.HookimplMarker("proptour")

# What a default run prints, line for line.
CANONICAL_OUTPUT = [
    "Username: AmiTiwari, Age: 25",
    "Total items in the cart: 2",
    "Fetching data from server...",
    '["Data1", "Data2", "Data3"]',
    "Volume will change to 5",
    "Volume changed from 0 to 5",
    "Volume will change to 10",
    "Volume changed from 5 to 10",
    "Playing Shape of You",
    "Stopping Shape of You",
    "App version updated to 1.0.1",
    "Current app version: 1.0.1",
    "Task: Finish Swift tutorial, Completed: true",
    "Location A: 37.7749, -122.4194",
    "Location B: 40.7128, -122.4194",
    "Settings A Theme: Dark",
    "Settings B Theme: Dark",
]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's PROPTOUR_* environment out of the tests."""
    import os

    for key in list(os.environ):
        if key.startswith("PROPTOUR_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _reset_app_config() -> Generator[None]:
    """Type-level state must not leak between tests."""
    AppConfig.reset()
    yield
    AppConfig.reset()


@pytest.fixture
def settings(tmp_path: Path) -> TourSettings:
    """Default settings, with discovery anchored in an empty temp dir."""
    return TourSettings.from_cli(search_from=tmp_path)


@pytest.fixture
def recorder() -> RecordingPlugin:
    return RecordingPlugin()


@pytest.fixture
def event_bus(recorder: RecordingPlugin) -> EventBus:
    """EventBus over a PluginManager with a recording plugin registered."""
    pm = PluginManager()
    pm.register_plugin(recorder, name="recorder")
    return EventBus(pm)


@pytest.fixture
def tour(settings: TourSettings) -> TourService:
    """TourService with no plugins attached."""
    return TourService(settings)


@pytest.fixture
def _isolated_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to an empty temp dir so no proptour.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_dir")`` on command test
    classes. Tests that write a config can request ``tmp_path`` directly.
    """
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Fake plugins
# ---------------------------------------------------------------------------


class RecordingPlugin:
    """Plugin that records every hook call in order."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []

    @hookimpl
    def volume_will_change(self, new_value: int) -> None:
        self.calls.append(("volume_will_change", {"new_value": new_value}))

    @hookimpl
    def volume_did_change(self, old_value: int, new_value: int) -> None:
        self.calls.append(
            ("volume_did_change", {"old_value": old_value, "new_value": new_value})
        )

    @hookimpl
    def post_section(self, section: str, lines: list[str]) -> None:
        self.calls.append(("post_section", {"section": section, "lines": lines}))


class FailingPlugin:
    """Plugin that always raises on volume_did_change."""

    @hookimpl
    def volume_did_change(self, old_value: int, new_value: int) -> None:
        msg = "Plugin exploded!"
        raise RuntimeError(msg)
