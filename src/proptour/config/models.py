"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, proptour.toml only contains
overrides.  With no file at all the tour prints its canonical walkthrough.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- proptour.toml sections ---


class ProfileConfig(BaseModel):
    """[profile] section."""

    model_config = {"frozen": True}

    username: str = "AmiTiwari"
    age: int = 25


class CartConfig(BaseModel):
    """[cart] section."""

    model_config = {"frozen": True}

    items: list[str] = Field(default_factory=lambda: ["iPhone", "MacBook"])


class FetcherConfig(BaseModel):
    """[fetcher] section."""

    model_config = {"frozen": True}

    server_data: list[str] = Field(default_factory=lambda: ["Data1", "Data2", "Data3"])


class VolumeConfig(BaseModel):
    """[volume] section."""

    model_config = {"frozen": True}

    initial: int = 0
    levels: list[int] = Field(default_factory=lambda: [5, 10])


class PlayerConfig(BaseModel):
    """[player] section."""

    model_config = {"frozen": True}

    track: str = "Shape of You"


class AppVersionConfig(BaseModel):
    """[app] section."""

    model_config = {"frozen": True}

    update_to: str = "1.0.1"


class TaskConfig(BaseModel):
    """[task] section."""

    model_config = {"frozen": True}

    title: str = "Finish Swift tutorial"


class LocationConfig(BaseModel):
    """[location] section."""

    model_config = {"frozen": True}

    latitude: float = 37.7749
    longitude: float = -122.4194
    moved_latitude: float = 40.7128


class ThemeConfig(BaseModel):
    """[theme] section."""

    model_config = {"frozen": True}

    initial: str = "Light"
    changed_to: str = "Dark"
