"""Instance methods: a player that acts on its own current track."""

from __future__ import annotations

NO_TRACK = "no track"


class MusicPlayer:
    """Tracks what is playing. ``play``/``stop`` return the line to show."""

    def __init__(self) -> None:
        self.current_track: str | None = None

    def play(self, track: str) -> str:
        self.current_track = track
        return f"Playing {track}"

    def stop(self) -> str:
        track = NO_TRACK if self.current_track is None else self.current_track
        message = f"Stopping {track}"
        self.current_track = None
        return message
