"""Value vs. reference semantics.

Python binds names to objects, so ``b = a`` always aliases.  Each type
here makes its semantics an explicit choice:

- :class:`Coordinate` is a value: duplicate it with :meth:`Coordinate.copy`
  and the two are independent from then on.
- :class:`UserSettings` is a reference: every name bound to an instance
  sees every mutation made through any other name.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass
class Coordinate:
    latitude: float
    longitude: float

    def copy(self) -> Coordinate:
        """Return an independent duplicate."""
        return replace(self)

    def describe(self, label: str) -> str:
        return f"Location {label}: {self.latitude}, {self.longitude}"


class UserSettings:
    """Shared, mutable settings. Assignment shares the instance."""

    def __init__(self, theme: str = "Light") -> None:
        self.theme = theme

    def describe(self, label: str) -> str:
        return f"Settings {label} Theme: {self.theme}"
