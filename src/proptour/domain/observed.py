"""Property observers as an explicit setter with ordered callbacks.

Every assignment runs the same three steps, synchronously and in order:

1. every *will-change* callback receives the pending value;
2. the stored value is replaced;
3. every *did-change* callback receives ``(old, new)``.

Assigning a value equal to the current one still notifies.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class ObservedValue(Generic[T]):
    """A single stored value with will/did-change notification hooks."""

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._will_change: list[Callable[[T], None]] = []
        self._did_change: list[Callable[[T, T], None]] = []

    @property
    def value(self) -> T:
        return self._value

    def subscribe(
        self,
        *,
        will_change: Callable[[T], None] | None = None,
        did_change: Callable[[T, T], None] | None = None,
    ) -> None:
        """Register callbacks. They run in the order they were added."""
        if will_change is not None:
            self._will_change.append(will_change)
        if did_change is not None:
            self._did_change.append(did_change)

    def set(self, new_value: T) -> None:
        for callback in self._will_change:
            callback(new_value)
        old_value = self._value
        self._value = new_value
        for callback in self._did_change:
            callback(old_value, self._value)


class VolumeController:
    """Volume level whose changes are announced before and after."""

    def __init__(self, initial: int = 0) -> None:
        self._volume: ObservedValue[int] = ObservedValue(initial)

    @property
    def volume(self) -> int:
        return self._volume.value

    @volume.setter
    def volume(self, new_value: int) -> None:
        self._volume.set(new_value)

    def observe(
        self,
        *,
        will_change: Callable[[int], None] | None = None,
        did_change: Callable[[int, int], None] | None = None,
    ) -> None:
        self._volume.subscribe(will_change=will_change, did_change=did_change)


def will_change_message(new_value: object) -> str:
    return f"Volume will change to {new_value}"


def did_change_message(old_value: object, new_value: object) -> str:
    return f"Volume changed from {old_value} to {new_value}"
