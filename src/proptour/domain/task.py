"""Mutating methods: a value type that updates its own fields in place."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Task:
    title: str
    is_completed: bool = False

    def complete(self) -> None:
        self.is_completed = True

    def describe(self) -> str:
        return f"Task: {self.title}, Completed: {str(self.is_completed).lower()}"
