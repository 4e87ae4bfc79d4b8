"""Stored properties: a profile whose fields are fixed at construction."""

from __future__ import annotations

from pydantic import BaseModel


class UserProfile(BaseModel):
    """A user's name and age, stored directly on each instance."""

    model_config = {"frozen": True}

    username: str
    age: int

    def describe(self) -> str:
        return f"Username: {self.username}, Age: {self.age}"
