"""Computed properties: a cart whose count is derived on every read."""

from __future__ import annotations


class ShoppingCart:
    """Ordered list of item names.

    ``item_count`` stores nothing; it is recomputed from ``items`` each
    time it is read.
    """

    def __init__(self, items: list[str] | None = None) -> None:
        self.items: list[str] = list(items) if items else []

    @property
    def item_count(self) -> int:
        return len(self.items)

    def add_item(self, item: str) -> None:
        self.items.append(item)
