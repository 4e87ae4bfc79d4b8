"""Lazy stored properties: values computed on first access, then cached.

:class:`Lazy` is the explicit compute-or-fetch-cached wrapper: it holds a
factory and an optional cached value, and checks which one to use on every
``get()``.  :class:`DataFetcher` builds its ``data`` property on top of it.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_SERVER_DATA: tuple[str, ...] = ("Data1", "Data2", "Data3")
FETCH_ANNOUNCEMENT = "Fetching data from server..."


class Lazy(Generic[T]):
    """Run *factory* once, on the first ``get()``, and cache the result."""

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._value: T | None = None
        self._computed = False

    @property
    def is_computed(self) -> bool:
        return self._computed

    def get(self) -> T:
        if not self._computed:
            self._value = self._factory()
            self._computed = True
        return self._value  # type: ignore[return-value]


class DataFetcher:
    """Holds a list of strings that is only fetched when first read.

    Args:
        server_data: What the simulated server returns.
        announce: Called with :data:`FETCH_ANNOUNCEMENT` when the fetch runs.
    """

    def __init__(
        self,
        server_data: list[str] | None = None,
        *,
        announce: Callable[[str], None] | None = None,
    ) -> None:
        if server_data is None:
            server_data = list(DEFAULT_SERVER_DATA)
        self._server_data = list(server_data)
        self._announce = announce
        self.fetch_count = 0
        self._data: Lazy[list[str]] = Lazy(self.fetch_data_from_server)

    @property
    def data(self) -> list[str]:
        return self._data.get()

    @property
    def is_loaded(self) -> bool:
        return self._data.is_computed

    def fetch_data_from_server(self) -> list[str]:
        self.fetch_count += 1
        if self._announce is not None:
            self._announce(FETCH_ANNOUNCEMENT)
        return list(self._server_data)
