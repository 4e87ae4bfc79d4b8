"""Type methods: state that belongs to the class, not to an instance.

``AppConfig.app_version`` is process-wide.  Writes go through
:meth:`AppConfig.update_version` / :meth:`AppConfig.reset` only, which
serialize on a class-level lock; reads are plain attribute access.
Prefer passing a version explicitly wherever a caller can.
"""

from __future__ import annotations

import threading
from typing import ClassVar

DEFAULT_APP_VERSION = "1.0.0"


class AppConfig:
    """Application-wide version string shared by every caller."""

    app_version: ClassVar[str] = DEFAULT_APP_VERSION
    _write_lock: ClassVar[threading.Lock] = threading.Lock()

    @classmethod
    def update_version(cls, version: str) -> str:
        with cls._write_lock:
            cls.app_version = version
        return f"App version updated to {cls.app_version}"

    @classmethod
    def reset(cls) -> None:
        with cls._write_lock:
            cls.app_version = DEFAULT_APP_VERSION
