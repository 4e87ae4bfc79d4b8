"""Extension layer — observer hooks via pluggy.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints.
INVARIANT: Plugin failures are warnings, never errors.
"""

from proptour.plugins.event_bus import EventBus
from proptour.plugins.manager import PluginManager

__all__ = ["EventBus", "PluginManager"]
