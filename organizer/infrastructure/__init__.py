"""Adapters over GLib, GSettings, YAML files and libwnck.

Modules that need PyGObject are imported directly, not re-exported here,
so the settings stores stay usable without a display.
"""

from .gsettings_store import GSettingsStore
from .yaml_settings_store import YamlSettingsStore

__all__ = ["GSettingsStore", "YamlSettingsStore"]
