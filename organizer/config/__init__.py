"""Configuration management."""

from .app_config import DEFAULT_CONFIG, ApplicationConfig
from .settings import PlacementSettings, TargetMonitorMode

__all__ = [
    "ApplicationConfig",
    "DEFAULT_CONFIG",
    "PlacementSettings",
    "TargetMonitorMode",
]
