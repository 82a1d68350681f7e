"""Monitor selection services."""

from .monitor_resolver import MonitorResolver
from .target_monitor import TargetMonitorStrategy, resolve_target_monitor

__all__ = ["MonitorResolver", "TargetMonitorStrategy", "resolve_target_monitor"]
