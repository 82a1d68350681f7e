"""
Placement settings model.

Loaded fresh for every placement decision and validated using Pydantic.
Keys use the GSettings spelling (``target-monitor-mode``), attribute
names are available too.
"""
import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger("WindowOrganizer.Settings")


class TargetMonitorMode(str, Enum):
    """Strategy used to choose the monitor for new windows."""

    MOUSE_CURSOR = "mouse-cursor"
    FOCUSED_WINDOW = "focused-window"


class PlacementSettings(BaseModel):
    """Settings read by the placement controller."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    target_monitor_mode: TargetMonitorMode = Field(
        default=TargetMonitorMode.MOUSE_CURSOR,
        alias="target-monitor-mode",
        description="Where new windows should be moved",
    )
    center_windows: bool = Field(
        default=False,
        alias="center-windows",
        description="Center new windows on the target monitor",
    )
    debug_logging: bool = Field(
        default=False,
        alias="debug-logging",
        description="Write detailed placement logs",
    )

    @field_validator("target_monitor_mode", mode="before")
    @classmethod
    def fallback_to_mouse_cursor(cls, v: Any) -> Any:
        """Anything that is not a known mode means mouse-cursor"""
        if isinstance(v, TargetMonitorMode):
            return v
        try:
            return TargetMonitorMode(v)
        except ValueError:
            logger.warning(f"Unknown target-monitor-mode {v!r}, using mouse-cursor")
            return TargetMonitorMode.MOUSE_CURSOR

