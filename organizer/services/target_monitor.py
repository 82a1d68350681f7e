"""Chooses the monitor new windows are placed on."""

import logging
from typing import Optional, Tuple

from organizer.config.settings import TargetMonitorMode
from organizer.interfaces.host import IDisplayHost, IWindow
from organizer.services.monitor_resolver import MonitorResolver

logger = logging.getLogger("WindowOrganizer.TargetMonitor")


def resolve_target_monitor(
    mode: TargetMonitorMode,
    focused_window: Optional[IWindow],
    pointer: Tuple[int, int],
    resolver: MonitorResolver,
) -> int:
    """
    Pick the target monitor for a new window.

    Focused-window mode falls back to the pointer when nothing has focus.

    Args:
        mode: Configured target monitor mode
        focused_window: Currently focused window, if any
        pointer: Pointer position (x, y)
        resolver: Resolver for the live monitor layout

    Returns:
        Monitor index
    """
    if mode == TargetMonitorMode.FOCUSED_WINDOW:
        if focused_window is not None:
            monitor = focused_window.get_monitor()
            logger.debug(f"target monitor mode=focused-window -> {monitor}")
            return monitor

        logger.debug("target monitor mode=focused-window but no focused window; falling back to mouse")

    pointer_x, pointer_y = pointer
    monitor = resolver.monitor_at_point(pointer_x, pointer_y)
    logger.debug(f"target monitor mode=mouse-cursor pointer=({pointer_x},{pointer_y}) -> {monitor}")
    return monitor


class TargetMonitorStrategy:
    """Resolves the target monitor against the live host state."""

    def __init__(self, host: IDisplayHost, resolver: Optional[MonitorResolver] = None):
        self.host = host
        self.resolver = resolver or MonitorResolver(host)

    def resolve(self, mode: TargetMonitorMode) -> int:
        focused_window = None
        if mode == TargetMonitorMode.FOCUSED_WINDOW:
            focused_window = self.host.get_focus_window()
        return resolve_target_monitor(mode, focused_window, self.host.get_pointer(), self.resolver)
