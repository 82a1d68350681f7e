"""Resolves which monitor contains a point."""

import logging

from organizer.interfaces.host import IDisplayHost

logger = logging.getLogger("WindowOrganizer.MonitorResolver")


class MonitorResolver:
    """Maps global coordinates to monitor indices using the live layout."""

    def __init__(self, host: IDisplayHost):
        """
        Initialize the resolver.

        Args:
            host: Display host to query monitors from
        """
        self.host = host

    def monitor_at_point(self, x: int, y: int) -> int:
        """
        Find the monitor containing a point.

        Monitors are checked in the host's index order and the first
        match wins, so overlapping regions resolve to the lower index.

        Args:
            x: Global x coordinate
            y: Global y coordinate

        Returns:
            Monitor index, or the host's current monitor if none contains the point
        """
        for index in range(self.host.get_n_monitors()):
            if self.host.get_monitor_geometry(index).contains(x, y):
                return index

        fallback = self.host.get_current_monitor()
        logger.debug(f"Point ({x},{y}) outside all monitors, using current monitor {fallback}")
        return fallback
