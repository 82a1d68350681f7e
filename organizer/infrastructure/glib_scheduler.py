"""GLib main loop scheduler."""

from typing import Callable, Optional

from gi.repository import GLib

from organizer.interfaces.scheduler import IScheduler


class GLibScheduler(IScheduler):
    """Schedules callbacks with GLib.timeout_add on the default main context."""

    def __init__(self, priority: Optional[int] = None):
        """
        Initialize the scheduler.

        Args:
            priority: GLib source priority, defaults to GLib.PRIORITY_DEFAULT
        """
        self.priority = GLib.PRIORITY_DEFAULT if priority is None else priority

    def schedule_once(self, delay_ms: int, callback: Callable[[], None]) -> int:
        def fire() -> bool:
            callback()
            return GLib.SOURCE_REMOVE

        return GLib.timeout_add(delay_ms, fire, priority=self.priority)

    def schedule_repeating(self, interval_ms: int, callback: Callable[[], bool]) -> int:
        def fire() -> bool:
            if callback():
                return GLib.SOURCE_CONTINUE
            return GLib.SOURCE_REMOVE

        return GLib.timeout_add(interval_ms, fire, priority=self.priority)

