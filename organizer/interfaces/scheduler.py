"""Timed callback scheduling interface."""
from abc import ABC, abstractmethod
from typing import Callable

# Same meaning as GLib.SOURCE_CONTINUE / GLib.SOURCE_REMOVE
SOURCE_CONTINUE = True
SOURCE_REMOVE = False


class IScheduler(ABC):
    """Schedules callbacks on the event loop."""

    @abstractmethod
    def schedule_once(self, delay_ms: int, callback: Callable[[], None]) -> int:
        """
        Run a callback once after a delay.

        Args:
            delay_ms: Delay in milliseconds
            callback: Function to call

        Returns:
            Source id of the GLib-style timeout
        """
        pass

    @abstractmethod
    def schedule_repeating(self, interval_ms: int, callback: Callable[[], bool]) -> int:
        """
        Run a callback every interval until it returns SOURCE_REMOVE.

        Args:
            interval_ms: Interval in milliseconds
            callback: Returns SOURCE_CONTINUE to be called again

        Returns:
            Source id of the GLib-style timeout
        """
        pass

