"""Bounded retry loop that centers a window once its size settles."""

import logging
from enum import Enum

from organizer.domain.geometry import center_in, is_approximately_at
from organizer.interfaces.host import IDisplayHost, IWindow
from organizer.interfaces.scheduler import SOURCE_CONTINUE, SOURCE_REMOVE, IScheduler

logger = logging.getLogger("WindowOrganizer.CenteringSession")


class SessionState(Enum):
    """Lifecycle of a centering session."""

    IDLE = "idle"
    AWAITING_STABLE_FRAME = "awaiting-stable-frame"
    CENTERED = "centered"
    ABANDONED = "abandoned"
    STOPPED = "stopped"


def is_fullscreen_or_maximized(window: IWindow) -> bool:
    """True when the window manager owns the window's placement."""
    return window.is_fullscreen() or window.is_maximized()


class CenteringSession:
    """
    Polls a new window until it sits centered on its monitor.

    Right after creation the host may still report a zero-sized frame or
    move the window again, so centering is retried on a timer. Each tick
    counts as one attempt; the session ends once the frame is within
    tolerance of the centered position or the attempt cap is reached.
    A session only touches its own window and never shares state.
    """

    def __init__(
        self,
        window: IWindow,
        monitor_index: int,
        host: IDisplayHost,
        max_attempts: int = 8,
        tolerance: int = 1,
    ):
        """
        Initialize a centering session.

        Args:
            window: Window to center
            monitor_index: Monitor to center the window on
            host: Display host for monitor geometry
            max_attempts: Maximum number of ticks
            tolerance: Allowed distance in pixels from the centered position
        """
        self.window = window
        self.monitor_index = monitor_index
        self.host = host
        self.max_attempts = max_attempts
        self.tolerance = tolerance
        self.attempts = 0
        self.state = SessionState.IDLE

    @property
    def finished(self) -> bool:
        return self.state in (
            SessionState.CENTERED,
            SessionState.ABANDONED,
            SessionState.STOPPED,
        )

    def start(self, scheduler: IScheduler, interval_ms: int) -> int:
        """
        Start ticking on the scheduler.

        Args:
            scheduler: Scheduler driving the ticks
            interval_ms: Interval between ticks

        Returns:
            Source id of the repeating callback
        """
        logger.debug(
            f"start centering retries monitor={self.monitor_index} maxAttempts={self.max_attempts}"
        )
        self.state = SessionState.AWAITING_STABLE_FRAME
        return scheduler.schedule_repeating(interval_ms, self.tick)

    def tick(self) -> bool:
        """
        Run one centering attempt.

        Returns:
            SOURCE_CONTINUE to be called again, SOURCE_REMOVE when done
        """
        if self.finished:
            return SOURCE_REMOVE

        if not self.window.is_valid():
            logger.debug("center retries stopped: missing window")
            return self._finish(SessionState.STOPPED)

        if is_fullscreen_or_maximized(self.window):
            logger.debug("center retries stopped: window became fullscreen/maximized")
            return self._finish(SessionState.STOPPED)

        self.attempts += 1
        frame = self.window.get_frame_rect()
        if not frame.has_valid_size:
            logger.debug(
                f"center attempt={self.attempts}/{self.max_attempts} skipped: invalid frame size"
            )
            return self._continue_or_abandon()

        region = self.host.get_monitor_geometry(self.monitor_index)
        centered_x, centered_y = center_in(frame, region)
        already_centered = is_approximately_at(frame, centered_x, centered_y, self.tolerance)

        logger.debug(
            f"center attempt={self.attempts}/{self.max_attempts} monitor={self.monitor_index} "
            f"frame={frame} target=({centered_x},{centered_y}) alreadyCentered={already_centered}"
        )

        if already_centered:
            logger.debug(f"centering finished after {self.attempts} attempts")
            return self._finish(SessionState.CENTERED)

        self.window.move_frame(centered_x, centered_y)
        return self._continue_or_abandon()

    def _continue_or_abandon(self) -> bool:
        if self.attempts >= self.max_attempts:
            logger.debug("centering stopped: max attempts reached")
            return self._finish(SessionState.ABANDONED)
        return SOURCE_CONTINUE

    def _finish(self, state: SessionState) -> bool:
        self.state = state
        return SOURCE_REMOVE
