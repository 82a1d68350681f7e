"""Places newly created windows on the target monitor."""

import logging
from typing import Optional

from organizer.config.app_config import DEFAULT_CONFIG, ApplicationConfig
from organizer.config.settings import PlacementSettings
from organizer.domain.geometry import center_in, is_approximately_at, relative_reposition
from organizer.domain.window import WindowType
from organizer.interfaces.host import IDisplayHost, IWindow
from organizer.interfaces.scheduler import IScheduler
from organizer.interfaces.settings import ISettingsStore
from organizer.managers.centering_session import (
    CenteringSession,
    is_fullscreen_or_maximized,
)
from organizer.services.target_monitor import TargetMonitorStrategy

logger = logging.getLogger("WindowOrganizer.PlacementController")

PACKAGE_LOGGER = "WindowOrganizer"


class PlacementController:
    """
    Reacts to window creation by moving the window to the target monitor.

    The work is split in three steps: a synchronous type filter in the
    notification handler, one deferred decision once the host has done
    its own initial placement, and an optional centering session.
    Settings and geometry are read fresh at decision time.
    """

    def __init__(
        self,
        host: IDisplayHost,
        scheduler: IScheduler,
        settings_store: ISettingsStore,
        config: ApplicationConfig = DEFAULT_CONFIG,
        force_debug: bool = False,
    ):
        """
        Initialize the controller.

        Args:
            host: Display host for windows and monitors
            scheduler: Scheduler for the deferred decision and retries
            settings_store: Source of placement settings
            config: Timing constants
            force_debug: Keep DEBUG logging on regardless of settings
        """
        self.host = host
        self.scheduler = scheduler
        self.settings_store = settings_store
        self.config = config
        self.force_debug = force_debug
        self.strategy = TargetMonitorStrategy(host)
        self._window_created_id: Optional[int] = None
        # Bumped on every enable; deferred checks from an older one are dropped
        self._generation = 0

    @property
    def enabled(self) -> bool:
        return self._window_created_id is not None

    def enable(self) -> None:
        """Start listening for new windows."""
        if self.enabled:
            logger.warning("Placement controller already enabled")
            return

        self._generation += 1
        self._window_created_id = self.host.connect_window_created(self.on_window_created)
        logger.info("Placement controller enabled")

    def disable(self) -> None:
        """
        Stop listening for new windows.

        Pending deferred decisions become no-ops, also after a later
        enable(). Running centering sessions stop on their own.
        """
        if self._window_created_id is not None:
            self.host.disconnect(self._window_created_id)
            self._window_created_id = None
        logger.info("Placement controller disabled")

    def on_window_created(self, window: Optional[IWindow]) -> None:
        """
        Handle a window-created notification.

        Args:
            window: The new window, may be None
        """
        if window is None:
            logger.debug("window-created skipped: missing window")
            return

        window_type = window.get_window_type()
        if window_type != WindowType.NORMAL:
            logger.debug(f"window-created ignored: type={window_type.value}")
            return

        logger.debug(f'window-created title="{window.get_title()}"')

        # Give the host time to finish its own initial placement
        generation = self._generation
        self.scheduler.schedule_once(
            self.config.placement_delay_ms,
            lambda: self._place_if_current(window, generation),
        )

    def _place_if_current(self, window: IWindow, generation: int) -> None:
        if generation != self._generation:
            logger.debug("placement skipped: scheduled before the controller was re-enabled")
            return
        self.place_window(window)

    def place_window(self, window: IWindow) -> Optional[CenteringSession]:
        """
        Decide and apply the placement of a window.

        Args:
            window: Window to place

        Returns:
            The centering session started for the window, if any
        """
        if not self.enabled:
            logger.debug("placement skipped: controller disabled")
            return None

        if not window.is_valid():
            logger.debug("placement skipped after delay: missing window")
            return None

        settings = self.settings_store.load_settings()
        self._apply_log_level(settings)

        target_monitor = self.strategy.resolve(settings.target_monitor_mode)
        current_monitor = window.get_monitor()
        n_monitors = self.host.get_n_monitors()

        if not 0 <= target_monitor < n_monitors:
            logger.debug(f"invalid target monitor {target_monitor} (nMonitors={n_monitors})")
            return None

        frame = window.get_frame_rect()
        target_rect = self.host.get_monitor_geometry(target_monitor)
        current_rect = None
        if 0 <= current_monitor < n_monitors:
            current_rect = self.host.get_monitor_geometry(current_monitor)

        monitor_changed = current_monitor != target_monitor
        logger.debug(
            f"placing window currentMonitor={current_monitor} targetMonitor={target_monitor} "
            f"center={settings.center_windows} frame={frame} "
            f"currentRect={current_rect} targetRect={target_rect}"
        )

        if monitor_changed:
            logger.debug(f"moving window to monitor {target_monitor}")
            window.move_to_monitor(target_monitor)

        if settings.center_windows:
            return self._center_window(window, target_monitor)

        if monitor_changed:
            if current_rect is None:
                logger.debug(f"relative move skipped: current monitor {current_monitor} unknown")
                return None
            moved_x, moved_y = relative_reposition(frame, current_rect, target_rect)
            logger.debug(f"moving frame relatively to ({moved_x},{moved_y})")
            window.move_frame(moved_x, moved_y)
        return None

    def _center_window(self, window: IWindow, monitor_index: int) -> Optional[CenteringSession]:
        # Let the WM keep placement for fullscreen/maximized windows
        if is_fullscreen_or_maximized(window):
            logger.debug("center skipped: window is fullscreen or maximized")
            return None

        frame = window.get_frame_rect()
        if frame.has_valid_size:
            region = self.host.get_monitor_geometry(monitor_index)
            centered_x, centered_y = center_in(frame, region)
            if not is_approximately_at(frame, centered_x, centered_y, self.config.center_tolerance_px):
                window.move_frame(centered_x, centered_y)

        session = CenteringSession(
            window,
            monitor_index,
            self.host,
            max_attempts=self.config.center_max_attempts,
            tolerance=self.config.center_tolerance_px,
        )
        session.start(self.scheduler, self.config.center_retry_interval_ms)
        return session

    def _apply_log_level(self, settings: PlacementSettings) -> None:
        debug = self.force_debug or settings.debug_logging
        logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if debug else logging.INFO)
