"""Display host backed by libwnck and Gdk 3 (X11 sessions)."""

import logging
from typing import Optional, Set, Tuple

import gi

gi.require_version("Gdk", "3.0")
gi.require_version("Wnck", "3.0")

from gi.repository import Gdk, Wnck

from organizer.domain.geometry import Rect, relative_reposition
from organizer.domain.window import WindowType
from organizer.interfaces.host import IDisplayHost, IWindow, WindowCreatedCallback

logger = logging.getLogger("WindowOrganizer.WnckHost")

WINDOW_TYPES = {
    Wnck.WindowType.NORMAL: WindowType.NORMAL,
    Wnck.WindowType.DIALOG: WindowType.DIALOG,
    Wnck.WindowType.UTILITY: WindowType.UTILITY,
    Wnck.WindowType.SPLASHSCREEN: WindowType.SPLASHSCREEN,
    Wnck.WindowType.MENU: WindowType.MENU,
}

MOVE_MASK = Wnck.WindowMoveResizeMask.X | Wnck.WindowMoveResizeMask.Y


class WnckWindow(IWindow):
    """IWindow over a Wnck.Window."""

    def __init__(self, window: Wnck.Window, host: "WnckDisplayHost"):
        self.window = window
        self.host = host
        self.xid = window.get_xid()

    def is_valid(self) -> bool:
        return self.host.is_open(self.xid)

    def get_window_type(self) -> WindowType:
        wnck_type = self.window.get_window_type()
        if wnck_type == Wnck.WindowType.DIALOG and self.window.get_transient() is not None:
            return WindowType.MODAL_DIALOG
        return WINDOW_TYPES.get(wnck_type, WindowType.OTHER)

    def get_title(self) -> str:
        return self.window.get_name() or ""

    def get_monitor(self) -> int:
        frame = self.get_frame_rect()
        return self.host.monitor_index_at(
            frame.x + frame.width // 2, frame.y + frame.height // 2
        )

    def get_frame_rect(self) -> Rect:
        x, y, width, height = self.window.get_geometry()
        return Rect(x, y, width, height)

    def is_fullscreen(self) -> bool:
        return self.window.is_fullscreen()

    def is_maximized(self) -> bool:
        return (
            self.window.is_maximized()
            or self.window.is_maximized_horizontally()
            or self.window.is_maximized_vertically()
        )

    def move_to_monitor(self, index: int) -> None:
        # Wnck has no monitor assignment, translate the frame instead
        frame = self.get_frame_rect()
        source = self.host.get_monitor_geometry(self.get_monitor())
        target = self.host.get_monitor_geometry(index)
        x, y = relative_reposition(frame, source, target)
        self.move_frame(x, y)

    def move_frame(self, x: int, y: int) -> None:
        logger.debug(f"set_geometry xid={self.xid} ({x},{y})")
        self.window.set_geometry(Wnck.WindowGravity.CURRENT, MOVE_MASK, x, y, 0, 0)


class WnckDisplayHost(IDisplayHost):
    """Queries monitors and pointer through Gdk and windows through Wnck."""

    def __init__(self):
        self.display = Gdk.Display.get_default()
        if self.display is None:
            raise RuntimeError("No display available")

        self.screen = Wnck.Screen.get_default()
        if self.screen is None:
            raise RuntimeError("No Wnck screen available (X11 session required)")
        self.screen.force_update()

        self._open_xids: Set[int] = {w.get_xid() for w in self.screen.get_windows()}
        self.screen.connect("window-opened", self._on_window_opened)
        self.screen.connect("window-closed", self._on_window_closed)

    def _on_window_opened(self, _screen, window: Wnck.Window) -> None:
        self._open_xids.add(window.get_xid())

    def _on_window_closed(self, _screen, window: Wnck.Window) -> None:
        self._open_xids.discard(window.get_xid())

    def is_open(self, xid: int) -> bool:
        return xid in self._open_xids

    def monitor_index_at(self, x: int, y: int) -> int:
        """Index of the monitor at or nearest to a point."""
        monitor = self.display.get_monitor_at_point(x, y)
        for index in range(self.display.get_n_monitors()):
            if self.display.get_monitor(index) == monitor:
                return index
        return 0

    def get_n_monitors(self) -> int:
        return self.display.get_n_monitors()

    def get_monitor_geometry(self, index: int) -> Rect:
        geometry = self.display.get_monitor(index).get_geometry()
        return Rect(geometry.x, geometry.y, geometry.width, geometry.height)

    def get_current_monitor(self) -> int:
        return self.monitor_index_at(*self.get_pointer())

    def get_pointer(self) -> Tuple[int, int]:
        pointer = self.display.get_default_seat().get_pointer()
        _screen, x, y = pointer.get_position()
        return x, y

    def get_focus_window(self) -> Optional[IWindow]:
        window = self.screen.get_active_window()
        if window is None:
            return None
        return WnckWindow(window, self)

    def connect_window_created(self, callback: WindowCreatedCallback) -> int:
        def on_window_opened(_screen, window: Optional[Wnck.Window]) -> None:
            # Runs after _on_window_opened, which was connected first
            callback(WnckWindow(window, self) if window is not None else None)

        return self.screen.connect("window-opened", on_window_opened)

    def disconnect(self, handler_id: int) -> None:
        self.screen.disconnect(handler_id)
