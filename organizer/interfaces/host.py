"""Window and display host interfaces."""
from abc import ABC, abstractmethod
from typing import Callable, Optional, Tuple

from organizer.domain.geometry import Rect
from organizer.domain.window import WindowType


class IWindow(ABC):
    """Handle to a live top-level window owned by the host."""

    @abstractmethod
    def is_valid(self) -> bool:
        """
        Check that the handle still refers to a live window.

        Returns:
            False once the window has been destroyed
        """
        pass

    @abstractmethod
    def get_window_type(self) -> WindowType:
        """Kind of window (normal, dialog, popup...)."""
        pass

    @abstractmethod
    def get_title(self) -> str:
        """Window title, for diagnostics only."""
        pass

    @abstractmethod
    def get_monitor(self) -> int:
        """Index of the monitor the window is on."""
        pass

    @abstractmethod
    def get_frame_rect(self) -> Rect:
        """
        Query the current outer frame of the window.

        Width and height can be zero right after creation.

        Returns:
            Frame rectangle in global coordinates
        """
        pass

    @abstractmethod
    def is_fullscreen(self) -> bool:
        """True if the window is fullscreen."""
        pass

    @abstractmethod
    def is_maximized(self) -> bool:
        """True if the window is maximized in either direction."""
        pass

    @abstractmethod
    def move_to_monitor(self, index: int) -> None:
        """
        Ask the host to move the window to another monitor.

        Args:
            index: Target monitor index
        """
        pass

    @abstractmethod
    def move_frame(self, x: int, y: int) -> None:
        """
        Move the window's frame so its top-left corner is at (x, y).

        Args:
            x: Global x coordinate
            y: Global y coordinate
        """
        pass


WindowCreatedCallback = Callable[[Optional[IWindow]], None]


class IDisplayHost(ABC):
    """Monitor, pointer and window queries provided by the desktop shell."""

    @abstractmethod
    def get_n_monitors(self) -> int:
        """Number of monitors currently connected."""
        pass

    @abstractmethod
    def get_monitor_geometry(self, index: int) -> Rect:
        """
        Query a monitor's region.

        Args:
            index: Monitor index in [0, get_n_monitors())

        Returns:
            Monitor rectangle in global coordinates
        """
        pass

    @abstractmethod
    def get_current_monitor(self) -> int:
        """Monitor index the host considers current, used as a fallback."""
        pass

    @abstractmethod
    def get_pointer(self) -> Tuple[int, int]:
        """Pointer position in global coordinates."""
        pass

    @abstractmethod
    def get_focus_window(self) -> Optional[IWindow]:
        """Currently focused window, or None if nothing has focus."""
        pass

    @abstractmethod
    def connect_window_created(self, callback: WindowCreatedCallback) -> int:
        """
        Subscribe to window creation notifications.

        Args:
            callback: Called with the new window handle

        Returns:
            Handler id to pass to disconnect()
        """
        pass

    @abstractmethod
    def disconnect(self, handler_id: int) -> None:
        """
        Remove a subscription made with connect_window_created().

        Args:
            handler_id: Id returned when connecting
        """
        pass
