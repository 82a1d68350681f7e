"""Manager classes for window placement."""

from .centering_session import CenteringSession, SessionState, is_fullscreen_or_maximized
from .placement_controller import PlacementController

__all__ = [
    "CenteringSession",
    "PlacementController",
    "SessionState",
    "is_fullscreen_or_maximized",
]
