"""Window domain models."""
from enum import Enum


class WindowType(Enum):
    """Kind of top-level window reported by the host."""

    NORMAL = "normal"
    DIALOG = "dialog"
    MODAL_DIALOG = "modal-dialog"
    UTILITY = "utility"
    SPLASHSCREEN = "splashscreen"
    MENU = "menu"
    POPUP = "popup"
    OTHER = "other"
