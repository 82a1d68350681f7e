"""Domain value objects and pure geometry."""

from .geometry import Rect, center_in, is_approximately_at, relative_reposition
from .window import WindowType

__all__ = [
    "Rect",
    "WindowType",
    "center_in",
    "is_approximately_at",
    "relative_reposition",
]
