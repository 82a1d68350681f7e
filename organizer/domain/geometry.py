"""Rectangle value object and frame transforms between monitor regions."""
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in global desktop coordinates.

    Used both for a monitor's region and for a window's frame.
    """

    x: int
    y: int
    width: int
    height: int

    @property
    def origin(self) -> Tuple[int, int]:
        """Top-left corner as an (x, y) pair."""
        return self.x, self.y

    @property
    def has_valid_size(self) -> bool:
        """False while the host has not settled the frame size yet."""
        return self.width > 0 and self.height > 0

    def contains(self, px: int, py: int) -> bool:
        """
        Check whether a point lies inside the rectangle.

        Bounds are half-open: the left/top edges are inside, the
        right/bottom edges belong to the neighbouring rectangle.

        Args:
            px: Point x coordinate
            py: Point y coordinate

        Returns:
            True if the point is inside
        """
        return (
            self.x <= px < self.x + self.width
            and self.y <= py < self.y + self.height
        )

    def __str__(self) -> str:
        return f"({self.x},{self.y} {self.width}x{self.height})"


def center_in(frame: Rect, region: Rect) -> Tuple[int, int]:
    """
    Compute the position that centers a frame inside a region.

    Frames larger than the region get a position before the region's
    origin; no clamping is applied.

    Args:
        frame: Window frame (only its size is used)
        region: Monitor region

    Returns:
        Target (x, y) for the frame
    """
    x = region.x + (region.width - frame.width) // 2
    y = region.y + (region.height - frame.height) // 2
    return x, y


def _clamp_axis(offset: int, target_origin: int, target_size: int, frame_size: int) -> int:
    desired = target_origin + offset
    far_limit = target_origin + max(0, target_size - frame_size)
    return max(target_origin, min(desired, far_limit))


def relative_reposition(frame: Rect, source: Rect, target: Rect) -> Tuple[int, int]:
    """
    Translate a frame from one region to another, keeping its offset.

    The frame's offset from the source origin is reapplied to the target
    origin, then each axis is clamped so the frame stays inside the
    target. When the frame is larger than the target on an axis it is
    pinned to the target origin on that axis.

    Args:
        frame: Current window frame
        source: Region the frame is currently on
        target: Region the frame is moving to

    Returns:
        Target (x, y) for the frame
    """
    x = _clamp_axis(frame.x - source.x, target.x, target.width, frame.width)
    y = _clamp_axis(frame.y - source.y, target.y, target.height, frame.height)
    return x, y


def is_approximately_at(frame: Rect, x: int, y: int, tolerance: int = 1) -> bool:
    """Check whether the frame sits at (x, y) give or take a few pixels."""
    return abs(frame.x - x) <= tolerance and abs(frame.y - y) <= tolerance
