"""Geometric primitives used throughout the layout engine."""

from __future__ import annotations
import math
from pydantic import BaseModel, ConfigDict


EPSILON = 1e-9  # Rounding slack for edges that should exactly touch


class Point2D(BaseModel):
    """Point on the wall plane (x to the right, y down from the ceiling)."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class Rect(BaseModel):
    """Axis-aligned rectangle, top-left origin."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2

    def contains(self, other: Rect) -> bool:
        """True if *other* lies entirely inside this rectangle (edges may touch)."""
        return (
            other.x >= self.x
            and other.y >= self.y
            and other.right <= self.right
            and other.bottom <= self.bottom
        )


def rects_overlap(
    ax: float, ay: float, aw: float, ah: float,
    bx: float, by: float, bw: float, bh: float,
    gap: float = 0.0,
) -> bool:
    """Overlap test with a *gap* buffer between the rectangles.

    Two rectangles are apart iff, on some axis, one's far edge plus the
    gap does not pass the other's near edge.
    """
    return not (
        ax + aw + gap <= bx + EPSILON
        or bx + bw + gap <= ax + EPSILON
        or ay + ah + gap <= by + EPSILON
        or by + bh + gap <= ay + EPSILON
    )


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.hypot(x2 - x1, y2 - y1)
