"""Collision detection between placed frames."""

from __future__ import annotations
from typing import Iterable

from gallery.models import PlacedFrame, Wall, rects_overlap


def has_collision(
    frame: PlacedFrame,
    x: float,
    y: float,
    frames: Iterable[PlacedFrame],
    gap: float,
) -> bool:
    """True if *frame* placed at (x, y) comes within *gap* of any other frame.

    The frame itself (matched by id) is always skipped.
    """
    for other in frames:
        if other.id == frame.id:
            continue
        if rects_overlap(x, y, frame.width, frame.height,
                         other.x, other.y, other.width, other.height, gap):
            return True
    return False


def clamp_to_wall(frame: PlacedFrame, x: float, y: float, wall: Wall) -> tuple[float, float]:
    """Keep the frame's rectangle on the wall. Oversized frames pin to the top-left."""
    return (
        max(0.0, min(wall.width - frame.width, x)),
        max(0.0, min(wall.height - frame.height, y)),
    )


def within_wall(frame: PlacedFrame, x: float, y: float, wall: Wall) -> bool:
    return x >= 0 and y >= 0 and x + frame.width <= wall.width and y + frame.height <= wall.height
