"""Collision resolution: finds the nearest free spot for a dragged frame.

Candidates are generated next to every other frame and at the wall's
corners and edges, filtered to those on the wall and clear of other
frames, and ranked by distance to the desired point.
"""

from __future__ import annotations
import logging
from typing import Iterator
from pydantic import BaseModel

from gallery.models import PlacedFrame, SnapConfig, Wall, distance
from gallery.core.collision import clamp_to_wall, has_collision, within_wall


log = logging.getLogger(__name__)


class Candidate(BaseModel):
    x: float
    y: float
    snap_line_x: float | None = None
    snap_line_y: float | None = None


class ResolvedPosition(BaseModel):
    x: float
    y: float
    snap_lines_x: list[float] = []
    snap_lines_y: list[float] = []


def resolve_collision(
    frame: PlacedFrame,
    desired_x: float,
    desired_y: float,
    frames: list[PlacedFrame],
    config: SnapConfig,
) -> ResolvedPosition:
    """Nearest valid position for *frame* around (desired_x, desired_y).

    When the clamped position is already free, only the light alignment
    pass runs. If nothing on the wall is free, the frame keeps its
    current position.
    """
    wall = config.wall
    gap = config.gap
    x, y = clamp_to_wall(frame, desired_x, desired_y, wall)

    if not has_collision(frame, x, y, frames, gap):
        return align_free_position(frame, x, y, frames, config)

    valid = [
        c for c in generate_candidates(frame, x, y, desired_x, desired_y, frames, wall, gap)
        if within_wall(frame, c.x, c.y, wall) and not has_collision(frame, c.x, c.y, frames, gap)
    ]
    if not valid:
        log.warning("No free position for frame %s; keeping (%.2f, %.2f)", frame.id, frame.x, frame.y)
        return ResolvedPosition(x=frame.x, y=frame.y)

    # min() keeps the first of equally distant candidates
    best = min(valid, key=lambda c: distance(c.x, c.y, desired_x, desired_y))
    log.debug("Resolved frame %s to (%.2f, %.2f) from %d candidate(s)",
              frame.id, best.x, best.y, len(valid))
    return ResolvedPosition(
        x=best.x,
        y=best.y,
        snap_lines_x=[best.snap_line_x] if best.snap_line_x is not None else [],
        snap_lines_y=[best.snap_line_y] if best.snap_line_y is not None else [],
    )


def generate_candidates(
    frame: PlacedFrame,
    x: float,
    y: float,
    desired_x: float,
    desired_y: float,
    frames: list[PlacedFrame],
    wall: Wall,
    gap: float,
) -> Iterator[Candidate]:
    """All positions worth trying. (x, y) is the clamped desired position."""
    for other in frames:
        if other.id == frame.id:
            continue
        yield from _adjacent_candidates(frame, other, x, y, gap)
    yield from _wall_candidates(frame, desired_x, desired_y, wall)


def _adjacent_candidates(
    frame: PlacedFrame, other: PlacedFrame, x: float, y: float, gap: float,
) -> Iterator[Candidate]:
    """Up to three spots on each side of *other*, one gap away."""
    w, h = frame.width, frame.height
    o_right = other.x + other.width
    o_bottom = other.y + other.height

    # Right of other
    right_x = o_right + gap
    yield Candidate(x=right_x, y=other.y, snap_line_x=o_right, snap_line_y=other.y)
    yield Candidate(x=right_x, y=o_bottom - h, snap_line_x=o_right, snap_line_y=o_bottom)
    yield Candidate(x=right_x, y=y, snap_line_x=o_right)

    # Left of other
    left_x = other.x - w - gap
    yield Candidate(x=left_x, y=other.y, snap_line_x=other.x, snap_line_y=other.y)
    yield Candidate(x=left_x, y=o_bottom - h, snap_line_x=other.x, snap_line_y=o_bottom)
    yield Candidate(x=left_x, y=y, snap_line_x=other.x)

    # Below other
    below_y = o_bottom + gap
    yield Candidate(x=other.x, y=below_y, snap_line_x=other.x, snap_line_y=o_bottom)
    yield Candidate(x=o_right - w, y=below_y, snap_line_x=o_right, snap_line_y=o_bottom)
    yield Candidate(x=x, y=below_y, snap_line_y=o_bottom)

    # Above other
    above_y = other.y - h - gap
    yield Candidate(x=other.x, y=above_y, snap_line_x=other.x, snap_line_y=other.y)
    yield Candidate(x=o_right - w, y=above_y, snap_line_x=o_right, snap_line_y=other.y)
    yield Candidate(x=x, y=above_y, snap_line_y=other.y)


def _wall_candidates(
    frame: PlacedFrame, desired_x: float, desired_y: float, wall: Wall,
) -> Iterator[Candidate]:
    """Wall edges and corners as escape positions, clamped onto the wall."""
    far_x = wall.width - frame.width
    far_y = wall.height - frame.height
    for px, py in (
        (0, desired_y),
        (far_x, desired_y),
        (desired_x, 0),
        (desired_x, far_y),
        (0, 0),
        (far_x, 0),
        (0, far_y),
        (far_x, far_y),
    ):
        cx, cy = clamp_to_wall(frame, px, py, wall)
        yield Candidate(x=cx, y=cy)


def align_free_position(
    frame: PlacedFrame,
    x: float,
    y: float,
    frames: list[PlacedFrame],
    config: SnapConfig,
) -> ResolvedPosition:
    """Light alignment pass for a position that is already collision-free.

    Snaps to the wall center and edges, then to other frames' edges
    where that keeps the frame clear.
    """
    wall = config.wall
    gap = config.gap
    threshold = config.settings.resolver_threshold
    lines_x: list[float] = []
    lines_y: list[float] = []

    if abs(x + frame.width / 2 - wall.center_x) < threshold:
        x = wall.center_x - frame.width / 2
        lines_x.append(wall.center_x)

    if abs(x) < threshold:
        x = 0.0
        lines_x.append(0.0)
    elif abs(x + frame.width - wall.width) < threshold:
        x = wall.width - frame.width
        lines_x.append(wall.width)

    if abs(y) < threshold:
        y = 0.0
        lines_y.append(0.0)
    elif abs(y + frame.height - wall.height) < threshold:
        y = wall.height - frame.height
        lines_y.append(wall.height)

    for other in frames:
        if other.id == frame.id:
            continue
        o_right = other.x + other.width
        o_bottom = other.y + other.height

        if abs(x - other.x) < threshold and not has_collision(frame, other.x, y, frames, gap):
            x = other.x
            lines_x.append(other.x)
        test_x = o_right - frame.width
        if abs(x + frame.width - o_right) < threshold and not has_collision(frame, test_x, y, frames, gap):
            x = test_x
            lines_x.append(o_right)
        if abs(y - other.y) < threshold and not has_collision(frame, x, other.y, frames, gap):
            y = other.y
            lines_y.append(other.y)
        test_y = o_bottom - frame.height
        if abs(y + frame.height - o_bottom) < threshold and not has_collision(frame, x, test_y, frames, gap):
            y = test_y
            lines_y.append(o_bottom)

    return ResolvedPosition(x=x, y=y, snap_lines_x=lines_x, snap_lines_y=lines_y)
