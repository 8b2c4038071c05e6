"""Interactive snapping: alignment snaps and guides for a dragged frame.

Works per axis: every wall, furniture and frame line within the snap
threshold becomes a candidate, the closest candidate that keeps the
frame clear of its neighbours wins, and a position that still collides
goes through the collision resolver.
"""

from __future__ import annotations
import logging
from pydantic import BaseModel

from gallery.models import (
    AlignmentGuide, GuideType, PlacedFrame, Rect, SnapConfig,
)
from gallery.core.anchors import furniture_rect
from gallery.core.collision import clamp_to_wall, has_collision
from gallery.core.resolver import resolve_collision


log = logging.getLogger(__name__)


class SnapCandidate(BaseModel):
    value: float     # Frame x (or y) after snapping
    distance: float  # How far the matching frame line is from its target
    guide: GuideType
    position: float  # Where the guide line is drawn


class SnapResult(BaseModel):
    x: float
    y: float
    guides: list[AlignmentGuide] = []
    resolved: bool = False  # True if the collision resolver picked the position


def snap_furniture(config: SnapConfig) -> Rect | None:
    """The furniture footprint, if the session has any furniture."""
    if config.furniture is None or not config.furniture.is_present:
        return None
    return furniture_rect(config.furniture, config.wall)


def _collect(
    out: list[SnapCandidate],
    current: float,
    target: float,
    value: float,
    guide: GuideType,
    threshold: float,
    position: float | None = None,
) -> None:
    d = abs(current - target)
    if d < threshold:
        out.append(SnapCandidate(
            value=value, distance=d, guide=guide,
            position=target if position is None else position,
        ))


def snap_candidates(
    frame: PlacedFrame,
    x: float,
    y: float,
    frames: list[PlacedFrame],
    config: SnapConfig,
) -> tuple[list[SnapCandidate], list[SnapCandidate]]:
    """Candidate x and y snaps for *frame* at (x, y), each sorted by distance."""
    wall = config.wall
    gap = config.gap
    t = config.settings.threshold
    w, h = frame.width, frame.height
    left, right, cx = x, x + w, x + w / 2
    top, bottom, cy = y, y + h, y + h / 2

    xs: list[SnapCandidate] = []
    ys: list[SnapCandidate] = []

    # Wall
    _collect(xs, left, 0, 0, GuideType.LEFT, t)
    _collect(xs, right, wall.width, wall.width - w, GuideType.RIGHT, t)
    _collect(xs, cx, wall.center_x, wall.center_x - w / 2, GuideType.CENTER_X, t)
    _collect(ys, top, 0, 0, GuideType.TOP, t)
    _collect(ys, bottom, wall.height, wall.height - h, GuideType.BOTTOM, t)
    _collect(ys, cy, wall.center_y, wall.center_y - h / 2, GuideType.CENTER_Y, t)

    # Furniture
    furniture = snap_furniture(config)
    if furniture is not None:
        _collect(xs, cx, furniture.center_x, furniture.center_x - w / 2, GuideType.CENTER_X, t)
        _collect(xs, left, furniture.x, furniture.x, GuideType.LEFT, t)
        _collect(xs, right, furniture.right, furniture.right - w, GuideType.RIGHT, t)
        above = furniture.y - gap
        _collect(ys, bottom, above, above - h, GuideType.BOTTOM, t)

    # Other frames
    for other in frames:
        if other.id == frame.id:
            continue
        o = other.as_rect()

        _collect(xs, left, o.x, o.x, GuideType.LEFT, t)
        _collect(xs, right, o.right, o.right - w, GuideType.RIGHT, t)
        _collect(xs, cx, o.center_x, o.center_x - w / 2, GuideType.CENTER_X, t)
        _collect(xs, left, o.center_x, o.center_x, GuideType.LEFT, t)
        _collect(xs, right, o.center_x, o.center_x - w, GuideType.RIGHT, t)
        _collect(xs, left, o.right + gap, o.right + gap, GuideType.LEFT, t)
        _collect(xs, right, o.x - gap, o.x - gap - w, GuideType.RIGHT, t)

        _collect(ys, top, o.y, o.y, GuideType.TOP, t)
        _collect(ys, bottom, o.bottom, o.bottom - h, GuideType.BOTTOM, t)
        _collect(ys, cy, o.center_y, o.center_y - h / 2, GuideType.CENTER_Y, t)
        _collect(ys, top, o.center_y, o.center_y, GuideType.TOP, t)
        _collect(ys, bottom, o.center_y, o.center_y - h, GuideType.BOTTOM, t)
        _collect(ys, top, o.bottom + gap, o.bottom + gap, GuideType.TOP, t)
        _collect(ys, bottom, o.y - gap, o.y - gap - h, GuideType.BOTTOM, t)

    # Stable sort: on ties, wall beats furniture beats frames
    xs.sort(key=lambda c: c.distance)
    ys.sort(key=lambda c: c.distance)
    return xs, ys


def snap_position(
    frame: PlacedFrame,
    desired_x: float,
    desired_y: float,
    frames: list[PlacedFrame],
    config: SnapConfig,
) -> SnapResult:
    """Corrected position and guides for *frame* dragged to (desired_x, desired_y).

    *frames* is the current frame set; the dragged frame is skipped by id.
    """
    wall = config.wall
    gap = config.gap
    x, y = clamp_to_wall(frame, desired_x, desired_y, wall)
    xs, ys = snap_candidates(frame, x, y, frames, config)

    for c in xs:
        test_x, _ = clamp_to_wall(frame, c.value, y, wall)
        if not has_collision(frame, test_x, y, frames, gap):
            x = test_x
            break

    for c in ys:
        _, test_y = clamp_to_wall(frame, x, c.value, wall)
        if not has_collision(frame, x, test_y, frames, gap):
            y = test_y
            break

    resolved = False
    if has_collision(frame, x, y, frames, gap):
        log.debug("Frame %s still collides at (%.2f, %.2f), resolving", frame.id, x, y)
        r = resolve_collision(frame, x, y, frames, config)
        x, y = r.x, r.y
        resolved = True

    guides = alignment_guides(frame, x, y, frames, config)
    return SnapResult(x=x, y=y, guides=guides, resolved=resolved)


def alignment_guides(
    frame: PlacedFrame,
    x: float,
    y: float,
    frames: list[PlacedFrame],
    config: SnapConfig,
) -> list[AlignmentGuide]:
    """Guides for every alignment that holds at the final position."""
    wall = config.wall
    gap = config.gap
    tol = config.settings.guide_tolerance
    f = Rect(x=x, y=y, width=frame.width, height=frame.height)
    guides: list[AlignmentGuide] = []

    def near(a: float, b: float) -> bool:
        return abs(a - b) < tol

    for other in frames:
        if other.id == frame.id:
            continue
        o = other.as_rect()
        span_x = (min(f.x, o.x), max(f.right, o.right))
        span_y = (min(f.y, o.y), max(f.bottom, o.bottom))

        # Horizontal lines (y alignments)
        for mine, theirs, kind in (
            (f.y, o.y, GuideType.TOP),
            (f.bottom, o.bottom, GuideType.BOTTOM),
            (f.center_y, o.center_y, GuideType.CENTER_Y),
        ):
            if near(mine, theirs):
                guides.append(AlignmentGuide(type=kind, position=theirs, start=span_x[0], end=span_x[1]))

        # Vertical lines (x alignments)
        for mine, theirs, kind in (
            (f.x, o.x, GuideType.LEFT),
            (f.right, o.right, GuideType.RIGHT),
            (f.center_x, o.center_x, GuideType.CENTER_X),
        ):
            if near(mine, theirs):
                guides.append(AlignmentGuide(type=kind, position=theirs, start=span_y[0], end=span_y[1]))

        # Gap adjacency
        if near(f.x, o.right + gap):
            guides.append(AlignmentGuide(type=GuideType.LEFT, position=f.x, start=span_y[0], end=span_y[1]))
        if near(f.right + gap, o.x):
            guides.append(AlignmentGuide(type=GuideType.RIGHT, position=f.right, start=span_y[0], end=span_y[1]))
        if near(f.y, o.bottom + gap):
            guides.append(AlignmentGuide(type=GuideType.TOP, position=f.y, start=span_x[0], end=span_x[1]))
        if near(f.bottom + gap, o.y):
            guides.append(AlignmentGuide(type=GuideType.BOTTOM, position=f.bottom, start=span_x[0], end=span_x[1]))

    # Wall
    if near(f.x, 0):
        guides.append(AlignmentGuide(type=GuideType.LEFT, position=0, start=f.y, end=f.bottom))
    if near(f.right, wall.width):
        guides.append(AlignmentGuide(type=GuideType.RIGHT, position=wall.width, start=f.y, end=f.bottom))
    if near(f.y, 0):
        guides.append(AlignmentGuide(type=GuideType.TOP, position=0, start=f.x, end=f.right))
    if near(f.bottom, wall.height):
        guides.append(AlignmentGuide(type=GuideType.BOTTOM, position=wall.height, start=f.x, end=f.right))
    if near(f.center_x, wall.center_x):
        guides.append(AlignmentGuide(type=GuideType.CENTER_X, position=wall.center_x, start=0, end=wall.height))
    if near(f.center_y, wall.center_y):
        guides.append(AlignmentGuide(type=GuideType.CENTER_Y, position=wall.center_y, start=0, end=wall.width))

    # Furniture
    furniture = snap_furniture(config)
    if furniture is not None:
        span_y = (min(f.y, furniture.y), max(f.bottom, furniture.bottom))
        if near(f.x, furniture.x):
            guides.append(AlignmentGuide(type=GuideType.LEFT, position=furniture.x, start=span_y[0], end=span_y[1]))
        if near(f.right, furniture.right):
            guides.append(AlignmentGuide(type=GuideType.RIGHT, position=furniture.right, start=span_y[0], end=span_y[1]))
        if near(f.center_x, furniture.center_x):
            guides.append(AlignmentGuide(type=GuideType.CENTER_X, position=furniture.center_x, start=span_y[0], end=span_y[1]))
        if near(f.bottom, furniture.y - gap):
            guides.append(AlignmentGuide(
                type=GuideType.BOTTOM, position=furniture.y - gap,
                start=min(f.x, furniture.x), end=max(f.right, furniture.right),
            ))

    return guides
