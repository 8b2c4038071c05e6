"""Drag sessions: snapped previews for single and group drags."""

from __future__ import annotations
from pydantic import BaseModel

from gallery.models import AlignmentGuide, PlacedFrame, Point2D, SnapConfig
from gallery.core.collision import clamp_to_wall
from gallery.core.errors import UnknownFrameError
from gallery.core.snapping import snap_position


class DragPreview(BaseModel):
    frame_id: str
    x: float
    y: float
    guides: list[AlignmentGuide] = []
    previews: dict[str, Point2D] = {}  # Every moving frame, the active one included


def find_frame(frames: list[PlacedFrame], frame_id: str) -> PlacedFrame:
    for f in frames:
        if f.id == frame_id:
            return f
    raise UnknownFrameError(frame_id)


def drag_previews(
    frames: list[PlacedFrame],
    frame_id: str,
    desired_x: float,
    desired_y: float,
    config: SnapConfig,
    selected_ids: list[str] | None = None,
) -> DragPreview:
    """Snap the active frame and move the rest of the selection by the same delta.

    Co-selected frames are only clamped to the wall, not snapped. They
    move only when the active frame is itself part of the selection.
    """
    frame = find_frame(frames, frame_id)
    result = snap_position(frame, desired_x, desired_y, frames, config)
    dx = result.x - frame.x
    dy = result.y - frame.y

    previews = {frame.id: Point2D(x=result.x, y=result.y)}
    selected = selected_ids or []
    if frame.id in selected:
        for other in frames:
            if other.id == frame.id or other.id not in selected:
                continue
            ox, oy = clamp_to_wall(other, other.x + dx, other.y + dy, config.wall)
            previews[other.id] = Point2D(x=ox, y=oy)

    return DragPreview(
        frame_id=frame.id, x=result.x, y=result.y, guides=result.guides, previews=previews,
    )


def commit_drag(frames: list[PlacedFrame], preview: DragPreview) -> list[PlacedFrame]:
    """New frame list with the preview positions applied; order is kept."""
    return [
        f.moved_to(preview.previews[f.id].x, preview.previews[f.id].y)
        if f.id in preview.previews else f
        for f in frames
    ]
