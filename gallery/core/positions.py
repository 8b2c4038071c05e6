"""Hook placement and derived measurements for a positioned frame."""

from __future__ import annotations

from gallery.models import Frame, FramePosition, HangingType, Rect, Wall


def hook_positions(frame: Frame, x: float) -> tuple[float, float | None, float | None]:
    """Return ``(hook_x, hook_x2, hook_gap)`` for a frame whose left edge is at *x*."""
    if frame.hanging_type == HangingType.CENTER:
        return x + frame.width / 2, None, None
    if frame.hanging_type == HangingType.DUAL:
        # Uniform sizing can shrink a frame below its hook spread
        inset = min(frame.hook_inset, frame.width / 2)
        return x + inset, x + frame.width - inset, frame.width - 2 * inset
    raise ValueError(f"Unknown hanging type: {frame.hanging_type}")


def is_out_of_bounds(x: float, y: float, width: float, height: float, wall: Wall) -> bool:
    return not wall.as_rect().contains(Rect(x=x, y=y, width=width, height=height))


def make_position(
    frame: Frame,
    x: float,
    y: float,
    wall: Wall,
    *,
    row: int | None = None,
    slot_id: str | None = None,
) -> FramePosition:
    hook_x, hook_x2, hook_gap = hook_positions(frame, x)
    hook_y = y + frame.hanging_offset
    return FramePosition(
        id=frame.id,
        x=x,
        y=y,
        width=frame.width,
        height=frame.height,
        hanging_offset=frame.hanging_offset,
        hook_x=hook_x,
        hook_x2=hook_x2,
        hook_y=hook_y,
        hook_gap=hook_gap,
        from_left=hook_x,
        from_floor=wall.height - hook_y,
        from_right=wall.width - (hook_x2 if hook_x2 is not None else hook_x),
        from_ceiling=hook_y,
        is_out_of_bounds=is_out_of_bounds(x, y, frame.width, frame.height, wall),
        row=row,
        slot_id=slot_id,
    )
