"""Anchor resolution: places a bounding box on the wall.

Horizontal anchors measure from the wall's side edges, vertical anchors
from the ceiling, the floor, or the top of a piece of furniture.
"""

from __future__ import annotations

from gallery.models import (
    AnchorType, CalculatorState, Distribution, FrameFurnitureAlignment,
    Furniture, FurnitureAnchor, FurnitureVerticalAnchor, HorizontalAnchorType,
    Rect, RowSettings, Wall,
)
from gallery.core.distribution import distribute, group_span


def furniture_rect(furniture: Furniture, wall: Wall) -> Rect:
    """Where the furniture sits on the wall. Furniture always stands on the floor."""
    if furniture.anchor == FurnitureAnchor.CENTER:
        left = (wall.width - furniture.width) / 2
    elif furniture.anchor == FurnitureAnchor.LEFT:
        left = furniture.offset
    elif furniture.anchor == FurnitureAnchor.RIGHT:
        left = wall.width - furniture.width - furniture.offset
    else:
        raise ValueError(f"Unknown furniture anchor: {furniture.anchor}")
    return Rect(
        x=left,
        y=wall.height - furniture.height,
        width=furniture.width,
        height=furniture.height,
    )


def resolve_horizontal(
    box_width: float,
    wall_width: float,
    anchor_type: HorizontalAnchorType,
    anchor_value: float,
) -> float:
    """Left edge of a box of *box_width*."""
    if anchor_type == HorizontalAnchorType.CENTER:
        return (wall_width - box_width) / 2
    if anchor_type == HorizontalAnchorType.LEFT:
        return anchor_value
    if anchor_type == HorizontalAnchorType.RIGHT:
        return wall_width - box_width - anchor_value
    raise ValueError(f"Unknown horizontal anchor: {anchor_type}")


def resolve_vertical(
    box_height: float,
    wall: Wall,
    anchor_type: AnchorType,
    anchor_value: float,
    furniture: Furniture,
) -> float:
    """Top edge of a box of *box_height*.

    For ``floor`` the anchor value is the gap between the floor and the
    bottom of the box. For ``furniture`` the furniture's vertical anchor
    decides what the value means.
    """
    if anchor_type == AnchorType.CENTER:
        return (wall.height - box_height) / 2
    if anchor_type == AnchorType.CEILING:
        return anchor_value
    if anchor_type == AnchorType.FLOOR:
        return wall.height - anchor_value - box_height
    if anchor_type == AnchorType.FURNITURE:
        furniture_top = wall.height - furniture.height
        vertical = furniture.vertical_anchor
        if vertical == FurnitureVerticalAnchor.CENTER:
            return (furniture_top - box_height) / 2
        if vertical == FurnitureVerticalAnchor.CEILING:
            return anchor_value
        if vertical == FurnitureVerticalAnchor.ABOVE_FURNITURE:
            return furniture_top - anchor_value - box_height
        raise ValueError(f"Unknown furniture vertical anchor: {vertical}")
    raise ValueError(f"Unknown anchor type: {anchor_type}")


def align_to_furniture(
    box_width: float,
    furniture: Rect,
    alignment: FrameFurnitureAlignment,
) -> float:
    """Left edge of a box aligned to the furniture. ``span`` centers the box."""
    if alignment == FrameFurnitureAlignment.LEFT:
        return furniture.x
    if alignment == FrameFurnitureAlignment.RIGHT:
        return furniture.right - box_width
    if alignment in (FrameFurnitureAlignment.CENTER, FrameFurnitureAlignment.SPAN):
        return furniture.center_x - box_width / 2
    raise ValueError(f"Unknown furniture alignment: {alignment}")


def horizontal_placement(
    widths: list[float],
    settings: RowSettings,
    state: CalculatorState,
    furniture: Rect,
) -> tuple[float, float]:
    """Return ``(start_x, gap)`` for a row of items with the given widths."""
    count = len(widths)
    item_span = sum(widths)
    mode = settings.h_distribution

    if state.anchor_type == AnchorType.FURNITURE:
        align = state.frame_furniture_align
        if align == FrameFurnitureAlignment.SPAN and mode != Distribution.FIXED:
            offset, gap = distribute(count, item_span, furniture.width, settings.h_spacing, mode)
            return furniture.x + offset, gap
        # Left/center/right (and fixed span) keep the fixed gap
        gap = settings.h_spacing
        return align_to_furniture(group_span(widths, gap), furniture, align), gap

    if mode != Distribution.FIXED:
        return distribute(count, item_span, state.wall.width, settings.h_spacing, mode)

    gap = settings.h_spacing
    start = resolve_horizontal(
        group_span(widths, gap), state.wall.width,
        state.h_anchor_type, state.h_anchor_value,
    )
    return start, gap
