"""Freeform row layout: frames in one or more rows.

Rows come from auto-wrapping by width or from each frame's manual row
index. The stack of rows is anchored vertically as one bounding box;
each row is distributed and anchored horizontally on its own.
"""

from __future__ import annotations

from gallery.layouts.base import LayoutStrategy
from gallery.models import (
    CalculatorState, FramePosition, LayoutContext, LayoutMode, Rect,
)
from gallery.core.anchors import horizontal_placement, resolve_vertical
from gallery.core.positions import make_position
from gallery.core.rows import Row, align_in_row, build_rows, stack_rows


class FreeformRowLayout(LayoutStrategy):
    """Auto-wrapped or manually grouped rows."""

    priority = 100  # Fallback for every configuration

    def get_id(self) -> str:
        return "layout.freeform"

    def get_name(self) -> str:
        return "Freeform Rows"

    def applies(self, context: LayoutContext) -> bool:
        # Also covers template mode when no template could be resolved
        return (
            context.state.layout_mode == LayoutMode.FREEFORM
            or context.template is None
        )

    def layout(self, context: LayoutContext) -> list[tuple[int, FramePosition]]:
        state = context.state
        rows = build_rows(context.frames, state)
        if not rows:
            return []

        _, total_height = stack_rows(rows, state.row_spacing)
        top = resolve_vertical(
            total_height, state.wall, state.anchor_type, state.anchor_value, state.furniture,
        )
        return place_rows(rows, top, state, context.furniture_rect)


def place_rows(
    rows: list[Row],
    top: float,
    state: CalculatorState,
    furniture: Rect | None,
    *,
    center_on: float | None = None,
) -> list[tuple[int, FramePosition]]:
    """Position the members of stacked *rows* starting at *top*.

    With *center_on* set each row is centered on that x with its fixed
    gap instead of going through the anchor resolver.
    """
    if furniture is None:
        furniture = Rect(x=0, y=state.wall.height, width=0, height=0)

    tops, _ = stack_rows(rows, state.row_spacing)
    placed: list[tuple[int, FramePosition]] = []

    for row, row_top in zip(rows, tops):
        if center_on is None:
            x, gap = horizontal_placement(row.widths, row.settings, state, furniture)
        else:
            gap = row.settings.h_spacing
            x = center_on - row.width / 2

        for member in row.members:
            frame = member.frame
            y = top + row_top + align_in_row(frame.height, row.height, row.settings.v_align)
            placed.append((member.index, make_position(frame, x, y, state.wall, row=row.index)))
            x += frame.width + gap

    return placed
