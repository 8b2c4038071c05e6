"""Template layout: maps frames onto a named template's slots.

Frames left over when the template has fewer slots than frames are
wrapped into rows beneath the template group.
"""

from __future__ import annotations
import logging

from gallery.layouts.base import LayoutStrategy
from gallery.layouts.freeform import place_rows
from gallery.models import FramePosition, LayoutContext, LayoutMode, RowMode
from gallery.core.positions import make_position
from gallery.core.rows import build_rows
from gallery.core.slots import assign_slots, fit_template


log = logging.getLogger(__name__)


class TemplateLayout(LayoutStrategy):
    """Slot-based arrangement from a built-in template."""

    priority = 10

    def get_id(self) -> str:
        return "layout.template"

    def get_name(self) -> str:
        return "Template"

    def applies(self, context: LayoutContext) -> bool:
        return (
            context.state.layout_mode == LayoutMode.TEMPLATE
            and context.template is not None
            and len(context.frames) > 0
        )

    def layout(self, context: LayoutContext) -> list[tuple[int, FramePosition]]:
        state = context.state
        template = context.template
        if template is None:
            return []

        assignments = assign_slots(template, context.frames, state.slot_assignments)
        placements, box = fit_template(template, assignments, state, context.furniture_rect)

        placed: list[tuple[int, FramePosition]] = [
            (
                p.assignment.index,
                make_position(p.assignment.frame, p.x, p.y, state.wall, slot_id=p.assignment.slot.id),
            )
            for p in placements
        ]

        slotted = {a.index for a in assignments}
        leftovers = [f for i, f in enumerate(context.frames) if i not in slotted]
        if leftovers:
            log.debug("Template %s: %d frame(s) without a slot", template.id, len(leftovers))
            overflow_state = state.model_copy(update={"row_mode": RowMode.AUTO})
            rows = build_rows(leftovers, overflow_state)
            # Row members index into the leftover list; map back to input indices
            leftover_indices = [i for i in range(len(context.frames)) if i not in slotted]
            for index, position in place_rows(
                rows, box.bottom + state.row_spacing, overflow_state,
                context.furniture_rect, center_on=box.center_x,
            ):
                placed.append((leftover_indices[index], position))

        return placed
