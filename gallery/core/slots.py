"""Template slot mapping: fits a template's relative slots onto the wall."""

from __future__ import annotations
import logging
from pydantic import BaseModel

from gallery.models import (
    AnchorType, CalculatorState, Frame, GalleryTemplate, Rect, TemplateSlot,
)
from gallery.core.anchors import align_to_furniture, resolve_horizontal, resolve_vertical


log = logging.getLogger(__name__)

# Share of the wall the template's slot centers may spread over
FILL_WIDTH = 0.85
FILL_HEIGHT = 0.75


class SlotAssignment(BaseModel):
    slot: TemplateSlot
    index: int  # Position of the frame in the input list
    frame: Frame


class SlotPlacement(BaseModel):
    assignment: SlotAssignment
    x: float
    y: float


def assign_slots(
    template: GalleryTemplate,
    frames: list[Frame],
    manual: dict[str, str],
) -> list[SlotAssignment]:
    """Pair slots with frames, in slot order.

    Manual pairs (slot id -> frame id) are kept when both sides exist.
    Every other slot takes the next frame, in input order, that is not
    already assigned.
    """
    index_of = {f.id: i for i, f in enumerate(frames)}
    slot_ids = {s.id for s in template.slots}

    fixed: dict[str, int] = {}
    used: set[int] = set()
    for slot_id, frame_id in manual.items():
        i = index_of.get(frame_id)
        if slot_id not in slot_ids or i is None or i in used:
            continue
        fixed[slot_id] = i
        used.add(i)

    free = (i for i in range(len(frames)) if i not in used)
    assignments: list[SlotAssignment] = []
    for slot in template.slots:
        i = fixed.get(slot.id)
        if i is None:
            i = next(free, None)
            if i is None:
                continue
        assignments.append(SlotAssignment(slot=slot, index=i, frame=frames[i]))
    return assignments


def template_scale(slots: list[TemplateSlot], available_width: float, available_height: float) -> float:
    """Uniform scale that fits the spread of slot centers into the available area."""
    if not slots:
        return 1.0
    xs = [s.center_x for s in slots]
    ys = [s.center_y for s in slots]
    spread_x = max(xs) - min(xs)
    spread_y = max(ys) - min(ys)

    if spread_x > 0 and spread_y > 0:
        return min(available_width / spread_x, available_height / spread_y)
    if spread_x > 0:
        return available_width / spread_x
    if spread_y > 0:
        return available_height / spread_y
    return 1.0


def fit_template(
    template: GalleryTemplate,
    assignments: list[SlotAssignment],
    state: CalculatorState,
    furniture: Rect,
) -> tuple[list[SlotPlacement], Rect]:
    """Scale slot centers to the wall and anchor the resulting group.

    The scale comes from every slot of *template*, filled or not, so a
    partly filled template keeps its shape. Returns the placements and
    the group's bounding box on the wall.
    """
    if not assignments:
        return [], Rect(x=0, y=0, width=0, height=0)

    wall = state.wall
    slots = template.slots
    scale = template_scale(slots, wall.width * FILL_WIDTH, wall.height * FILL_HEIGHT)
    min_cx = min(s.center_x for s in slots)
    min_cy = min(s.center_y for s in slots)

    # Frame top-left corners relative to the template's first slot center
    local: list[tuple[float, float]] = []
    for a in assignments:
        cx = (a.slot.center_x - min_cx) * scale
        cy = (a.slot.center_y - min_cy) * scale
        local.append((cx - a.frame.width / 2, cy - a.frame.height / 2))

    min_x = min(x for x, _ in local)
    min_y = min(y for _, y in local)
    max_x = max(x + a.frame.width for (x, _), a in zip(local, assignments))
    max_y = max(y + a.frame.height for (_, y), a in zip(local, assignments))
    box_w = max_x - min_x
    box_h = max_y - min_y

    if box_w > wall.width:
        origin_x = (wall.width - box_w) / 2
    elif state.anchor_type == AnchorType.FURNITURE:
        origin_x = align_to_furniture(box_w, furniture, state.frame_furniture_align)
    else:
        origin_x = resolve_horizontal(box_w, wall.width, state.h_anchor_type, state.h_anchor_value)

    if box_h > wall.height:
        origin_y = (wall.height - box_h) / 2
    else:
        origin_y = resolve_vertical(box_h, wall, state.anchor_type, state.anchor_value, state.furniture)

    log.debug("Template fit: scale=%.3f box=%.2fx%.2f origin=(%.2f, %.2f)",
              scale, box_w, box_h, origin_x, origin_y)

    placements = [
        SlotPlacement(assignment=a, x=origin_x + x - min_x, y=origin_y + y - min_y)
        for (x, y), a in zip(local, assignments)
    ]
    return placements, Rect(x=origin_x, y=origin_y, width=box_w, height=box_h)
