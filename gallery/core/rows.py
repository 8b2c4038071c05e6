"""Row grouping: partitions the frame list into horizontal rows."""

from __future__ import annotations
import logging
from pydantic import BaseModel

from gallery.models import CalculatorState, Frame, RowMode, RowSettings, VAlign
from gallery.core.distribution import group_span


log = logging.getLogger(__name__)


class RowMember(BaseModel):
    index: int  # Position of the frame in the input list
    frame: Frame


class Row(BaseModel):
    """Frames sharing one vertical band."""
    index: int
    members: list[RowMember]
    settings: RowSettings

    @property
    def widths(self) -> list[float]:
        return [m.frame.width for m in self.members]

    @property
    def width(self) -> float:
        return group_span(self.widths, self.settings.h_spacing)

    @property
    def height(self) -> float:
        return max((m.frame.height for m in self.members), default=0.0)


def build_rows(frames: list[Frame], state: CalculatorState) -> list[Row]:
    """Group *frames* into rows according to ``state.row_mode``."""
    if not frames:
        return []

    if state.row_mode == RowMode.MANUAL:
        groups = _group_manual(frames)
    elif state.row_mode == RowMode.AUTO:
        max_width = state.max_row_width if state.max_row_width is not None else state.wall.width
        groups = _group_auto(frames, max_width, state.h_spacing)
    else:
        raise ValueError(f"Unknown row mode: {state.row_mode}")

    rows = [
        Row(index=row_index, members=members, settings=state.row_settings(row_index))
        for row_index, members in groups
    ]
    log.debug("Built %d row(s) from %d frame(s) (%s)", len(rows), len(frames), state.row_mode.value)
    return rows


def _group_manual(frames: list[Frame]) -> list[tuple[int, list[RowMember]]]:
    buckets: dict[int, list[RowMember]] = {}
    for i, frame in enumerate(frames):
        row = frame.row if frame.row is not None else 0
        buckets.setdefault(row, []).append(RowMember(index=i, frame=frame))
    return sorted(buckets.items())


def _group_auto(
    frames: list[Frame], max_width: float, gap: float,
) -> list[tuple[int, list[RowMember]]]:
    """Greedy wrap. A frame wider than *max_width* still gets a row of its own."""
    groups: list[list[RowMember]] = []
    current: list[RowMember] = []
    current_width = 0.0

    for i, frame in enumerate(frames):
        if current and current_width + gap + frame.width > max_width:
            groups.append(current)
            current = []
            current_width = 0.0
        current_width += frame.width if not current else gap + frame.width
        current.append(RowMember(index=i, frame=frame))

    if current:
        groups.append(current)
    return list(enumerate(groups))


def stack_rows(rows: list[Row], row_spacing: float) -> tuple[list[float], float]:
    """Return each row's top offset within the group and the group's total height."""
    tops: list[float] = []
    y = 0.0
    for row in rows:
        tops.append(y)
        y += row.height + row_spacing
    total = sum(r.height for r in rows) + max(len(rows) - 1, 0) * row_spacing
    return tops, total


def align_in_row(frame_height: float, row_height: float, v_align: VAlign) -> float:
    """Offset of a frame's top within its row band."""
    if v_align == VAlign.TOP:
        return 0.0
    if v_align == VAlign.CENTER:
        return (row_height - frame_height) / 2
    if v_align == VAlign.BOTTOM:
        return row_height - frame_height
    raise ValueError(f"Unknown vertical alignment: {v_align}")
