"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel

from gallery.models import (
    AlignmentGuide, CalculatorState, FramePosition, PlacedFrame, Point2D, SnapConfig,
)
from gallery.core.units import Unit


class LayoutRequest(BaseModel):
    """Request body for the /layout endpoint."""
    state: CalculatorState = CalculatorState()
    unit: Unit = Unit.INCH


class MeasurementLabels(BaseModel):
    """Display strings for one frame's hook measurements."""
    id: str
    from_left: str
    from_right: str
    from_floor: str
    from_ceiling: str
    hook_gap: str | None = None


class LayoutResponse(BaseModel):
    """Response from the /layout endpoint."""
    positions: list[FramePosition]
    labels: list[MeasurementLabels]
    frame_count: int
    out_of_bounds_count: int


class DragRequest(BaseModel):
    """A pointer position for one frame, plus the co-selected frames."""
    frames: list[PlacedFrame]
    frame_id: str
    desired_x: float
    desired_y: float
    selected_ids: list[str] = []
    config: SnapConfig = SnapConfig()


class DragResponse(BaseModel):
    x: float
    y: float
    guides: list[AlignmentGuide]
    previews: dict[str, Point2D]


class CommitResponse(BaseModel):
    frames: list[PlacedFrame]


class StrategyInfo(BaseModel):
    id: str
    name: str
