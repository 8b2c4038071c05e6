"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from gallery.models import CalculatorState, GalleryTemplate, FramePosition
from gallery.core.errors import UnknownFrameError
from gallery.core.units import Unit, format_measurement, to_display_unit
from gallery.data.presets import GalleryPreset
from gallery.services.layout_service import LayoutService
from gallery.api.schemas import (
    CommitResponse, DragRequest, DragResponse, LayoutRequest, LayoutResponse,
    MeasurementLabels, StrategyInfo,
)

router = APIRouter()

# Shared service instance
_service = LayoutService()


def _label(value: float, unit: Unit) -> str:
    return format_measurement(to_display_unit(value, unit), unit)


def _labels(position: FramePosition, unit: Unit) -> MeasurementLabels:
    return MeasurementLabels(
        id=position.id,
        from_left=_label(position.from_left, unit),
        from_right=_label(position.from_right, unit),
        from_floor=_label(position.from_floor, unit),
        from_ceiling=_label(position.from_ceiling, unit),
        hook_gap=(
            _label(position.hook_gap, unit)
            if position.hook_gap is not None else None
        ),
    )


@router.post("/layout", response_model=LayoutResponse)
async def calculate_layout(request: LayoutRequest) -> LayoutResponse:
    """Compute frame and hook positions for a configuration."""
    positions = _service.calculate(request.state)
    return LayoutResponse(
        positions=positions,
        labels=[_labels(p, request.unit) for p in positions],
        frame_count=len(positions),
        out_of_bounds_count=sum(1 for p in positions if p.is_out_of_bounds),
    )


@router.post("/snap", response_model=DragResponse)
async def snap_frame(request: DragRequest) -> DragResponse:
    """Snapped preview for a frame being dragged."""
    try:
        preview = _service.preview_drag(
            request.frames, request.frame_id, request.desired_x, request.desired_y,
            request.config, request.selected_ids,
        )
    except UnknownFrameError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return DragResponse(x=preview.x, y=preview.y, guides=preview.guides, previews=preview.previews)


@router.post("/drag/commit", response_model=CommitResponse)
async def commit_drag(request: DragRequest) -> CommitResponse:
    """Apply the final snapped position of a drag to the frame set."""
    try:
        frames = _service.commit_drag(
            request.frames, request.frame_id, request.desired_x, request.desired_y,
            request.config, request.selected_ids,
        )
    except UnknownFrameError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return CommitResponse(frames=frames)


@router.get("/templates", response_model=list[GalleryTemplate])
async def list_templates() -> list[GalleryTemplate]:
    return _service.list_templates()


@router.get("/presets", response_model=list[GalleryPreset])
async def list_presets() -> list[GalleryPreset]:
    return _service.list_presets()


@router.get("/presets/{preset_id}/state", response_model=CalculatorState)
async def preset_state(preset_id: str) -> CalculatorState:
    """A full calculator state with the preset applied to the default wall."""
    state = _service.preset_state(preset_id)
    if state is None:
        raise HTTPException(status_code=404, detail=f"Unknown preset: {preset_id}")
    return state


@router.get("/strategies", response_model=list[StrategyInfo])
async def list_strategies() -> list[StrategyInfo]:
    """List all available layout strategies."""
    return [StrategyInfo(**s) for s in _service.list_strategies()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
