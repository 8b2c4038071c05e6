"""High-level layout service: facade for the API layer."""

from __future__ import annotations

from gallery.models import (
    CalculatorState, FramePosition, GalleryTemplate, PlacedFrame, SnapConfig, Wall,
)
from gallery.core.drag import DragPreview, commit_drag, drag_previews
from gallery.core.generator import LayoutEngine
from gallery.core.registry import LayoutRegistry, create_default_registry
from gallery.data.presets import GALLERY_PRESETS, GalleryPreset, get_preset_by_id
from gallery.data.templates import BUILT_IN_TEMPLATES


class LayoutService:
    """Delegates batch layouts to the engine and drags to the snap engine."""

    def __init__(
        self,
        registry: LayoutRegistry | None = None,
        templates: list[GalleryTemplate] | None = None,
    ) -> None:
        self.registry = registry or create_default_registry()
        self.templates = templates if templates is not None else BUILT_IN_TEMPLATES
        self.engine = LayoutEngine(self.registry, self.templates)

    def calculate(self, state: CalculatorState) -> list[FramePosition]:
        return self.engine.calculate(state)

    def preview_drag(
        self,
        frames: list[PlacedFrame],
        frame_id: str,
        desired_x: float,
        desired_y: float,
        config: SnapConfig | None = None,
        selected_ids: list[str] | None = None,
    ) -> DragPreview:
        if config is None:
            config = SnapConfig()
        return drag_previews(frames, frame_id, desired_x, desired_y, config, selected_ids)

    def commit_drag(
        self,
        frames: list[PlacedFrame],
        frame_id: str,
        desired_x: float,
        desired_y: float,
        config: SnapConfig | None = None,
        selected_ids: list[str] | None = None,
    ) -> list[PlacedFrame]:
        preview = self.preview_drag(frames, frame_id, desired_x, desired_y, config, selected_ids)
        return commit_drag(frames, preview)

    def list_templates(self) -> list[GalleryTemplate]:
        return list(self.templates)

    def list_presets(self) -> list[GalleryPreset]:
        return list(GALLERY_PRESETS)

    def preset_state(self, preset_id: str, wall: Wall | None = None) -> CalculatorState | None:
        preset = get_preset_by_id(preset_id)
        if preset is None:
            return None
        return preset.to_state(wall)

    def list_strategies(self) -> list[dict[str, str]]:
        return [
            {"id": s.get_id(), "name": s.get_name()}
            for s in self.registry.list_strategies()
        ]
