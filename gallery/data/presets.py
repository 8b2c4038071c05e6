"""Ready-made gallery arrangements."""

from __future__ import annotations
from pydantic import BaseModel

from gallery.models import (
    AnchorType, CalculatorState, Distribution, Frame, FrameFurnitureAlignment,
    Furniture, FurnitureAnchor, FurnitureVerticalAnchor, HorizontalAnchorType,
    RowConfig, RowMode, VAlign, Wall,
)


class PresetSettings(BaseModel):
    uniform_size: bool = False
    frame_width: float | None = None
    frame_height: float | None = None
    h_spacing: float = 3.0
    h_distribution: Distribution = Distribution.FIXED
    v_align: VAlign = VAlign.CENTER
    row_spacing: float = 3.0
    row_configs: dict[str, RowConfig] = {}
    anchor_type: AnchorType = AnchorType.FLOOR
    anchor_value: float = 57.0
    h_anchor_type: HorizontalAnchorType = HorizontalAnchorType.CENTER
    furniture: Furniture | None = None
    frame_furniture_align: FrameFurnitureAlignment | None = None


class GalleryPreset(BaseModel):
    id: str
    name: str
    description: str
    frames: list[Frame]
    settings: PresetSettings

    def to_state(self, wall: Wall | None = None) -> CalculatorState:
        """A calculator state with this preset's frames and settings applied."""
        s = self.settings
        update: dict[str, object] = {
            "frames": self.frames,
            "uniform_size": s.uniform_size,
            "h_spacing": s.h_spacing,
            "h_distribution": s.h_distribution,
            "v_align": s.v_align,
            "row_mode": RowMode.MANUAL,
            "row_spacing": s.row_spacing,
            "row_configs": s.row_configs,
            "anchor_type": s.anchor_type,
            "anchor_value": s.anchor_value,
            "h_anchor_type": s.h_anchor_type,
        }
        if wall is not None:
            update["wall"] = wall
        if s.frame_width is not None:
            update["frame_width"] = s.frame_width
        if s.frame_height is not None:
            update["frame_height"] = s.frame_height
        if s.furniture is not None:
            update["furniture"] = s.furniture
        if s.frame_furniture_align is not None:
            update["frame_furniture_align"] = s.frame_furniture_align
        return CalculatorState(**update)


def _frames(preset_id: str, sizes: list[tuple[float, float, int]]) -> list[Frame]:
    return [
        Frame(id=f"{preset_id}-{n}", width=w, height=h, row=row)
        for n, (w, h, row) in enumerate(sizes, start=1)
    ]


GALLERY_PRESETS: list[GalleryPreset] = [
    GalleryPreset(
        id="varied-trio",
        name="Classic Trio",
        description="3 frames, varied sizes",
        frames=_frames("varied-trio", [(11, 14, 0), (16, 20, 0), (11, 14, 0)]),
        settings=PresetSettings(),
    ),
    GalleryPreset(
        id="salon-style",
        name="Salon Style",
        description="5 frames, 2 rows",
        frames=_frames("salon-style", [
            (8, 10, 0), (11, 14, 0), (8, 10, 0), (16, 20, 1), (12, 12, 1),
        ]),
        settings=PresetSettings(
            h_spacing=2.5,
            v_align=VAlign.BOTTOM,
            row_spacing=2.5,
            row_configs={"row-1": RowConfig(v_align=VAlign.TOP)},
        ),
    ),
    GalleryPreset(
        id="grid-four",
        name="Perfect Grid",
        description="4 uniform frames",
        frames=_frames("grid-four", [(12, 12, 0), (12, 12, 0), (12, 12, 1), (12, 12, 1)]),
        settings=PresetSettings(uniform_size=True, frame_width=12, frame_height=12),
    ),
    GalleryPreset(
        id="pyramid",
        name="Pyramid",
        description="Ascending & descending",
        frames=_frames("pyramid", [
            (8, 10, 0), (11, 14, 0), (16, 20, 0), (11, 14, 0), (8, 10, 0),
        ]),
        settings=PresetSettings(h_spacing=2),
    ),
    GalleryPreset(
        id="above-sofa",
        name="Above Sofa",
        description="3 frames over furniture",
        frames=_frames("above-sofa", [(11, 14, 0), (16, 20, 0), (11, 14, 0)]),
        settings=PresetSettings(
            anchor_type=AnchorType.FURNITURE,
            anchor_value=8,
            furniture=Furniture(
                width=72,
                height=52,
                anchor=FurnitureAnchor.CENTER,
                offset=0,
                vertical_anchor=FurnitureVerticalAnchor.ABOVE_FURNITURE,
            ),
            frame_furniture_align=FrameFurnitureAlignment.CENTER,
        ),
    ),
    GalleryPreset(
        id="mirror-gallery",
        name="Mirror Gallery",
        description="10 frames, stacked pyramids",
        frames=_frames("mirror-gallery", [
            (8, 10, 0), (11, 14, 0), (16, 20, 0), (11, 14, 0), (8, 10, 0),
            (8, 10, 1), (11, 14, 1), (16, 20, 1), (11, 14, 1), (8, 10, 1),
        ]),
        settings=PresetSettings(
            h_spacing=2.25,
            row_spacing=2.25,
            row_configs={
                "row-0": RowConfig(v_align=VAlign.BOTTOM),
                "row-1": RowConfig(v_align=VAlign.TOP),
            },
            anchor_type=AnchorType.CEILING,
            anchor_value=6,
        ),
    ),
]


def get_preset_by_id(preset_id: str) -> GalleryPreset | None:
    for p in GALLERY_PRESETS:
        if p.id == preset_id:
            return p
    return None
