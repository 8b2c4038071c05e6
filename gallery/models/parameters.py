"""Layout configuration and interactive settings."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field

from .frames import Frame
from .wall import Furniture, Wall


class Distribution(str, Enum):
    FIXED = "fixed"                  # Fixed gap, group placed by its anchor
    SPACE_BETWEEN = "space-between"  # First/last item at the container edges
    SPACE_EVENLY = "space-evenly"    # Equal space at edges and between items
    SPACE_AROUND = "space-around"    # Half-size space at edges


class AnchorType(str, Enum):
    FLOOR = "floor"
    CEILING = "ceiling"
    CENTER = "center"
    FURNITURE = "furniture"


class HorizontalAnchorType(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class FrameFurnitureAlignment(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    SPAN = "span"  # Distribute across the furniture's width


class VAlign(str, Enum):
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


class RowMode(str, Enum):
    AUTO = "auto"      # Wrap rows by width
    MANUAL = "manual"  # Group by each frame's row index


class LayoutMode(str, Enum):
    FREEFORM = "freeform"
    TEMPLATE = "template"


def row_config_id(row: int) -> str:
    return f"row-{row}"


class RowSettings(BaseModel):
    """Fully resolved per-row settings."""
    model_config = ConfigDict(frozen=True)

    h_spacing: float
    v_align: VAlign
    h_distribution: Distribution


class RowConfig(BaseModel):
    """Per-row overrides. ``None`` means unset: use the global setting."""
    model_config = ConfigDict(frozen=True)

    h_spacing: float | None = None
    v_align: VAlign | None = None
    h_distribution: Distribution | None = None

    def resolve(self, defaults: RowSettings) -> RowSettings:
        return RowSettings(
            h_spacing=defaults.h_spacing if self.h_spacing is None else self.h_spacing,
            v_align=defaults.v_align if self.v_align is None else self.v_align,
            h_distribution=(
                defaults.h_distribution if self.h_distribution is None
                else self.h_distribution
            ),
        )


class CalculatorState(BaseModel):
    """Everything the batch engine needs to compute a layout."""
    model_config = ConfigDict(frozen=True)

    wall: Wall = Field(default_factory=Wall)
    frames: list[Frame] = []

    # Uniform sizing overrides each frame's own dimensions
    uniform_size: bool = False
    frame_width: float = Field(default=16, gt=0)
    frame_height: float = Field(default=20, gt=0)

    # Spacing
    h_spacing: float = 3.0
    h_distribution: Distribution = Distribution.FIXED
    v_align: VAlign = VAlign.CENTER

    # Rows
    row_mode: RowMode = RowMode.AUTO
    max_row_width: float | None = None  # None = wall width
    row_spacing: float = 3.0
    row_configs: dict[str, RowConfig] = {}

    # Positioning
    anchor_type: AnchorType = AnchorType.FLOOR
    anchor_value: float = 57.0
    h_anchor_type: HorizontalAnchorType = HorizontalAnchorType.CENTER
    h_anchor_value: float = 0.0

    # Furniture (used when anchor_type is furniture)
    furniture: Furniture = Field(default_factory=Furniture)
    frame_furniture_align: FrameFurnitureAlignment = FrameFurnitureAlignment.CENTER

    # Templates
    layout_mode: LayoutMode = LayoutMode.FREEFORM
    template_id: str | None = None
    slot_assignments: dict[str, str] = {}  # slot id -> frame id

    @property
    def row_defaults(self) -> RowSettings:
        return RowSettings(
            h_spacing=self.h_spacing,
            v_align=self.v_align,
            h_distribution=self.h_distribution,
        )

    def row_settings(self, row: int) -> RowSettings:
        """Settings for one row, overrides merged over the global defaults."""
        override = self.row_configs.get(row_config_id(row))
        if override is None:
            return self.row_defaults
        return override.resolve(self.row_defaults)


class SnapSettings(BaseModel):
    """Tuning for the interactive snap engine (wall units)."""
    model_config = ConfigDict(frozen=True)

    threshold: float = Field(default=20, ge=0)
    resolver_threshold: float = Field(default=15, ge=0)
    guide_tolerance: float = Field(default=1, gt=0)


class SnapConfig(BaseModel):
    """Static inputs of a drag session."""
    model_config = ConfigDict(frozen=True)

    wall: Wall = Field(default_factory=Wall)
    furniture: Furniture | None = None
    gap: float = Field(default=3.0, ge=0)  # Minimum spacing kept between frames
    settings: SnapSettings = Field(default_factory=SnapSettings)
