"""Frame input records and engine output models."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .geometry import Rect


class HangingType(str, Enum):
    CENTER = "center"  # Single hook at the horizontal center
    DUAL = "dual"      # Two hooks inset from the side edges


class GuideType(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"
    CENTER_Y = "center_y"
    LEFT = "left"
    RIGHT = "right"
    CENTER_X = "center_x"


class Frame(BaseModel):
    """A picture frame as configured by the user."""
    model_config = ConfigDict(frozen=True)

    id: str
    width: float = Field(gt=0)
    height: float = Field(gt=0)
    hanging_offset: float = 2.0  # Frame top to hook (inches)
    hanging_type: HangingType = HangingType.CENTER
    hook_inset: float = Field(default=3.0, ge=0)  # Dual only: side edge to hook
    row: int | None = None  # Manual row assignment

    @model_validator(mode="after")
    def _hooks_inside_frame(self) -> Frame:
        if self.hanging_type == HangingType.DUAL and 2 * self.hook_inset > self.width:
            raise ValueError(
                f"hook_inset {self.hook_inset} leaves no room between dual hooks "
                f"on a frame {self.width} wide"
            )
        return self


class PlacedFrame(BaseModel):
    """A frame with a stored position, as used by the interactive editor."""
    model_config = ConfigDict(frozen=True)

    id: str
    x: float
    y: float
    width: float = Field(gt=0)
    height: float = Field(gt=0)
    hanging_offset: float = 2.0

    def as_rect(self) -> Rect:
        return Rect(x=self.x, y=self.y, width=self.width, height=self.height)

    def moved_to(self, x: float, y: float) -> PlacedFrame:
        return self.model_copy(update={"x": x, "y": y})


class FramePosition(BaseModel):
    """Computed position of one frame on the wall."""
    id: str
    x: float
    y: float
    width: float
    height: float
    hanging_offset: float
    hook_x: float
    hook_x2: float | None = None
    hook_y: float
    hook_gap: float | None = None
    from_left: float
    from_floor: float
    from_right: float
    from_ceiling: float
    is_out_of_bounds: bool = False
    row: int | None = None
    slot_id: str | None = None


class AlignmentGuide(BaseModel):
    """A transient guide line drawn while dragging."""
    type: GuideType
    position: float  # X for vertical lines, Y for horizontal lines
    start: float
    end: float
