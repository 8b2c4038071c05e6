"""Wall and furniture models."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field

from .geometry import Rect


class FurnitureAnchor(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class FurnitureVerticalAnchor(str, Enum):
    CENTER = "center"                    # Centered between ceiling and furniture top
    CEILING = "ceiling"                  # Fixed distance from the ceiling
    ABOVE_FURNITURE = "above-furniture"  # Fixed gap above the furniture


class Wall(BaseModel):
    """The wall being hung on. All dimensions in inches."""
    model_config = ConfigDict(frozen=True)

    width: float = Field(default=120, gt=0)
    height: float = Field(default=96, gt=0)

    @property
    def center_x(self) -> float:
        return self.width / 2

    @property
    def center_y(self) -> float:
        return self.height / 2

    def as_rect(self) -> Rect:
        return Rect(x=0, y=0, width=self.width, height=self.height)


class Furniture(BaseModel):
    """A piece of furniture standing on the floor against the wall."""
    model_config = ConfigDict(frozen=True)

    width: float = Field(default=48, ge=0)
    height: float = Field(default=30, ge=0)
    anchor: FurnitureAnchor = FurnitureAnchor.CENTER
    offset: float = 0.0  # Distance from the anchored wall edge (ignored for center)
    vertical_anchor: FurnitureVerticalAnchor = FurnitureVerticalAnchor.ABOVE_FURNITURE

    @property
    def is_present(self) -> bool:
        return self.width > 0 and self.height > 0
