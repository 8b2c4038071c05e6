"""Gallery template models.

Slots are expressed in relative coordinates (0-1) and are scaled to the
wall at layout time. Slot sizes only drive where a frame's center ends
up; the frame keeps its own dimensions.
"""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field


class TemplateSlot(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    x: float = Field(ge=0, le=1)
    y: float = Field(ge=0, le=1)
    width: float = Field(ge=0, le=1)
    height: float = Field(ge=0, le=1)

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2


class GalleryTemplate(BaseModel):
    """A named arrangement shape."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    aspect_ratio: float = 1.5  # Preview hint only
    slots: list[TemplateSlot]
