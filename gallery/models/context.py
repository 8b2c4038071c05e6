"""Layout context: accumulates state during one layout pass."""

from __future__ import annotations
from pydantic import BaseModel

from .frames import Frame, FramePosition
from .geometry import Rect
from .parameters import CalculatorState
from .templates import GalleryTemplate


class LayoutContext(BaseModel):
    """
    Holds all state during a single layout pass.

    The analyzer resolves effective frames, furniture geometry and the
    selected template. Layout strategies add positions keyed by the
    frame's index in the input list. The engine reads them back in
    input order.
    """
    # Input
    state: CalculatorState

    # Analysis results (populated by the analyzer)
    frames: list[Frame] = []
    furniture_rect: Rect | None = None
    template: GalleryTemplate | None = None

    # Output (populated by layout strategies)
    positions: dict[int, FramePosition] = {}

    def add_position(self, index: int, position: FramePosition) -> None:
        self.positions[index] = position

    def ordered_positions(self) -> list[FramePosition]:
        return [self.positions[i] for i in sorted(self.positions)]
