"""Exceptions raised at the engine's edges."""

from __future__ import annotations


class LayoutError(Exception):
    """Base class for layout engine errors."""


class UnknownFrameError(LayoutError):
    """A drag referenced a frame id that is not in the frame set."""

    def __init__(self, frame_id: str) -> None:
        self.frame_id = frame_id
        super().__init__(f"Unknown frame: {frame_id}")
