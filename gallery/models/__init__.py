from .geometry import Point2D, Rect, rects_overlap, distance
from .wall import Wall, Furniture, FurnitureAnchor, FurnitureVerticalAnchor
from .frames import (
    Frame, PlacedFrame, FramePosition, AlignmentGuide, HangingType, GuideType,
)
from .parameters import (
    CalculatorState, RowConfig, RowSettings, SnapSettings, SnapConfig, Distribution,
    AnchorType, HorizontalAnchorType, FrameFurnitureAlignment, VAlign,
    RowMode, LayoutMode, row_config_id,
)
from .templates import GalleryTemplate, TemplateSlot
from .context import LayoutContext

__all__ = [
    "Point2D", "Rect", "rects_overlap", "distance",
    "Wall", "Furniture", "FurnitureAnchor", "FurnitureVerticalAnchor",
    "Frame", "PlacedFrame", "FramePosition", "AlignmentGuide", "HangingType", "GuideType",
    "CalculatorState", "RowConfig", "RowSettings", "SnapSettings", "SnapConfig", "Distribution",
    "AnchorType", "HorizontalAnchorType", "FrameFurnitureAlignment", "VAlign",
    "RowMode", "LayoutMode", "row_config_id",
    "GalleryTemplate", "TemplateSlot",
    "LayoutContext",
]
