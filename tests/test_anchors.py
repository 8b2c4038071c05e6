import pytest

from gallery.core.anchors import (
    align_to_furniture, furniture_rect, horizontal_placement,
    resolve_horizontal, resolve_vertical,
)
from gallery.models import (
    AnchorType, Distribution, FrameFurnitureAlignment, Furniture, FurnitureAnchor,
    FurnitureVerticalAnchor, HorizontalAnchorType, Rect, Wall,
)


WALL = Wall(width=100, height=100)


def test_resolve_horizontal():
    assert resolve_horizontal(20, 100, HorizontalAnchorType.CENTER, 99) == 40
    assert resolve_horizontal(20, 100, HorizontalAnchorType.LEFT, 10) == 10
    assert resolve_horizontal(20, 100, HorizontalAnchorType.RIGHT, 10) == 70


def test_resolve_vertical_wall_anchors():
    furniture = Furniture()
    assert resolve_vertical(20, WALL, AnchorType.CENTER, 0, furniture) == 40
    assert resolve_vertical(20, WALL, AnchorType.CEILING, 15, furniture) == 15
    # Floor: value is the gap under the box
    assert resolve_vertical(20, WALL, AnchorType.FLOOR, 10, furniture) == 70


def test_resolve_vertical_above_furniture():
    furniture = Furniture(height=30, vertical_anchor=FurnitureVerticalAnchor.ABOVE_FURNITURE)
    # Furniture top at 70, 5 gap, 20 box
    assert resolve_vertical(20, WALL, AnchorType.FURNITURE, 5, furniture) == 45


def test_resolve_vertical_furniture_center_and_ceiling():
    centered = Furniture(height=30, vertical_anchor=FurnitureVerticalAnchor.CENTER)
    assert resolve_vertical(20, WALL, AnchorType.FURNITURE, 5, centered) == 25

    from_ceiling = Furniture(height=30, vertical_anchor=FurnitureVerticalAnchor.CEILING)
    assert resolve_vertical(20, WALL, AnchorType.FURNITURE, 5, from_ceiling) == 5


def test_furniture_rect_anchors():
    wall = Wall(width=120, height=96)
    centered = furniture_rect(Furniture(width=48, height=30, offset=7), wall)
    assert (centered.x, centered.y, centered.width, centered.height) == (36, 66, 48, 30)

    left = furniture_rect(Furniture(width=48, anchor=FurnitureAnchor.LEFT, offset=10), wall)
    assert left.x == 10

    right = furniture_rect(Furniture(width=48, anchor=FurnitureAnchor.RIGHT, offset=10), wall)
    assert right.x == 62


def test_align_to_furniture():
    furniture = Rect(x=36, y=66, width=48, height=30)
    assert align_to_furniture(20, furniture, FrameFurnitureAlignment.LEFT) == 36
    assert align_to_furniture(20, furniture, FrameFurnitureAlignment.RIGHT) == 64
    assert align_to_furniture(20, furniture, FrameFurnitureAlignment.CENTER) == 50
    assert align_to_furniture(20, furniture, FrameFurnitureAlignment.SPAN) == 50


def test_horizontal_placement_spans_furniture(make_state):
    state = make_state(
        anchor_type=AnchorType.FURNITURE,
        frame_furniture_align=FrameFurnitureAlignment.SPAN,
        h_distribution=Distribution.SPACE_BETWEEN,
    )
    furniture = furniture_rect(state.furniture, state.wall)
    start, gap = horizontal_placement([10, 10], state.row_defaults, state, furniture)
    assert start == pytest.approx(36)
    assert gap == pytest.approx(28)


def test_horizontal_placement_fixed_span_centers_group(make_state):
    state = make_state(
        anchor_type=AnchorType.FURNITURE,
        frame_furniture_align=FrameFurnitureAlignment.SPAN,
        h_distribution=Distribution.FIXED,
    )
    furniture = furniture_rect(state.furniture, state.wall)
    start, gap = horizontal_placement([10, 10], state.row_defaults, state, furniture)
    # Group of 24 centered on furniture center 60
    assert gap == 4
    assert start == pytest.approx(48)
