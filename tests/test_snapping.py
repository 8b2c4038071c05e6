import pytest

from gallery.core.snapping import alignment_guides, snap_candidates, snap_position
from gallery.models import (
    Furniture, GuideType, SnapConfig, SnapSettings, Wall,
)


def test_snaps_one_gap_right_of_neighbour(placed):
    other = placed("a", 10, 10)
    dragged = placed("b", 60, 60)
    config = SnapConfig()

    result = snap_position(dragged, 38, 12, [other, dragged], config)

    # 38 is 5 away from other.right + gap = 33
    assert result.x == 33
    assert result.y == 10
    assert result.resolved is False
    assert any(g.type == GuideType.LEFT and g.position == 33 for g in result.guides)
    assert any(g.type == GuideType.TOP and g.position == 10 for g in result.guides)


def test_desired_position_is_clamped_first(placed):
    dragged = placed("a", 10, 10)
    config = SnapConfig(settings=SnapSettings(threshold=0))
    result = snap_position(dragged, -40, 500, [dragged], config)
    assert (result.x, result.y) == (0, 76)


def test_no_snap_outside_threshold(placed):
    dragged = placed("a", 0, 0)
    config = SnapConfig(settings=SnapSettings(threshold=5))
    result = snap_position(dragged, 31, 27, [dragged], config)
    assert (result.x, result.y) == (31, 27)
    assert result.guides == []


def test_snaps_to_wall_center(placed):
    dragged = placed("a", 0, 0)
    result = snap_position(dragged, 45, 30, [dragged], SnapConfig())
    # Center 55 is 5 from the wall center 60
    assert result.x == 50
    assert any(
        g.type == GuideType.CENTER_X and g.position == 60
        for g in result.guides
    )


def test_snaps_above_furniture(placed):
    # Furniture 48x30 centered on 120x96: top at 66, gap plane at 63
    config = SnapConfig(furniture=Furniture(), gap=3)
    dragged = placed("a", 0, 0)
    result = snap_position(dragged, 5, 42, [dragged], config)
    assert result.y == 43
    assert any(g.type == GuideType.BOTTOM and g.position == 63 for g in result.guides)


def test_candidates_sorted_by_distance(placed):
    other = placed("a", 10, 10)
    dragged = placed("b", 60, 60)
    xs, ys = snap_candidates(dragged, 38, 12, [other, dragged], SnapConfig())
    assert [c.distance for c in xs] == sorted(c.distance for c in xs)
    assert xs[0].value == 33
    assert ys[0].distance == pytest.approx(2)


def test_colliding_candidate_is_skipped(placed):
    other = placed("a", 10, 10, 20, 20)
    dragged = placed("b", 80, 80, 20, 20)
    config = SnapConfig()
    xs, _ = snap_candidates(dragged, 24, 15, [other, dragged], config)
    # Nearest x snap (left edge on the neighbour's center) overlaps it
    assert xs[0].value == 20

    result = snap_position(dragged, 24, 15, [other, dragged], config)
    assert result.x == 33
    assert result.y == 10
    assert result.resolved is False


def test_snapped_layout_never_overlaps(placed, overlapping_pairs):
    frames = [
        placed("a", 10, 10),
        placed("b", 50, 10),
        placed("c", 10, 50),
        placed("d", 90, 60),
    ]
    config = SnapConfig()
    for desired in [(30, 12), (45, 45), (70, 30), (15, 35), (100, 5)]:
        dragged = frames[3]
        result = snap_position(dragged, *desired, frames, config)
        moved = frames[:3] + [dragged.moved_to(result.x, result.y)]
        assert overlapping_pairs(moved, config.gap) == []


def test_alignment_guides_wall_edges(placed):
    wall = Wall(width=100, height=100)
    dragged = placed("a", 0, 0, 20, 20)
    guides = alignment_guides(dragged, 0, 80, [dragged], SnapConfig(wall=wall))
    kinds = {(g.type, g.position) for g in guides}
    assert (GuideType.LEFT, 0) in kinds
    assert (GuideType.BOTTOM, 100) in kinds
