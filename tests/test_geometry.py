import pytest

from gallery.models import Rect, Wall, distance, rects_overlap


def test_rects_overlap_touching_edges_without_gap():
    assert rects_overlap(0, 0, 10, 10, 10, 0, 10, 10) is False
    assert rects_overlap(0, 0, 10, 10, 9.5, 0, 10, 10) is True


def test_rects_overlap_gap_buffer():
    # 2 units apart, gap of 3 required
    assert rects_overlap(0, 0, 10, 10, 12, 0, 10, 10, gap=3) is True
    # Exactly one gap apart
    assert rects_overlap(0, 0, 10, 10, 13, 0, 10, 10, gap=3) is False
    # Far apart vertically
    assert rects_overlap(0, 0, 10, 10, 0, 20, 10, 10, gap=3) is False


def test_rects_overlap_is_symmetric():
    a = (5, 5, 10, 20)
    b = (12, 20, 8, 8)
    assert rects_overlap(*a, *b, gap=2) == rects_overlap(*b, *a, gap=2)


def test_rect_edges_and_centers():
    r = Rect(x=10, y=20, width=30, height=40)
    assert r.right == 40
    assert r.bottom == 60
    assert r.center_x == 25
    assert r.center_y == 40


def test_rect_contains():
    wall = Wall(width=100, height=100).as_rect()
    assert wall.contains(Rect(x=0, y=0, width=100, height=100))
    assert wall.contains(Rect(x=10, y=10, width=5, height=5))
    assert not wall.contains(Rect(x=1, y=0, width=100, height=100))
    assert not wall.contains(Rect(x=-1, y=0, width=10, height=10))


def test_distance():
    assert distance(0, 0, 3, 4) == pytest.approx(5)
