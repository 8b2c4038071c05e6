from gallery.core.collision import has_collision
from gallery.core.resolver import align_free_position, generate_candidates, resolve_collision
from gallery.models import SnapConfig, Wall, distance


def test_resolver_picks_nearest_free_candidate(placed):
    a = placed("a", 40, 40)
    b = placed("b", 63, 40)
    dragged = placed("c", 0, 0)
    frames = [a, b, dragged]
    config = SnapConfig()

    result = resolve_collision(dragged, 52, 45, frames, config)

    # Straight below both neighbours, keeping the desired x
    assert (result.x, result.y) == (52, 63)
    assert result.snap_lines_y == [60]
    assert not has_collision(dragged, result.x, result.y, frames, config.gap)


def test_resolver_result_is_minimal(placed):
    a = placed("a", 40, 40)
    b = placed("b", 63, 40)
    dragged = placed("c", 0, 0)
    frames = [a, b, dragged]
    config = SnapConfig()
    wall = config.wall

    result = resolve_collision(dragged, 52, 45, frames, config)
    best = distance(result.x, result.y, 52, 45)
    for c in generate_candidates(dragged, 52, 45, 52, 45, frames, wall, config.gap):
        if c.x < 0 or c.y < 0 or c.x + 20 > wall.width or c.y + 20 > wall.height:
            continue
        if has_collision(dragged, c.x, c.y, frames, config.gap):
            continue
        assert distance(c.x, c.y, 52, 45) >= best - 1e-9


def test_resolver_keeps_prior_position_when_wall_is_full(placed):
    wall = Wall(width=20, height=20)
    blocker = placed("a", 0, 0, 20, 20)
    dragged = placed("b", 3, 4, 10, 10)
    result = resolve_collision(dragged, 5, 5, [blocker, dragged], SnapConfig(wall=wall))
    assert (result.x, result.y) == (3, 4)
    assert result.snap_lines_x == []
    assert result.snap_lines_y == []


def test_free_position_aligns_to_wall_center(placed):
    dragged = placed("a", 0, 0)
    result = resolve_collision(dragged, 49, 30, [dragged], SnapConfig())
    assert (result.x, result.y) == (50, 30)
    assert result.snap_lines_x == [60]


def test_free_position_aligns_to_neighbour_edges(placed):
    other = placed("a", 30, 10)
    dragged = placed("b", 0, 0)
    # Left edges 5 apart, far enough below to stay clear
    result = align_free_position(dragged, 35, 50, [other, dragged], SnapConfig())
    assert result.x == 30
    assert 30 in result.snap_lines_x


def test_wall_candidates_are_on_wall(placed):
    dragged = placed("a", 0, 0)
    config = SnapConfig()
    candidates = list(generate_candidates(dragged, 200, -30, 200, -30, [dragged], config.wall, config.gap))
    assert len(candidates) == 8
    for c in candidates:
        assert 0 <= c.x <= 100
        assert 0 <= c.y <= 76
