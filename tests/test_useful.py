import pytest

from disarray.useful import circles_collide, line


def test_overlapping_circles_collide():
    assert circles_collide(0, 0, 5, 3, 4, 1) is True


def test_touching_circles_do_not_collide():
    assert circles_collide(0, 0, 2, 3, 4, 3) is False


def test_far_circles_do_not_collide():
    assert circles_collide(0, 0, 1, 100, 100, 1) is False


def test_collision_is_symmetric():
    assert circles_collide(1, 2, 3, 4, 5, 2) == circles_collide(4, 5, 2, 1, 2, 3)


def test_horizontal_line():
    assert line(0, 0, 4, 0, 1) == [(x, 0) for x in range(4)]


def test_vertical_line_is_steep():
    assert line(0, 0, 0, 4, 1) == [(0, y) for y in range(4)]


def test_reversed_endpoints_give_same_cells():
    assert line(4, 0, 0, 0, 1) == line(0, 0, 4, 0, 1)


def test_degenerate_line_is_empty():
    assert line(3, 3, 3, 3, 1) == []


def test_grid_width_scales_cells():
    assert line(0, 0, 40, 0, 10) == line(0, 0, 4, 0, 1)


def test_cells_step_by_at_most_one():
    cells = line(0, 0, 17, 6, 1)
    assert len(cells) == 17
    assert cells[0] == (0, 0)
    for (ax, ay), (bx, by) in zip(cells, cells[1:]):
        assert bx - ax == 1
        assert by - ay in (0, 1)


def test_non_positive_grid_raises():
    with pytest.raises(ValueError):
        line(0, 0, 5, 5, 0)