import pytest

from utils.colors import darken_color, normalize_color
from utils.errors import InvalidColorError, SnapCanvasError
from utils.geometry import Point, best_snap, clamp, sign, snap_offset


@pytest.mark.parametrize("coord, expected", [
    (0, 0),
    (3, -3),
    (7, -7),
    (8, 0),
    (50, 0),
    (92, 0),
    (93, 7),
    (97, 3),
    (103, -3),
    (-3, 3),
    (-98, -2),
    (1007, -7),
    (2.5, -2.5),
])
def test_snap_offset_examples(coord, expected):
    assert snap_offset(coord) == pytest.approx(expected)


def test_snap_offset_range_property():
    for v in range(-350, 351):
        d = snap_offset(v)
        distance = min(v % 100, 100 - v % 100)
        if distance <= 7:
            # Snapping lands exactly on a grid line
            assert (v + d) % 100 == 0
            assert abs(d) <= 7
        else:
            assert d == 0


def test_best_snap_picks_smallest_magnitude():
    assert best_snap(105, 197) == 3
    assert best_snap(197, 105) == 3
    assert best_snap(106, 202) == -2


def test_best_snap_first_seen_wins_ties():
    assert best_snap(97, 3) == 3
    assert best_snap(3, 97) == -3


def test_best_snap_zero_when_nothing_catches():
    assert best_snap(50, 60) == 0
    assert best_snap() == 0


def test_best_snap_ignores_edges_already_on_grid():
    # An edge sitting exactly on a line contributes nothing, the other edge may still snap
    assert best_snap(200, 296) == 4


def test_point_arithmetic():
    p = Point(3, 4)
    assert p + Point(1, 1) == Point(4, 5)
    assert p - Point(1, 1) == Point(2, 3)
    assert p * 2 == Point(6, 8)
    assert p / 2 == Point(1.5, 2)
    assert p.as_tuple() == (3, 4)


def test_clamp_and_sign():
    assert clamp(20, 0.1, 10) == 10
    assert clamp(0.01, 0.1, 10) == 0.1
    assert clamp(2, 0.1, 10) == 2
    assert sign(-4) == -1
    assert sign(0) == 0
    assert sign(0.5) == 1


def test_darken_color_scales_and_floors_channels():
    assert darken_color('#ff8000', 0.2) == '#cc6600'
    assert darken_color('#e0e0e0', 0.2) == '#b3b3b3'
    assert darken_color('#000000', 0.2) == '#000000'
    assert darken_color('#ffffff', 0) == '#ffffff'


def test_normalize_color_accepts_pillow_formats():
    assert normalize_color('#FFF') == '#ffffff'
    assert normalize_color('red') == '#ff0000'
    assert normalize_color('#00FF00') == '#00ff00'


def test_invalid_color_raises_typed_error():
    with pytest.raises(InvalidColorError):
        darken_color('not-a-color', 0.2)
    with pytest.raises(ValueError):
        normalize_color('#12')
    assert issubclass(InvalidColorError, SnapCanvasError)
