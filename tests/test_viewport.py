import pytest

from utils.geometry import Point
from viewport import ViewportTransform


@pytest.mark.parametrize("scale, offset", [
    (1.0, Point(0, 0)),
    (2.5, Point(-130, 47)),
    (0.1, Point(12.5, -900)),
    (10, Point(3, 3)),
])
def test_screen_world_round_trip(scale, offset):
    vp = ViewportTransform(scale, offset)
    for p in (Point(0, 0), Point(123.4, -56.7), Point(-1000, 2500)):
        back = vp.to_world(vp.to_screen(p))
        assert back.x == pytest.approx(p.x)
        assert back.y == pytest.approx(p.y)


def test_zoom_keeps_anchor_fixed(viewport):
    anchor = Point(400, 300)
    before = viewport.to_world(anchor)
    viewport.zoom(anchor, 2)
    after = viewport.to_screen(before)
    assert viewport.scale == 2
    assert after.x == pytest.approx(400)
    assert after.y == pytest.approx(300)


def test_zoom_anchor_survives_pan_and_repeated_zoom():
    vp = ViewportTransform(1.3, Point(-40, 75))
    anchor = Point(250, 610)
    world = vp.to_world(anchor)
    for factor in (1.2, 0.7, 3.0):
        vp.zoom(anchor, factor)
        s = vp.to_screen(world)
        assert s.x == pytest.approx(anchor.x)
        assert s.y == pytest.approx(anchor.y)


def test_zoom_is_clamped(viewport):
    for _ in range(20):
        viewport.zoom(Point(0, 0), 3)
    assert viewport.scale == 10
    for _ in range(40):
        viewport.zoom(Point(0, 0), 0.5)
    assert viewport.scale == pytest.approx(0.1)


def test_clamped_zoom_still_keeps_anchor():
    vp = ViewportTransform(8)
    anchor = Point(300, 200)
    world = vp.to_world(anchor)
    vp.zoom(anchor, 4)
    assert vp.scale == 10
    s = vp.to_screen(world)
    assert s.x == pytest.approx(300)
    assert s.y == pytest.approx(200)


def test_constructor_clamps_scale():
    assert ViewportTransform(50).scale == 10
    assert ViewportTransform(0).scale == pytest.approx(0.1)


def test_pan_moves_offset(viewport):
    viewport.pan(Point(15, -20))
    viewport.pan(Point(5, 5))
    assert viewport.offset == Point(20, -15)
    assert viewport.to_world(Point(20, -15)) == Point(0, 0)


def test_reset(viewport):
    viewport.zoom(Point(10, 10), 3)
    viewport.pan(Point(100, 100))
    viewport.reset()
    assert viewport.scale == 1.0
    assert viewport.offset == Point(0, 0)


def test_wheel_factor():
    assert ViewportTransform.zoom_factor_for_wheel(100) == pytest.approx(0.85)
    assert ViewportTransform.zoom_factor_for_wheel(-100) == pytest.approx(1.15)
    assert ViewportTransform.zoom_factor_for_wheel(0) == 1


def test_visible_world_bounds():
    vp = ViewportTransform(2, Point(-100, -50))
    assert vp.visible_world_bounds(800, 600) == (50, 25, 450, 325)


def test_observers_notified(viewport):
    calls = []
    viewport.add_observer(lambda: calls.append(1))
    viewport.pan(Point(1, 1))
    viewport.zoom(Point(0, 0), 2)
    viewport.reset()
    assert len(calls) == 3
