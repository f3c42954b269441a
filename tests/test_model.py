import logging

import pytest

from shapes import Circle, Rectangle
from utils.geometry import Point


def test_append_returns_index(store, circle, rect):
    assert store.append(circle) == 0
    assert store.append(rect) == 1
    assert len(store) == 2
    assert store.shapes() == (circle, rect)


def test_hit_test_returns_topmost(store):
    store.append(Rectangle(100, 100, 100, 100))
    store.append(Circle(120, 120, 30))
    assert store.hit_test(Point(120, 120)) == 1
    assert store.hit_test(Point(60, 60)) == 0
    assert store.hit_test(Point(500, 500)) is None


def test_hit_test_empty_store(store):
    assert store.hit_test(Point(0, 0)) is None


def test_raise_to_top(store):
    a, b, c = Circle(0, 0, 10), Circle(50, 0, 10), Circle(100, 0, 10)
    for s in (a, b, c):
        store.append(s)
    assert store.raise_to_top(0) == 2
    assert store.shapes() == (b, c, a)
    # Raising the top shape leaves the order alone
    assert store.raise_to_top(2) == 2
    assert store.shapes() == (b, c, a)


def test_replace_and_remove(store, circle, rect):
    store.append(circle)
    store.append(rect)
    store.replace(0, circle.moved_by(Point(1, 1)))
    assert store[0].center == Point(201, 201)
    assert store.remove(0) == circle.moved_by(Point(1, 1))
    assert store.shapes() == (rect,)


def test_bad_indices_raise(store, circle):
    store.append(circle)
    with pytest.raises(IndexError):
        store.replace(3, circle)
    with pytest.raises(IndexError):
        store.remove(-1)
    with pytest.raises(IndexError):
        store.raise_to_top(1)


def test_get_is_lenient(store, circle):
    store.append(circle)
    assert store.get(0) is circle
    assert store.get(None) is None
    assert store.get(1) is None
    assert store.get(-1) is None


def test_iteration_is_over_a_snapshot(store, circle, rect):
    store.append(circle)
    store.append(rect)
    seen = []
    for shape in store:
        seen.append(shape)
        store.clear()
    assert seen == [circle, rect]


def test_observers(store, circle):
    calls = []
    store.add_observer(lambda: calls.append('changed'))
    store.append(circle)
    store.replace(0, circle)  # unchanged value, no notification
    store.replace(0, circle.moved_by(Point(1, 0)))
    store.clear()
    assert calls == ['changed'] * 3


def test_failing_observer_is_logged_not_raised(store, circle, caplog):
    def boom():
        raise RuntimeError("boom")
    seen = []
    store.add_observer(boom)
    store.add_observer(lambda: seen.append(1))
    with caplog.at_level(logging.ERROR):
        store.append(circle)
    assert seen == [1]
    assert "Error calling model observer" in caplog.text
