import pytest

from shapes import Circle
from utils.errors import InvalidColorError


def test_select_shows_panel_and_seeds_preview(store, selection):
    store.append(Circle(10, 10, 10, fill_color='#123456'))
    selection.select(0)
    assert selection.index == 0
    assert selection.panel_visible
    assert selection.preview_fill == '#123456'
    assert selection.shape == store[0]


def test_select_out_of_range_clears(store, selection):
    store.append(Circle(10, 10, 10))
    selection.select(0)
    selection.select(5)
    assert selection.index is None
    assert selection.panel_visible is False
    assert selection.preview_colors() is None


def test_suspend_and_restore_panel(store, selection):
    store.append(Circle(10, 10, 10))
    selection.select(0)
    selection.set_preview('#00ff00')
    selection.suspend_panel()
    assert selection.panel_visible is False
    assert selection.preview_colors() is None
    selection.restore_panel()
    assert selection.panel_visible
    # Restoring reseeds the preview from the stored fill
    assert selection.preview_fill == '#e0e0e0'


def test_restore_without_selection_keeps_panel_hidden(selection):
    selection.restore_panel()
    assert selection.panel_visible is False


def test_set_preview_requires_selection(selection):
    selection.set_preview('#00ff00')
    assert selection.preview_fill is None


def test_set_preview_rejects_bad_color(store, selection):
    store.append(Circle(10, 10, 10))
    selection.select(0)
    with pytest.raises(InvalidColorError):
        selection.set_preview('#zzzzzz')


def test_listeners(store, selection):
    events = []
    selection.add_listener(lambda index, visible: events.append((index, visible)))
    store.append(Circle(10, 10, 10))
    selection.select(0)
    selection.suspend_panel()
    selection.clear()
    assert events == [(0, True), (0, False), (None, False)]
