from clipboard import ClipboardController
from shapes import Circle, Rectangle
from utils.geometry import Point


def test_paste_cascades_from_copied_shape(app):
    app.model.append(Rectangle(500, 500, 92, 92))
    app.selection.select(0)
    assert app.copy_selected()

    first = app.paste()
    second = app.paste()

    assert app.model[first].center == Point(540, 540)
    assert app.model[second].center == Point(580, 580)
    assert app.selection.index == second
    assert len(app.model) == 3


def test_keyboard_copy_paste(app):
    app.model.append(Circle(500, 500, 30))
    app.selection.select(0)
    assert app.on_key('c', ctrl=True)
    assert app.on_key('V', ctrl=True)
    assert app.model[1].center == Point(540, 540)
    assert [r.action for r in app.diagnostics.records] == ['paste']


def test_paste_with_empty_clipboard(store, selection):
    clipboard = ClipboardController(store, selection)
    assert clipboard.is_empty
    assert clipboard.paste() is None
    assert len(store) == 0


def test_copy_without_selection(store, selection):
    clipboard = ClipboardController(store, selection)
    assert clipboard.copy(None) is False
    assert clipboard.copy(3) is False
    assert clipboard.is_empty


def test_new_copy_restarts_cascade(store, selection):
    clipboard = ClipboardController(store, selection)
    store.append(Circle(100, 100, 20))
    store.append(Circle(800, 100, 20))
    clipboard.copy(0)
    clipboard.paste()
    clipboard.copy(1)
    index = clipboard.paste()
    assert store[index].center == Point(840, 140)


def test_paste_is_independent_of_source(store, selection):
    clipboard = ClipboardController(store, selection)
    store.append(Circle(100, 100, 20))
    clipboard.copy(0)
    store.replace(0, store[0].with_colors('#ff0000', '#cc0000'))
    index = clipboard.paste()
    assert store[index].fill_color == '#e0e0e0'
