# controller.py

import logging
from typing import Callable, List, Optional

from constants import SHAPE_TYPES, DARKEN_AMOUNT, BUTTON_LEFT, BUTTON_MIDDLE, BUTTON_RIGHT
from clipboard import ClipboardController
from diagnostics import DiagnosticLog
from interaction import (IDLE, Idle, InteractionMode, Panning, Dragging, Resizing,
                         DragController, ResizeController, handle_at)
from model import ShapeStore
from selection import SelectionController
from shapes.base_shape import make_shape
from utils.colors import darken_color, normalize_color
from utils.errors import UnknownToolError
from utils.geometry import Point
from viewport import ViewportTransform

log = logging.getLogger(__name__)


class DrawingApp:
    """
    Routes pointer, wheel and keyboard events into the engine.

    Every entry point takes screen coordinates, converts them through the
    viewport and hands off to the controller owning the active interaction.
    The view only forwards events here and redraws when notified.
    """

    def __init__(self, model: Optional[ShapeStore] = None, viewport: Optional[ViewportTransform] = None,
                 diagnostics: Optional[DiagnosticLog] = None):
        self.model = model if model is not None else ShapeStore()
        self.viewport = viewport if viewport is not None else ViewportTransform()
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticLog()

        self.selection = SelectionController(self.model)
        self.clipboard = ClipboardController(self.model, self.selection)
        self.drag = DragController(self.model)
        self.resize = ResizeController(self.model)

        # Controller state for interaction
        self.mode: InteractionMode = IDLE
        self.current_tool: Optional[str] = None
        self.delete_mode = False

        self._observers: List[Callable] = []
        self.model.add_observer(self.notify_observers)
        self.viewport.add_observer(self.notify_observers)
        self.selection.add_listener(lambda index, visible: self.notify_observers())

    # --- Tools ---

    def select_tool(self, tool: Optional[str]):
        if tool is not None and tool not in SHAPE_TYPES:
            raise UnknownToolError(f"Unknown shape tool: {tool!r} (expected one of {SHAPE_TYPES})")
        log.debug("DrawingApp.select_tool: %s", tool)
        self.current_tool = tool
        self.delete_mode = False
        self.selection.clear()
        self.notify_observers()

    def set_delete_mode(self, active: bool):
        self.delete_mode = bool(active)
        if self.delete_mode:
            self.current_tool = None
            self.selection.clear()
        log.debug("DrawingApp.set_delete_mode: %s", self.delete_mode)
        self.notify_observers()

    def clear_all(self):
        count = len(self.model)
        self.mode = IDLE
        self.selection.clear()
        self.model.clear()
        log.info("Cleared %d shapes", count)

    def remove_selected(self):
        index = self.selection.index
        if index is None:
            log.debug("DrawingApp.remove_selected: nothing selected")
            return
        self._remove_shape(index)

    def _remove_shape(self, index: int):
        # A removal invalidates any index an interaction still holds
        self.mode = IDLE
        self.selection.clear()
        shape = self.model.remove(index)
        log.info("Deleted %s at (%.0f, %.0f)", shape.kind, shape.x, shape.y)

    # --- Pointer events ---

    def on_pointer_down(self, x: float, y: float, button: int = BUTTON_LEFT):
        if not isinstance(self.mode, Idle):
            # A second button pressed mid-interaction finishes the first one
            self.on_pointer_up()

        screen = Point(x, y)
        world = self.viewport.to_world(screen)
        log.debug("DrawingApp.on_pointer_down: screen (%s, %s) world (%.2f, %.2f) button %s",
                  x, y, world.x, world.y, button)

        if button == BUTTON_MIDDLE:
            self.mode = Panning(screen)
            return

        if button == BUTTON_RIGHT:
            # Secondary button only selects, it never starts a drag
            self.selection.select(self.model.hit_test(world))
            return

        if button != BUTTON_LEFT:
            return

        # 1. Resize handle of the current selection
        selected = self.selection.shape
        if selected is not None and not self.delete_mode:
            corner = handle_at(selected, self.viewport, screen)
            if corner is not None:
                self.mode = self.resize.start(self.selection.index, corner, world)
                self.selection.suspend_panel()
                return

        # 2. A shape: delete it or start dragging it
        index = self.model.hit_test(world)
        if index is not None:
            if self.delete_mode:
                self._remove_shape(index)
                return
            self.mode = self.drag.start(index, world)
            self.selection.select(self.mode.index)
            self.selection.suspend_panel()
            return

        # 3. Background: deselect and pan the view
        self.selection.clear()
        self.mode = Panning(screen)

    def on_pointer_move(self, x: float, y: float):
        mode = self.mode
        screen = Point(x, y)

        if isinstance(mode, Panning):
            self.mode = Panning(screen)
            self.viewport.pan(screen - mode.last_screen)
        elif isinstance(mode, Dragging):
            self.drag.update(mode, self.viewport.to_world(screen))
        elif isinstance(mode, Resizing):
            self.resize.update(mode, self.viewport.to_world(screen))

    def on_pointer_up(self, x: Optional[float] = None, y: Optional[float] = None):
        """Ends any interaction. Also wired to releases outside the canvas."""
        mode = self.mode
        if isinstance(mode, Dragging):
            self.mode = self.drag.end(mode)
            self._finish_manipulation('move', mode.index)
        elif isinstance(mode, Resizing):
            self.mode = self.resize.end(mode)
            self._finish_manipulation('resize', mode.index)
        else:
            self.mode = IDLE

    def _finish_manipulation(self, action: str, index: int):
        shape = self.model.get(index)
        if shape is None:
            return
        self.selection.restore_panel()
        self.diagnostics.emit(action, shape)

    def on_wheel(self, x: float, y: float, delta_y: float, modifier: bool = False):
        if not modifier:
            return
        factor = self.viewport.zoom_factor_for_wheel(delta_y)
        self.viewport.zoom(Point(x, y), factor)

    def on_double_click(self, x: float, y: float) -> Optional[int]:
        if self.current_tool is None:
            return None
        world = self.viewport.to_world(Point(x, y))
        if self.model.hit_test(world) is not None:
            log.debug("DrawingApp.on_double_click: shape under cursor, nothing created")
            return None

        shape = make_shape(self.current_tool, world)
        index = self.model.append(shape)
        self.selection.select(index)
        self.diagnostics.emit('create', shape)
        return index

    # --- Keyboard ---

    def on_key(self, key: str, ctrl: bool = False) -> bool:
        """Handles a key press. Returns True when the key was consumed."""
        key = key.lower() if len(key) == 1 else key
        if ctrl and key == '0':
            self.reset_view()
            return True
        if ctrl and key == 'c':
            self.copy_selected()
            return True
        if ctrl and key == 'v':
            self.paste()
            return True
        if not ctrl and key in ('Delete', 'BackSpace'):
            self.remove_selected()
            return True
        return False

    def reset_view(self):
        self.viewport.reset()

    def copy_selected(self) -> bool:
        return self.clipboard.copy(self.selection.index)

    def paste(self) -> Optional[int]:
        index = self.clipboard.paste()
        if index is not None:
            self.diagnostics.emit('paste', self.model[index])
        return index

    # --- Color panel ---

    def preview_color(self, fill: str):
        self.selection.set_preview(fill)

    def commit_color(self, fill: str):
        index = self.selection.index
        shape = self.model.get(index)
        if shape is None:
            log.debug("DrawingApp.commit_color: nothing selected")
            return
        fill = normalize_color(fill)
        stroke = darken_color(fill, DARKEN_AMOUNT)
        self.model.replace(index, shape.with_colors(fill, stroke))
        self.selection.set_preview(fill)
        log.info("Recolored %s: color %s border_color %s", shape.kind, fill, stroke)

    # --- Observers ---

    def add_observer(self, fn):
        if callable(fn): self._observers.append(fn)

    def notify_observers(self):
        for cb in list(self._observers):
            try: cb()
            except Exception:
                log.exception("Error calling controller observer %r", cb)
