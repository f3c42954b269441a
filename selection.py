# selection.py

import logging
from typing import Callable, List, Optional

from constants import DARKEN_AMOUNT
from model import ShapeStore
from utils.colors import darken_color, normalize_color

log = logging.getLogger(__name__)


class SelectionController:
    """
    Tracks the single selected shape and the color panel that goes with it.

    The panel is shown whenever something is selected, hidden while the
    selection is being dragged or resized, and offers a preview fill that is
    drawn for the selected shape without being written to the store.
    """

    def __init__(self, model: ShapeStore):
        self.model = model
        self.index: Optional[int] = None
        self.panel_visible = False
        self.preview_fill: Optional[str] = None
        self._listeners: List[Callable[[Optional[int], bool], None]] = []

    @property
    def shape(self):
        return self.model.get(self.index)

    def select(self, index: Optional[int]):
        if index is not None and self.model.get(index) is None:
            log.debug("SelectionController.select: index %s out of range, clearing", index)
            index = None
        self.index = index
        if index is None:
            self.panel_visible = False
            self.preview_fill = None
        else:
            self.panel_visible = True
            self.preview_fill = self.model[index].fill_color
        self._notify()

    def clear(self):
        self.select(None)

    def suspend_panel(self):
        if self.panel_visible:
            self.panel_visible = False
            self._notify()

    def restore_panel(self):
        shape = self.shape
        if shape is None:
            return
        self.panel_visible = True
        self.preview_fill = shape.fill_color
        self._notify()

    def set_preview(self, fill: str):
        if self.index is None:
            return
        self.preview_fill = normalize_color(fill)
        self._notify()

    def preview_colors(self):
        """(fill, stroke) to render for the selected shape, or None when no preview applies."""
        if not self.panel_visible or self.preview_fill is None or self.shape is None:
            return None
        return self.preview_fill, darken_color(self.preview_fill, DARKEN_AMOUNT)

    def add_listener(self, fn: Callable[[Optional[int], bool], None]):
        if callable(fn): self._listeners.append(fn)

    def _notify(self):
        for cb in list(self._listeners):
            try: cb(self.index, self.panel_visible)
            except Exception:
                log.exception("Error calling selection listener %r", cb)
