# clipboard.py

import logging
from typing import Optional

from constants import PASTE_OFFSET
from model import ShapeStore
from selection import SelectionController
from shapes.base_shape import Shape
from utils.geometry import Point

log = logging.getLogger(__name__)

_PASTE_STEP = Point(PASTE_OFFSET, PASTE_OFFSET)


class ClipboardController:
    """
    Single-slot clipboard. Each paste lands one step down-right of the slot's
    stored position and then advances the slot, so repeated pastes cascade
    diagonally instead of stacking.
    """

    def __init__(self, model: ShapeStore, selection: SelectionController):
        self.model = model
        self.selection = selection
        self.slot: Optional[Shape] = None

    @property
    def is_empty(self) -> bool:
        return self.slot is None

    def copy(self, index: Optional[int]) -> bool:
        shape = self.model.get(index)
        if shape is None:
            log.debug("ClipboardController.copy: nothing to copy at %s", index)
            return False
        # Shapes are immutable values, holding the reference is a copy
        self.slot = shape
        log.info("Copied %s at (%.0f, %.0f)", shape.kind, shape.x, shape.y)
        return True

    def paste(self) -> Optional[int]:
        if self.slot is None:
            log.debug("ClipboardController.paste: clipboard empty")
            return None
        pasted = self.slot.moved_by(_PASTE_STEP)
        index = self.model.append(pasted)
        self.selection.select(index)
        self.slot = self.slot.moved_by(_PASTE_STEP)
        return index
