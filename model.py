# model.py

import logging
from typing import Callable, Iterator, List, Optional, Tuple

from shapes.base_shape import Shape
from utils.geometry import Point

log = logging.getLogger(__name__)


class ShapeStore:
    """
    Ordered store of every shape on the canvas. List order is z-order: later
    shapes are drawn on top. Shapes are immutable values, so every mutation
    replaces the value at an index.

    An index only identifies a shape until the next reorder or removal.
    """

    def __init__(self):
        self._shapes: List[Shape] = []
        # Observer callbacks
        self._observers: List[Callable] = []

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(list(self._shapes))

    def __getitem__(self, index: int) -> Shape:
        return self._shapes[index]

    def get(self, index: Optional[int]) -> Optional[Shape]:
        if index is None or not (0 <= index < len(self._shapes)):
            return None
        return self._shapes[index]

    def shapes(self) -> Tuple[Shape, ...]:
        return tuple(self._shapes)

    def append(self, shape: Shape) -> int:
        """Adds a shape on top of the stack and returns its index."""
        self._shapes.append(shape)
        index = len(self._shapes) - 1
        log.debug("ShapeStore.append: %s at index %d", shape.kind, index)
        self.notify_observers()
        return index

    def replace(self, index: int, shape: Shape):
        self._check_index(index)
        if self._shapes[index] == shape:
            return
        self._shapes[index] = shape
        self.notify_observers()

    def remove(self, index: int) -> Shape:
        self._check_index(index)
        shape = self._shapes.pop(index)
        log.debug("ShapeStore.remove: %s at index %d", shape.kind, index)
        self.notify_observers()
        return shape

    def raise_to_top(self, index: int) -> int:
        """Moves the shape at `index` to the top of the z-order and returns its new index."""
        self._check_index(index)
        top = len(self._shapes) - 1
        if index != top:
            self._shapes.append(self._shapes.pop(index))
            self.notify_observers()
        return top

    def clear(self):
        self._shapes = []
        self.notify_observers()

    def hit_test(self, p: Point) -> Optional[int]:
        """Index of the topmost shape containing world point `p`, or None."""
        for index in range(len(self._shapes) - 1, -1, -1):
            if self._shapes[index].contains(p):
                return index
        return None

    def _check_index(self, index: int):
        if not (0 <= index < len(self._shapes)):
            raise IndexError(f"Shape index {index} out of range (store holds {len(self._shapes)})")

    def add_observer(self, fn):
        if callable(fn): self._observers.append(fn)

    def notify_observers(self):
        for cb in list(self._observers):
            try: cb()
            except Exception:
                log.exception("Error calling model observer %r", cb)
