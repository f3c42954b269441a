# viewport.py

import logging
from typing import Callable, List, Tuple

from constants import MIN_SCALE, MAX_SCALE, ZOOM_INTENSITY
from utils.geometry import Point, clamp

log = logging.getLogger(__name__)


class ViewportTransform:
    """
    Maps world coordinates to screen pixels and back.
    screen = world * scale + offset, with scale kept inside [MIN_SCALE, MAX_SCALE]
    so the mapping is always invertible.
    """

    def __init__(self, scale: float = 1.0, offset: Point = Point(0, 0)):
        self.scale = clamp(scale, MIN_SCALE, MAX_SCALE)
        self.offset = offset
        self._observers: List[Callable] = []

    def to_screen(self, p: Point) -> Point:
        return p * self.scale + self.offset

    def to_world(self, p: Point) -> Point:
        return (p - self.offset) / self.scale

    def pan(self, delta_screen: Point):
        self.offset = self.offset + delta_screen
        self.notify_observers()

    def zoom(self, anchor_screen: Point, factor: float):
        """Zooms by `factor` keeping the world point under `anchor_screen` fixed on screen."""
        anchor_world = self.to_world(anchor_screen)
        new_scale = clamp(self.scale * factor, MIN_SCALE, MAX_SCALE)
        self.offset = anchor_screen - anchor_world * new_scale
        self.scale = new_scale
        log.debug("Viewport zoom: scale=%.4f offset=(%.2f, %.2f)", self.scale, self.offset.x, self.offset.y)
        self.notify_observers()

    @staticmethod
    def zoom_factor_for_wheel(delta_y: float) -> float:
        # Scrolling down (positive delta) zooms out
        return 1 - delta_y * ZOOM_INTENSITY

    def reset(self):
        self.scale = 1.0
        self.offset = Point(0, 0)
        self.notify_observers()

    def visible_world_bounds(self, width: float, height: float) -> Tuple[float, float, float, float]:
        """Returns (left, top, right, bottom) of the world area shown in a width x height view."""
        top_left = self.to_world(Point(0, 0))
        bottom_right = self.to_world(Point(width, height))
        return top_left.x, top_left.y, bottom_right.x, bottom_right.y

    def add_observer(self, fn):
        if callable(fn): self._observers.append(fn)

    def notify_observers(self):
        for cb in list(self._observers):
            try: cb()
            except Exception:
                log.exception("Error calling viewport observer %r", cb)
