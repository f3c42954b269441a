# geometry.py

from dataclasses import dataclass
from typing import Tuple

from constants import GRID_SIZE, SNAP_THRESHOLD


@dataclass(frozen=True)
class Point:
    """A 2D point or vector. Used for both world and screen coordinates."""

    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> "Point":
        return Point(self.x * k, self.y * k)

    def __truediv__(self, k: float) -> "Point":
        return Point(self.x / k, self.y / k)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def sign(value: float) -> int:
    """Returns -1, 0 or 1. Zero stays zero."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def snap_offset(coord: float, grid_size: float = GRID_SIZE, threshold: float = SNAP_THRESHOLD) -> float:
    """
    Returns the offset that moves `coord` onto the nearest grid line, or 0 when
    no grid line is within `threshold`.
    Negative offsets move left/up, positive offsets move right/down.
    """
    # Python's % already returns a non-negative remainder for a positive modulus,
    # the second pass only guards against float rounding landing on grid_size.
    mod = ((coord % grid_size) + grid_size) % grid_size

    if mod <= threshold:
        return -mod
    if grid_size - mod <= threshold:
        return grid_size - mod
    return 0


def best_snap(*edges: float) -> float:
    """
    Computes snap_offset for every edge and returns the non-zero offset with the
    smallest magnitude. The first edge wins ties. Returns 0 if no edge snaps.
    """
    best = 0
    for edge in edges:
        d = snap_offset(edge)
        if d and (best == 0 or abs(d) < abs(best)):
            best = d
    return best
