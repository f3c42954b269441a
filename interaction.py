# interaction.py

"""
Pointer interaction state machines.

The controller holds exactly one InteractionMode at a time. Pan, drag and
resize each carry their own payload, so two of them can never be active
together and a stale payload cannot outlive its mode.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from constants import CORNERS, HANDLE_SIZE, MIN_RADIUS, MIN_SIDE, OUTLINE_HALF
from model import ShapeStore
from shapes.base_shape import Shape
from shapes.circle import Circle
from shapes.rectangle import Rectangle
from utils.geometry import Point, best_snap, sign, snap_offset
from viewport import ViewportTransform

log = logging.getLogger(__name__)


# ─── Interaction modes ─────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Panning:
    last_screen: Point


@dataclass(frozen=True)
class Dragging:
    index: int
    grab_offset: Point  # cursor minus shape center, in world units


@dataclass(frozen=True)
class Resizing:
    index: int
    corner: str
    snapshot: Shape
    initial_world: Point


InteractionMode = Union[Idle, Panning, Dragging, Resizing]

IDLE = Idle()


# ─── Handles ───────────────────────────────────────────────────────────────────

def handle_at(shape: Shape, viewport: ViewportTransform, screen: Point) -> Optional[str]:
    """
    Returns the corner whose resize handle contains the screen point, or None.
    Handles are HANDLE_SIZE pixel squares centered on the screen position of
    each corner, tested in tl, tr, bl, br order.
    """
    half = HANDLE_SIZE / 2
    corners = shape.corners()
    for corner in CORNERS:
        h = viewport.to_screen(corners[corner])
        if h.x - half <= screen.x <= h.x + half and h.y - half <= screen.y <= h.y + half:
            return corner
    return None


def opposite_corner(corner: str) -> str:
    vertical = 'b' if corner[0] == 't' else 't'
    horizontal = 'r' if corner[1] == 'l' else 'l'
    return vertical + horizontal


# ─── Drag ──────────────────────────────────────────────────────────────────────

class DragController:
    """Moves one shape with the cursor, snapping its outer box to the grid as a rigid body."""

    def __init__(self, model: ShapeStore):
        self.model = model

    def start(self, index: int, cursor_world: Point) -> Dragging:
        shape = self.model[index]
        grab_offset = cursor_world - shape.center
        # Dragging brings the shape to the front; selection alone does not
        new_index = self.model.raise_to_top(index)
        log.debug("DragController.start: index %d -> %d, grab offset %s", index, new_index, grab_offset)
        return Dragging(new_index, grab_offset)

    def update(self, mode: InteractionMode, cursor_world: Point) -> bool:
        """Moves the dragged shape. Returns False (no-op) when there is nothing to drag."""
        if not isinstance(mode, Dragging):
            return False
        shape = self.model.get(mode.index)
        if shape is None:
            log.debug("DragController.update: stale index %d ignored", mode.index)
            return False

        candidate = cursor_world - mode.grab_offset
        left, top, right, bottom = shape.outer_bbox(candidate)
        delta = Point(best_snap(left, right), best_snap(top, bottom))
        self.model.replace(mode.index, shape.moved_to(candidate + delta))
        return True

    def end(self, mode: InteractionMode) -> Idle:
        return IDLE


# ─── Resize ────────────────────────────────────────────────────────────────────

def resize_rectangle(snapshot: Rectangle, corner: str, delta: Point) -> Rectangle:
    """
    Moves the two edges adjacent to `corner` by `delta`, leaving the opposite
    edges where the snapshot had them. Only the moved edges are snapped.
    """
    left, top, right, bottom = snapshot.bbox()
    if 'l' in corner:
        left += delta.x
    else:
        right += delta.x
    if 't' in corner:
        top += delta.y
    else:
        bottom += delta.y

    outer_left = left - OUTLINE_HALF
    outer_right = right + OUTLINE_HALF
    outer_top = top - OUTLINE_HALF
    outer_bottom = bottom + OUTLINE_HALF

    if 'l' in corner:
        outer_left += snap_offset(outer_left)
    if 'r' in corner:
        outer_right += snap_offset(outer_right)
    if 't' in corner:
        outer_top += snap_offset(outer_top)
    if 'b' in corner:
        outer_bottom += snap_offset(outer_bottom)

    left = outer_left + OUTLINE_HALF
    right = outer_right - OUTLINE_HALF
    top = outer_top + OUTLINE_HALF
    bottom = outer_bottom - OUTLINE_HALF

    # Minimums are applied after snapping
    width = max(MIN_SIDE, right - left)
    height = max(MIN_SIDE, bottom - top)
    return Rectangle(
        (left + right) / 2,
        (top + bottom) / 2,
        width,
        height,
        snapshot.fill_color,
        snapshot.stroke_color,
    )


def circle_from_anchor(anchor: Point, cursor_world: Point):
    """
    Center and radius of the circle spanned between a fixed anchor corner and
    the cursor. The smaller axis delta decides the size so the circle never
    runs ahead of the cursor on one axis while lagging on the other.
    """
    dx = cursor_world.x - anchor.x
    dy = cursor_world.y - anchor.y
    radius = max(MIN_RADIUS, min(abs(dx), abs(dy)) / 2)
    center = Point(anchor.x + sign(dx) * radius, anchor.y + sign(dy) * radius)
    return center, radius


def resize_circle(snapshot: Circle, corner: str, cursor_world: Point) -> Circle:
    anchor = snapshot.corners()[opposite_corner(corner)]
    center, radius = circle_from_anchor(anchor, cursor_world)

    resized = Circle(center.x, center.y, radius, snapshot.fill_color, snapshot.stroke_color)
    # The center always moves, so both edges of each axis are snap candidates
    left, top, right, bottom = resized.outer_bbox()
    return resized.moved_by(Point(best_snap(left, right), best_snap(top, bottom)))


class ResizeController:
    """Resizes one shape from a corner handle, working from a snapshot taken at start."""

    def __init__(self, model: ShapeStore):
        self.model = model

    def start(self, index: int, corner: str, cursor_world: Point) -> Resizing:
        if corner not in CORNERS:
            raise ValueError(f"Unknown corner: {corner!r}")
        snapshot = self.model[index]
        log.debug("ResizeController.start: index %d corner %s", index, corner)
        return Resizing(index, corner, snapshot, cursor_world)

    def update(self, mode: InteractionMode, cursor_world: Point) -> bool:
        if not isinstance(mode, Resizing) or mode.snapshot is None:
            return False
        if self.model.get(mode.index) is None:
            log.debug("ResizeController.update: stale index %d ignored", mode.index)
            return False

        snapshot = mode.snapshot
        if snapshot.kind == 'circle':
            resized = resize_circle(snapshot, mode.corner, cursor_world)
        else:
            resized = resize_rectangle(snapshot, mode.corner, cursor_world - mode.initial_world)
        # Keep any recolor applied since the resize began
        current = self.model[mode.index]
        resized = resized.with_colors(current.fill_color, current.stroke_color)
        self.model.replace(mode.index, resized)
        return True

    def end(self, mode: InteractionMode) -> Idle:
        return IDLE
