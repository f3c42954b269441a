# shapes/base_shape.py

from typing import Union

from constants import (SHAPE_TYPES, DEFAULT_RADIUS, DEFAULT_RECT_SIZE, DEFAULT_SQUARE_SIZE,
                       DEFAULT_FILL, DEFAULT_STROKE)
from utils.errors import UnknownToolError
from utils.geometry import Point

from shapes.circle import Circle
from shapes.rectangle import Rectangle

# Shapes are a closed tagged union: dispatch on `shape.kind`, never on a class hierarchy.
# A square is a Rectangle with equal sides, it carries no tag of its own.
Shape = Union[Circle, Rectangle]


def make_shape(tool: str, center: Point, fill_color: str = DEFAULT_FILL,
               stroke_color: str = DEFAULT_STROKE) -> Shape:
    """Factory used by the placement tools. Builds the tool's shape at its default size."""
    tool = (tool or '').lower()
    if tool == 'circle':
        return Circle(center.x, center.y, DEFAULT_RADIUS, fill_color, stroke_color)
    if tool == 'rectangle':
        width, height = DEFAULT_RECT_SIZE
        return Rectangle(center.x, center.y, width, height, fill_color, stroke_color)
    if tool == 'square':
        return Rectangle(center.x, center.y, DEFAULT_SQUARE_SIZE, DEFAULT_SQUARE_SIZE, fill_color, stroke_color)
    raise UnknownToolError(f"Unknown shape tool: {tool!r} (expected one of {SHAPE_TYPES})")


def display_name(shape: Shape) -> str:
    """Human name used by diagnostics: Circle, Square or Rect."""
    if shape.kind == 'circle':
        return 'Circle'
    return 'Square' if shape.is_square else 'Rect'
