from dataclasses import dataclass, field, replace
from typing import Dict, Optional, Tuple

from PIL import ImageDraw

from constants import MIN_SIDE, OUTLINE_WIDTH, OUTLINE_HALF, DEFAULT_FILL, DEFAULT_STROKE
from utils.geometry import Point


@dataclass(frozen=True)
class Rectangle:
    x: float
    y: float
    width: float
    height: float
    fill_color: str = DEFAULT_FILL
    stroke_color: str = DEFAULT_STROKE
    kind: str = field(default='rectangle', init=False)

    def __post_init__(self):
        if self.width < MIN_SIDE or self.height < MIN_SIDE:
            raise ValueError(f"Rectangle {self.width}x{self.height} is below the minimum side {MIN_SIDE}")

    @property
    def center(self) -> Point:
        return Point(self.x, self.y)

    @property
    def is_square(self) -> bool:
        return self.width == self.height

    def contains(self, p: Point) -> bool:
        left, top, right, bottom = self.bbox()
        return left <= p.x <= right and top <= p.y <= bottom

    def bbox(self) -> Tuple[float, float, float, float]:
        """(left, top, right, bottom) of the geometry, outline excluded."""
        hw = self.width / 2
        hh = self.height / 2
        return self.x - hw, self.y - hh, self.x + hw, self.y + hh

    def outer_bbox(self, center: Optional[Point] = None) -> Tuple[float, float, float, float]:
        c = center if center is not None else self.center
        hw = self.width / 2 + OUTLINE_HALF
        hh = self.height / 2 + OUTLINE_HALF
        return c.x - hw, c.y - hh, c.x + hw, c.y + hh

    def corners(self) -> Dict[str, Point]:
        left, top, right, bottom = self.bbox()
        return {
            'tl': Point(left, top),
            'tr': Point(right, top),
            'bl': Point(left, bottom),
            'br': Point(right, bottom),
        }

    def moved_to(self, center: Point) -> "Rectangle":
        return replace(self, x=center.x, y=center.y)

    def moved_by(self, delta: Point) -> "Rectangle":
        return replace(self, x=self.x + delta.x, y=self.y + delta.y)

    def with_colors(self, fill_color: str, stroke_color: str) -> "Rectangle":
        return replace(self, fill_color=fill_color, stroke_color=stroke_color)

    def draw_shape(self, viewport, canvas=None, draw: Optional[ImageDraw.ImageDraw] = None,
                   fill: Optional[str] = None, stroke: Optional[str] = None):
        fill = fill or self.fill_color
        stroke = stroke or self.stroke_color
        line_width = max(1, round(OUTLINE_WIDTH * viewport.scale))

        if canvas:
            left, top, right, bottom = self.bbox()
            tl = viewport.to_screen(Point(left, top))
            br = viewport.to_screen(Point(right, bottom))
            canvas.create_rectangle(tl.x, tl.y, br.x, br.y, fill=fill, outline=stroke, width=line_width)
        elif draw:
            left, top, right, bottom = self.outer_bbox()
            tl = viewport.to_screen(Point(left, top))
            br = viewport.to_screen(Point(right, bottom))
            draw.rectangle([tl.x, tl.y, br.x, br.y], fill=fill, outline=stroke, width=line_width)
