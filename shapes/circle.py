from dataclasses import dataclass, field, replace
from typing import Dict, Optional, Tuple

from PIL import ImageDraw

from constants import MIN_RADIUS, OUTLINE_WIDTH, OUTLINE_HALF, DEFAULT_FILL, DEFAULT_STROKE
from utils.geometry import Point


@dataclass(frozen=True)
class Circle:
    x: float
    y: float
    radius: float
    fill_color: str = DEFAULT_FILL
    stroke_color: str = DEFAULT_STROKE
    kind: str = field(default='circle', init=False)

    def __post_init__(self):
        if self.radius < MIN_RADIUS:
            raise ValueError(f"Circle radius {self.radius} is below the minimum {MIN_RADIUS}")

    @property
    def center(self) -> Point:
        return Point(self.x, self.y)

    def contains(self, p: Point) -> bool:
        dx = p.x - self.x
        dy = p.y - self.y
        return dx * dx + dy * dy <= self.radius * self.radius

    def bbox(self) -> Tuple[float, float, float, float]:
        """(left, top, right, bottom) of the bounding square."""
        r = self.radius
        return self.x - r, self.y - r, self.x + r, self.y + r

    def outer_bbox(self, center: Optional[Point] = None) -> Tuple[float, float, float, float]:
        """Bounding square grown by half the outline, optionally evaluated at another center."""
        c = center if center is not None else self.center
        r = self.radius + OUTLINE_HALF
        return c.x - r, c.y - r, c.x + r, c.y + r

    def corners(self) -> Dict[str, Point]:
        left, top, right, bottom = self.bbox()
        return {
            'tl': Point(left, top),
            'tr': Point(right, top),
            'bl': Point(left, bottom),
            'br': Point(right, bottom),
        }

    def moved_to(self, center: Point) -> "Circle":
        return replace(self, x=center.x, y=center.y)

    def moved_by(self, delta: Point) -> "Circle":
        return replace(self, x=self.x + delta.x, y=self.y + delta.y)

    def with_colors(self, fill_color: str, stroke_color: str) -> "Circle":
        return replace(self, fill_color=fill_color, stroke_color=stroke_color)

    def draw_shape(self, viewport, canvas=None, draw: Optional[ImageDraw.ImageDraw] = None,
                   fill: Optional[str] = None, stroke: Optional[str] = None):
        fill = fill or self.fill_color
        stroke = stroke or self.stroke_color
        line_width = max(1, round(OUTLINE_WIDTH * viewport.scale))

        if canvas:
            # Tkinter centers the outline on the oval's path
            left, top, right, bottom = self.bbox()
            tl = viewport.to_screen(Point(left, top))
            br = viewport.to_screen(Point(right, bottom))
            canvas.create_oval(tl.x, tl.y, br.x, br.y, fill=fill, outline=stroke, width=line_width)
        elif draw:
            # PIL draws the outline inward from the box, so pass the outer box
            left, top, right, bottom = self.outer_bbox()
            tl = viewport.to_screen(Point(left, top))
            br = viewport.to_screen(Point(right, bottom))
            draw.ellipse([tl.x, tl.y, br.x, br.y], fill=fill, outline=stroke, width=line_width)
