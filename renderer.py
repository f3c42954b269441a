# renderer.py

import math
from typing import Optional, Tuple

from PIL import Image, ImageDraw

from constants import (GRID_SIZE, GRID_LINE_COLOR, GRID_LINE_WIDTH, HANDLE_SIZE, HANDLE_COLOR,
                       CORNERS, COLOR_PANEL_OFFSET)
from model import ShapeStore
from selection import SelectionController
from utils.geometry import Point
from viewport import ViewportTransform


def color_panel_anchor(shape, viewport: ViewportTransform) -> Tuple[float, float]:
    """Screen position for the color panel's top-left: left of the shape's center, above its top."""
    left, top, right, bottom = shape.bbox()
    center = viewport.to_screen(shape.center)
    screen_top = viewport.to_screen(Point(left, top)).y
    dx, dy = COLOR_PANEL_OFFSET
    return center.x - dx, screen_top - dy


class SceneRenderer:
    """
    Redraw pass. Reads the store, viewport and selection and paints grid,
    shapes and resize handles. Never mutates anything it reads.
    Paints onto a Tk canvas or a PIL ImageDraw, the same way each shape's
    draw_shape does.
    """

    def __init__(self, model: ShapeStore, viewport: ViewportTransform, selection: SelectionController):
        self.model = model
        self.viewport = viewport
        self.selection = selection

    def draw(self, width: float, height: float, canvas=None, draw: Optional[ImageDraw.ImageDraw] = None):
        if canvas:
            canvas.delete("all")
        self._draw_grid(width, height, canvas, draw)

        preview = self.selection.preview_colors()
        for index, shape in enumerate(self.model):
            fill = stroke = None
            if preview and index == self.selection.index:
                fill, stroke = preview
            shape.draw_shape(self.viewport, canvas=canvas, draw=draw, fill=fill, stroke=stroke)

        selected = self.selection.shape
        if selected is not None:
            self._draw_handles(selected, canvas, draw)

    def render_image(self, width: int, height: int, background: str = '#ffffff') -> Image.Image:
        """Headless snapshot of the scene."""
        image = Image.new('RGB', (width, height), background)
        self.draw(width, height, draw=ImageDraw.Draw(image))
        return image

    def _draw_grid(self, width, height, canvas, draw):
        left, top, right, bottom = self.viewport.visible_world_bounds(width, height)
        line_width = max(1, round(GRID_LINE_WIDTH))

        x = math.floor(left / GRID_SIZE) * GRID_SIZE
        while x < right:
            sx = self.viewport.to_screen(Point(x, 0)).x
            if canvas:
                canvas.create_line(sx, 0, sx, height, fill=GRID_LINE_COLOR, width=GRID_LINE_WIDTH, tags="grid")
            elif draw:
                draw.line([(sx, 0), (sx, height)], fill=GRID_LINE_COLOR, width=line_width)
            x += GRID_SIZE

        y = math.floor(top / GRID_SIZE) * GRID_SIZE
        while y < bottom:
            sy = self.viewport.to_screen(Point(0, y)).y
            if canvas:
                canvas.create_line(0, sy, width, sy, fill=GRID_LINE_COLOR, width=GRID_LINE_WIDTH, tags="grid")
            elif draw:
                draw.line([(0, sy), (width, sy)], fill=GRID_LINE_COLOR, width=line_width)
            y += GRID_SIZE

    def _draw_handles(self, shape, canvas, draw):
        # Handles keep a fixed pixel size whatever the zoom
        half = HANDLE_SIZE / 2
        corners = shape.corners()
        for corner in CORNERS:
            h = self.viewport.to_screen(corners[corner])
            box = (h.x - half, h.y - half, h.x + half, h.y + half)
            if canvas:
                canvas.create_rectangle(*box, fill=HANDLE_COLOR, outline='', tags=("handle", corner))
            elif draw:
                draw.rectangle(box, fill=HANDLE_COLOR)
