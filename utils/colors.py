# colors.py

import math

from PIL import ImageColor

from utils.errors import InvalidColorError


def _to_rgb(color: str):
    try:
        rgb = ImageColor.getrgb(color)
    except (ValueError, AttributeError) as e:
        raise InvalidColorError(f"Invalid color: {color!r}") from e
    return rgb[:3]


def normalize_color(color: str) -> str:
    """Returns `color` as a lowercase '#rrggbb' string. Accepts anything Pillow can parse."""
    r, g, b = _to_rgb(color)
    return f"#{r:02x}{g:02x}{b:02x}"


def darken_color(color: str, amount: float) -> str:
    """
    Scales each RGB channel by (1 - amount), flooring the result.
    darken_color('#ff8000', 0.2) -> '#cc6600'
    """
    r, g, b = _to_rgb(color)
    factor = 1 - amount
    r, g, b = (max(0, min(255, math.floor(c * factor))) for c in (r, g, b))
    return f"#{r:02x}{g:02x}{b:02x}"
