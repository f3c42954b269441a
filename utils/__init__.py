# utils/__init__.py

# Import key utility classes/functions you want to expose
from .geometry import Point, clamp, sign, snap_offset, best_snap
from .colors import darken_color, normalize_color
from .errors import SnapCanvasError, UnknownToolError, InvalidColorError
from .log import setup_logging

# __all__ = ['Point', 'snap_offset', 'best_snap', 'darken_color', 'setup_logging']
