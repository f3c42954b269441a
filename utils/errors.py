# errors.py


class SnapCanvasError(Exception):
    """Base error for the drawing engine."""


class UnknownToolError(SnapCanvasError, ValueError):
    """Raised when a placement tool name is not one of SHAPE_TYPES."""


class InvalidColorError(SnapCanvasError, ValueError):
    """Raised when a color string cannot be parsed."""
