# diagnostics.py

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Tuple

import pandas as pd

from constants import OUTLINE_HALF, OUTLINE_WIDTH
from shapes.base_shape import Shape, display_name

log = logging.getLogger(__name__)

FRAME_COLUMNS = ['action', 'kind', 'x', 'y', 'radius', 'width', 'height', 'fill_color', 'stroke_color']


@dataclass(frozen=True)
class DiagnosticRecord:
    action: str
    kind: str
    position: Tuple[float, float]
    dimensions: Dict[str, float] = field(default_factory=dict)
    fill_color: str = ''
    stroke_color: str = ''

    @classmethod
    def from_shape(cls, action: str, shape: Shape) -> "DiagnosticRecord":
        """
        Describes a shape the way it looks on screen, outline included:
        circles report their center and outer radius, rectangles their outer
        top-left corner and outer size.
        """
        if shape.kind == 'circle':
            position = (shape.x, shape.y)
            dimensions = {'radius': shape.radius + OUTLINE_HALF}
        else:
            position = (shape.x - shape.width / 2 - OUTLINE_HALF,
                        shape.y - shape.height / 2 - OUTLINE_HALF)
            dimensions = {'width': shape.width + OUTLINE_WIDTH,
                          'height': shape.height + OUTLINE_WIDTH}
        return cls(action, display_name(shape), position, dimensions,
                   shape.fill_color, shape.stroke_color)

    def as_row(self) -> Dict[str, object]:
        row = {
            'action': self.action,
            'kind': self.kind,
            'x': self.position[0],
            'y': self.position[1],
            'radius': None,
            'width': None,
            'height': None,
            'fill_color': self.fill_color,
            'stroke_color': self.stroke_color,
        }
        row.update(self.dimensions)
        return row

    def __str__(self) -> str:
        dims = ' '.join(f"{k}: {v:.0f}" for k, v in self.dimensions.items())
        return (f"{self.action} {self.kind} position: ({self.position[0]:.0f}, {self.position[1]:.0f}) "
                f"{dims} color: {self.fill_color} border_color: {self.stroke_color}")


class DiagnosticLog:
    """Collects shape records emitted on create/paste/move/resize. Observability only."""

    def __init__(self):
        self.records: List[DiagnosticRecord] = []
        self._listeners: List[Callable[[DiagnosticRecord], None]] = []

    def emit(self, action: str, shape: Shape) -> DiagnosticRecord:
        record = DiagnosticRecord.from_shape(action, shape)
        self.records.append(record)
        log.info("%s", record)
        for cb in list(self._listeners):
            try: cb(record)
            except Exception:
                log.exception("Error calling diagnostics listener %r", cb)
        return record

    def add_listener(self, fn: Callable[[DiagnosticRecord], None]):
        if callable(fn): self._listeners.append(fn)

    def clear(self):
        self.records = []

    def to_frame(self) -> pd.DataFrame:
        """All records so far as a DataFrame, one row per record."""
        return pd.DataFrame([r.as_row() for r in self.records], columns=FRAME_COLUMNS)
