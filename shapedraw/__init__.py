"""ShapeDraw diagram editor core built with PySide6.

Nodes are rectangles placed on a canvas; connections are arrows that start and
end on the node borders and follow the nodes while they are dragged.
"""

from .canvas import DiagramCanvas
from .constants import NODE_DEFAULTS
from .controller import InteractionController
from .errors import (
    InvalidPropertyError,
    InvalidValueError,
    NotFoundError,
    SelfConnectionError,
    ShapeStoreError,
)
from .geometry import compute_arrow_path, compute_border_point
from .model import ShapeStore
from .renderer import render
from .surface import QPainterSurface, RecordingSurface, Surface
from .types import (
    ArrowPath,
    ArrowPending,
    ArrowPreview,
    Connection,
    Dragging,
    Idle,
    Node,
    NodeProperty,
    Point,
    Segment,
)
from .ui import create_window, main

__all__ = [
    "ArrowPath",
    "ArrowPending",
    "ArrowPreview",
    "Connection",
    "DiagramCanvas",
    "Dragging",
    "Idle",
    "InteractionController",
    "InvalidPropertyError",
    "InvalidValueError",
    "NODE_DEFAULTS",
    "Node",
    "NodeProperty",
    "NotFoundError",
    "Point",
    "QPainterSurface",
    "RecordingSurface",
    "Segment",
    "SelfConnectionError",
    "ShapeStore",
    "ShapeStoreError",
    "Surface",
    "compute_arrow_path",
    "compute_border_point",
    "create_window",
    "main",
    "render",
]
