"""Constants and defaults for ShapeDraw diagrams."""

from typing import Any, Dict


NODE_ID_PREFIX = "node"
CONNECTION_ID_PREFIX = "connection"


NODE_DEFAULTS: Dict[str, Any] = {
    "x": 60.0,
    "y": 60.0,
    "width": 120.0,
    "height": 60.0,
    "fillColor": "#4a9eff",
    "strokeColor": "#1b2028",
    "strokeWidth": 2.0,
}


# Arrow style is global and independent of the connected nodes.
ARROW_COLOR = "#2d3436"
ARROW_WIDTH = 2.0
ARROW_HEAD_LENGTH = 10.0
ARROW_HEAD_ANGLE_DEGREES = 30.0

# Outline drawn around the node an arrow preview would connect to.
HOVER_COLOR = "#f39c12"
HOVER_WIDTH = 3.0

CANVAS_BACKGROUND = "#f5f6f8"


SMOKE_ENV_VAR = "SHAPEDRAW_SMOKE"
DEBUG_ENV_VAR = "SHAPEDRAW_DEBUG"
