"""Full-frame renderer for ShapeDraw diagrams."""

from __future__ import annotations

from typing import Optional

from .constants import ARROW_COLOR, ARROW_WIDTH, HOVER_COLOR, HOVER_WIDTH
from .geometry import compute_arrow_path, compute_border_point, node_center
from .model import ShapeStore
from .surface import Surface
from .types import ArrowPreview, Point


def render(surface: Surface, store: ShapeStore, preview: Optional[ArrowPreview] = None) -> None:
    """Redraw the whole scene from the store's current contents.

    Nodes are drawn in insertion order, so later nodes cover earlier ones.
    Connection anchors are recomputed from current node positions on every
    call. A preview outlines the node it would connect to before its arrow
    is drawn.
    """
    surface.clear()
    nodes, connections = store.list()

    for node in nodes:
        surface.fill_rect(node.x, node.y, node.width, node.height, node.fill_color)
        if node.stroke_width > 0:
            surface.stroke_rect(
                node.x, node.y, node.width, node.height, node.stroke_color, node.stroke_width
            )

    for connection in connections:
        source = store.requireNode(connection.from_id)
        target = store.requireNode(connection.to_id)
        source_center = node_center(source)
        target_center = node_center(target)
        start = compute_border_point(source, target_center.x, target_center.y)
        end = compute_border_point(target, source_center.x, source_center.y)
        draw_arrow(surface, start, end)

    if preview is not None:
        hover = store.getNode(preview.hover_target_id) if preview.hover_target_id else None
        if hover is not None:
            surface.stroke_rect(hover.x, hover.y, hover.width, hover.height, HOVER_COLOR, HOVER_WIDTH)
        draw_arrow(surface, preview.start, preview.end)


def draw_arrow(surface: Surface, start: Point, end: Point) -> None:
    path = compute_arrow_path(start.x, start.y, end.x, end.y)
    for segment in (path.shaft, path.head_left, path.head_right):
        surface.move_to(segment.start.x, segment.start.y)
        surface.line_to(segment.end.x, segment.end.y)
    surface.stroke(ARROW_COLOR, ARROW_WIDTH)
