"""Geometry helpers for anchoring arrows on node borders.

Everything here is a pure function of its arguments so the renderer and the
interaction controller can call it on every frame.
"""

from __future__ import annotations

import math

from .constants import ARROW_HEAD_ANGLE_DEGREES, ARROW_HEAD_LENGTH
from .types import ArrowPath, Node, Point, Segment


def node_center(node: Node) -> Point:
    return Point(node.x + node.width / 2, node.y + node.height / 2)


def contains_point(node: Node, x: float, y: float) -> bool:
    """Return True if (x, y) lies inside the node's closed rectangle."""
    return node.x <= x <= node.x + node.width and node.y <= y <= node.y + node.height


def compute_border_point(node: Node, target_x: float, target_y: float) -> Point:
    """Return where the ray from the node center toward a target leaves the node.

    The ray leaves through a vertical edge when its slope ``|dx/dy|`` is
    steeper than the rectangle's aspect ratio ``width / height``, otherwise
    through a horizontal edge. The other coordinate follows from similar
    triangles.

    A target exactly on the center has no direction; the right-edge midpoint
    is returned in that case.
    """
    center = node_center(node)
    half_width = node.width / 2
    half_height = node.height / 2
    dx = target_x - center.x
    dy = target_y - center.y

    if dx == 0 and dy == 0:
        return Point(center.x + half_width, center.y)
    if dy == 0:
        return Point(center.x + math.copysign(half_width, dx), center.y)
    if dx == 0:
        return Point(center.x, center.y + math.copysign(half_height, dy))

    aspect_ratio = node.width / node.height
    if abs(dx / dy) > aspect_ratio:
        scale = half_width / abs(dx)
    else:
        scale = half_height / abs(dy)
    return Point(center.x + dx * scale, center.y + dy * scale)


def compute_arrow_path(x1: float, y1: float, x2: float, y2: float) -> ArrowPath:
    """Return the shaft and both head strokes of an arrow pointing at (x2, y2).

    Head strokes have a fixed length regardless of the shaft length.
    """
    tip = Point(x2, y2)
    angle = math.atan2(y2 - y1, x2 - x1)
    spread = math.radians(ARROW_HEAD_ANGLE_DEGREES)

    left_angle = angle - spread
    right_angle = angle + spread
    head_left = Point(
        x2 - ARROW_HEAD_LENGTH * math.cos(left_angle),
        y2 - ARROW_HEAD_LENGTH * math.sin(left_angle),
    )
    head_right = Point(
        x2 - ARROW_HEAD_LENGTH * math.cos(right_angle),
        y2 - ARROW_HEAD_LENGTH * math.sin(right_angle),
    )
    return ArrowPath(
        shaft=Segment(Point(x1, y1), tip),
        head_left=Segment(tip, head_left),
        head_right=Segment(tip, head_right),
    )
