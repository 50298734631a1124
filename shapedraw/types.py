"""Data types for ShapeDraw diagrams.

This module contains the core data structures shared by the store, the
interaction controller and the renderer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class NodeProperty(Enum):
    """Node properties that may be edited from outside the canvas."""

    X = "x"
    Y = "y"
    WIDTH = "width"
    HEIGHT = "height"
    FILL_COLOR = "fillColor"
    STROKE_COLOR = "strokeColor"
    STROKE_WIDTH = "strokeWidth"

    @property
    def attribute(self) -> str:
        """Name of the matching ``Node`` attribute."""
        return _PROPERTY_ATTRIBUTES[self]

    @property
    def is_color(self) -> bool:
        return self in (NodeProperty.FILL_COLOR, NodeProperty.STROKE_COLOR)


_PROPERTY_ATTRIBUTES = {
    NodeProperty.X: "x",
    NodeProperty.Y: "y",
    NodeProperty.WIDTH: "width",
    NodeProperty.HEIGHT: "height",
    NodeProperty.FILL_COLOR: "fill_color",
    NodeProperty.STROKE_COLOR: "stroke_color",
    NodeProperty.STROKE_WIDTH: "stroke_width",
}


@dataclass
class Node:
    """A rectangular shape displayed on the canvas."""

    id: str
    x: float
    y: float
    width: float = 120.0
    height: float = 60.0
    fill_color: str = "#4a9eff"
    stroke_color: str = "#1b2028"
    stroke_width: float = 2.0


@dataclass(frozen=True)
class Connection:
    """A directed connection between two nodes, referenced by id."""

    id: str
    from_id: str
    to_id: str


@dataclass(frozen=True)
class Point:
    """A position in canvas coordinates."""

    x: float
    y: float


@dataclass(frozen=True)
class Segment:
    """A straight line between two points."""

    start: Point
    end: Point


@dataclass(frozen=True)
class ArrowPath:
    """Line segments making up a rendered arrow."""

    shaft: Segment
    head_left: Segment
    head_right: Segment


@dataclass(frozen=True)
class ArrowPreview:
    """An in-progress arrow that has not been committed to the store."""

    source_id: str
    start: Point
    end: Point
    hover_target_id: Optional[str] = None


# --- Interaction states -------------------------------------------------------


@dataclass(frozen=True)
class Idle:
    """No gesture in progress."""


@dataclass(frozen=True)
class Dragging:
    """A node follows the pointer, keeping the offset where it was grabbed."""

    node_id: str
    grab_offset: Point


@dataclass(frozen=True)
class ArrowPending:
    """An arrow has been started from a source node and awaits a target."""

    source_id: str


ControllerState = Union[Idle, Dragging, ArrowPending]
