"""Drawing surfaces the renderer can target.

The renderer only needs a handful of primitives, described by ``Surface``.
``QPainterSurface`` draws onto any Qt paint device through a ``QPainter``;
``RecordingSurface`` keeps the calls so a frame can be inspected without a
display.
"""

from __future__ import annotations

from typing import List, Protocol, Tuple

from PySide6.QtCore import QRectF, Qt
from PySide6.QtGui import QColor, QPainter, QPainterPath, QPen


class Surface(Protocol):
    """Minimal 2D drawing interface used by ``shapedraw.renderer``."""

    def clear(self) -> None:
        ...

    def fill_rect(self, x: float, y: float, width: float, height: float, color: str) -> None:
        ...

    def stroke_rect(
        self, x: float, y: float, width: float, height: float, color: str, line_width: float
    ) -> None:
        ...

    def move_to(self, x: float, y: float) -> None:
        ...

    def line_to(self, x: float, y: float) -> None:
        ...

    def stroke(self, color: str, line_width: float) -> None:
        ...


class QPainterSurface:
    """Surface backed by an active ``QPainter``."""

    def __init__(self, painter: QPainter, width: float, height: float, background: str):
        self._painter = painter
        self._width = width
        self._height = height
        self._background = background
        self._path = QPainterPath()
        self._painter.setRenderHint(QPainter.RenderHint.Antialiasing)

    def clear(self) -> None:
        self._painter.fillRect(QRectF(0, 0, self._width, self._height), QColor(self._background))
        self._path = QPainterPath()

    def fill_rect(self, x: float, y: float, width: float, height: float, color: str) -> None:
        self._painter.fillRect(QRectF(x, y, width, height), QColor(color))

    def stroke_rect(
        self, x: float, y: float, width: float, height: float, color: str, line_width: float
    ) -> None:
        self._painter.save()
        self._painter.setPen(QPen(QColor(color), line_width))
        self._painter.setBrush(Qt.NoBrush)
        self._painter.drawRect(QRectF(x, y, width, height))
        self._painter.restore()

    def move_to(self, x: float, y: float) -> None:
        self._path.moveTo(x, y)

    def line_to(self, x: float, y: float) -> None:
        self._path.lineTo(x, y)

    def stroke(self, color: str, line_width: float) -> None:
        self._painter.save()
        self._painter.setPen(QPen(QColor(color), line_width))
        self._painter.setBrush(Qt.NoBrush)
        self._painter.drawPath(self._path)
        self._painter.restore()
        self._path = QPainterPath()


DrawCall = Tuple[object, ...]


class RecordingSurface:
    """Surface that records every primitive call as a tuple."""

    def __init__(self) -> None:
        self.calls: List[DrawCall] = []
        self._frames = 0

    @property
    def frames(self) -> int:
        """Number of times the surface has been cleared."""
        return self._frames

    def clear(self) -> None:
        self.calls = [("clear",)]
        self._frames += 1

    def fill_rect(self, x: float, y: float, width: float, height: float, color: str) -> None:
        self.calls.append(("fill_rect", x, y, width, height, color))

    def stroke_rect(
        self, x: float, y: float, width: float, height: float, color: str, line_width: float
    ) -> None:
        self.calls.append(("stroke_rect", x, y, width, height, color, line_width))

    def move_to(self, x: float, y: float) -> None:
        self.calls.append(("move_to", x, y))

    def line_to(self, x: float, y: float) -> None:
        self.calls.append(("line_to", x, y))

    def stroke(self, color: str, line_width: float) -> None:
        self.calls.append(("stroke", color, line_width))

    def calls_named(self, name: str) -> List[DrawCall]:
        return [call for call in self.calls if call[0] == name]
