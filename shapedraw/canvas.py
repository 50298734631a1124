"""Qt widget hosting the ShapeDraw canvas."""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QKeyEvent, QMouseEvent, QPainter, QPaintEvent
from PySide6.QtWidgets import QWidget

from .constants import CANVAS_BACKGROUND
from .controller import InteractionController
from .model import ShapeStore
from .renderer import render
from .surface import QPainterSurface

logger = logging.getLogger(__name__)


class DiagramCanvas(QWidget):
    """Forward pointer input to the controller and paint the current scene."""

    def __init__(
        self,
        store: ShapeStore,
        controller: InteractionController,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self._store = store
        self._controller = controller
        self.setFocusPolicy(Qt.StrongFocus)
        self.setMinimumSize(640, 480)
        self._controller.renderRequested.connect(self._on_render_requested)

    def _on_render_requested(self) -> None:
        # repaint() paints before returning, keeping each event fully handled.
        self.repaint()

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            surface = QPainterSurface(painter, self.width(), self.height(), CANVAS_BACKGROUND)
            render(surface, self._store, self._controller.preview)
        finally:
            painter.end()

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.LeftButton:
            super().mousePressEvent(event)
            return
        pos = event.position()
        self._controller.pointerDown(pos.x(), pos.y())

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        pos = event.position()
        self._controller.pointerMove(pos.x(), pos.y())

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.LeftButton:
            super().mouseReleaseEvent(event)
            return
        pos = event.position()
        self._controller.pointerUp(pos.x(), pos.y())

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if event.key() == Qt.Key_Escape:
            logger.debug("Arrow creation cancelled from keyboard")
            self._controller.cancelArrowCreation()
            return
        super().keyPressEvent(event)
