"""UI creation functions for ShapeDraw."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from PySide6.QtGui import QAction
from PySide6.QtWidgets import QApplication, QMainWindow, QToolBar

from .canvas import DiagramCanvas
from .constants import DEBUG_ENV_VAR, SMOKE_ENV_VAR
from .controller import InteractionController
from .model import ShapeStore

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False) -> None:
    """Configure console logging for the application."""
    level = logging.DEBUG if debug else logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if root_logger.handlers:
        # Already configured; a second handler would duplicate every line.
        return

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logger.info(f"Logging initialized at {'DEBUG' if debug else 'INFO'} level")


def create_window(
    store: Optional[ShapeStore] = None,
    controller: Optional[InteractionController] = None,
) -> QMainWindow:
    """Create a main window with a toolbar and the diagram canvas."""
    if store is None:
        store = ShapeStore()
    if controller is None:
        controller = InteractionController(store)

    window = QMainWindow()
    window.setWindowTitle("ShapeDraw")
    canvas = DiagramCanvas(store, controller, window)
    window.setCentralWidget(canvas)

    toolbar = QToolBar("Tools", window)
    toolbar.setMovable(False)
    add_node_action = QAction("Add node", window)
    add_node_action.triggered.connect(lambda: controller.addNode())
    connect_action = QAction("Connect", window)
    connect_action.triggered.connect(lambda: controller.beginArrowCreation())
    toolbar.addAction(add_node_action)
    toolbar.addAction(connect_action)
    window.addToolBar(toolbar)

    # Keep Python wrappers alive as long as the window.
    window._store = store
    window._controller = controller
    window._canvas = canvas
    return window


def _parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="ShapeDraw diagram editor")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--smoke", action="store_true", help="Build the window and exit")
    args, _unknown = parser.parse_known_args(argv)
    return args


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for ShapeDraw."""
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    debug = args.debug or os.environ.get(DEBUG_ENV_VAR) == "1"
    smoke_mode = args.smoke or os.environ.get(SMOKE_ENV_VAR) == "1"
    setup_logging(debug)

    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)

    window = create_window()
    window.resize(1000, 700)
    if smoke_mode:
        logger.info("Smoke mode: window created, exiting")
        return 0

    window.show()
    return app.exec()
