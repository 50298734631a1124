"""Shared pytest fixtures for Qt application lifecycle."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QCoreApplication  # noqa: E402
from PySide6.QtWidgets import QApplication  # noqa: E402

from shapedraw import InteractionController, ShapeStore  # noqa: E402


@pytest.fixture(scope="session")
def app():
    """Provide a single QApplication for all tests."""
    instance = QApplication.instance()
    if instance is None:
        instance = QApplication(sys.argv)

    yield instance

    QCoreApplication.processEvents()


@pytest.fixture
def store(app):
    return ShapeStore()


@pytest.fixture
def controller(store):
    return InteractionController(store)


@pytest.fixture
def render_requests(controller):
    """Count renderRequested emissions from the controller."""
    calls = []
    controller.renderRequested.connect(lambda: calls.append(1))
    return calls
