"""Pointer-driven interaction state machine for the ShapeDraw canvas.

The controller turns raw pointer positions into store mutations (dragging,
committing connections) and into a transient arrow preview. It is also the only
command surface the surrounding UI uses to add nodes, start arrows and edit
properties.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

from PySide6.QtCore import Property, QObject, Signal, Slot

from .geometry import compute_border_point
from .model import ShapeStore
from .types import (
    ArrowPending,
    ArrowPreview,
    ControllerState,
    Dragging,
    Idle,
    NodeProperty,
    Point,
)

logger = logging.getLogger(__name__)


class InteractionController(QObject):
    """Translate pointer events into ShapeStore changes and arrow previews."""

    stateChanged = Signal()
    renderRequested = Signal()

    def __init__(self, store: ShapeStore, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._store = store
        self._state: ControllerState = Idle()
        self._arrow_mode_requested = False
        self._preview: Optional[ArrowPreview] = None

        self._store.changed.connect(self._on_store_changed)
        self._store.nodeRemoved.connect(self._on_node_removed)

    # --- Properties exposed to Qt ------------------------------------------
    @property
    def state(self) -> ControllerState:
        return self._state

    @property
    def preview(self) -> Optional[ArrowPreview]:
        return self._preview

    @Property(str, notify=stateChanged)
    def mode(self) -> str:
        if isinstance(self._state, Dragging):
            return "dragging"
        if isinstance(self._state, ArrowPending):
            return "arrowPending"
        return "idle"

    @Property(bool, notify=stateChanged)
    def arrowModeRequested(self) -> bool:
        return self._arrow_mode_requested

    @Property(str, notify=renderRequested)
    def hoverTargetId(self) -> str:
        if self._preview is None:
            return ""
        return self._preview.hover_target_id or ""

    # --- Commands -----------------------------------------------------------
    @Slot(result=str)
    def addNode(self) -> str:
        return self._store.addNode().id

    @Slot()
    def beginArrowCreation(self) -> None:
        """Arm arrow mode for the next pointer-down on a node.

        Re-arming while an arrow is pending discards that arrow, so the next
        pointer-down always starts from a clean state. A drag in progress is
        left alone.
        """
        if isinstance(self._state, ArrowPending):
            logger.debug(f"Discarding pending arrow from {self._state.source_id}")
            self._set_state(Idle())
            self._clear_preview()
        self._arrow_mode_requested = True
        self.stateChanged.emit()

    @Slot()
    def cancelArrowCreation(self) -> None:
        was_armed = self._arrow_mode_requested
        self._arrow_mode_requested = False
        if isinstance(self._state, ArrowPending):
            self._set_state(Idle())
            self._clear_preview()
        elif was_armed:
            self.stateChanged.emit()

    def setNodeProperty(self, node_id: str, prop: Union[NodeProperty, str], value: Any) -> None:
        """Edit one node property; store errors propagate to the caller."""
        self._store.updateProperty(node_id, prop, value)

    # --- Pointer input ------------------------------------------------------
    @Slot(float, float)
    def pointerDown(self, x: float, y: float) -> None:
        self._set_state(self._on_pointer_down(self._state, Point(x, y)))

    @Slot(float, float)
    def pointerMove(self, x: float, y: float) -> None:
        self._set_state(self._on_pointer_move(self._state, Point(x, y)))

    @Slot(float, float)
    def pointerUp(self, x: float, y: float) -> None:
        self._set_state(self._on_pointer_up(self._state, Point(x, y)))

    # --- Transitions --------------------------------------------------------
    def _on_pointer_down(self, state: ControllerState, pointer: Point) -> ControllerState:
        if not isinstance(state, Idle):
            # The matching pointer-up never arrived; drop the stale gesture.
            logger.debug(f"Resetting unfinished gesture {state}")
            self._clear_preview()
            state = Idle()

        node = self._store.nodeAt(pointer.x, pointer.y)
        if node is None:
            return state

        if self._arrow_mode_requested:
            self._arrow_mode_requested = False
            logger.debug(f"Arrow started from {node.id}")
            return ArrowPending(node.id)

        grab_offset = Point(pointer.x - node.x, pointer.y - node.y)
        self._store.select(node.id)
        logger.debug(f"Drag started on {node.id} with offset {grab_offset}")
        return Dragging(node.id, grab_offset)

    def _on_pointer_move(self, state: ControllerState, pointer: Point) -> ControllerState:
        if isinstance(state, Dragging):
            self._store.moveNode(
                state.node_id,
                pointer.x - state.grab_offset.x,
                pointer.y - state.grab_offset.y,
            )
        elif isinstance(state, ArrowPending):
            self._preview = self._build_preview(state.source_id, pointer)
            self.renderRequested.emit()
        return state

    def _on_pointer_up(self, state: ControllerState, pointer: Point) -> ControllerState:
        if isinstance(state, ArrowPending):
            target = self._store.nodeAt(pointer.x, pointer.y)
            self._clear_preview()
            if target is not None and target.id != state.source_id:
                self._store.addConnection(state.source_id, target.id)
            else:
                logger.debug(f"Arrow from {state.source_id} discarded")
            return Idle()
        if isinstance(state, Dragging):
            logger.debug(f"Drag finished on {state.node_id}")
            return Idle()
        return state

    # --- Helpers ------------------------------------------------------------
    def _set_state(self, state: ControllerState) -> None:
        if state == self._state:
            return
        self._state = state
        self.stateChanged.emit()

    def _clear_preview(self) -> None:
        if self._preview is None:
            return
        self._preview = None
        self.renderRequested.emit()

    def _build_preview(self, source_id: str, pointer: Point) -> ArrowPreview:
        source = self._store.requireNode(source_id)
        start = compute_border_point(source, pointer.x, pointer.y)
        hover = self._store.nodeAt(pointer.x, pointer.y)
        hover_id = hover.id if hover is not None and hover.id != source.id else None
        return ArrowPreview(source.id, start, pointer, hover_id)

    def _on_store_changed(self) -> None:
        # Keep a pending preview anchored on the source's current geometry.
        preview = self._preview
        if preview is not None and self._store.getNode(preview.source_id) is not None:
            self._preview = self._build_preview(preview.source_id, preview.end)
        self.renderRequested.emit()

    def _on_node_removed(self, node_id: str) -> None:
        state = self._state
        if isinstance(state, Dragging) and state.node_id == node_id:
            self._set_state(Idle())
        elif isinstance(state, ArrowPending) and state.source_id == node_id:
            self._clear_preview()
            self._set_state(Idle())
