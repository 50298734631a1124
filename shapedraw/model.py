"""ShapeStore: the Qt model owning diagram nodes, connections and selection.

Every mutation is validated before anything changes, so a rejected call leaves
the store exactly as it was. Connections refer to nodes by id and are resolved
against the store whenever they are drawn.
"""

from __future__ import annotations

import logging
import math
from itertools import count
from typing import Any, Dict, List, Optional, Tuple, Union

from PySide6.QtCore import (
    QAbstractListModel,
    QModelIndex,
    Property,
    Qt,
    Signal,
    Slot,
)
from PySide6.QtGui import QColor

from .constants import CONNECTION_ID_PREFIX, NODE_DEFAULTS, NODE_ID_PREFIX
from .errors import (
    InvalidPropertyError,
    InvalidValueError,
    NotFoundError,
    SelfConnectionError,
)
from .geometry import contains_point
from .types import Connection, Node, NodeProperty

logger = logging.getLogger(__name__)


class ShapeStore(QAbstractListModel):
    """Qt model exposing diagram nodes to views."""

    IdRole = Qt.UserRole + 1
    XRole = Qt.UserRole + 2
    YRole = Qt.UserRole + 3
    WidthRole = Qt.UserRole + 4
    HeightRole = Qt.UserRole + 5
    FillColorRole = Qt.UserRole + 6
    StrokeColorRole = Qt.UserRole + 7
    StrokeWidthRole = Qt.UserRole + 8
    SelectedRole = Qt.UserRole + 9

    nodesChanged = Signal()
    connectionsChanged = Signal()
    selectionChanged = Signal()
    nodeRemoved = Signal(str, arguments=["nodeId"])
    # Emitted once for every change that alters what the canvas shows.
    changed = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._nodes: List[Node] = []
        self._connections: List[Connection] = []
        self._selected_id: Optional[str] = None
        self._node_id_source = count()
        self._connection_id_source = count()

    @staticmethod
    def _next_id(prefix: str, source: count) -> str:
        return f"{prefix}_{next(source)}"

    def _row_of(self, node_id: str) -> int:
        for row, node in enumerate(self._nodes):
            if node.id == node_id:
                return row
        return -1

    def _emit_row_changed(self, row: int, roles: List[int]) -> None:
        index = self.index(row, 0)
        self.dataChanged.emit(index, index, roles)

    # --- Qt model overrides -------------------------------------------------
    def rowCount(self, parent: QModelIndex | None = QModelIndex()) -> int:  # type: ignore[override]
        return len(self._nodes)

    def data(self, index: QModelIndex, role: int = Qt.DisplayRole):  # type: ignore[override]
        if not index.isValid() or not (0 <= index.row() < len(self._nodes)):
            return None

        node = self._nodes[index.row()]
        if role == self.IdRole:
            return node.id
        if role == self.XRole:
            return node.x
        if role == self.YRole:
            return node.y
        if role == self.WidthRole:
            return node.width
        if role == self.HeightRole:
            return node.height
        if role == self.FillColorRole:
            return node.fill_color
        if role == self.StrokeColorRole:
            return node.stroke_color
        if role == self.StrokeWidthRole:
            return node.stroke_width
        if role == self.SelectedRole:
            return node.id == self._selected_id
        return None

    def roleNames(self) -> Dict[int, bytes]:  # type: ignore[override]
        return {
            self.IdRole: b"nodeId",
            self.XRole: b"x",
            self.YRole: b"y",
            self.WidthRole: b"width",
            self.HeightRole: b"height",
            self.FillColorRole: b"fillColor",
            self.StrokeColorRole: b"strokeColor",
            self.StrokeWidthRole: b"strokeWidth",
            self.SelectedRole: b"selected",
        }

    def _role_for(self, prop: NodeProperty) -> int:
        return {
            NodeProperty.X: self.XRole,
            NodeProperty.Y: self.YRole,
            NodeProperty.WIDTH: self.WidthRole,
            NodeProperty.HEIGHT: self.HeightRole,
            NodeProperty.FILL_COLOR: self.FillColorRole,
            NodeProperty.STROKE_COLOR: self.StrokeColorRole,
            NodeProperty.STROKE_WIDTH: self.StrokeWidthRole,
        }[prop]

    # --- Properties exposed to Qt ------------------------------------------
    @Property(int, notify=nodesChanged)
    def count(self) -> int:
        return len(self._nodes)

    @Property(list, notify=connectionsChanged)
    def connections(self) -> List[Dict[str, str]]:
        return [
            {"id": connection.id, "fromId": connection.from_id, "toId": connection.to_id}
            for connection in self._connections
        ]

    @Property(str, notify=selectionChanged)
    def selectedId(self) -> str:
        return self._selected_id or ""

    # --- Node management ----------------------------------------------------
    def addNode(self, defaults: Optional[Dict[Union[NodeProperty, str], Any]] = None) -> Node:
        """Append a node built from ``NODE_DEFAULTS`` overlaid with ``defaults``.

        ``defaults`` is keyed like ``updateProperty`` (a ``NodeProperty`` or its
        name) and every entry is checked the same way. A bad entry raises
        ``InvalidPropertyError`` or ``InvalidValueError`` before an id is
        issued, so the store is left untouched.
        """
        attributes = {
            NodeProperty(name).attribute: value for name, value in NODE_DEFAULTS.items()
        }
        for key, value in (defaults or {}).items():
            prop = _resolve_property(key)
            attributes[prop.attribute] = _validate_value(prop, value)

        node = Node(id=self._next_id(NODE_ID_PREFIX, self._node_id_source), **attributes)
        self.beginInsertRows(QModelIndex(), len(self._nodes), len(self._nodes))
        self._nodes.append(node)
        self.endInsertRows()
        logger.debug(f"Added node {node.id} at ({node.x}, {node.y})")
        self.nodesChanged.emit()
        self.changed.emit()
        return node

    def updateProperty(
        self,
        node_id: str,
        prop: Union[NodeProperty, str],
        value: Any,
    ) -> None:
        """Set a single settable property on a node.

        Raises:
            InvalidPropertyError: ``prop`` is not a settable node property.
            NotFoundError: no node has ``node_id``.
            InvalidValueError: ``value`` is outside the property's domain.
        """
        prop = _resolve_property(prop)
        row = self._row_of(node_id)
        if row < 0:
            logger.debug(f"Rejected update of {prop.value} on missing node {node_id}")
            raise NotFoundError(f"Node not found: {node_id}")
        checked = _validate_value(prop, value)

        node = self._nodes[row]
        if getattr(node, prop.attribute) == checked:
            return
        setattr(node, prop.attribute, checked)
        logger.debug(f"Set {prop.value} of {node_id} to {checked!r}")
        self._emit_row_changed(row, [self._role_for(prop)])
        self.nodesChanged.emit()
        self.changed.emit()

    def moveNode(self, node_id: str, x: float, y: float) -> None:
        """Move a node's top-left corner with a single change notification."""
        row = self._row_of(node_id)
        if row < 0:
            raise NotFoundError(f"Node not found: {node_id}")
        new_x = _validate_value(NodeProperty.X, x)
        new_y = _validate_value(NodeProperty.Y, y)

        node = self._nodes[row]
        if node.x == new_x and node.y == new_y:
            return
        node.x = new_x
        node.y = new_y
        self._emit_row_changed(row, [self.XRole, self.YRole])
        self.nodesChanged.emit()
        self.changed.emit()

    @Slot(str)
    def removeNode(self, node_id: str) -> None:
        """Remove a node together with every connection touching it."""
        row = self._row_of(node_id)
        if row < 0:
            raise NotFoundError(f"Node not found: {node_id}")

        remaining = [
            connection
            for connection in self._connections
            if connection.from_id != node_id and connection.to_id != node_id
        ]
        if len(remaining) != len(self._connections):
            logger.debug(
                f"Removing {len(self._connections) - len(remaining)} connection(s) of {node_id}"
            )
            self._connections = remaining
            self.connectionsChanged.emit()

        self.beginRemoveRows(QModelIndex(), row, row)
        self._nodes.pop(row)
        self.endRemoveRows()
        logger.debug(f"Removed node {node_id}")

        if self._selected_id == node_id:
            self._selected_id = None
            self.selectionChanged.emit()

        self.nodesChanged.emit()
        self.nodeRemoved.emit(node_id)
        self.changed.emit()

    # --- Connections --------------------------------------------------------
    def addConnection(self, from_id: str, to_id: str) -> Connection:
        """Append a directed connection between two existing, distinct nodes."""
        for node_id in (from_id, to_id):
            if self._row_of(node_id) < 0:
                logger.debug(f"Rejected connection {from_id} -> {to_id}: {node_id} missing")
                raise NotFoundError(f"Node not found: {node_id}")
        if from_id == to_id:
            logger.debug(f"Rejected self connection on {from_id}")
            raise SelfConnectionError(f"Cannot connect node {from_id} to itself")

        connection = Connection(
            id=self._next_id(CONNECTION_ID_PREFIX, self._connection_id_source),
            from_id=from_id,
            to_id=to_id,
        )
        self._connections.append(connection)
        logger.debug(f"Added connection {connection.id}: {from_id} -> {to_id}")
        self.connectionsChanged.emit()
        self.changed.emit()
        return connection

    @Slot(str)
    def removeConnection(self, connection_id: str) -> None:
        for idx, connection in enumerate(self._connections):
            if connection.id == connection_id:
                self._connections.pop(idx)
                logger.debug(f"Removed connection {connection_id}")
                self.connectionsChanged.emit()
                self.changed.emit()
                return
        raise NotFoundError(f"Connection not found: {connection_id}")

    # --- Selection ----------------------------------------------------------
    @Slot(str)
    def select(self, node_id: str) -> None:
        row = self._row_of(node_id)
        if row < 0:
            raise NotFoundError(f"Node not found: {node_id}")
        if self._selected_id == node_id:
            return
        previous_row = self._row_of(self._selected_id) if self._selected_id else -1
        self._selected_id = node_id
        if previous_row >= 0:
            self._emit_row_changed(previous_row, [self.SelectedRole])
        self._emit_row_changed(row, [self.SelectedRole])
        self.selectionChanged.emit()

    @Slot()
    def clearSelection(self) -> None:
        if self._selected_id is None:
            return
        row = self._row_of(self._selected_id)
        self._selected_id = None
        if row >= 0:
            self._emit_row_changed(row, [self.SelectedRole])
        self.selectionChanged.emit()

    def getSelected(self) -> Optional[str]:
        return self._selected_id

    # --- Queries ------------------------------------------------------------
    def getNode(self, node_id: str) -> Optional[Node]:
        for node in self._nodes:
            if node.id == node_id:
                return node
        return None

    def requireNode(self, node_id: str) -> Node:
        node = self.getNode(node_id)
        if node is None:
            raise NotFoundError(f"Node not found: {node_id}")
        return node

    def nodeAt(self, x: float, y: float) -> Optional[Node]:
        """Return the first node, in insertion order, containing (x, y).

        Earlier nodes win when shapes overlap, even though later nodes are
        drawn on top of them.
        """
        for node in self._nodes:
            if contains_point(node, x, y):
                return node
        return None

    @Slot(float, float, result=str)
    def nodeIdAt(self, x: float, y: float) -> str:
        node = self.nodeAt(x, y)
        return node.id if node else ""

    def list(self) -> Tuple[List[Node], List[Connection]]:
        """Return nodes and connections in insertion (render) order."""
        return list(self._nodes), list(self._connections)


def _resolve_property(prop: Union[NodeProperty, str]) -> NodeProperty:
    if isinstance(prop, NodeProperty):
        return prop
    try:
        return NodeProperty(prop)
    except ValueError as exc:
        raise InvalidPropertyError(f"Unknown node property: {prop!r}") from exc


def _validate_value(prop: NodeProperty, value: Any) -> Union[float, str]:
    if prop.is_color:
        if not isinstance(value, str) or not QColor.isValidColorName(value):
            raise InvalidValueError(f"Invalid color for {prop.value}: {value!r}")
        return value

    # bool is an int subclass but never a meaningful coordinate or size.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidValueError(f"{prop.value} must be a number, got {value!r}")
    number = float(value)
    if not math.isfinite(number):
        raise InvalidValueError(f"{prop.value} must be finite, got {value!r}")
    if prop in (NodeProperty.WIDTH, NodeProperty.HEIGHT) and number <= 0:
        raise InvalidValueError(f"{prop.value} must be positive, got {value!r}")
    if prop is NodeProperty.STROKE_WIDTH and number < 0:
        raise InvalidValueError(f"{prop.value} must not be negative, got {value!r}")
    return number
