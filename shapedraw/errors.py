"""Errors raised by ShapeStore mutations."""

from __future__ import annotations


class ShapeStoreError(Exception):
    """Base class for rejected store operations."""


class NotFoundError(ShapeStoreError):
    """Raised when a node or connection id is not present in the store."""


class InvalidPropertyError(ShapeStoreError):
    """Raised when a property name is outside the settable set."""


class InvalidValueError(ShapeStoreError):
    """Raised when a property receives a value outside its domain."""


class SelfConnectionError(ShapeStoreError):
    """Raised when a connection would start and end on the same node."""
