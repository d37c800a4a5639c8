"""Custom exceptions for room_footprint geometry operations."""


class RoomFootprintError(Exception):
    """Base exception for all room_footprint errors."""


class EmptySetError(RoomFootprintError):
    """
    Raised when a bounds, hull or rectangle query is issued against a
    point set that holds no points.

    Callers should check the size of the set before querying.
    """


class DegenerateHullError(RoomFootprintError):
    """
    Raised when a hull has fewer than two vertices, so no edge exists to
    align a rectangle to.

    This is recoverable: keep adding points and query again.
    """


class InvalidPointError(RoomFootprintError, ValueError):
    """Raised when a supplied coordinate is non-numeric, NaN or infinite."""
