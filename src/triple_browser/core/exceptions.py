"""Custom exceptions for the triple browser."""

from __future__ import annotations


class BrowserError(Exception):
    """Base exception for exploration operations."""

    pass


class QueryError(BrowserError):
    """Raised when a pattern query against the triple source fails."""

    def __init__(
        self,
        pattern: tuple[str | None, str | None, str | None],
        message: str = "",
    ):
        self.pattern = pattern
        super().__init__(message or f"Pattern query failed: {pattern}")


class SourceLoadError(BrowserError):
    """Raised when a triple source cannot be loaded."""

    def __init__(self, location: str, message: str = ""):
        self.location = location
        super().__init__(message or f"Could not load triple source: {location}")


class NodeNotFoundError(BrowserError):
    """Raised when a node id or IRI is not part of the exploration state."""

    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(f"Node '{node_id}' not found")


class NotSpecializableError(BrowserError):
    """Raised when specialize is requested on anything but a predicate group."""

    def __init__(self, node_id: str, node_type: str):
        self.node_id = node_id
        self.node_type = node_type
        super().__init__(
            f"Node '{node_id}' is a {node_type}, only predicate groups can be specialized"
        )
