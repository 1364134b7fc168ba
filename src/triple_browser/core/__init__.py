"""Core types, protocols and exceptions."""

from triple_browser.core.exceptions import (
    BrowserError,
    NodeNotFoundError,
    NotSpecializableError,
    QueryError,
    SourceLoadError,
)
from triple_browser.core.protocols import FocusRegistry, TripleSource
from triple_browser.core.types import RDFS_LABEL, Direction, NodeType, Term, TermKind, Triple

__all__ = [
    "RDFS_LABEL",
    "Direction",
    "NodeType",
    "Term",
    "TermKind",
    "Triple",
    "TripleSource",
    "FocusRegistry",
    "BrowserError",
    "QueryError",
    "SourceLoadError",
    "NodeNotFoundError",
    "NotSpecializableError",
]
