"""Triple Browser - lazy exploration of large read-only RDF graphs.

Turns point queries against a pattern-matchable triple source into an
expandable tree, in two modes:
- General browser: drill into any predicate, in either direction
- Specialized traversal: follow one predicate recursively, memoized by IRI

Example:
    >>> from triple_browser import GraphBrowser, SpecializedTraversal, RdflibTripleSource
    >>>
    >>> source = RdflibTripleSource.from_file("data.ttl")
    >>> browser = GraphBrowser(source)
    >>> await browser.load_root("http://example.org/alice")
    >>> out_id = browser.root.children[0]
    >>> await browser.expand(out_id)
    >>>
    >>> # Follow one predicate as a hierarchy
    >>> predicate_id = browser.get(out_id).children[0]
    >>> traversal = SpecializedTraversal(source, browser.specialize(predicate_id))
    >>> await traversal.start()
"""

from triple_browser.browser import (
    ExplorationNode,
    ExplorationState,
    GraphBrowser,
    NodePath,
    SpecializeRequest,
)
from triple_browser.config import BrowserConfig
from triple_browser.core import (
    BrowserError,
    Direction,
    NodeNotFoundError,
    NodeType,
    NotSpecializableError,
    QueryError,
    SourceLoadError,
    Term,
    TermKind,
    Triple,
    TripleSource,
)
from triple_browser.display import TreeItem, shorten_iri
from triple_browser.focus import FieldFocusRegistry
from triple_browser.source import InMemoryTripleSource, RdflibTripleSource
from triple_browser.specialized import LoadState, SpecializedNode, SpecializedTraversal

__version__ = "0.1.0"

__all__ = [
    # Core
    "Direction",
    "NodeType",
    "Term",
    "TermKind",
    "Triple",
    "TripleSource",
    "BrowserConfig",
    # Sources
    "InMemoryTripleSource",
    "RdflibTripleSource",
    # Browser
    "GraphBrowser",
    "ExplorationNode",
    "ExplorationState",
    "NodePath",
    "SpecializeRequest",
    # Specialized traversal
    "SpecializedTraversal",
    "SpecializedNode",
    "LoadState",
    # Display
    "TreeItem",
    "shorten_iri",
    # Focus
    "FieldFocusRegistry",
    # Exceptions
    "BrowserError",
    "QueryError",
    "SourceLoadError",
    "NodeNotFoundError",
    "NotSpecializableError",
]
