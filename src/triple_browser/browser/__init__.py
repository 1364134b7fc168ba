"""General graph browser.

Example:
    >>> from triple_browser.browser import GraphBrowser
    >>> from triple_browser.source import InMemoryTripleSource
    >>>
    >>> browser = GraphBrowser(InMemoryTripleSource(triples))
    >>> await browser.load_root("http://example.org/alice")
"""

from triple_browser.browser.collapse import CollapseDecision, decide_collapse
from triple_browser.browser.explorer import GraphBrowser
from triple_browser.browser.resolver import DEFAULT_RESULT_LIMIT, ChildResolver
from triple_browser.browser.state import ExplorationState
from triple_browser.browser.types import (
    ExplorationNode,
    NodePath,
    PathSegment,
    Resolution,
    SpecializeRequest,
)

__all__ = [
    # Types
    "ExplorationNode",
    "NodePath",
    "PathSegment",
    "Resolution",
    "SpecializeRequest",
    # Collapse policy
    "CollapseDecision",
    "decide_collapse",
    # Resolution and state
    "ChildResolver",
    "DEFAULT_RESULT_LIMIT",
    "ExplorationState",
    # Session
    "GraphBrowser",
]
