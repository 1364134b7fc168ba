"""Single-predicate traversal for hierarchy-style views."""

from triple_browser.specialized.traversal import SpecializedTraversal
from triple_browser.specialized.types import LoadState, SpecializedNode

__all__ = [
    "LoadState",
    "SpecializedNode",
    "SpecializedTraversal",
]
