"""Graph browser: lazy, multi-directional exploration from a root IRI."""

from __future__ import annotations

import logging

from triple_browser.browser.resolver import ChildResolver
from triple_browser.browser.state import ExplorationState
from triple_browser.browser.types import ExplorationNode, NodePath, SpecializeRequest
from triple_browser.config import BrowserConfig
from triple_browser.core.exceptions import (
    NodeNotFoundError,
    NotSpecializableError,
    QueryError,
)
from triple_browser.core.protocols import TripleSource
from triple_browser.core.types import Direction, NodeType
from triple_browser.display.projector import TreeItem, project_browser_tree

logger = logging.getLogger(__name__)


class GraphBrowser:
    """Explore a triple source by expanding a tree on demand.

    A root has an ``out`` and an ``in`` group; each group lists the distinct
    predicates in that direction; each predicate group lists the values at
    the other end of the edge, and resource values expand like a root.

    Every tree position has its own path-based id, so the same IRI reached
    twice is tracked twice.

    Example:
        >>> browser = GraphBrowser(source)
        >>> await browser.load_root("http://example.org/alice")
        >>> out_group = browser.get(browser.root.children[0])
        >>> await browser.expand(out_group.id)
        >>> for item in browser.tree():
        ...     print(item.label)
    """

    def __init__(self, source: TripleSource, config: BrowserConfig | None = None) -> None:
        self._config = config or BrowserConfig()
        self._resolver = ChildResolver(source, result_limit=self._config.result_limit)
        self._state: ExplorationState | None = None

    @property
    def config(self) -> BrowserConfig:
        return self._config

    @property
    def state(self) -> ExplorationState | None:
        """The active exploration state, or None before a root is loaded."""
        return self._state

    @property
    def root(self) -> ExplorationNode | None:
        return self._state.root if self._state else None

    async def load_root(self, iri: str) -> ExplorationNode:
        """Discard the current exploration and start a new one at ``iri``.

        The root is expanded right away, giving its two direction groups.
        """
        iri = iri.strip()
        if not iri:
            raise ValueError("Root IRI must not be empty")

        state = ExplorationState(iri)
        self._state = state
        logger.info("Loaded root %s", iri)
        await self.expand(state.root_id)
        return state.root

    async def expand(self, node_id: NodePath | str) -> ExplorationNode | None:
        """Load the children of a node.

        Expanding a loaded or non-expandable node changes nothing. An id
        that is not part of the current exploration (for example one left
        over from a previous root) returns None.

        Raises:
            QueryError: If the source query fails; the node stays unloaded
        """
        state = self._state
        if state is None:
            return None

        node_id = self._coerce_id(node_id)
        if node_id is None:
            return None
        node = state.get(node_id)
        if node is None:
            logger.debug("Ignoring expand for unknown node %s", node_id)
            return None
        if node.loaded or not node.expandable:
            return node

        state.begin(node_id)
        try:
            resolution = await self._resolver.resolve(node)
        except QueryError:
            logger.warning("Expansion of %s failed, node left unloaded", node_id, exc_info=True)
            raise
        finally:
            state.end(node_id)

        if state is not self._state:
            logger.debug("Root changed while expanding %s, dropping result", node_id)
            return None

        if state.commit(node_id, resolution):
            logger.debug(
                "Expanded %s: %d children%s",
                node_id,
                len(resolution.children),
                " (collapsed)" if resolution.literal_value is not None else "",
            )
        return state.get(node_id)

    def get(self, node_id: NodePath | str) -> ExplorationNode:
        """Look up a node by id.

        Raises:
            NodeNotFoundError: If the id is not part of the current exploration
        """
        key = node_id.key() if isinstance(node_id, NodePath) else node_id
        path = self._coerce_id(node_id)
        node = self._state.get(path) if self._state and path else None
        if node is None:
            raise NodeNotFoundError(key)
        return node

    def children(self, node_id: NodePath | str) -> list[ExplorationNode]:
        """Loaded children of a node, in stored order."""
        node = self.get(node_id)
        return [self.get(child_id) for child_id in node.children or ()]

    def specialize(
        self,
        node_id: NodePath | str,
        direction: Direction | str | None = None,
    ) -> SpecializeRequest:
        """Build the hand-off message for a specialized traversal.

        Args:
            node_id: A predicate group
            direction: Direction to follow; defaults to the group's own

        Raises:
            NodeNotFoundError: If the node is unknown
            NotSpecializableError: If the node is not a predicate group
        """
        node = self.get(node_id)
        if node.type != NodeType.PREDICATE_GROUP or node.predicate is None:
            raise NotSpecializableError(node.id.key(), node.type.value)

        if direction is None:
            direction = node.direction or Direction.OUT
        return SpecializeRequest(
            subject_iri=node.iri,
            predicate_iri=node.predicate,
            direction=Direction(direction),
        )

    def tree(self) -> list[TreeItem]:
        """Project the current exploration into display items."""
        return project_browser_tree(
            self._state,
            rules=self._config.prefixes,
            max_length=self._config.browser_suffix_length,
        )

    @staticmethod
    def _coerce_id(node_id: NodePath | str) -> NodePath | None:
        if isinstance(node_id, NodePath):
            return node_id
        try:
            return NodePath.parse(node_id)
        except ValueError:
            return None
