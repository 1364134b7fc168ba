"""Exploration state: the node map owned by one browsing session."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import replace
from types import MappingProxyType
from typing import Iterator, Mapping

from triple_browser.browser.types import ExplorationNode, NodePath, Resolution
from triple_browser.core.types import NodeType

logger = logging.getLogger(__name__)


class ExplorationState:
    """Node map for one root, updated copy-on-write.

    Every commit builds a new mapping and swaps it in, so a reader holding
    :attr:`nodes` never sees a half-applied expansion. A new root gets a
    new state object; the old one is simply dropped.
    """

    def __init__(self, root_iri: str) -> None:
        self._root_id = NodePath.root(root_iri)
        root = ExplorationNode(id=self._root_id, type=NodeType.ROOT, iri=root_iri)
        self._nodes: Mapping[NodePath, ExplorationNode] = MappingProxyType({self._root_id: root})
        self._in_flight: Counter[NodePath] = Counter()

    @property
    def root_id(self) -> NodePath:
        return self._root_id

    @property
    def root(self) -> ExplorationNode:
        return self._nodes[self._root_id]

    @property
    def nodes(self) -> Mapping[NodePath, ExplorationNode]:
        """Read-only snapshot of the current node map."""
        return self._nodes

    def get(self, node_id: NodePath) -> ExplorationNode | None:
        return self._nodes.get(node_id)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[ExplorationNode]:
        return iter(self._nodes.values())

    # ----- in-flight bookkeeping -----

    def begin(self, node_id: NodePath) -> None:
        self._in_flight[node_id] += 1

    def end(self, node_id: NodePath) -> None:
        self._in_flight[node_id] -= 1
        if self._in_flight[node_id] <= 0:
            del self._in_flight[node_id]

    def is_loading(self, node_id: NodePath) -> bool:
        return self._in_flight[node_id] > 0

    # ----- write-back -----

    def commit(self, node_id: NodePath, resolution: Resolution) -> bool:
        """Apply a resolution to a node, marking it loaded.

        Returns False without writing if the node is gone or already loaded,
        which is checked here rather than when the expansion started.
        """
        node = self._nodes.get(node_id)
        if node is None:
            logger.debug("Dropping result for unknown node %s", node_id)
            return False
        if node.loaded:
            logger.debug("Node %s already loaded, ignoring duplicate result", node_id)
            return False

        updated = dict(self._nodes)
        for child in resolution.children:
            updated.setdefault(child.id, child)

        if resolution.literal_value is not None:
            updated[node_id] = replace(
                node, loaded=True, literal_value=resolution.literal_value, children=()
            )
        else:
            updated[node_id] = replace(
                node, loaded=True, children=tuple(c.id for c in resolution.children)
            )

        self._nodes = MappingProxyType(updated)
        return True
