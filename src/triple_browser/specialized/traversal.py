"""Specialized traversal: follow one predicate in one direction, memoized by IRI."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from types import MappingProxyType
from typing import Mapping

from triple_browser.browser.types import SpecializeRequest
from triple_browser.config import BrowserConfig
from triple_browser.core.exceptions import NodeNotFoundError, QueryError
from triple_browser.core.protocols import TripleSource
from triple_browser.core.types import Direction
from triple_browser.display.projector import TreeItem, project_specialized_tree
from triple_browser.source.query import run_query
from triple_browser.specialized.types import LoadState, SpecializedNode

logger = logging.getLogger(__name__)


class SpecializedTraversal:
    """Recursive, demand-driven exploration along a single predicate.

    Unlike the general browser, a node's identity is its IRI: reaching the
    same IRI again reuses the same record. Expansion only ever goes one
    level per call, so cycles show up as a known node reappearing as a
    child instead of runaway recursion.

    Labels are looked up in background tasks started when a node is first
    registered. They race with child loading and each writes its own field
    of the shared record.

    Example:
        >>> request = browser.specialize(predicate_group_id)
        >>> traversal = SpecializedTraversal(source, request)
        >>> await traversal.start()
        >>> await traversal.expand("http://example.org/child")
        >>> await traversal.wait_for_labels()
    """

    def __init__(
        self,
        source: TripleSource,
        request: SpecializeRequest,
        config: BrowserConfig | None = None,
    ) -> None:
        self._source = source
        self._request = request
        self._config = config or BrowserConfig()
        self._nodes: Mapping[str, SpecializedNode] = MappingProxyType({})
        self._label_tasks: set[asyncio.Task[None]] = set()
        self._closed = False

    @property
    def request(self) -> SpecializeRequest:
        return self._request

    @property
    def start_iri(self) -> str:
        return self._request.subject_iri

    @property
    def nodes(self) -> Mapping[str, SpecializedNode]:
        """Read-only snapshot of all known records."""
        return self._nodes

    async def start(self) -> SpecializedNode | None:
        """Register the start node, request its label and load its children.

        Returns None if the traversal was closed before loading finished.
        """
        self._register(self.start_iri)
        logger.info(
            "Specialized traversal from %s along %s (%s)",
            self.start_iri,
            self._request.predicate_iri,
            self._request.direction.value,
        )
        return await self.expand(self.start_iri)

    async def expand(self, iri: str) -> SpecializedNode | None:
        """Load the children of one node.

        Re-expanding a loading or loaded node is a no-op. Unknown IRIs
        return None. A failed or cancelled expansion returns the node to
        unloaded so it can be retried.

        Raises:
            QueryError: If the source query fails
        """
        node = self._nodes.get(iri)
        if node is None:
            logger.debug("Ignoring expand for unknown IRI %s", iri)
            return None
        if node.state != LoadState.UNLOADED:
            return node

        self._update(iri, state=LoadState.LOADING)
        try:
            children = await self._load_children(iri)
        except QueryError:
            self._update(iri, state=LoadState.UNLOADED)
            logger.warning("Expansion of %s failed, node left unloaded", iri, exc_info=True)
            raise
        except asyncio.CancelledError:
            self._update(iri, state=LoadState.UNLOADED)
            logger.debug("Expansion of %s cancelled, node left unloaded", iri)
            raise

        if self._closed:
            return None

        for child_iri in children:
            self._register(child_iri)
        self._update(iri, state=LoadState.LOADED, children=tuple(children))
        logger.debug("Expanded %s: %d children", iri, len(children))
        return self._nodes[iri]

    async def expand_children(self, iri: str) -> list[SpecializedNode]:
        """Expand every unloaded child of a loaded node, concurrently.

        Lets a view show which children have children of their own as soon
        as their parent is opened. Failures are logged; the affected child
        stays unloaded.
        """
        node = self.get(iri)
        pending = [
            child for child in node.children or ()
            if self._nodes[child].state == LoadState.UNLOADED
        ]
        results = await asyncio.gather(
            *(self.expand(child) for child in pending), return_exceptions=True
        )
        for child, result in zip(pending, results):
            if isinstance(result, BaseException):
                if not isinstance(result, QueryError):
                    raise result
                logger.warning("Could not expand child %s: %s", child, result)
        return [self._nodes[child] for child in node.children or ()]

    def get(self, iri: str) -> SpecializedNode:
        """Look up a record by IRI.

        Raises:
            NodeNotFoundError: If the IRI has not been discovered
        """
        node = self._nodes.get(iri)
        if node is None:
            raise NodeNotFoundError(iri)
        return node

    def tree(self) -> list[TreeItem]:
        """Project the traversal into display items."""
        return project_specialized_tree(
            self._nodes,
            self.start_iri,
            rules=self._config.prefixes,
            max_length=self._config.specialized_suffix_length,
        )

    async def wait_for_labels(self) -> None:
        """Wait until every label lookup started so far has finished."""
        while self._label_tasks:
            await asyncio.gather(*list(self._label_tasks), return_exceptions=True)

    async def close(self) -> None:
        """Cancel outstanding label lookups; later results are discarded."""
        self._closed = True
        tasks = list(self._label_tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    # ----- internals -----

    def _register(self, iri: str) -> None:
        if iri in self._nodes:
            return
        updated = dict(self._nodes)
        updated[iri] = SpecializedNode(iri=iri)
        self._nodes = MappingProxyType(updated)

        task = asyncio.create_task(self._resolve_label(iri), name=f"label:{iri}")
        self._label_tasks.add(task)
        task.add_done_callback(self._label_tasks.discard)

    def _update(self, iri: str, **changes: object) -> None:
        updated = dict(self._nodes)
        updated[iri] = replace(updated[iri], **changes)
        self._nodes = MappingProxyType(updated)

    async def _load_children(self, iri: str) -> list[str]:
        predicate = self._request.predicate_iri
        if self._request.direction == Direction.OUT:
            triples = await run_query(self._source, iri, predicate, None)
            terms = [t.object for t in triples]
        else:
            triples = await run_query(self._source, None, predicate, iri)
            terms = [t.subject for t in triples]
        return [term.value for term in terms if term.is_named]

    async def _resolve_label(self, iri: str) -> None:
        try:
            triples = await run_query(self._source, iri, self._config.label_predicate, None)
        except QueryError:
            logger.warning("Label lookup for %s failed", iri, exc_info=True)
            return

        label = next((t.object.value for t in triples if t.object.is_literal), None)
        if label is None or self._closed or iri not in self._nodes:
            return
        self._update(iri, label=label)
