"""Child resolution: decide what to query for a node and build its children."""

from __future__ import annotations

import logging

from triple_browser.browser.collapse import decide_collapse
from triple_browser.browser.types import ExplorationNode, PathSegment, Resolution
from triple_browser.core.protocols import TripleSource
from triple_browser.core.types import Direction, NodeType, Term
from triple_browser.source.query import run_query

logger = logging.getLogger(__name__)

DEFAULT_RESULT_LIMIT = 100


class ChildResolver:
    """Compute the children of an exploration node from the triple source.

    The resolver never touches exploration state: it returns a
    :class:`Resolution` that the caller commits. A failing query raises
    QueryError and nothing is returned.

    Example:
        >>> resolver = ChildResolver(source)
        >>> resolution = await resolver.resolve(node)
    """

    def __init__(self, source: TripleSource, result_limit: int = DEFAULT_RESULT_LIMIT) -> None:
        if result_limit < 1:
            raise ValueError("result_limit must be positive")
        self._source = source
        self._result_limit = result_limit

    @property
    def result_limit(self) -> int:
        return self._result_limit

    async def resolve(self, node: ExplorationNode) -> Resolution:
        """Resolve children for a node, dispatching on its type."""
        if node.type == NodeType.ROOT:
            return Resolution(children=self._direction_groups(node))

        if node.type == NodeType.DIRECTION_GROUP:
            return await self._resolve_direction(node)

        if node.type == NodeType.PREDICATE_GROUP:
            return await self._resolve_predicate(node)

        # Value: resources behave like a root, literals are terminal.
        if node.is_literal:
            return Resolution()
        return Resolution(children=self._direction_groups(node))

    def _direction_groups(self, node: ExplorationNode) -> list[ExplorationNode]:
        children = []
        for direction in (Direction.OUT, Direction.IN):
            child_id = node.id.child(
                PathSegment(NodeType.DIRECTION_GROUP, node.iri, direction=direction)
            )
            children.append(ExplorationNode(
                id=child_id,
                type=NodeType.DIRECTION_GROUP,
                iri=node.iri,
                direction=direction,
                parent_id=node.id,
            ))
        return children

    async def _resolve_direction(self, node: ExplorationNode) -> Resolution:
        if node.direction == Direction.OUT:
            triples = await run_query(self._source, node.iri, None, None)
        else:
            triples = await run_query(self._source, None, None, node.iri)

        predicates = sorted({t.predicate.value for t in triples})
        logger.debug("%d %s predicates for %s", len(predicates), node.direction.value, node.iri)

        return Resolution(children=[
            ExplorationNode(
                id=node.id.child(PathSegment(
                    NodeType.PREDICATE_GROUP,
                    node.iri,
                    predicate=predicate,
                    direction=node.direction,
                )),
                type=NodeType.PREDICATE_GROUP,
                iri=node.iri,
                predicate=predicate,
                direction=node.direction,
                parent_id=node.id,
            )
            for predicate in predicates
        ])

    async def _resolve_predicate(self, node: ExplorationNode) -> Resolution:
        if node.direction == Direction.OUT:
            triples = await run_query(
                self._source, node.iri, node.predicate, None, limit=self._result_limit
            )
            terms = [t.object for t in triples if t.object.is_named or t.object.is_literal]
            decision = decide_collapse(terms)
            if decision.collapsed:
                return Resolution(literal_value=decision.literal)
            values = decision.values
        else:
            triples = await run_query(
                self._source, None, node.predicate, node.iri, limit=self._result_limit
            )
            # Literal subjects are malformed data; drop them with everything else unnamed.
            values = [t.subject for t in triples if t.subject.is_named]

        return Resolution(children=self._value_nodes(node, values))

    def _value_nodes(self, node: ExplorationNode, values: list[Term]) -> list[ExplorationNode]:
        children: list[ExplorationNode] = []
        seen = set()
        for term in values:
            child_id = node.id.child(PathSegment(
                NodeType.VALUE,
                term.value,
                predicate=node.predicate,
                literal=term.is_literal,
                lang=term.lang,
                datatype=term.datatype,
            ))
            if child_id in seen:
                continue
            seen.add(child_id)
            children.append(ExplorationNode(
                id=child_id,
                type=NodeType.VALUE,
                iri=term.value,
                predicate=node.predicate,
                is_literal=term.is_literal,
                literal_value=term.value if term.is_literal else None,
                lang=term.lang,
                datatype=term.datatype,
                parent_id=node.id,
            ))
        return children
