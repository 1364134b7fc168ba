"""Triple source backed by an rdflib Graph."""

from __future__ import annotations

import asyncio
import logging
from itertools import islice
from pathlib import Path

from rdflib import Graph, Literal, URIRef
from rdflib.term import Node

from triple_browser.core.exceptions import SourceLoadError
from triple_browser.core.types import Term, TermKind, Triple

logger = logging.getLogger(__name__)


class RdflibTripleSource:
    """Adapter exposing an ``rdflib.Graph`` through the pattern-match contract."""

    def __init__(self, graph: Graph) -> None:
        self._graph = graph

    @classmethod
    def from_file(cls, path: str | Path, format: str | None = None) -> RdflibTripleSource:
        """Parse an RDF file into a new graph.

        Args:
            path: File to parse
            format: rdflib format name; guessed from the suffix when omitted

        Raises:
            SourceLoadError: If the file is missing or cannot be parsed
        """
        graph = Graph()
        try:
            graph.parse(str(path), format=format)
        except Exception as e:
            raise SourceLoadError(str(path), f"Could not parse {path}: {e}") from e
        logger.info("Loaded %d triples from %s", len(graph), path)
        return cls(graph)

    @property
    def graph(self) -> Graph:
        return self._graph

    def __len__(self) -> int:
        return len(self._graph)

    async def match(
        self,
        subject: str | None = None,
        predicate: str | None = None,
        obj: str | None = None,
        limit: int | None = None,
    ) -> list[Triple]:
        pattern = (
            URIRef(subject) if subject is not None else None,
            URIRef(predicate) if predicate is not None else None,
            URIRef(obj) if obj is not None else None,
        )
        return await asyncio.to_thread(self._match_sync, pattern, limit)

    def _match_sync(self, pattern: tuple, limit: int | None) -> list[Triple]:
        # Stop the graph scan at the limit instead of materializing every match.
        matches = islice(self._graph.triples(pattern), limit)
        return [Triple(_to_term(s), _to_term(p), _to_term(o)) for s, p, o in matches]


def _to_term(node: Node) -> Term:
    if isinstance(node, URIRef):
        return Term(str(node), TermKind.NAMED)
    if isinstance(node, Literal):
        return Term.literal(
            str(node),
            lang=node.language,
            datatype=str(node.datatype) if node.datatype is not None else None,
        )
    return Term(str(node), TermKind.OTHER)
