"""Triple sources and IRIs shared by the tests."""

from __future__ import annotations

import asyncio

from triple_browser.core.types import RDFS_LABEL
from triple_browser.source.memory import InMemoryTripleSource

EX = "http://example.org/"
KNOWS = EX + "knows"
AGE = EX + "age"
NICK = EX + "nick"
MIXED = EX + "mixed"
ADDRESS = EX + "address"
SUBCLASS = "http://www.w3.org/2000/01/rdf-schema#subClassOf"


def ex(name: str) -> str:
    return EX + name


class FailingSource(InMemoryTripleSource):
    """Raises on match while ``failing`` is set."""

    def __init__(self, triples=()) -> None:
        super().__init__(triples)
        self.failing = False
        self.calls = 0

    async def match(self, subject=None, predicate=None, obj=None, limit=None):
        self.calls += 1
        if self.failing:
            raise ConnectionError("source unavailable")
        return await super().match(subject, predicate, obj, limit)


class GatedSource(InMemoryTripleSource):
    """Blocks every match until ``gate`` is set."""

    def __init__(self, triples=()) -> None:
        super().__init__(triples)
        self.gate = asyncio.Event()
        self.waiting = 0

    async def match(self, subject=None, predicate=None, obj=None, limit=None):
        self.waiting += 1
        await self.gate.wait()
        self.waiting -= 1
        return await super().match(subject, predicate, obj, limit)


class LabelGatedSource(InMemoryTripleSource):
    """Blocks only label lookups until ``label_gate`` is set."""

    def __init__(self, triples=()) -> None:
        super().__init__(triples)
        self.label_gate = asyncio.Event()

    async def match(self, subject=None, predicate=None, obj=None, limit=None):
        if predicate == RDFS_LABEL:
            await self.label_gate.wait()
        return await super().match(subject, predicate, obj, limit)


class EdgeGatedSource(InMemoryTripleSource):
    """Blocks everything except label lookups until ``gate`` is set."""

    def __init__(self, triples=()) -> None:
        super().__init__(triples)
        self.gate = asyncio.Event()

    async def match(self, subject=None, predicate=None, obj=None, limit=None):
        if predicate != RDFS_LABEL:
            await self.gate.wait()
        return await super().match(subject, predicate, obj, limit)


class RecordingSource(InMemoryTripleSource):
    """Records each query's limit and how many triples it produced."""

    def __init__(self, triples=()) -> None:
        super().__init__(triples)
        self.queries: list[tuple[tuple, int | None, int]] = []

    async def match(self, subject=None, predicate=None, obj=None, limit=None):
        triples = await super().match(subject, predicate, obj, limit)
        self.queries.append(((subject, predicate, obj), limit, len(triples)))
        return triples
