"""In-memory triple source."""

from __future__ import annotations

from collections import defaultdict
from itertools import islice
from typing import Iterable

from triple_browser.core.types import Term, Triple


class InMemoryTripleSource:
    """Holds triples in a list and answers pattern queries from it.

    Results come back in insertion order. Subject and object positions are
    indexed so the one-bound-term queries the browser issues do not scan the
    whole list.

    Example:
        >>> source = InMemoryTripleSource([
        ...     Triple.of("http://ex.org/a", "http://ex.org/knows", "http://ex.org/b"),
        ... ])
        >>> await source.match("http://ex.org/a", None, None)
    """

    def __init__(self, triples: Iterable[Triple] = ()) -> None:
        self._triples: list[Triple] = []
        self._by_subject: dict[str, list[int]] = defaultdict(list)
        self._by_object: dict[str, list[int]] = defaultdict(list)
        for triple in triples:
            self.add(triple)

    def add(self, triple: Triple) -> None:
        """Append a triple."""
        index = len(self._triples)
        self._triples.append(triple)
        self._by_subject[triple.subject.value].append(index)
        self._by_object[triple.object.value].append(index)

    def __len__(self) -> int:
        return len(self._triples)

    async def match(
        self,
        subject: str | None = None,
        predicate: str | None = None,
        obj: str | None = None,
        limit: int | None = None,
    ) -> list[Triple]:
        if subject is not None:
            candidates = (self._triples[i] for i in self._by_subject.get(subject, []))
        elif obj is not None:
            candidates = (self._triples[i] for i in self._by_object.get(obj, []))
        else:
            candidates = self._triples

        matches = (
            t for t in candidates
            if _matches(t.subject, subject)
            and _matches(t.predicate, predicate)
            and _matches(t.object, obj)
        )
        return list(islice(matches, limit))


def _matches(term: Term, value: str | None) -> bool:
    # Pattern positions are IRIs, so only named terms can match a bound value.
    return value is None or (term.is_named and term.value == value)
