"""Pytest fixtures for triple-browser tests.

Provides fixtures for:
- A small sample graph with resources, literals, blank nodes and a cycle
- A class hierarchy with labels and a cycle
"""

from __future__ import annotations

import pytest

from triple_browser.core.types import RDFS_LABEL, Term, Triple
from triple_browser.source.memory import InMemoryTripleSource

from tests.fake_sources import ADDRESS, AGE, KNOWS, MIXED, NICK, SUBCLASS, ex


# ============================================================================
# Sample graph
# ============================================================================


@pytest.fixture
def sample_triples() -> list[Triple]:
    """alice knows bob and carol, has one label, one age and two nicks."""
    return [
        Triple.of(ex("alice"), KNOWS, ex("bob")),
        Triple.of(ex("alice"), KNOWS, ex("carol")),
        Triple.of(ex("alice"), RDFS_LABEL, Term.literal("Alice")),
        Triple.of(ex("alice"), AGE, Term.literal("42")),
        Triple.of(ex("alice"), NICK, Term.literal("Al")),
        Triple.of(ex("alice"), NICK, Term.literal("Ally")),
        Triple.of(ex("alice"), ADDRESS, Term.blank("b0")),
        Triple.of(ex("bob"), KNOWS, ex("alice")),
        Triple.of(ex("bob"), RDFS_LABEL, Term.literal("Bob")),
        Triple.of(ex("carol"), MIXED, ex("dave")),
        Triple.of(ex("carol"), MIXED, Term.literal("text")),
    ]


@pytest.fixture
def source(sample_triples: list[Triple]) -> InMemoryTripleSource:
    return InMemoryTripleSource(sample_triples)


@pytest.fixture
def hierarchy_triples() -> list[Triple]:
    """A small class hierarchy with labels and a cycle between c and d."""
    return [
        Triple.of(ex("a"), SUBCLASS, ex("root")),
        Triple.of(ex("b"), SUBCLASS, ex("root")),
        Triple.of(ex("c"), SUBCLASS, ex("a")),
        Triple.of(ex("d"), SUBCLASS, ex("c")),
        Triple.of(ex("c"), SUBCLASS, ex("d")),
        Triple.of(ex("x"), SUBCLASS, Term.literal("not a class")),
        Triple(Term.blank("b1"), Term.iri(SUBCLASS), Term.iri(ex("root"))),
        Triple.of(ex("root"), RDFS_LABEL, Term.literal("Root")),
        Triple.of(ex("a"), RDFS_LABEL, Term.literal("A")),
        Triple.of(ex("c"), RDFS_LABEL, Term.literal("C")),
        Triple.of(ex("c"), RDFS_LABEL, Term.literal("Second C")),
    ]


@pytest.fixture
def hierarchy_source(hierarchy_triples: list[Triple]) -> InMemoryTripleSource:
    return InMemoryTripleSource(hierarchy_triples)
