"""Core types: terms, triples, edge direction and tree node kinds."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


RDFS_LABEL = "http://www.w3.org/2000/01/rdf-schema#label"


class TermKind(str, Enum):
    """Kind discriminator for a term in a triple."""

    NAMED = "named"  # IRI / named resource
    LITERAL = "literal"
    OTHER = "other"  # blank nodes, variables, ...


class Direction(str, Enum):
    """Which half of a node's edges to follow."""

    OUT = "out"  # node is the subject
    IN = "in"  # node is the object


class NodeType(str, Enum):
    """Kind of position in the exploration tree."""

    ROOT = "root"
    DIRECTION_GROUP = "direction"
    PREDICATE_GROUP = "predicate"
    VALUE = "value"


@dataclass(frozen=True)
class Term:
    """A subject, predicate or object value.

    For literals, ``value`` is the lexical form; ``lang`` and ``datatype``
    complete its identity, so "Alice"@en and "Alice"@de are different terms.
    """

    value: str
    kind: TermKind = TermKind.NAMED
    lang: str | None = None
    datatype: str | None = None

    @classmethod
    def iri(cls, value: str) -> Term:
        return cls(value, TermKind.NAMED)

    @classmethod
    def literal(
        cls, value: str, lang: str | None = None, datatype: str | None = None
    ) -> Term:
        return cls(value, TermKind.LITERAL, lang=lang, datatype=datatype)

    @classmethod
    def blank(cls, value: str) -> Term:
        return cls(value, TermKind.OTHER)

    @property
    def is_named(self) -> bool:
        return self.kind == TermKind.NAMED

    @property
    def is_literal(self) -> bool:
        return self.kind == TermKind.LITERAL


@dataclass(frozen=True)
class Triple:
    """A (subject, predicate, object) fact."""

    subject: Term
    predicate: Term
    object: Term

    @classmethod
    def of(cls, subject: str, predicate: str, obj: str | Term) -> Triple:
        """Build a triple from IRI strings; a plain string object is an IRI."""
        if not isinstance(obj, Term):
            obj = Term.iri(obj)
        return cls(Term.iri(subject), Term.iri(predicate), obj)
