"""Types for the general graph browser."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote, unquote

from triple_browser.core.types import Direction, NodeType


@dataclass(frozen=True)
class PathSegment:
    """One typed step in a node path."""

    type: NodeType
    iri: str
    predicate: str | None = None
    direction: Direction | None = None
    literal: bool = False
    # Literal identity beyond the lexical form in ``iri``
    lang: str | None = None
    datatype: str | None = None

    def key(self) -> str:
        fields = (
            self.type.value,
            self.iri,
            self.predicate or "",
            self.direction.value if self.direction else "",
            "1" if self.literal else "",
            self.lang or "",
            self.datatype or "",
        )
        return ":".join(quote(f, safe="") for f in fields)

    @classmethod
    def parse(cls, key: str) -> PathSegment:
        parts = key.split(":")
        if len(parts) != 7:
            raise ValueError(f"Malformed path segment: {key!r}")
        type_, iri, predicate, direction, literal, lang, datatype = (unquote(p) for p in parts)
        return cls(
            type=NodeType(type_),
            iri=iri,
            predicate=predicate or None,
            direction=Direction(direction) if direction else None,
            literal=literal == "1",
            lang=lang or None,
            datatype=datatype or None,
        )


@dataclass(frozen=True)
class NodePath:
    """Stable, path-based identity of a tree position.

    The same IRI reached through different parents gets a different path,
    so each occurrence keeps its own loading state.
    """

    segments: tuple[PathSegment, ...]

    @classmethod
    def root(cls, iri: str) -> NodePath:
        return cls((PathSegment(NodeType.ROOT, iri),))

    def child(self, segment: PathSegment) -> NodePath:
        return NodePath(self.segments + (segment,))

    @property
    def parent(self) -> NodePath | None:
        if len(self.segments) <= 1:
            return None
        return NodePath(self.segments[:-1])

    @property
    def last(self) -> PathSegment:
        return self.segments[-1]

    @property
    def depth(self) -> int:
        return len(self.segments) - 1

    def key(self) -> str:
        """Unambiguous string form, safe to hand to clients."""
        return "/".join(s.key() for s in self.segments)

    @classmethod
    def parse(cls, key: str) -> NodePath:
        """Inverse of :meth:`key`. Raises ValueError on malformed input."""
        if not key:
            raise ValueError("Empty node path")
        return cls(tuple(PathSegment.parse(part) for part in key.split("/")))

    def __str__(self) -> str:
        return self.key()


@dataclass(frozen=True)
class ExplorationNode:
    """A position in the exploration tree.

    Nodes are immutable; the exploration state swaps in updated copies.
    """

    id: NodePath
    type: NodeType
    iri: str
    predicate: str | None = None
    direction: Direction | None = None
    loaded: bool = False
    children: tuple[NodePath, ...] | None = None
    is_literal: bool = False
    literal_value: str | None = None
    lang: str | None = None
    datatype: str | None = None
    parent_id: NodePath | None = None

    @property
    def collapsed(self) -> bool:
        """Predicate group inlined to its single literal value."""
        return self.type == NodeType.PREDICATE_GROUP and self.literal_value is not None

    @property
    def expandable(self) -> bool:
        if self.type == NodeType.PREDICATE_GROUP:
            return not self.collapsed
        if self.type == NodeType.VALUE:
            return not self.is_literal
        return True

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id.key(),
            "type": self.type.value,
            "iri": self.iri,
            "predicate": self.predicate,
            "direction": self.direction.value if self.direction else None,
            "loaded": self.loaded,
            "children": [c.key() for c in self.children] if self.children is not None else None,
            "is_literal": self.is_literal,
            "literal_value": self.literal_value,
            "lang": self.lang,
            "datatype": self.datatype,
            "parent_id": self.parent_id.key() if self.parent_id else None,
        }


@dataclass(frozen=True)
class SpecializeRequest:
    """Hand-off from the general browser to a specialized traversal."""

    subject_iri: str
    predicate_iri: str
    direction: Direction

    def to_dict(self) -> dict[str, str]:
        return {
            "subject_iri": self.subject_iri,
            "predicate_iri": self.predicate_iri,
            "direction": self.direction.value,
        }


@dataclass
class Resolution:
    """Result of resolving one node's children, not yet committed."""

    children: list[ExplorationNode] = field(default_factory=list)
    literal_value: str | None = None
