"""Types for single-predicate traversal."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class LoadState(str, Enum):
    """Per-node child loading state."""

    UNLOADED = "unloaded"
    LOADING = "loading"
    LOADED = "loaded"


@dataclass(frozen=True)
class SpecializedNode:
    """Record for one IRI in a specialized traversal, shared by every occurrence."""

    iri: str
    label: str | None = None
    state: LoadState = LoadState.UNLOADED
    children: tuple[str, ...] | None = None  # child IRIs, set once loaded

    @property
    def loaded(self) -> bool:
        return self.state == LoadState.LOADED

    @property
    def loading(self) -> bool:
        return self.state == LoadState.LOADING

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "iri": self.iri,
            "label": self.label,
            "loaded": self.loaded,
            "state": self.state.value,
            "children": list(self.children) if self.children is not None else None,
        }
