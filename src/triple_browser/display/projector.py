"""Project exploration state into an ordered, presentable tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Mapping, Sequence

from triple_browser.core.types import Direction, NodeType
from triple_browser.display.prefixes import (
    BROWSER_SUFFIX_LENGTH,
    DEFAULT_PREFIXES,
    SPECIALIZED_SUFFIX_LENGTH,
    PrefixRule,
    shorten_iri,
)

if TYPE_CHECKING:
    from triple_browser.browser.state import ExplorationState
    from triple_browser.browser.types import ExplorationNode, NodePath
    from triple_browser.specialized.types import SpecializedNode

PLACEHOLDER_LABEL = "..."
LOADING_LABEL = "Loading..."


@dataclass
class TreeItem:
    """One renderable tree entry."""

    id: str
    label: str
    node_type: str
    children: list[TreeItem] = field(default_factory=list)
    expandable: bool = False
    loaded: bool = True
    is_literal: bool = False
    placeholder: bool = False
    repeated: bool = False  # ancestor reappearing through a cycle

    # Predicate group details, needed to build a specialize hand-off
    iri: str | None = None
    predicate: str | None = None
    direction: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        result: dict[str, Any] = {
            "id": self.id,
            "label": self.label,
            "node_type": self.node_type,
            "expandable": self.expandable,
            "loaded": self.loaded,
            "children": [c.to_dict() for c in self.children],
        }
        if self.is_literal:
            result["is_literal"] = True
        if self.placeholder:
            result["placeholder"] = True
        if self.repeated:
            result["repeated"] = True
        if self.iri is not None:
            result["iri"] = self.iri
        if self.predicate is not None:
            result["predicate"] = self.predicate
        if self.direction is not None:
            result["direction"] = self.direction
        return result


def _placeholder(parent_id: str, loading: bool) -> TreeItem:
    return TreeItem(
        id=f"{parent_id}/~placeholder",
        label=LOADING_LABEL if loading else PLACEHOLDER_LABEL,
        node_type="placeholder",
        placeholder=True,
    )


# ============================================================================
# General browser
# ============================================================================


def browser_label(
    node: ExplorationNode,
    rules: Sequence[PrefixRule] = DEFAULT_PREFIXES,
    max_length: int = BROWSER_SUFFIX_LENGTH,
) -> str:
    """Display label for one exploration node."""
    if node.type == NodeType.DIRECTION_GROUP:
        return "→ Out" if node.direction == Direction.OUT else "← In"
    if node.type == NodeType.PREDICATE_GROUP:
        label = shorten_iri(node.predicate or "", rules, max_length)
        if node.collapsed:
            label = f"{label}: {node.literal_value}"
        return label
    if node.type == NodeType.VALUE and node.is_literal:
        text = node.literal_value or ""
        return f"{text}@{node.lang}" if node.lang else text
    return shorten_iri(node.iri, rules, max_length)


def project_browser_tree(
    state: ExplorationState | None,
    rules: Sequence[PrefixRule] = DEFAULT_PREFIXES,
    max_length: int = BROWSER_SUFFIX_LENGTH,
) -> list[TreeItem]:
    """Build the tree for the general browser, rooted at the state's root.

    Children follow their stored order. An expandable node that is not
    loaded yet gets exactly one placeholder child.
    """
    if state is None:
        return []

    def build(node_id: NodePath) -> TreeItem | None:
        node = state.get(node_id)
        if node is None:
            return None

        key = node_id.key()
        item = TreeItem(
            id=key,
            label=browser_label(node, rules, max_length),
            node_type=node.type.value,
            expandable=node.expandable,
            loaded=node.loaded,
            is_literal=node.is_literal or node.collapsed,
        )
        if node.type == NodeType.PREDICATE_GROUP:
            item.iri = node.iri
            item.predicate = node.predicate
            item.direction = node.direction.value if node.direction else None

        if not node.expandable:
            return item

        if node.loaded:
            for child_id in node.children or ():
                child = build(child_id)
                if child is not None:
                    item.children.append(child)
        else:
            item.children.append(_placeholder(key, state.is_loading(node_id)))
        return item

    root = build(state.root_id)
    return [root] if root is not None else []


# ============================================================================
# Specialized traversal
# ============================================================================


def specialized_label(
    node: SpecializedNode,
    rules: Sequence[PrefixRule] = DEFAULT_PREFIXES,
    max_length: int = SPECIALIZED_SUFFIX_LENGTH,
) -> str:
    """``short(iri) | label`` when a label is known, else ``short(iri)``."""
    short = shorten_iri(node.iri, rules, max_length)
    return f"{short} | {node.label}" if node.label else short


def project_specialized_tree(
    nodes: Mapping[str, SpecializedNode],
    root_iri: str,
    rules: Sequence[PrefixRule] = DEFAULT_PREFIXES,
    max_length: int = SPECIALIZED_SUFFIX_LENGTH,
) -> list[TreeItem]:
    """Build the tree for a specialized traversal.

    Label and children resolve independently, so a labelled node that is
    not loaded still gets its placeholder. A node already on the path from
    the root is emitted once more as a leaf marked ``repeated``.
    """

    def build(iri: str, ancestors: frozenset[str]) -> TreeItem | None:
        node = nodes.get(iri)
        if node is None:
            return None

        item = TreeItem(
            id=iri,
            label=specialized_label(node, rules, max_length),
            node_type="specialized",
            expandable=True,
            loaded=node.loaded,
            iri=iri,
        )
        if iri in ancestors:
            item.repeated = True
            return item

        if node.children:
            path = ancestors | {iri}
            for child_iri in node.children:
                child = build(child_iri, path)
                if child is not None:
                    item.children.append(child)
        elif not node.loaded:
            item.children.append(_placeholder(iri, node.loading))
        return item

    root = build(root_iri, frozenset())
    return [root] if root is not None else []


def render_text(items: Sequence[TreeItem], indent: int = 0) -> str:
    """Render tree items as indented text, one per line."""
    lines = []
    for item in items:
        marker = "↻ " if item.repeated else ""
        lines.append(f"{'  ' * indent}{marker}{item.label}")
        if item.children:
            lines.append(render_text(item.children, indent + 1))
    return "\n".join(lines)
