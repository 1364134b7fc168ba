"""FastMCP server exposing the browser and specialized traversal as tools."""

from __future__ import annotations

import logging

from mcp.server.fastmcp import FastMCP

from triple_browser.core.exceptions import BrowserError
from triple_browser.core.protocols import TripleSource
from triple_browser.core.types import NodeType
from triple_browser.display.projector import render_text
from triple_browser.server.config import ServerConfig
from triple_browser.server.dependencies import SessionPool, load_source

logger = logging.getLogger(__name__)


def create_mcp_server(config: ServerConfig, source: TripleSource | None = None) -> FastMCP:
    """Create a FastMCP server with the exploration tools."""

    mcp = FastMCP(
        "Triple Browser",
        instructions="Explore an RDF graph as a lazily expanded tree",
    )

    # Shared state
    _pool: SessionPool | None = None

    def _get_session():
        nonlocal _pool
        if _pool is None:
            _pool = SessionPool(config, source if source is not None else load_source(config))
        return _pool.get("mcp")

    def _browser_text() -> str:
        text = render_text(_get_session().browser.tree())
        return text or "No root loaded. Call browse_root first."

    # ===== Tool 1: browse_root =====

    @mcp.tool()
    async def browse_root(iri: str) -> str:
        """Start exploring the graph at an IRI. Replaces any previous exploration."""
        session = _get_session()
        try:
            await session.browser.load_root(iri)
        except ValueError as e:
            return f"Error: {e}"
        root = session.browser.root
        lines = [_browser_text(), "", "Node ids:"]
        lines.extend(f"- {child.key()}" for child in root.children or ())
        return "\n".join(lines)

    # ===== Tool 2: browse_expand =====

    @mcp.tool()
    async def browse_expand(node_id: str) -> str:
        """Expand a node by id and list the ids of its children."""
        session = _get_session()
        try:
            node = await session.browser.expand(node_id)
        except BrowserError as e:
            return f"Error: {e}"
        if node is None:
            return f"Unknown node: {node_id}"

        if node.collapsed:
            return f"{node.predicate} = {node.literal_value}"
        children = session.browser.children(node.id)
        if not children:
            return "No data"
        lines = []
        for child in children:
            if child.type == NodeType.DIRECTION_GROUP:
                value = child.direction.value
            elif child.type == NodeType.PREDICATE_GROUP:
                value = child.predicate
            else:
                value = child.literal_value if child.is_literal else child.iri
            lines.append(f"- [{child.type.value}] {value}\n  id: {child.id.key()}")
        return "\n".join(lines)

    # ===== Tool 3: browse_tree =====

    @mcp.tool()
    async def browse_tree() -> str:
        """Show the current exploration tree."""
        return _browser_text()

    # ===== Tool 4: specialize =====

    @mcp.tool()
    async def specialize(node_id: str, direction: str | None = None) -> str:
        """Follow one predicate group recursively as a hierarchy.

        direction is "in" or "out"; defaults to the group's own direction.
        """
        session = _get_session()
        try:
            request = session.browser.specialize(node_id, direction)
            traversal = await session.start_traversal(_pool.source, request)
        except (BrowserError, ValueError) as e:
            return f"Error: {e}"
        await traversal.wait_for_labels()
        return render_text(traversal.tree())

    # ===== Tool 5: specialized_expand =====

    @mcp.tool()
    async def specialized_expand(iri: str, include_children: bool = False) -> str:
        """Expand one node of the active specialized traversal.

        With include_children, every child of the node is expanded one level
        too, showing which of them have children of their own.
        """
        session = _get_session()
        try:
            traversal = session.require_traversal()
            node = await traversal.expand(iri)
            if node is not None and include_children:
                await traversal.expand_children(iri)
        except BrowserError as e:
            logger.warning("specialized_expand failed for %s", iri, exc_info=True)
            return f"Error: {e}"
        if node is None:
            return f"Unknown IRI: {iri}"
        await traversal.wait_for_labels()
        return render_text(traversal.tree())

    return mcp
