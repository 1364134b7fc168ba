"""Specialized traversal REST endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from triple_browser.core.exceptions import NodeNotFoundError
from triple_browser.server.dependencies import BrowserSession, get_session
from triple_browser.server.schemas import (
    SpecializedExpandRequest,
    SpecializedNodeResponse,
    TreeResponse,
)
from triple_browser.specialized.traversal import SpecializedTraversal

router = APIRouter()


def traversal_tree(traversal: SpecializedTraversal) -> TreeResponse:
    return TreeResponse(
        root_id=traversal.start_iri,
        items=[item.to_dict() for item in traversal.tree()],
    )


@router.post("/specialized/expand")
async def expand(
    body: SpecializedExpandRequest,
    session: BrowserSession = Depends(get_session),
) -> TreeResponse:
    traversal = session.require_traversal()
    node = await traversal.expand(body.iri)
    if node is None:
        raise NodeNotFoundError(body.iri)
    if body.include_children:
        await traversal.expand_children(body.iri)
    await traversal.wait_for_labels()
    return traversal_tree(traversal)


@router.get("/specialized/tree")
async def tree(session: BrowserSession = Depends(get_session)) -> TreeResponse:
    return traversal_tree(session.require_traversal())


@router.get("/specialized/node")
async def get_node(
    iri: str,
    session: BrowserSession = Depends(get_session),
) -> SpecializedNodeResponse:
    return SpecializedNodeResponse(**session.require_traversal().get(iri).to_dict())


@router.delete("/specialized")
async def close(session: BrowserSession = Depends(get_session)) -> dict[str, bool]:
    """Close the active traversal."""
    closed = session.traversal is not None
    await session.close_traversal()
    return {"closed": closed}
