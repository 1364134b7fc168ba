"""General browser REST endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from triple_browser.core.exceptions import NodeNotFoundError
from triple_browser.server.dependencies import BrowserSession, SessionPool, get_pool, get_session
from triple_browser.server.schemas import (
    ExpandRequest,
    HandOff,
    LoadRootRequest,
    NodeResponse,
    SpecializeBody,
    SpecializeResponse,
    TreeResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def browser_tree(session: BrowserSession) -> TreeResponse:
    browser = session.browser
    root = browser.root
    return TreeResponse(
        root_id=root.id.key() if root else None,
        items=[item.to_dict() for item in browser.tree()],
    )


@router.post("/browser/root")
async def load_root(
    body: LoadRootRequest,
    session: BrowserSession = Depends(get_session),
) -> TreeResponse:
    """Start a new exploration at an IRI, discarding the previous one."""
    await session.browser.load_root(body.iri)
    return browser_tree(session)


@router.post("/browser/expand")
async def expand(
    body: ExpandRequest,
    session: BrowserSession = Depends(get_session),
) -> TreeResponse:
    """Load the children of a node and return the updated tree."""
    node = await session.browser.expand(body.node_id)
    if node is None:
        raise NodeNotFoundError(body.node_id)
    return browser_tree(session)


@router.get("/browser/tree")
async def tree(session: BrowserSession = Depends(get_session)) -> TreeResponse:
    return browser_tree(session)


@router.get("/browser/node")
async def get_node(
    node_id: str,
    session: BrowserSession = Depends(get_session),
) -> NodeResponse:
    return NodeResponse(**session.browser.get(node_id).to_dict())


@router.post("/browser/specialize")
async def specialize(
    body: SpecializeBody,
    session: BrowserSession = Depends(get_session),
    pool: SessionPool = Depends(get_pool),
) -> SpecializeResponse:
    """Hand a predicate group over to a new specialized traversal."""
    request = session.browser.specialize(body.node_id, body.direction)
    traversal = await session.start_traversal(pool.source, request)
    await traversal.wait_for_labels()
    return SpecializeResponse(
        request=HandOff(**request.to_dict()),
        tree=TreeResponse(
            root_id=traversal.start_iri,
            items=[item.to_dict() for item in traversal.tree()],
        ),
    )
