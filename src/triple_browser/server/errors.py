"""Error types and exception-to-HTTP mapping for the server."""

from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse

from triple_browser.core.exceptions import (
    BrowserError,
    NodeNotFoundError,
    NotSpecializableError,
    QueryError,
    SourceLoadError,
)


class NoActiveTraversalError(BrowserError):
    """The session has no specialized traversal to act on."""

    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        super().__init__(f"Session '{session_id}' has no active specialized traversal")


async def node_not_found_handler(request: Request, exc: NodeNotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=404,
        content={"error": "not_found", "detail": str(exc), "id": exc.node_id},
    )


async def no_traversal_handler(request: Request, exc: NoActiveTraversalError) -> JSONResponse:
    return JSONResponse(
        status_code=404,
        content={"error": "no_traversal", "detail": str(exc)},
    )


async def not_specializable_handler(request: Request, exc: NotSpecializableError) -> JSONResponse:
    return JSONResponse(
        status_code=409,
        content={
            "error": "not_specializable",
            "detail": str(exc),
            "id": exc.node_id,
            "type": exc.node_type,
        },
    )


async def query_error_handler(request: Request, exc: QueryError) -> JSONResponse:
    return JSONResponse(
        status_code=502,
        content={"error": "query_failed", "detail": str(exc)},
    )


async def source_load_error_handler(request: Request, exc: SourceLoadError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"error": "source_load_failed", "detail": str(exc)},
    )


EXCEPTION_HANDLERS = {
    NodeNotFoundError: node_not_found_handler,
    NoActiveTraversalError: no_traversal_handler,
    NotSpecializableError: not_specializable_handler,
    QueryError: query_error_handler,
    SourceLoadError: source_load_error_handler,
}
