"""Dependency injection: session pool, session resolution, triple source loading."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from fastapi import Depends, Header, Request

from triple_browser.browser.explorer import GraphBrowser
from triple_browser.browser.types import SpecializeRequest
from triple_browser.core.protocols import TripleSource
from triple_browser.focus.registry import FieldFocusRegistry
from triple_browser.server.config import ServerConfig
from triple_browser.server.errors import NoActiveTraversalError
from triple_browser.source.memory import InMemoryTripleSource
from triple_browser.source.rdflib_source import RdflibTripleSource
from triple_browser.specialized.traversal import SpecializedTraversal

logger = logging.getLogger(__name__)


def load_source(config: ServerConfig) -> TripleSource:
    """Open the configured RDF file, or an empty source when none is set."""
    if config.data_path is None:
        logger.warning("No data file configured, serving an empty graph")
        return InMemoryTripleSource()
    return RdflibTripleSource.from_file(config.data_path, format=config.data_format)


@dataclass
class BrowserSession:
    """Exploration state owned by one client."""

    id: str
    browser: GraphBrowser
    focus: FieldFocusRegistry = field(default_factory=FieldFocusRegistry)
    traversal: SpecializedTraversal | None = None

    async def start_traversal(
        self, source: TripleSource, request: SpecializeRequest
    ) -> SpecializedTraversal:
        """Replace the active specialized traversal with a new one."""
        await self.close_traversal()
        self.traversal = SpecializedTraversal(source, request, config=self.browser.config)
        await self.traversal.start()
        return self.traversal

    def require_traversal(self) -> SpecializedTraversal:
        if self.traversal is None:
            raise NoActiveTraversalError(self.id)
        return self.traversal

    async def close_traversal(self) -> None:
        if self.traversal is not None:
            await self.traversal.close()
            self.traversal = None


class SessionPool:
    """Manages one BrowserSession per session id, all sharing one triple source."""

    def __init__(self, config: ServerConfig, source: TripleSource) -> None:
        self._config = config
        self._source = source
        self._sessions: dict[str, BrowserSession] = {}

    @property
    def source(self) -> TripleSource:
        return self._source

    def get(self, session_id: str) -> BrowserSession:
        """Get or create the session for an id."""
        if session_id not in self._sessions:
            self._sessions[session_id] = BrowserSession(
                id=session_id,
                browser=GraphBrowser(self._source, config=self._config.browser),
            )
            logger.info("Created browser session %s", session_id)
        return self._sessions[session_id]

    def active_sessions(self) -> list[BrowserSession]:
        return list(self._sessions.values())

    async def close_all(self) -> None:
        """Close all sessions."""
        for session in self._sessions.values():
            try:
                await session.close_traversal()
            except Exception:
                logger.exception("Error closing session %s", session.id)
        self._sessions.clear()


def get_pool(request: Request) -> SessionPool:
    """Get the SessionPool from app state."""
    return request.app.state.pool


def resolve_session_id(x_session_id: str = Header(default="default")) -> str:
    """Resolve the session id from the request headers."""
    return x_session_id


def get_session(
    pool: SessionPool = Depends(get_pool),
    session_id: str = Depends(resolve_session_id),
) -> BrowserSession:
    """Get the BrowserSession for the current request."""
    return pool.get(session_id)
