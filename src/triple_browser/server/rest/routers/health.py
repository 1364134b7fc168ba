"""Health endpoint."""

from __future__ import annotations

import time

from fastapi import APIRouter, Request

from triple_browser.server.schemas import HealthResponse

router = APIRouter()


@router.get("/health")
async def health(request: Request) -> HealthResponse:
    elapsed = time.monotonic() - request.app.state.start_time
    return HealthResponse(
        status="ok",
        version="0.1.0",
        uptime_seconds=round(elapsed, 1),
        active_sessions=len(request.app.state.pool.active_sessions()),
    )
