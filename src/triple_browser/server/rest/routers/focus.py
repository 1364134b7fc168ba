"""Focus registry endpoints: route a chosen IRI into the last focused field."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from triple_browser.server.dependencies import BrowserSession, get_session
from triple_browser.server.schemas import FieldsResponse, FillRequest, FillResponse, FocusRequest

router = APIRouter()


@router.post("/focus")
async def record_focus(
    body: FocusRequest,
    session: BrowserSession = Depends(get_session),
) -> FieldsResponse:
    session.focus.record_focus(body.field_id)
    return FieldsResponse(last_focused=session.focus.last_focused, fields=session.focus.fields())


@router.post("/focus/fill")
async def fill_focused(
    body: FillRequest,
    session: BrowserSession = Depends(get_session),
) -> FillResponse:
    field_id = session.focus.fill_focused(body.value)
    return FillResponse(field_id=field_id, filled=field_id is not None)


@router.get("/focus/fields")
async def fields(session: BrowserSession = Depends(get_session)) -> FieldsResponse:
    return FieldsResponse(last_focused=session.focus.last_focused, fields=session.focus.fields())
