"""Pydantic request/response models for the REST API."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


# ========== Common ==========

class ErrorResponse(BaseModel):
    error: str
    detail: str


class HealthResponse(BaseModel):
    status: str
    version: str
    uptime_seconds: float
    active_sessions: int


class TreeResponse(BaseModel):
    """Projected tree; each item is a nested TreeItem dict."""

    root_id: str | None = None
    items: list[dict[str, Any]] = Field(default_factory=list)


# ========== Browser ==========

class LoadRootRequest(BaseModel):
    iri: str = Field(min_length=1)


class ExpandRequest(BaseModel):
    node_id: str


class NodeResponse(BaseModel):
    id: str
    type: str
    iri: str
    predicate: str | None = None
    direction: str | None = None
    loaded: bool
    children: list[str] | None = None
    is_literal: bool = False
    literal_value: str | None = None
    lang: str | None = None
    datatype: str | None = None
    parent_id: str | None = None


class SpecializeBody(BaseModel):
    node_id: str
    direction: Literal["in", "out"] | None = None


class HandOff(BaseModel):
    subject_iri: str
    predicate_iri: str
    direction: str


class SpecializeResponse(BaseModel):
    request: HandOff
    tree: TreeResponse


# ========== Specialized ==========

class SpecializedExpandRequest(BaseModel):
    iri: str
    include_children: bool = Field(
        default=False, description="Also expand every child of the node one level"
    )


class SpecializedNodeResponse(BaseModel):
    iri: str
    label: str | None = None
    loaded: bool
    state: str
    children: list[str] | None = None


# ========== Focus ==========

class FocusRequest(BaseModel):
    field_id: str


class FillRequest(BaseModel):
    value: str


class FillResponse(BaseModel):
    field_id: str | None
    filled: bool


class FieldsResponse(BaseModel):
    last_focused: str | None
    fields: dict[str, str]
