"""SHUNT FILE PURPOSE
Purpose: admin endpoints to list shunts and change their status.
Hot path: no (admin control-plane only).
Feature flags: SHUNT_FEATURE_ADMIN.
Failure mode: auth failures return 401; unknown shunt reads return 404;
per-shunt change problems are reported in the response messages.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Header, HTTPException, Request
from pydantic import BaseModel, Field

from shunt.config import admin_api_key
from shunt.feedback import FeedbackCollector
from shunt.runtime import ShuntRuntime

router = APIRouter(prefix="/admin/shunts", tags=["shunts"])


class StatusFormRequest(BaseModel):
    statuses: dict[str, bool] = Field(default_factory=dict)


class ToggleRequest(BaseModel):
    name: str | None = None


def _authorized(auth_header: str | None) -> bool:
    configured = admin_api_key()
    if not configured or not isinstance(auth_header, str):
        return False
    prefix = "Bearer "
    if not auth_header.startswith(prefix):
        return False
    token = auth_header[len(prefix) :].strip()
    return token == configured


def _require_admin_bearer(authorization: str | None) -> None:
    if not _authorized(authorization):
        raise HTTPException(status_code=401, detail="unauthorized")


def _runtime(request: Request) -> ShuntRuntime:
    return request.app.state.shunts


def _listing(rt: ShuntRuntime) -> list[dict[str, Any]]:
    statuses = rt.query.statuses()
    return [
        {"name": d.name, "description": d.description, "enabled": statuses[d.name]}
        for d in rt.registry.definitions()
    ]


@router.get("")
async def list_shunts(request: Request, authorization: str | None = Header(default=None)) -> dict[str, Any]:
    _require_admin_bearer(authorization)
    return {"ok": True, "shunts": _listing(_runtime(request))}


@router.get("/{name}")
async def get_shunt(name: str, request: Request, authorization: str | None = Header(default=None)) -> dict[str, Any]:
    _require_admin_bearer(authorization)
    rt = _runtime(request)
    if not rt.query.exists(name):
        raise HTTPException(status_code=404, detail="unknown shunt")
    return {
        "ok": True,
        "shunt": {"name": name, "description": rt.registry.describe(name), "enabled": rt.query.is_enabled(name)},
    }


@router.post("")
async def submit_statuses(
    body: StatusFormRequest,
    request: Request,
    authorization: str | None = Header(default=None),
) -> dict[str, Any]:
    _require_admin_bearer(authorization)
    rt = _runtime(request)
    collector = FeedbackCollector()
    # the form submits every checkbox; unchanged ones are not worth a warning
    rt.mutation.with_feedback(collector).set_status_multiple(body.statuses, warn_on_noop=False)
    return {"ok": not collector.has_errors(), "messages": collector.as_dicts(), "shunts": _listing(rt)}


def _toggle(request: Request, body: ToggleRequest | None, desired: bool) -> dict[str, Any]:
    rt = _runtime(request)
    collector = FeedbackCollector()
    mutation = rt.mutation.with_feedback(collector)
    name = body.name if body is not None else None
    if desired:
        mutation.enable_shunt(name)
    else:
        mutation.disable_shunt(name)
    return {"ok": not collector.has_errors(), "messages": collector.as_dicts()}


@router.post("/enable")
async def enable(
    request: Request,
    body: ToggleRequest | None = None,
    authorization: str | None = Header(default=None),
) -> dict[str, Any]:
    _require_admin_bearer(authorization)
    return _toggle(request, body, True)


@router.post("/disable")
async def disable(
    request: Request,
    body: ToggleRequest | None = None,
    authorization: str | None = Header(default=None),
) -> dict[str, Any]:
    _require_admin_bearer(authorization)
    return _toggle(request, body, False)
