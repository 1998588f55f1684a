"""Shared dependencies for the HTTP routers."""

from __future__ import annotations

from fastapi import HTTPException, Request

from ..commands import AppState, CommandError

_STATUS_BY_KIND = {"storage": 500, "gateway": 502}


def get_state(request: Request) -> AppState:
    return request.app.state.sensei


def command_failed(exc: CommandError) -> HTTPException:
    return HTTPException(status_code=_STATUS_BY_KIND.get(exc.kind, 500), detail=exc.message)
