"""Attempt history statistics."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ..commands import AppState, CommandError
from ..schemas import UserStats
from .deps import command_failed, get_state

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("", response_model=UserStats)
async def get_user_stats(state: AppState = Depends(get_state)) -> UserStats:
    """Aggregate over every recorded puzzle attempt."""
    try:
        return await state.get_user_stats()
    except CommandError as exc:
        raise command_failed(exc) from None
