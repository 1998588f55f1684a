"""Opening endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path

from ..commands import AppState, CommandError
from ..schemas import Opening
from .deps import command_failed, get_state

router = APIRouter(prefix="/openings", tags=["openings"])


@router.get("", response_model=List[Opening])
async def get_openings(state: AppState = Depends(get_state)) -> List[Opening]:
    try:
        return await state.get_openings()
    except CommandError as exc:
        raise command_failed(exc) from None


@router.get("/{opening_id}", response_model=Opening)
async def get_opening(
    opening_id: int = Path(..., description="Opening identifier"),
    state: AppState = Depends(get_state),
) -> Opening:
    try:
        opening = await state.get_opening_by_id(opening_id)
    except CommandError as exc:
        raise command_failed(exc) from None
    if opening is None:
        raise HTTPException(status_code=404, detail="Opening not found")
    return opening
